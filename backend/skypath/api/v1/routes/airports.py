"""
Endpoint Aeroporti.

GET /api/v1/airports
    Lista di tutti gli aeroporti del dataset, ordinati per codice.
    Usata dal frontend per autocomplete e suggerimenti.
"""
from typing import Annotated

from fastapi import APIRouter, Depends

from skypath.models.flight_data import Airport
from skypath.services.providers.base import FlightDataProvider
from skypath.services.providers.factory import get_data_provider

router = APIRouter()

DataDep = Annotated[FlightDataProvider, Depends(get_data_provider)]


@router.get("", response_model=list[Airport])
async def list_airports(data: DataDep) -> list[Airport]:
    """To get all airports"""
    return data.all_airports()

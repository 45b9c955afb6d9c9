import asyncio
from datetime import date, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from skypath.api.errors import ApiError
from skypath.models.schemas import ErrorOut, SearchOut
from skypath.services.providers.base import FlightDataProvider
from skypath.services.providers.factory import get_data_provider
from skypath.services.search_engine import search_itineraries

router = APIRouter()

DataDep = Annotated[FlightDataProvider, Depends(get_data_provider)]


def _is_valid_iata(code: str) -> bool:
    return len(code) == 3 and code.isascii() and code.isalpha() and code.isupper()


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ApiError(
            "INVALID_DATE",
            f"Date must be in ISO 8601 format (YYYY-MM-DD). Got: '{value}'.",
        )


"""
Endpoint Flight Search.-----------------------------------------------------------------------------------

GET /api/v1/flights/search
  ?origin=JFK
  &destination=LAX
  &date=2024-03-15
"""
@router.get(
    "/search",
    response_model=SearchOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def search_flights(
    data: DataDep,
    origin: Annotated[str | None, Query(description="Codice IATA di partenza")] = None,
    destination: Annotated[str | None, Query(description="Codice IATA di arrivo")] = None,
    date: Annotated[str | None, Query(description="Data di partenza (YYYY-MM-DD)")] = None,
) -> SearchOut:

    #Validation area -------------------------------------------
    if origin is None or not origin.strip():
        raise ApiError("MISSING_ORIGIN", "The 'origin' parameter is required.")
    if destination is None or not destination.strip():
        raise ApiError("MISSING_DESTINATION", "The 'destination' parameter is required.")
    if date is None or not date.strip():
        raise ApiError("MISSING_DATE", "The 'date' parameter is required.")

    origin_code = origin.strip().upper()
    destination_code = destination.strip().upper()

    if not _is_valid_iata(origin_code):
        raise ApiError(
            "INVALID_ORIGIN",
            f"Origin must be a 3-letter IATA airport code. Got: '{origin}'.",
        )
    if not _is_valid_iata(destination_code):
        raise ApiError(
            "INVALID_DESTINATION",
            f"Destination must be a 3-letter IATA airport code. Got: '{destination}'.",
        )

    if not data.airport_exists(origin_code):
        raise ApiError("UNKNOWN_ORIGIN", f"Airport '{origin_code}' not found in the dataset.")
    if not data.airport_exists(destination_code):
        raise ApiError("UNKNOWN_DESTINATION", f"Airport '{destination_code}' not found in the dataset.")

    if origin_code == destination_code:
        raise ApiError("SAME_ORIGIN_DESTINATION", "Origin and destination must be different airports.")

    travel_date = _parse_date(date.strip())
    #Validation area -------------------------------------------


    itineraries = await asyncio.to_thread(
        search_itineraries, data, origin_code, destination_code, travel_date
    )

    return SearchOut(itineraries=itineraries, count=len(itineraries))

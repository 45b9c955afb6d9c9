from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skypath.api.errors import register_exception_handlers
from skypath.api.v1.router import api_router
from skypath.config import settings
from skypath.models.schemas import HealthOut
from skypath.services.providers.base import FlightDataProvider
from skypath.services.providers.factory import get_data_provider, init_data_provider, reset_data_provider
from skypath.utils.log_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: dataset caricato una volta sola, poi solo letture.
    # Un DataIntegrityError qui blocca l'avvio.
    setup_logging(settings.log_level)
    init_data_provider(settings.data_path)

    yield

    # Shutdown
    reset_data_provider()


app = FastAPI(
    title="SkyPath API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/api/v1/health", response_model=HealthOut)
async def health(data: Annotated[FlightDataProvider, Depends(get_data_provider)]) -> HealthOut:
    return HealthOut(
        status="ok",
        env=settings.app_env,
        airports=len(data.all_airports()),
        flights=data.flight_count,
    )

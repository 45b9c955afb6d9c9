"""
Dati statici del dataset: aeroporti e voli.

Caricati una sola volta all'avvio e mai modificati (frozen).
Le chiavi JSON del file sono in camelCase (flightNumber, departureTime, ...).
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Airport(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    code: str
    name: str
    city: str
    country: str
    timezone: str  # IANA, es. "America/New_York"


class Flight(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    flight_number: str
    airline: str
    origin: str
    destination: str
    # Orari locali "naive": vanno interpretati con il fuso dell'aeroporto
    departure_time: datetime
    arrival_time: datetime
    price: float = Field(ge=0)
    aircraft: str


class FlightDataset(BaseModel):
    airports: list[Airport] = []
    flights: list[Flight] = []

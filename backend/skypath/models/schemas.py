from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # Output JSON in camelCase, come si aspetta il frontend
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Itinerary (output della ricerca)
# ---------------------------------------------------------------------------

class FlightSegment(_CamelModel):
    flight_number: str
    airline: str
    origin_code: str
    origin_name: str
    origin_city: str
    destination_code: str
    destination_name: str
    destination_city: str
    departure_time: str     # ISO-8601 con offset, es. "2024-03-15T08:00:00-04:00"
    arrival_time: str
    duration_minutes: int
    aircraft: str


class Layover(_CamelModel):
    airport_code: str
    airport_name: str
    airport_city: str
    duration_minutes: int


class Itinerary(_CamelModel):
    segments: list[FlightSegment]
    layovers: list[Layover]
    total_duration_minutes: int
    total_price: float
    stops: int


# ---------------------------------------------------------------------------
# Risposte API
# ---------------------------------------------------------------------------

class SearchOut(_CamelModel):
    itineraries: list[Itinerary]
    count: int


class ErrorOut(_CamelModel):
    error: str              # codice macchina, es. "UNKNOWN_ORIGIN"
    message: str            # messaggio human-readable per il banner frontend
    status_code: int


class HealthOut(BaseModel):
    status: str
    env: str
    airports: int
    flights: int

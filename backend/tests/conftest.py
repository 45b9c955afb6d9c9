"""
Fixture condivise per la test suite SkyPath.

Il dataset viene sostituito da aeroporti/voli sintetici: o tramite
InMemoryFlightData (dati reali in memoria) o tramite un provider
unittest.mock, che restituisce esattamente le liste passate dal test.
"""
from datetime import date, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from skypath.models.flight_data import Airport, Flight
from skypath.services.providers.base import FlightDataProvider
from skypath.services.providers.memory import load_dataset

SEARCH_DATE = date(2024, 3, 15)

BUNDLED_DATASET = Path(__file__).resolve().parent.parent / "data" / "flights.json"


# ---------------------------------------------------------------------------
# Aeroporti fittizi
# ---------------------------------------------------------------------------

AIRPORTS: dict[str, Airport] = {
    a.code: a
    for a in [
        Airport(code="JFK", name="JFK International", city="New York", country="US", timezone="America/New_York"),
        Airport(code="LAX", name="LAX International", city="Los Angeles", country="US", timezone="America/Los_Angeles"),
        Airport(code="ORD", name="O'Hare International", city="Chicago", country="US", timezone="America/Chicago"),
        Airport(code="DFW", name="DFW International", city="Dallas", country="US", timezone="America/Chicago"),
        Airport(code="SFO", name="SFO Airport", city="San Francisco", country="US", timezone="America/Los_Angeles"),
        Airport(code="LHR", name="London Heathrow", city="London", country="GB", timezone="Europe/London"),
        Airport(code="MAN", name="Manchester Airport", city="Manchester", country="GB", timezone="Europe/London"),
        Airport(code="NRT", name="Narita International", city="Tokyo", country="JP", timezone="Asia/Tokyo"),
        Airport(code="SYD", name="Sydney Airport", city="Sydney", country="AU", timezone="Australia/Sydney"),
    ]
}


def make_flight(
    number: str,
    origin: str,
    destination: str,
    dep: tuple[int, int],
    arr: tuple[int, int],
    price: float = 100.0,
    dep_day: int = 15,
    arr_day: int | None = None,
) -> Flight:
    """Volo di marzo 2024 con orari locali (ora, minuti); arr_day di default = dep_day."""
    return Flight(
        flight_number=number,
        airline="TestAir",
        origin=origin,
        destination=destination,
        departure_time=datetime(2024, 3, dep_day, *dep),
        arrival_time=datetime(2024, 3, arr_day if arr_day is not None else dep_day, *arr),
        price=price,
        aircraft="A320",
    )


def make_mock_provider(
    first_legs: list[Flight],
    connections: dict[str, list[Flight]] | None = None,
) -> MagicMock:
    """
    Provider mockato: flights_departing_on_date restituisce sempre first_legs,
    flights_departing_from restituisce connections[codice] (lista vuota se assente).
    """
    connections = connections or {}
    provider = MagicMock(spec=FlightDataProvider)
    provider.get_airport.side_effect = AIRPORTS.get
    provider.airport_exists.side_effect = lambda code: code in AIRPORTS
    provider.flights_departing_on_date.return_value = first_legs
    provider.flights_departing_from.side_effect = lambda code: connections.get(code, [])
    return provider


# ---------------------------------------------------------------------------
# Fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def airports():
    return AIRPORTS


@pytest.fixture
def empty_provider():
    """Provider con tutti gli aeroporti ma nessun volo."""
    return make_mock_provider([])


@pytest.fixture(scope="session")
def bundled_data():
    """Il dataset di esempio distribuito con il backend."""
    return load_dataset(BUNDLED_DATASET)


@pytest.fixture
def search_date():
    return SEARCH_DATE

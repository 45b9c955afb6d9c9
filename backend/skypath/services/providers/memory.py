"""
InMemoryFlightData — dataset caricato da file JSON e tenuto in memoria.

Formato del file:
    {
      "airports": [{"code": "JFK", "name": ..., "city": ..., "country": "US",
                    "timezone": "America/New_York"}, ...],
      "flights":  [{"flightNumber": "SP101", "airline": ..., "origin": "JFK",
                    "destination": "LAX", "departureTime": "2024-03-15T08:00:00",
                    "arrivalTime": "2024-03-15T11:15:00", "price": 299.0,
                    "aircraft": "A321"}, ...]
    }

Regole di caricamento:
  - codici aeroporto duplicati → vince l'ultimo (nessun errore)
  - volo che punta a un aeroporto inesistente → DataIntegrityError (fatale)
  - fuso IANA sconosciuto → DataIntegrityError (fatale)
  - file assente o illeggibile → dataset vuoto, il servizio parte comunque
"""
import logging
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ValidationError

from skypath.models.flight_data import Airport, Flight, FlightDataset
from skypath.services.providers.base import DataIntegrityError, FlightDataProvider

logger = logging.getLogger(__name__)


class InMemoryFlightData(FlightDataProvider):

    def __init__(self, airports: list[Airport], flights: list[Flight]):
        self._airports: dict[str, Airport] = {a.code: a for a in airports}
        self._flights_by_origin: dict[str, list[Flight]] = {}
        for f in flights:
            self._flights_by_origin.setdefault(f.origin, []).append(f)
        self._flight_count = len(flights)
        self._check_integrity()

    def _check_integrity(self) -> None:
        for airport in self._airports.values():
            try:
                ZoneInfo(airport.timezone)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise DataIntegrityError(
                    f"Airport '{airport.code}' has unknown timezone '{airport.timezone}'."
                ) from exc

        for flights in self._flights_by_origin.values():
            for f in flights:
                for code in (f.origin, f.destination):
                    if code not in self._airports:
                        raise DataIntegrityError(
                            f"Flight {f.flight_number} references unknown airport '{code}'."
                        )

    @property
    def flight_count(self) -> int:
        return self._flight_count

    def get_airport(self, code: str) -> Airport | None:
        return self._airports.get(code)

    def airport_exists(self, code: str) -> bool:
        return code in self._airports

    def flights_departing_on_date(self, origin: str, travel_date: date) -> list[Flight]:
        return [
            f for f in self._flights_by_origin.get(origin, [])
            if f.departure_time.date() == travel_date
        ]

    def flights_departing_from(self, origin: str) -> list[Flight]:
        return list(self._flights_by_origin.get(origin, []))

    def all_airports(self) -> list[Airport]:
        return sorted(self._airports.values(), key=lambda a: a.code)


def load_dataset(path: str | Path) -> InMemoryFlightData:
    """
    Legge il file JSON e costruisce il dataset in memoria.

    Returns:
        InMemoryFlightData (vuoto se il file manca o non è valido).

    Raises:
        DataIntegrityError: se un volo referenzia un aeroporto inesistente
            o un aeroporto ha un fuso sconosciuto.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Dataset not found at '%s'. Starting with empty dataset.", path)
        return InMemoryFlightData([], [])

    try:
        dataset = FlightDataset.model_validate_json(path.read_bytes())
    except (OSError, ValidationError) as exc:
        logger.error("Failed to load dataset from '%s': %s", path, exc)
        return InMemoryFlightData([], [])

    data = InMemoryFlightData(dataset.airports, dataset.flights)
    logger.info("Loaded %d airports and %d flights.", len(data.all_airports()), data.flight_count)
    return data

"""
Flight Data Layer — interfaccia astratta in sola lettura.

Il codice di ricerca (path_finder, connection_validator, itinerary_builder)
usa solo questa classe. L'implementazione concreta (dataset in memoria) viene
scelta dalla factory; nei test si sostituisce con un dataset sintetico o un mock.
"""
from abc import ABC, abstractmethod
from datetime import date

from skypath.models.flight_data import Airport, Flight


class DataIntegrityError(Exception):
    """Il dataset referenzia un aeroporto (o un fuso) inesistente. Errore fatale."""


class FlightDataProvider(ABC):

    @abstractmethod
    def get_airport(self, code: str) -> Airport | None:
        """Restituisce l'aeroporto con quel codice, None se non esiste."""
        ...

    @abstractmethod
    def airport_exists(self, code: str) -> bool:
        ...

    @abstractmethod
    def flights_departing_on_date(self, origin: str, travel_date: date) -> list[Flight]:
        """
        Voli in partenza da origin nel giorno indicato.
        Confronta la data locale "naive" della partenza, senza conversioni di fuso.
        """
        ...

    @abstractmethod
    def flights_departing_from(self, origin: str) -> list[Flight]:
        """
        Tutti i voli in partenza da origin, qualsiasi data.
        Usato oltre la prima tratta: il filtro temporale lo fa il layover.
        """
        ...

    @abstractmethod
    def all_airports(self) -> list[Airport]:
        ...

    @property
    @abstractmethod
    def flight_count(self) -> int:
        ...


def require_airport(provider: FlightDataProvider, code: str) -> Airport:
    """Come get_airport, ma un codice sconosciuto è un errore di integrità."""
    airport = provider.get_airport(code)
    if airport is None:
        raise DataIntegrityError(f"Airport '{code}' referenced by a flight is not in the dataset.")
    return airport

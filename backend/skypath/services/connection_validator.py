"""
Connection Validator — decide se due voli consecutivi formano uno scalo valido.

Regole (in ordine):
  1. layover = partenza del secondo volo − arrivo del primo, entrambi nel fuso
     del rispettivo aeroporto → negativo = scartato
  2. minimo 45 min se la connessione è domestica, 90 altrimenti
  3. massimo 360 min sempre

Una connessione scartata non è un errore: semplicemente non genera itinerari.
"""
from dataclasses import dataclass
from enum import Enum

from skypath.models.flight_data import Flight
from skypath.services.providers.base import FlightDataProvider, require_airport
from skypath.utils.timezones import minutes_between, to_zoned

MIN_LAYOVER_DOMESTIC_MINUTES = 45
MIN_LAYOVER_INTERNATIONAL_MINUTES = 90
MAX_LAYOVER_MINUTES = 360


class Rejection(str, Enum):
    NEGATIVE_LAYOVER = "negative_layover"
    LAYOVER_TOO_SHORT = "layover_too_short"
    LAYOVER_TOO_LONG = "layover_too_long"


@dataclass(frozen=True)
class ConnectionCheck:
    layover_minutes: int
    rejection: Rejection | None = None

    @property
    def valid(self) -> bool:
        return self.rejection is None


def layover_minutes(provider: FlightDataProvider, arriving: Flight, departing: Flight) -> int:
    """Minuti di attesa tra l'arrivo di arriving e la partenza di departing."""
    # Stesso aeroporto, ma i due fusi vengono risolti separatamente
    arrival_airport = require_airport(provider, arriving.destination)
    departure_airport = require_airport(provider, departing.origin)

    arrival = to_zoned(arriving.arrival_time, arrival_airport.timezone)
    departure = to_zoned(departing.departure_time, departure_airport.timezone)
    return minutes_between(arrival, departure)


def is_domestic_connection(provider: FlightDataProvider, arriving: Flight, departing: Flight) -> bool:
    """Domestica solo se ENTRAMBE le tratte sono interne al proprio paese."""
    arriving_domestic = (
        require_airport(provider, arriving.origin).country
        == require_airport(provider, arriving.destination).country
    )
    departing_domestic = (
        require_airport(provider, departing.origin).country
        == require_airport(provider, departing.destination).country
    )
    return arriving_domestic and departing_domestic


def check_connection(provider: FlightDataProvider, arriving: Flight, departing: Flight) -> ConnectionCheck:
    minutes = layover_minutes(provider, arriving, departing)
    if minutes < 0:
        return ConnectionCheck(minutes, Rejection.NEGATIVE_LAYOVER)

    min_layover = (
        MIN_LAYOVER_DOMESTIC_MINUTES
        if is_domestic_connection(provider, arriving, departing)
        else MIN_LAYOVER_INTERNATIONAL_MINUTES
    )
    if minutes < min_layover:
        return ConnectionCheck(minutes, Rejection.LAYOVER_TOO_SHORT)

    if minutes > MAX_LAYOVER_MINUTES:
        return ConnectionCheck(minutes, Rejection.LAYOVER_TOO_LONG)

    return ConnectionCheck(minutes)

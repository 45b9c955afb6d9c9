"""
Itinerary Builder — trasforma una catena di voli già validata in un Itinerary.

Per ogni tratta: orari agganciati al fuso del proprio aeroporto, durata,
timestamp ISO-8601 con offset. Per ogni coppia di tratte: layover ricalcolato
con la stessa funzione del validatore. Totali: durata da prima partenza ad
ultimo arrivo, prezzo sommato e arrotondato al centesimo.
"""
import math
from collections.abc import Sequence

from skypath.models.flight_data import Flight
from skypath.models.schemas import FlightSegment, Itinerary, Layover
from skypath.services.connection_validator import layover_minutes
from skypath.services.providers.base import FlightDataProvider, require_airport
from skypath.utils.timezones import minutes_between, to_zoned


def round_price(value: float) -> float:
    """Arrotonda al centesimo, metà sempre per eccesso (non banker's rounding)."""
    return math.floor(value * 100 + 0.5) / 100


def _build_segment(provider: FlightDataProvider, flight: Flight) -> FlightSegment:
    origin = require_airport(provider, flight.origin)
    dest = require_airport(provider, flight.destination)

    departure = to_zoned(flight.departure_time, origin.timezone)
    arrival = to_zoned(flight.arrival_time, dest.timezone)

    return FlightSegment(
        flight_number=flight.flight_number,
        airline=flight.airline,
        origin_code=flight.origin,
        origin_name=origin.name,
        origin_city=origin.city,
        destination_code=flight.destination,
        destination_name=dest.name,
        destination_city=dest.city,
        departure_time=departure.isoformat(),
        arrival_time=arrival.isoformat(),
        duration_minutes=minutes_between(departure, arrival),
        aircraft=flight.aircraft,
    )


def build_itinerary(provider: FlightDataProvider, flights: Sequence[Flight]) -> Itinerary:
    if not flights:
        raise ValueError("Cannot build an itinerary from an empty flight list.")

    segments: list[FlightSegment] = []
    layovers: list[Layover] = []
    total_price = 0.0

    for i, flight in enumerate(flights):
        segments.append(_build_segment(provider, flight))
        total_price += flight.price

        if i < len(flights) - 1:
            connecting = require_airport(provider, flight.destination)
            layovers.append(
                Layover(
                    airport_code=flight.destination,
                    airport_name=connecting.name,
                    airport_city=connecting.city,
                    duration_minutes=layover_minutes(provider, flight, flights[i + 1]),
                )
            )

    first, last = flights[0], flights[-1]
    first_departure = to_zoned(first.departure_time, require_airport(provider, first.origin).timezone)
    last_arrival = to_zoned(last.arrival_time, require_airport(provider, last.destination).timezone)

    return Itinerary(
        segments=segments,
        layovers=layovers,
        total_duration_minutes=minutes_between(first_departure, last_arrival),
        total_price=round_price(total_price),
        stops=len(flights) - 1,
    )

"""
Core logic per la ricerca itinerari.

Flusso:
  1. find_flight_paths()  → tutte le catene valide (0–2 scali)
  2. build_itinerary()    → segmenti, layover, durata e prezzo totali
  3. sort_by_duration()   → ordinamento stabile per durata crescente

Chiamata sincrona e senza stato condiviso: la route la esegue in un thread
separato via asyncio.to_thread() per non bloccare l'event loop.
Nessun itinerario trovato → lista vuota, non un errore.
"""
import logging
from datetime import date

from skypath.models.schemas import Itinerary
from skypath.services.itinerary_builder import build_itinerary
from skypath.services.path_finder import find_flight_paths
from skypath.services.providers.base import FlightDataProvider

logger = logging.getLogger(__name__)


def sort_by_duration(itineraries: list[Itinerary]) -> list[Itinerary]:
    """A parità di durata resta l'ordine di scoperta (sort stabile)."""
    return sorted(itineraries, key=lambda it: it.total_duration_minutes)


def search_itineraries(
    provider: FlightDataProvider,
    origin: str,
    destination: str,
    travel_date: date,
) -> list[Itinerary]:
    """
    Cerca tutti gli itinerari origin → destination con partenza in travel_date.

    Gli input sono già validati dal layer HTTP (codici esistenti, origin != destination).
    """
    paths = find_flight_paths(provider, origin, destination, travel_date)
    itineraries = [build_itinerary(provider, path) for path in paths]

    logger.debug(
        "Found %d itineraries from %s to %s on %s",
        len(itineraries), origin, destination, travel_date,
    )
    return sort_by_duration(itineraries)

"""
Path Finder — DFS limitata con backtracking.

Enumera tutte le catene di voli origin → destination con al massimo
MAX_STOPS scali (quindi al massimo 3 tratte):
  - prima tratta: voli in partenza da origin nella data richiesta
  - tratte successive: qualsiasi volo dall'aeroporto corrente che superi
    check_connection() (il filtro temporale lo fa il layover, non la data)
  - nessun aeroporto intermedio visitato due volte

path e visited sono strutture mutabili create a ogni chiamata e ripristinate
all'uscita di ogni ramo: due ricerche concorrenti non condividono nulla.
"""
from datetime import date

from skypath.models.flight_data import Flight
from skypath.services.connection_validator import check_connection
from skypath.services.providers.base import FlightDataProvider

MAX_STOPS = 2


def find_flight_paths(
    provider: FlightDataProvider,
    origin: str,
    destination: str,
    travel_date: date,
) -> list[tuple[Flight, ...]]:
    """
    Returns:
        Tutte le catene complete che arrivano a destination, nell'ordine
        in cui la ricerca le trova (non ordinate).
    """
    results: list[tuple[Flight, ...]] = []
    path: list[Flight] = []
    visited: set[str] = {origin}

    for flight in provider.flights_departing_on_date(origin, travel_date):
        path.append(flight)
        if flight.destination == destination:
            results.append(tuple(path))
        else:
            visited.add(flight.destination)
            _extend(provider, path, destination, visited, results, depth=1)
            visited.discard(flight.destination)
        path.pop()

    return results


def _extend(
    provider: FlightDataProvider,
    path: list[Flight],
    destination: str,
    visited: set[str],
    results: list[tuple[Flight, ...]],
    depth: int,
) -> None:
    if depth > MAX_STOPS:
        return

    previous = path[-1]
    for candidate in provider.flights_departing_from(previous.destination):
        if not check_connection(provider, previous, candidate).valid:
            continue
        # La destinazione finale passa sempre, gli intermedi solo una volta
        if candidate.destination in visited and candidate.destination != destination:
            continue

        path.append(candidate)
        if candidate.destination == destination:
            results.append(tuple(path))
        elif depth < MAX_STOPS:
            visited.add(candidate.destination)
            _extend(provider, path, destination, visited, results, depth + 1)
            visited.discard(candidate.destination)
        path.pop()

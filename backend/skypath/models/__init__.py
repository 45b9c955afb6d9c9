# Punto unico di import per i modelli: dati del dataset e schemi di risposta.
from skypath.models.flight_data import Airport, Flight, FlightDataset  # noqa: F401
from skypath.models.schemas import (  # noqa: F401
    ErrorOut,
    FlightSegment,
    HealthOut,
    Itinerary,
    Layover,
    SearchOut,
)

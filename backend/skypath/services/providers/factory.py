"""
Flight Data Factory — dataset di processo, caricato una volta sola.

Uso come dependency FastAPI:
    data = Annotated[FlightDataProvider, Depends(get_data_provider)]

Il lifespan dell'app chiama init_data_provider() all'avvio; se nessuno l'ha
fatto (es. script) get_data_provider() carica in modo lazy da settings.data_path.
"""
from skypath.config import settings
from skypath.services.providers.base import FlightDataProvider
from skypath.services.providers.memory import load_dataset

_provider: FlightDataProvider | None = None


def init_data_provider(path: str | None = None) -> FlightDataProvider:
    """Carica il dataset e lo registra come provider globale."""
    global _provider
    _provider = load_dataset(path or settings.data_path)
    return _provider


def get_data_provider() -> FlightDataProvider:
    """Restituisce il provider globale (singleton lazy)."""
    if _provider is None:
        return init_data_provider()
    return _provider


def reset_data_provider() -> None:
    """Dimentica il dataset corrente. Da chiamare nello shutdown del lifespan."""
    global _provider
    _provider = None

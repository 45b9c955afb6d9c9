from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Dataset
    data_path: str = "data/flights.json"

    # App
    app_env: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"


# Istanza globale usata in tutto il progetto
settings = Settings()

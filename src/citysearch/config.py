"""citysearch configuration — catalog location, logging and tracing settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

from citysearch.query import RUSSIAN_ALPHABET


class Settings(BaseSettings):
    # Catalog
    catalog_path: str = "cities.json"
    query_alphabet: str = RUSSIAN_ALPHABET

    # Logging
    log_json: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Accept 'debug', ' Info ' and friends from hand-edited env files."""
        return value.strip().upper()

    # MLflow tracing, off by default
    tracing_enabled: bool = False
    mlflow_tracking_uri: str = "sqlite:///mlruns/mlflow.db"
    mlflow_experiment_name: str = "citysearch"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

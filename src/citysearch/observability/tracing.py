"""MLflow tracing setup for engine builds and lookups."""

import logging

import mlflow

from citysearch.config import Settings

logger = logging.getLogger(__name__)


def configure_tracing(settings: Settings) -> bool:
    """Point MLflow at the configured store, or switch tracing off.

    Returns whether tracing is enabled.
    """
    if not settings.tracing_enabled:
        mlflow.tracing.disable()
        return False

    mlflow.set_tracking_uri(settings.mlflow_tracking_uri)
    mlflow.set_experiment(settings.mlflow_experiment_name)
    mlflow.tracing.enable()
    logger.info("MLflow tracing enabled: %s", settings.mlflow_tracking_uri)
    return True

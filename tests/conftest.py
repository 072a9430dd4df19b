"""Shared test fixtures."""

import mlflow
import pytest

from citysearch.catalog import parse_catalog
from citysearch.config import settings
from citysearch.core.types import City
from citysearch.observability.tracing import configure_tracing
from citysearch.search.engine import CitySearchEngine
from tests.factories import build_catalog_payload


@pytest.fixture(autouse=True)
def _disable_mlflow_tracing():
    """Disable MLflow tracing during tests so nothing writes a trace store."""
    mlflow.tracing.disable()
    yield
    configure_tracing(settings)


@pytest.fixture(scope="session")
def catalog_payload() -> dict:
    return build_catalog_payload()


@pytest.fixture(scope="session")
def cities(catalog_payload) -> list[City]:
    return parse_catalog(catalog_payload)


@pytest.fixture
def engine(cities) -> CitySearchEngine:
    return CitySearchEngine.build(cities)

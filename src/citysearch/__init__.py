"""citysearch — in-memory word-prefix city search and nearest-city lookup."""

from citysearch.catalog import load_catalog, parse_catalog
from citysearch.config import settings
from citysearch.core.types import City, CityTier, Coordinate, SearchResult, Section
from citysearch.observability.tracing import configure_tracing
from citysearch.query import normalize_query, validate_query
from citysearch.search.engine import CitySearchEngine

__version__ = "0.1.0"

# Engine methods carry @mlflow.trace; keep tracing off unless settings opt in.
configure_tracing(settings)

__all__ = [
    "City",
    "CitySearchEngine",
    "CityTier",
    "Coordinate",
    "SearchResult",
    "Section",
    "load_catalog",
    "normalize_query",
    "parse_catalog",
    "validate_query",
]

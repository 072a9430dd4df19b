"""Core domain types shared across all citysearch modules."""

from citysearch.core.errors import CatalogError, CatalogOrderError, EmptyQueryError
from citysearch.core.types import (
    City,
    CityTier,
    CombinedSizes,
    Coordinate,
    Ordering,
    SearchEntry,
    SearchResult,
    Section,
    SectionKind,
    compare,
)

__all__ = [
    "CatalogError",
    "CatalogOrderError",
    "City",
    "CityTier",
    "CombinedSizes",
    "Coordinate",
    "EmptyQueryError",
    "Ordering",
    "SearchEntry",
    "SearchResult",
    "Section",
    "SectionKind",
    "compare",
]

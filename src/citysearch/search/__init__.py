"""Search engine, bounded-search primitives and nearest-city lookup."""

from citysearch.search.engine import CitySearchEngine

__all__ = ["CitySearchEngine"]

"""In-memory city search engine.

Built once from an immutable catalog; every query only reads the
structures prepared here, so a single engine can be shared across threads
without locking. Rebuild the engine when the catalog changes.

Two lookups are supported:
  1. Incremental word-prefix search over city names, returned as tiered,
     alphabetically ordered sections.
  2. Nearest city to a coordinate by geodesic distance.
"""

import logging
import time
from collections.abc import Iterable

import mlflow
from mlflow.entities import SpanType

from citysearch.core.errors import CatalogOrderError, EmptyQueryError
from citysearch.core.types import City, CityTier, Coordinate, SearchEntry, SearchResult, Section
from citysearch.search.bounds import equal_range
from citysearch.search.matching import word_prefix_comparator
from citysearch.search.nearest import nearest
from citysearch.search.sectioning import section

logger = logging.getLogger(__name__)


class CitySearchEngine:
    """Immutable search index over a city catalog.

    Ids must equal catalog positions; the constructor raises
    :class:`CatalogOrderError` otherwise. :meth:`build` additionally checks
    that big cities form a contiguous prefix of the catalog.
    """

    __slots__ = ("_cities", "_entries", "_tiers", "_default_result")

    def __init__(self, cities: Iterable[City] = ()):
        self._cities: tuple[City, ...] = tuple(cities)
        _check_ids(self._cities)
        self._tiers: tuple[CityTier, ...] = tuple(city.tier for city in self._cities)
        # sorted() is stable: equal names keep catalog order.
        self._entries: tuple[SearchEntry, ...] = tuple(sorted(
            (SearchEntry(city.id, city.name.lower()) for city in self._cities),
            key=lambda entry: entry.lowercased_name,
        ))
        self._default_result = self._make_default_result(self._cities)

    @classmethod
    @mlflow.trace(name="build_city_index", span_type=SpanType.PARSER)
    def build(cls, cities: Iterable[City]) -> "CitySearchEngine":
        """Validate a catalog and build an engine over it.

        Raises:
            CatalogOrderError: ids are not catalog positions, or big cities
                do not form a contiguous prefix.
        """
        cities = tuple(cities)
        _check_catalog(cities)

        start = time.monotonic()
        engine = cls(cities)
        logger.info(
            "Built city index: %d cities, %d big",
            len(cities), len(engine._default_result.matched_ids),
            extra={
                "city_count": len(cities),
                "duration_ms": round((time.monotonic() - start) * 1000, 2),
            },
        )
        return engine

    @property
    def cities(self) -> tuple[City, ...]:
        return self._cities

    @property
    def entries(self) -> tuple[SearchEntry, ...]:
        """Search entries in ascending lowercase-name order."""
        return self._entries

    def __len__(self) -> int:
        return len(self._cities)

    def is_empty(self) -> bool:
        return not self._cities

    def city(self, city_id: int) -> City:
        return self._cities[city_id]

    def default_result(self) -> SearchResult:
        """Result shown when no query is active: big cities by name."""
        return self._default_result

    @mlflow.trace(name="city_search", span_type=SpanType.RETRIEVER)
    def search(self, query: str) -> SearchResult:
        """Find cities whose names word-prefix match ``query``.

        ``query`` must already be sanitized and lowercased; an empty query
        raises :class:`EmptyQueryError`.
        """
        if not query:
            raise EmptyQueryError("search() needs a non-empty query; use default_result()")

        matches = self._entries[_match_slice(self._entries, query)]
        sections = section(matches, self._tiers)
        result = SearchResult(
            query=query,
            matched_ids=frozenset(entry.city_id for entry in matches),
            sections=sections,
        )
        logger.debug(
            "Search %r matched %d cities", query, len(matches),
            extra={"query": query, "match_count": len(matches)},
        )
        return result

    @mlflow.trace(name="nearest_city", span_type=SpanType.TOOL)
    def nearest_city(self, coordinate: Coordinate | None) -> City | None:
        """Closest city to ``coordinate``, or None without a coordinate or catalog."""
        found = self.nearest_city_with_distance(coordinate)
        return found[0] if found else None

    def nearest_city_with_distance(self, coordinate: Coordinate | None) -> tuple[City, float] | None:
        """Like :meth:`nearest_city` but also returns the distance in meters."""
        if coordinate is None or not self._cities:
            return None
        found = nearest(self._cities, coordinate)
        if found:
            logger.debug("Nearest city to %s is %s (%.0f m)", coordinate, found[0].name, found[1])
        return found

    @staticmethod
    def _make_default_result(cities: tuple[City, ...]) -> SearchResult:
        if not cities:
            return SearchResult(query="")

        big_cities = []
        for city in cities:
            if city.tier is not CityTier.BIG:
                break
            big_cities.append(city)
        big_ids = [city.id for city in sorted(big_cities, key=lambda city: city.name)]

        return SearchResult(
            query="",
            matched_ids=frozenset(big_ids),
            sections=(Section.big_cities(big_ids),),
        )


def _match_slice(entries: tuple[SearchEntry, ...], query: str) -> slice:
    found = equal_range(entries, word_prefix_comparator(query))
    return slice(found.start, found.stop)


def _check_ids(cities: tuple[City, ...]) -> None:
    for position, city in enumerate(cities):
        if city.id != position:
            raise CatalogOrderError(f"city {city.name!r} has id {city.id}, expected {position}")


def _check_catalog(cities: tuple[City, ...]) -> None:
    seen_smaller = False
    for city in cities:
        if city.tier is not CityTier.BIG:
            seen_smaller = True
        elif seen_smaller:
            raise CatalogOrderError(
                f"big city {city.name!r} (id {city.id}) follows a smaller city"
            )

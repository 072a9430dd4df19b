"""Domain types for the citysearch engine.

All shared dataclasses and enums live here to prevent circular imports
and establish a single source of truth for the domain model. Every other
module imports from here.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

class Ordering(IntEnum):
    """Three-way comparison result used by the bounded searches."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(lhs, rhs) -> Ordering:
    """Three-way compare two values of the same comparable type."""
    if lhs == rhs:
        return Ordering.EQUAL
    return Ordering.LESS if lhs < rhs else Ordering.GREATER


# ---------------------------------------------------------------------------
# Catalog types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Coordinate:
    """A WGS-84 point in decimal degrees."""

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return self.latitude, self.longitude


class CityTier(IntEnum):
    """Population tier; a lower rank is more prominent."""

    BIG = 0
    MIDDLE = 1
    SMALL = 2
    TINY = 3

    @property
    def is_big_or_middle(self) -> bool:
        return self < CityTier.SMALL


@dataclass(frozen=True, eq=False)
class City:
    """A catalog entry. Two cities are equal iff their ids are equal."""

    id: int
    name: str
    coordinate: Coordinate
    tier: CityTier
    subject: str | None = None  # only set for cities sharing a name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, City):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class SearchEntry:
    """Lightweight name-sorted index row pointing back at a city."""

    city_id: int
    lowercased_name: str


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

class SectionKind(Enum):
    BIG_CITIES = "big_cities"
    COMBINED_SIZES = "combined_sizes"
    UNTITLED = "untitled"


class CombinedSizes(Enum):
    BIG_AND_MIDDLE = "big_and_middle"
    OTHERS = "others"


@dataclass(frozen=True)
class Section:
    """A labelled, alphabetically ordered group of city ids.

    ``sizes`` is set only when ``kind`` is ``COMBINED_SIZES``.
    """

    kind: SectionKind
    city_ids: tuple[int, ...]
    sizes: CombinedSizes | None = None

    def __post_init__(self) -> None:
        if (self.kind is SectionKind.COMBINED_SIZES) != (self.sizes is not None):
            raise ValueError(f"sizes must be set exactly for combined sections, got {self.kind}/{self.sizes}")

    @classmethod
    def big_cities(cls, city_ids) -> "Section":
        return cls(SectionKind.BIG_CITIES, tuple(city_ids))

    @classmethod
    def combined(cls, sizes: CombinedSizes, city_ids) -> "Section":
        return cls(SectionKind.COMBINED_SIZES, tuple(city_ids), sizes)

    @classmethod
    def untitled(cls, city_ids) -> "Section":
        return cls(SectionKind.UNTITLED, tuple(city_ids))


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one query, echoing the query so stale results can be dropped."""

    query: str
    matched_ids: frozenset[int] = frozenset()
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def ordered_ids(self) -> list[int]:
        """All section ids concatenated in display order."""
        return [city_id for section in self.sections for city_id in section.city_ids]

    def is_stale(self, latest_query: str) -> bool:
        return self.query != latest_query

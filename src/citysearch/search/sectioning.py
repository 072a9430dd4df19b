"""Split a match set into display sections by city tier.

Big and middle cities come first, the rest after; alphabetical order is
kept inside each group because the regrouping is a single stable sort.
"""

from collections.abc import Mapping, Sequence

from citysearch.core.types import CityTier, CombinedSizes, Ordering, SearchEntry, Section
from citysearch.search.bounds import upper_bound


def _tier_rank(tier: CityTier) -> Ordering:
    return Ordering.EQUAL if tier.is_big_or_middle else Ordering.GREATER


def section(
    entries: Sequence[SearchEntry],
    tiers: Mapping[int, CityTier] | Sequence[CityTier],
) -> tuple[Section, ...]:
    """Partition alphabetically ordered ``entries`` into tiered sections.

    ``tiers`` maps a city id to its tier. Returns two combined-size sections
    when the matches contain both big-or-middle and smaller cities, a single
    untitled section otherwise, and nothing when ``entries`` is empty.
    """
    if not entries:
        return ()

    # sorted() is stable, so each group keeps its alphabetical order.
    by_tier = sorted(
        ((entry.city_id, tiers[entry.city_id]) for entry in entries),
        key=lambda item: not item[1].is_big_or_middle,
    )
    ids = [city_id for city_id, _ in by_tier]
    threshold = upper_bound(by_tier, lambda item: _tier_rank(item[1]))
    count = len(by_tier)

    if 0 < threshold < count:
        return (
            Section.combined(CombinedSizes.BIG_AND_MIDDLE, ids[:threshold]),
            Section.combined(CombinedSizes.OTHERS, ids[threshold:]),
        )
    return (Section.untitled(ids),)

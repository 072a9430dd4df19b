"""Generalized binary search over a three-way predicate.

``compare(item)`` reports where ``item`` sits relative to an implicit
target: LESS means the item belongs before it, GREATER after it. The
sequence should be partitioned as LESS* EQUAL* GREATER*. The word-prefix
comparator is not strictly monotonic for multi-word queries, so the probe
order below is fixed: midpoints are taken over the inclusive span
``[lo, hi - 1]``.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from citysearch.core.types import Ordering

T = TypeVar("T")


def _span(items: Sequence, lo: int | None, hi: int | None) -> tuple[int, int]:
    lo = 0 if lo is None else lo
    hi = len(items) if hi is None else hi
    if not 0 <= lo <= hi <= len(items):
        raise ValueError(f"invalid search range [{lo}, {hi}) for {len(items)} items")
    return lo, hi


def lower_bound(
    items: Sequence[T],
    compare: Callable[[T], Ordering],
    lo: int | None = None,
    hi: int | None = None,
) -> int:
    """Return the first index in ``[lo, hi)`` whose item does not compare LESS.

    Returns ``hi`` when every item compares LESS.
    """
    lo, hi = _span(items, lo, hi)
    result = hi
    upper = hi - 1
    while lo <= upper:
        middle = (lo + upper) >> 1
        if compare(items[middle]) is Ordering.LESS:
            lo = middle + 1
        else:
            result = middle
            upper = middle - 1
    return result


def upper_bound(
    items: Sequence[T],
    compare: Callable[[T], Ordering],
    lo: int | None = None,
    hi: int | None = None,
) -> int:
    """Return the first index in ``[lo, hi)`` whose item compares GREATER.

    Returns ``hi`` when no item compares GREATER.
    """
    lo, hi = _span(items, lo, hi)
    result = hi
    upper = hi - 1
    while lo <= upper:
        middle = (lo + upper) >> 1
        if compare(items[middle]) is Ordering.GREATER:
            result = middle
            upper = middle - 1
        else:
            lo = middle + 1
    return result


def equal_range(items: Sequence[T], compare: Callable[[T], Ordering]) -> range:
    """Half-open index range of items comparing EQUAL."""
    start = lower_bound(items, compare)
    stop = upper_bound(items, compare, lo=start)
    return range(start, stop)

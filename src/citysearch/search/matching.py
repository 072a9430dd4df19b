"""Word-prefix comparator for name-sorted search entries.

A name matches a query when, word by word, each query word is a literal
prefix of the corresponding name word. Names with fewer words than the
query fall back to a whole-string comparison so they still sort on the
correct side of the match range.
"""

from collections.abc import Callable

from citysearch.core.types import Ordering, SearchEntry, compare

WORD_SEPARATOR = " "


def _is_prefix(part: str, name_part: str) -> bool:
    # An empty query word never counts as a prefix.
    return bool(part) and name_part.startswith(part)


def word_prefix_comparator(query: str) -> Callable[[SearchEntry], Ordering]:
    """Build ``compare(entry)`` for a lowercased query."""
    query_parts = query.split(WORD_SEPARATOR)
    query_parts_count = len(query_parts)

    def compare_entry(entry: SearchEntry) -> Ordering:
        name = entry.lowercased_name
        name_parts = name.split(WORD_SEPARATOR)

        if len(name_parts) < query_parts_count:
            return compare(name, query)

        for part, name_part in zip(query_parts, name_parts):
            if not _is_prefix(part, name_part):
                return compare(name_part, part)
        return Ordering.EQUAL

    return compare_entry

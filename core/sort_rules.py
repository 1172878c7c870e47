"""
sort_rules.py - Sorted Lookup Helpers

Names are compared by plain string order, so lookups are exact and
case-sensitive, like the filesystem calls that follow them.
"""

from bisect import bisect_left
from typing import Iterable, List, Optional, Sequence


def sorted_copy(names: Iterable[str]) -> List[str]:
    """
    Return an independently sorted copy of names

    Args:
        names: Names in any order

    Returns:
        New sorted list (the input is left untouched)
    """
    return sorted(names)


def contains_sorted(sorted_names: Sequence[str], name: str) -> bool:
    """
    Binary search for name in an already sorted sequence

    Args:
        sorted_names: Sequence sorted with sorted_copy()
        name: Name to look up

    Returns:
        Whether name is present
    """
    i = bisect_left(sorted_names, name)
    return i < len(sorted_names) and sorted_names[i] == name


def find_adjacent_duplicate(sorted_names: Sequence[str]) -> Optional[str]:
    """Return the first name equal to its sorted neighbour, or None"""
    for i in range(len(sorted_names) - 1):
        if sorted_names[i] == sorted_names[i + 1]:
            return sorted_names[i]
    return None

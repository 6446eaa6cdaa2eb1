"""Binary search helpers shared by the prefix tree nodes."""

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar


class SupportsLessThan(Protocol):
    """Any element type with a total order defined by ``<``."""

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


def search_for_insert_position(key: T, items: Sequence[T]) -> int:
    """Find the index where `key` can be inserted while keeping `items`
    sorted.

    Every element before the returned index is less than `key` and no
    element from the returned index onwards is less than `key`. Only the
    ``<`` operator of the elements is used.

    Args:
        key (T): The element to locate.
        items (Sequence[T]): A strictly ascending sequence.

    Returns:
        int: The first index whose element is not less than `key`,
        or ``len(items)`` if there is none.

    """
    # Half-open range [left, right) of candidate positions
    left = 0
    right = len(items)

    while left < right:
        # Midpoint without summing both bounds
        mid = left + (right - left) // 2
        # Everything up to mid is smaller, search to the right
        if items[mid] < key:
            left = mid + 1
        # mid is a candidate, keep it in range
        else:
            right = mid

    return left

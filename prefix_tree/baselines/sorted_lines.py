"""Prefix lookup over a sorted list of lines, kept as a comparison point
for the sorted-edge prefix tree.
"""

import bisect
from collections.abc import Iterable


class SortedLines:
    """Answer prefix queries with a binary search over sorted lines."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines = sorted(lines)

    def insert(self, line: str) -> None:
        bisect.insort(self.lines, line)

    def exists(self, prefix: str) -> bool:
        """Check whether any stored line starts with `prefix`.

        The first line not less than `prefix` is the only candidate,
        because every line starting with `prefix` sorts right after it.

        Args:
            prefix (str): The prefix to search for.

        Returns:
            bool: True if some line starts with `prefix`
            (always True for the empty string), False otherwise.

        """
        if not prefix:
            return True

        index = bisect.bisect_left(self.lines, prefix)
        return index < len(self.lines) and self.lines[index].startswith(prefix)

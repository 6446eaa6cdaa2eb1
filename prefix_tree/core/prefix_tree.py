"""This module represents the implementation of a prefix tree whose nodes
store their edges in sorted parallel lists, used for fast checking of
whether a sequence is a prefix of anything inserted so far.
"""

import itertools
import logging
from collections.abc import Sequence
from types import TracebackType
from typing import Generic, Optional

from prefix_tree.core.allocator import NodeAllocator
from prefix_tree.core.chain import make_node_chain
from prefix_tree.core.node import Node
from prefix_tree.core.search import T, search_for_insert_position


class PrefixTree(Generic[T]):
    """Represents the sorted-edge prefix tree data structure.

    Elements of the stored sequences only need to support ``<`` and
    ``==``. The tree is not thread safe: callers must serialize
    `insert` calls and must not run `exists` while an insert is
    in progress.
    """

    def __init__(self, allocator: Optional[NodeAllocator] = None) -> None:
        """Initialize an empty tree.

        Args:
            allocator (Optional[NodeAllocator]): The allocator consulted
            before the tree grows. Defaults to one that never fails.

        """
        self.root: Node[T] = Node()
        self.allocator = (
            allocator if allocator is not None else NodeAllocator()
        )

    def __enter__(self) -> "PrefixTree[T]":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.release()

    def __contains__(self, sequence: Sequence[T]) -> bool:
        return self.exists(sequence)

    def insert(self, sequence: Sequence[T]) -> None:
        """Insert a new sequence into the tree.

        The tree is descended one element at a time. As soon as an element
        has no structure below it, the rest of the sequence is built as a
        single node chain and attached. Inserting a sequence that is
        already present changes nothing.

        Args:
            sequence (Sequence[T]): The sequence to insert.

        Raises:
            AllocationFailure: If storage cannot be reserved. Any edge
            created by this call is removed first, leaving the tree as
            it was before the call.

        """
        node = self.root
        for position, label in enumerate(sequence):
            # Sorted position of the label among this node's edges
            index = search_for_insert_position(label, node.labels)
            has_rest = position + 1 < len(sequence)

            if index < len(node.labels) and node.labels[index] == label:
                child = node.edges[index]
                # Follow the existing edge
                if child is not None:
                    node = child
                    continue

                # The edge ends here, grow the rest of the sequence below it
                if has_rest:
                    rest = self._rest_of(sequence, position)
                    node.edges[index] = make_node_chain(rest, self.allocator)
                return

            # No edge for this label yet
            node.insert_edge(index, label, self.allocator)

            if has_rest:
                rest = self._rest_of(sequence, position)
                try:
                    node.edges[index] = make_node_chain(rest, self.allocator)
                except MemoryError:
                    logging.debug(
                        "Rolling back edge %r after a failed insert.",
                        label,
                    )
                    node.remove_edge(index)
                    raise
            return

    def exists(self, sequence: Sequence[T]) -> bool:
        """Check whether `sequence` is a path in the tree.

        Every non-empty prefix of an inserted sequence is reported as
        present; the tree does not mark where an inserted sequence ended.

        Args:
            sequence (Sequence[T]): The sequence to search for.

        Returns:
            bool: True if the path exists (always True for an empty
            sequence), False otherwise.

        """
        if len(sequence) == 0:
            return True

        last = len(sequence) - 1
        node = self.root
        for position in range(last):
            index = node.index_of(sequence[position])
            if index is None:
                return False
            child = node.edges[index]
            # A terminal edge cannot continue the path
            if child is None:
                return False
            node = child

        # Only the edge matters for the last element, not its child
        return node.index_of(sequence[last]) is not None

    @staticmethod
    def _rest_of(sequence: Sequence[T], position: int) -> tuple[T, ...]:
        # Not every Sequence supports slicing (deque does not)
        return tuple(itertools.islice(sequence, position + 1, None))

    def release(self) -> None:
        """Release every node of the tree, leaving it empty and reusable."""
        self.root.release()

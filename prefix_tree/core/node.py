"""This module represents a prefix tree node whose outgoing edges are
kept as two parallel sorted lists instead of a dictionary.
"""

from typing import Generic, Optional

from prefix_tree.core.allocator import NodeAllocator
from prefix_tree.core.search import T, search_for_insert_position


class Node(Generic[T]):
    """Represent a node in the prefix tree.

    ``labels[i]`` is the label of the i-th outgoing edge and ``edges[i]``
    is the child it leads to, or None if the edge is terminal.
    """

    __slots__ = ("labels", "edges")

    def __init__(self) -> None:
        """Initialize a node without any edges.

        Attributes:
            labels (list[T]): Strictly ascending edge labels.
            edges (list[Optional[Node]]): Children owned by each edge,
            in the same index space as `labels`.

        """
        self.labels: list[T] = []
        self.edges: list[Optional[Node[T]]] = []

    @classmethod
    def with_label(cls, label: T) -> "Node[T]":
        """Create a node holding a single terminal edge.

        Args:
            label (T): The label of the only edge.

        Returns:
            Node[T]: The new single-edge node.

        """
        node: Node[T] = cls()
        node.labels = [label]
        node.edges = [None]
        return node

    def __len__(self) -> int:
        return len(self.labels)

    def __repr__(self) -> str:
        return f"Node(labels={self.labels!r})"

    def index_of(self, label: T) -> Optional[int]:
        """Look up the edge carrying `label`.

        Args:
            label (T): The label to look for.

        Returns:
            Optional[int]: The edge index, or None if no edge has
            this label.

        """
        # The label can only sit at its sorted insertion point
        index = search_for_insert_position(label, self.labels)
        if index < len(self.labels) and self.labels[index] == label:
            return index
        return None

    def insert_edge(
        self,
        index: int,
        label: T,
        allocator: NodeAllocator,
    ) -> None:
        """Insert a terminal edge with `label` at `index`.

        The label and the edge slot are reserved one after the other. If
        the edge slot cannot be reserved, the label that was already
        inserted is removed again, so both lists keep the same length.

        Args:
            index (int): Sorted position of the new edge, as returned
            by `search_for_insert_position`.
            label (T): The label of the new edge.
            allocator (NodeAllocator): The allocator to reserve storage from.

        Raises:
            AllocationFailure: If storage for the label or the edge
            cannot be reserved.

        """
        # Grow the labels first
        allocator.reserve("label")
        self.labels.insert(index, label)
        try:
            # Then the edge slot at the same index
            allocator.reserve("edge")
            self.edges.insert(index, None)
        except MemoryError:
            # Undo the label so both lists keep the same length
            del self.labels[index]
            raise

    def remove_edge(self, index: int) -> None:
        """Remove the edge at `index` together with its label, releasing
        the child it owns.

        Only used to roll back an insertion that failed.

        Args:
            index (int): The index of the edge to remove.

        """
        child = self.edges[index]
        # Release the owned subtree before dropping the edge
        if child is not None:
            child.release()
        del self.labels[index]
        del self.edges[index]

    def release(self) -> None:
        """Release this node and every node it owns, depth first.

        An explicit stack is used so that long chains do not hit the
        interpreter's recursion limit.
        """
        stack: list[Node[T]] = [self]
        while stack:
            node = stack.pop()
            # Queue the children before their owner is cleared
            stack.extend(child for child in node.edges if child is not None)
            node.labels.clear()
            node.edges.clear()

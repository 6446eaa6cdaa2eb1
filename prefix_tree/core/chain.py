"""Build a run of single-edge nodes for a suffix the tree has never seen."""

import logging
from collections.abc import Sequence

from prefix_tree.core.allocator import NodeAllocator
from prefix_tree.core.node import Node
from prefix_tree.core.search import T


def make_node_chain(suffix: Sequence[T], allocator: NodeAllocator) -> Node[T]:
    """Create one node per element of `suffix`, each linked to the next.

    Node ``k`` holds the single label ``suffix[k]``; its edge leads to
    node ``k + 1`` and the last node's edge is terminal. The whole chain
    is built before anything is attached to the tree.

    Args:
        suffix (Sequence[T]): The non-empty suffix to materialize.
        allocator (NodeAllocator): The allocator to reserve nodes from.

    Raises:
        ValueError: If `suffix` is empty.
        AllocationFailure: If a node cannot be reserved. Every node
        already built for this chain is released first.

    Returns:
        Node[T]: The first node of the chain.

    """
    if len(suffix) == 0:
        raise ValueError("Cannot build a node chain for an empty suffix.")

    chain: list[Node[T]] = []
    try:
        for label in suffix:
            # Reserve and build one single-edge node per element
            allocator.reserve("node")
            node = Node.with_label(label)
            # Link the previous node's only edge to the new node
            if chain:
                chain[-1].edges[0] = node
            chain.append(node)

    except MemoryError:
        logging.debug(
            "Node chain allocation failed after %d of %d nodes, releasing.",
            len(chain),
            len(suffix),
        )
        # Releasing the head releases every linked node after it
        if chain:
            chain[0].release()
        raise

    return chain[0]

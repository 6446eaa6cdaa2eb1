"""Allocation hooks consulted before the prefix tree grows its storage."""


class AllocationFailure(MemoryError):
    """Raised when storage for a label, an edge or a node
    cannot be reserved.
    """


class NodeAllocator:
    """Default allocator: every reservation succeeds."""

    def __init__(self) -> None:
        """Initialize the allocator.

        Attributes:
            allocations (int): The number of reservations granted so far.

        """
        self.allocations = 0

    def reserve(self, kind: str) -> None:
        """Reserve storage for one more item of the given kind.

        Args:
            kind (str): What is about to be allocated
            (``"label"``, ``"edge"`` or ``"node"``).

        Raises:
            AllocationFailure: If the storage cannot be reserved.

        """
        self.allocations += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(allocations={self.allocations})"


class BudgetAllocator(NodeAllocator):
    """Allocator that refuses to grant more than `limit` reservations
    over its lifetime.
    """

    def __init__(self, limit: int) -> None:
        """Initialize the allocator with a fixed budget.

        Args:
            limit (int): The maximum number of reservations to grant.

        Raises:
            ValueError: If `limit` is negative.

        """
        if limit < 0:
            raise ValueError(f"Allocation limit must be >= 0, got {limit}.")
        super().__init__()
        self.limit = limit

    def reserve(self, kind: str) -> None:
        if self.allocations >= self.limit:
            raise AllocationFailure(
                f"Allocation budget of {self.limit} exhausted "
                f"while reserving a {kind}.",
            )
        super().reserve(kind)

"""Relationship identifier allocation."""


class IdAllocator:
    """Hand out unique relationship identifiers in increasing order.

    Each package build owns its own allocator; identifiers are never reused.
    """

    def __init__(self, start: int = 0):
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    @property
    def peek(self) -> int:
        """The identifier the next call to ``next()`` will return."""
        return self._next

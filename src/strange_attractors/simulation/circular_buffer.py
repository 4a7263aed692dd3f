"""Fixed-capacity ring buffer indexed by recency."""

from __future__ import annotations

import copy
from typing import Generic, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """Ring buffer holding the ``capacity`` most recently pushed values.

    The buffer has no empty state: every slot starts as a copy of ``default``,
    so ``get`` is defined for every rank in ``[0, capacity)`` from the moment
    of construction. The backing list never changes length.

    Rank 0 is the value pushed last, rank 1 the one before it, and so on.
    Once fewer than ``capacity`` pushes have happened the oldest ranks still
    return the pre-fill default.
    """

    def __init__(self, capacity: int, default: T) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._slots: list[T] = [copy.copy(default) for _ in range(capacity)]
        # First push wraps to slot capacity - 1.
        self._head = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._capacity

    def push(self, item: T) -> None:
        """Store ``item`` as the most recent value, evicting the oldest."""
        self._head = self._capacity - 1 if self._head == 0 else self._head - 1
        self._slots[self._head] = item

    def get(self, rank: int) -> T:
        """Return the value pushed ``rank`` pushes ago."""
        if not 0 <= rank < self._capacity:
            raise IndexError(
                f"rank {rank} out of range for buffer of capacity {self._capacity}"
            )
        return self._slots[(self._head + rank) % self._capacity]

    def ordered(self) -> list[T]:
        """All values, most recent first."""
        return [self.get(rank) for rank in range(self._capacity)]

"""Tests for the fixed-capacity recency buffer."""
from __future__ import annotations

import numpy as np
import pytest

from strange_attractors.simulation.circular_buffer import CircularBuffer


class TestCircularBufferConstruction:
    def test_prefilled_with_default(self):
        buf = CircularBuffer(5, "d")
        assert [buf.get(r) for r in range(5)] == ["d"] * 5

    def test_capacity_and_len(self):
        buf = CircularBuffer(7, 0)
        assert buf.capacity == 7
        assert len(buf) == 7

    def test_zero_capacity_rejected(self):
        with pytest.raises(ValueError, match="capacity must be >= 1"):
            CircularBuffer(0, 0)

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError, match="capacity must be >= 1"):
            CircularBuffer(-3, 0)

    def test_default_copied_per_slot(self):
        """Mutable defaults are not shared between slots."""
        default = np.zeros(3)
        buf = CircularBuffer(3, default)
        buf.get(0)[0] = 9.0
        assert buf.get(1)[0] == 0.0
        assert default[0] == 0.0


class TestCircularBufferWraparound:
    def test_partial_fill(self):
        """Three pushes into capacity 4: the oldest rank is still the default."""
        buf = CircularBuffer(4, "d")
        for v in ("v1", "v2", "v3"):
            buf.push(v)
        assert buf.get(0) == "v3"
        assert buf.get(1) == "v2"
        assert buf.get(2) == "v1"
        assert buf.get(3) == "d"

    def test_fourth_push_evicts_default(self):
        buf = CircularBuffer(4, "d")
        for v in ("v1", "v2", "v3", "v4"):
            buf.push(v)
        assert [buf.get(r) for r in range(4)] == ["v4", "v3", "v2", "v1"]

    def test_many_wraps(self):
        """After 2.5 laps the buffer holds exactly the last N pushes."""
        buf = CircularBuffer(4, -1)
        for v in range(10):
            buf.push(v)
        assert [buf.get(r) for r in range(4)] == [9, 8, 7, 6]

    def test_capacity_one(self):
        buf = CircularBuffer(1, "d")
        assert buf.get(0) == "d"
        buf.push("a")
        buf.push("b")
        assert buf.get(0) == "b"

    @pytest.mark.parametrize("n_pushes", [0, 1, 4, 5, 17])
    def test_every_rank_defined(self, n_pushes):
        """get is defined for every rank no matter how many pushes happened."""
        buf = CircularBuffer(5, -1)
        for v in range(n_pushes):
            buf.push(v)
        values = [buf.get(r) for r in range(5)]
        expected = [n_pushes - 1 - r if r < n_pushes else -1 for r in range(5)]
        assert values == expected

    def test_get_does_not_mutate(self):
        buf = CircularBuffer(3, 0)
        buf.push(1)
        first = buf.ordered()
        for _ in range(5):
            buf.get(2)
        assert buf.ordered() == first

    def test_ordered_most_recent_first(self):
        buf = CircularBuffer(3, 0)
        buf.push(1)
        buf.push(2)
        assert buf.ordered() == [2, 1, 0]


class TestCircularBufferBounds:
    def test_rank_equal_to_capacity(self):
        buf = CircularBuffer(4, 0)
        with pytest.raises(IndexError, match="out of range"):
            buf.get(4)

    def test_negative_rank(self):
        buf = CircularBuffer(4, 0)
        buf.push(1)
        with pytest.raises(IndexError, match="out of range"):
            buf.get(-1)

"""Sources of starting points for attractor trajectories."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class PointSource(ABC):
    """Produces starting points inside an axis-aligned cube."""

    @abstractmethod
    def sample(self, n: int, low: float, high: float) -> np.ndarray:
        """Return an (n, 3) float32 array with coordinates in [low, high]."""


class UniformPointSource(PointSource):
    """Each coordinate drawn independently and uniformly from [low, high]."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def sample(self, n: int, low: float, high: float) -> np.ndarray:
        if low > high:
            raise ValueError(f"lower bound {low} exceeds upper bound {high}")
        points = self.rng.uniform(low, high, size=(n, 3)).astype(np.float32)
        # Rounding to float32 can step just outside the cube.
        return np.clip(points, np.float32(low), np.float32(high))


class FixedPointSource(PointSource):
    """Replays caller-supplied points, ignoring the requested cube.

    Useful for reproducing a specific configuration of trajectories.
    """

    def __init__(self, points: np.ndarray) -> None:
        points = np.asarray(points, dtype=np.float32)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError(f"points must have shape (n, 3), got {points.shape}")
        self.points = points

    def sample(self, n: int, low: float, high: float) -> np.ndarray:
        if n != len(self.points):
            raise ValueError(f"requested {n} points but {len(self.points)} were supplied")
        return self.points.copy()

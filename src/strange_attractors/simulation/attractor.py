"""Attractor engine: N independent trajectories with bounded trails."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

import numpy as np

from strange_attractors.simulation.circular_buffer import CircularBuffer
from strange_attractors.simulation.dynamics import Dynamics
from strange_attractors.simulation.initial_conditions import PointSource, UniformPointSource

logger = logging.getLogger(__name__)

DEFAULT_BOUNDS = (-20.0, 20.0)


class Trajectory:
    """One evolving point plus its trail of the last ``trail_length`` positions.

    The trail is pre-filled with the starting point, so it always holds
    exactly ``trail_length`` positions.
    """

    def __init__(self, point: np.ndarray, trail_length: int) -> None:
        self.point = np.array(point, dtype=np.float32).reshape(3)
        self.trail: CircularBuffer[np.ndarray] = CircularBuffer(trail_length, self.point)

    def advance(self, increment: np.ndarray) -> None:
        """Apply one Euler increment and record the new position."""
        self.point = self.point + increment
        self.trail.push(self.point.copy())

    def reset(self, point: np.ndarray) -> None:
        self.point = np.array(point, dtype=np.float32).reshape(3)
        self.trail = CircularBuffer(self.trail.capacity, self.point)

    def history(self) -> np.ndarray:
        """Trail as an (L, 3) array, most recent position first."""
        return np.stack(self.trail.ordered())


class Attractor:
    """A set of independent trajectories driven by one shared dynamics model.

    Each tick advances every trajectory by a single explicit Euler step,
    ``p <- p + dynamics.derivatives(p, dt)``, and pushes the new position
    into that trajectory's trail. Trajectories never interact: they share
    only the read-only dynamics coefficients.

    With ``n_workers > 1`` a tick splits the trajectories into contiguous
    chunks integrated on a thread pool created once at construction. Call
    ``close()``, or use the attractor as a context manager, to release it.
    Ticks and ``trails()`` must not overlap on the same instance.

    Args:
        dynamics: Variant supplying the per-step increments.
        n_trajectories: Number of trajectories N, at least 1.
        trail_length: Trail capacity L, at least 1.
        point_source: Produces starting points. Defaults to an unseeded
            ``UniformPointSource``.
        bounds: Cube ``(low, high)`` for the starting points.
        n_workers: Threads used by ``tick``.
    """

    def __init__(
        self,
        dynamics: Dynamics,
        n_trajectories: int,
        trail_length: int,
        point_source: PointSource | None = None,
        bounds: tuple[float, float] = DEFAULT_BOUNDS,
        n_workers: int = 1,
    ) -> None:
        if n_trajectories < 1:
            raise ValueError(f"n_trajectories must be >= 1, got {n_trajectories}")
        if trail_length < 1:
            raise ValueError(f"trail_length must be >= 1, got {trail_length}")
        if n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {n_workers}")

        self._dynamics = dynamics
        self._n_trajectories = n_trajectories
        self._trail_length = trail_length
        self._point_source = point_source or UniformPointSource()
        self._n_workers = min(n_workers, n_trajectories)
        self._tick_count = 0

        low, high = bounds
        points = self._point_source.sample(n_trajectories, low, high)
        self._trajectories = [Trajectory(p, trail_length) for p in points]

        self._pool: ThreadPoolExecutor | None = None
        self._chunks: list[list[Trajectory]] = [self._trajectories]
        if self._n_workers > 1:
            self._chunks = [
                [self._trajectories[i] for i in indices]
                for indices in np.array_split(np.arange(n_trajectories), self._n_workers)
            ]
            self._pool = ThreadPoolExecutor(max_workers=self._n_workers)
        logger.debug(
            f"Created {type(dynamics).__name__} attractor with "
            f"{n_trajectories} trajectories, trail length {trail_length}"
        )

    @property
    def dynamics(self) -> Dynamics:
        return self._dynamics

    @property
    def n_trajectories(self) -> int:
        return self._n_trajectories

    @property
    def trail_length(self) -> int:
        return self._trail_length

    @property
    def tick_count(self) -> int:
        """Ticks performed since construction or the last reset."""
        return self._tick_count

    @property
    def points(self) -> np.ndarray:
        """Current positions as an (N, 3) float32 array."""
        return np.stack([t.point for t in self._trajectories])

    def reset(self, low: float, high: float) -> None:
        """Restart every trajectory at a fresh random point in [low, high]^3."""
        self.reset_points(self._point_source.sample(self._n_trajectories, low, high))
        logger.debug(f"Reset {self._n_trajectories} trajectories within [{low}, {high}]")

    def reset_points(self, points: np.ndarray) -> None:
        """Restart every trajectory at the given (N, 3) points."""
        points = np.asarray(points, dtype=np.float32)
        if points.shape != (self._n_trajectories, 3):
            raise ValueError(
                f"expected points of shape ({self._n_trajectories}, 3), got {points.shape}"
            )
        for trajectory, point in zip(self._trajectories, points):
            trajectory.reset(point)
        self._tick_count = 0

    def tick(self, dt: float) -> None:
        """Advance all trajectories by one Euler step of size ``dt``."""
        if self._pool is None:
            for chunk in self._chunks:
                self._integrate(chunk, dt)
        else:
            # list() re-raises any worker exception here.
            list(self._pool.map(lambda chunk: self._integrate(chunk, dt), self._chunks))
        self._tick_count += 1

    def close(self) -> None:
        """Shut down the worker pool. Later ticks run on the calling thread."""
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None
            logger.debug(f"Closed {self._n_workers}-thread tick pool")

    def __enter__(self) -> Attractor:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _integrate(self, trajectories: Sequence[Trajectory], dt: float) -> None:
        points = np.stack([t.point for t in trajectories])
        dx, dy, dz = self._dynamics.derivatives(points[:, 0], points[:, 1], points[:, 2], dt)
        increments = np.stack(np.broadcast_arrays(dx, dy, dz), axis=1).astype(
            np.float32, copy=False
        )
        for trajectory, increment in zip(trajectories, increments):
            trajectory.advance(increment)

    def trails(self) -> list[tuple[int, np.ndarray]]:
        """Recency-ordered (L, 3) trail for every trajectory, keyed by index."""
        return [(i, t.history()) for i, t in enumerate(self._trajectories)]

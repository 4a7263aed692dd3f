"""Shared test fixtures for Strange Attractors."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from strange_attractors.simulation.attractor import Attractor
from strange_attractors.simulation.dynamics import Lorenz
from strange_attractors.simulation.initial_conditions import FixedPointSource


@pytest.fixture
def tmp_output_dir(tmp_path):
    """Temporary directory for test outputs."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def make_attractor():
    """Factory for attractors started at explicit points."""

    def _make(points, trail_length=4, dynamics=None, n_workers=1):
        points = np.asarray(points, dtype=np.float32)
        return Attractor(
            dynamics or Lorenz(),
            n_trajectories=len(points),
            trail_length=trail_length,
            point_source=FixedPointSource(points),
            n_workers=n_workers,
        )

    return _make

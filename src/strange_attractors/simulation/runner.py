"""Config-driven construction and headless driving of an attractor."""

from __future__ import annotations

import logging
import time

import numpy as np

from strange_attractors.simulation.attractor import Attractor
from strange_attractors.simulation.dynamics import make_dynamics
from strange_attractors.simulation.initial_conditions import UniformPointSource
from strange_attractors.types.simulation import SimulationConfig

logger = logging.getLogger(__name__)


def build_attractor(config: SimulationConfig) -> Attractor:
    """Build an attractor from config, applying ``reset_bounds`` when set."""
    dynamics = make_dynamics(config.dynamics, config.parameters)
    attractor = Attractor(
        dynamics,
        n_trajectories=config.n_trajectories,
        trail_length=config.trail_length,
        point_source=UniformPointSource(config.seed),
        bounds=config.initial_bounds,
        n_workers=config.n_workers,
    )
    if config.reset_bounds is not None:
        attractor.reset(*config.reset_bounds)
    logger.info(
        f"Built {config.dynamics.value} attractor: N={config.n_trajectories}, "
        f"L={config.trail_length}, parameters={dynamics.parameters}"
    )
    return attractor


def run_simulation(
    config: SimulationConfig,
    n_ticks: int | None = None,
    attractor: Attractor | None = None,
) -> Attractor:
    """Tick an attractor ``n_ticks`` times with ``config.dt``.

    Args:
        config: Simulation settings.
        n_ticks: Number of ticks (default: ``config.n_ticks``).
        attractor: Existing attractor to continue; built from config if None.

    Returns:
        The advanced attractor.
    """
    if n_ticks is None:
        n_ticks = config.n_ticks
    if attractor is None:
        attractor = build_attractor(config)

    t0 = time.time()
    log_every = max(n_ticks // 10, 1)
    for i in range(1, n_ticks + 1):
        attractor.tick(config.dt)
        if i % log_every == 0:
            logger.info(f"  tick {i}/{n_ticks}")

    elapsed = time.time() - t0
    logger.info(f"Ran {n_ticks} ticks (dt={config.dt}) in {elapsed:.2f}s")

    points = attractor.points
    n_diverged = int(np.sum(~np.all(np.isfinite(points), axis=1)))
    if n_diverged:
        logger.warning(
            f"{n_diverged}/{attractor.n_trajectories} trajectories have non-finite coordinates"
        )
    return attractor

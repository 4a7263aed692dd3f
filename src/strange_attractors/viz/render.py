"""Matplotlib rendering of attractor trails."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from strange_attractors.simulation.attractor import Attractor
from strange_attractors.types.simulation import RenderConfig
from strange_attractors.utils.color import trail_gradient


def trail_segments(trail: np.ndarray) -> np.ndarray:
    """Segments joining consecutive ranks of an (L, 3) trail.

    Returns an (L - 1, 2, 3) array; segment r runs from rank r to rank r + 1.
    """
    return np.stack([trail[:-1], trail[1:]], axis=1)


def setup_axes(config: RenderConfig) -> tuple[plt.Figure, plt.Axes]:
    """Create a dark 3D figure with hidden panes."""
    fig = plt.figure(figsize=config.figsize, dpi=config.dpi, facecolor=config.background)
    ax = fig.add_subplot(projection="3d", facecolor=config.background)
    ax.set_axis_off()
    return fig, ax


def fit_limits(ax: plt.Axes, attractor: Attractor, margin: float = 0.1) -> None:
    """Scale the axes to the finite part of all trails."""
    pts = np.concatenate([trail for _, trail in attractor.trails()])
    pts = pts[np.all(np.isfinite(pts), axis=1)]
    if len(pts) == 0:
        return
    lo, hi = pts.min(axis=0), pts.max(axis=0)
    pad = np.maximum((hi - lo) * margin, 1e-3)
    ax.set_xlim(lo[0] - pad[0], hi[0] + pad[0])
    ax.set_ylim(lo[1] - pad[1], hi[1] + pad[1])
    ax.set_zlim(lo[2] - pad[2], hi[2] + pad[2])


def draw_frame(
    ax: plt.Axes, attractor: Attractor, config: RenderConfig
) -> list[Line3DCollection]:
    """Add one colored line collection per trajectory to ``ax``.

    A trail of length 1 has no segments, so nothing is drawn.
    """
    if attractor.trail_length < 2:
        return []
    colors = trail_gradient(
        attractor.trail_length,
        config.hue_start,
        config.hue_end,
        saturation=config.saturation,
        value=config.value,
    )
    collections = []
    for _, trail in attractor.trails():
        lc = Line3DCollection(
            trail_segments(trail), colors=colors, linewidths=config.line_width
        )
        ax.add_collection3d(lc)
        collections.append(lc)
    return collections


def render_snapshot(
    attractor: Attractor, path: str | Path, config: RenderConfig | None = None
) -> Path:
    """Save the current trails as an image and return its path."""
    config = config or RenderConfig()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = setup_axes(config)
    draw_frame(ax, attractor, config)
    fit_limits(ax, attractor)
    fig.savefig(path, facecolor=fig.get_facecolor())
    plt.close(fig)
    return path


def frame_updater(
    attractor: Attractor,
    dt: float,
    collections: list[Line3DCollection],
    ticks_per_frame: int = 1,
) -> Callable[[int], list[Line3DCollection]]:
    """Per-frame callback: tick, then move each collection to its new trail."""

    def update(_frame: int) -> list[Line3DCollection]:
        for _ in range(ticks_per_frame):
            attractor.tick(dt)
        for lc, (_, trail) in zip(collections, attractor.trails()):
            lc.set_segments(trail_segments(trail))
        return collections

    return update


def animate(
    attractor: Attractor,
    dt: float,
    config: RenderConfig | None = None,
    frames: int | None = None,
) -> FuncAnimation:
    """Build an animation that ticks the attractor once per frame.

    Each frame runs ``config.ticks_per_frame`` ticks, then redraws every
    trail from ``trails()``. ``frames=None`` animates until the window closes.
    """
    config = config or RenderConfig()
    fig, ax = setup_axes(config)
    collections = draw_frame(ax, attractor, config)
    fit_limits(ax, attractor)

    return FuncAnimation(
        fig,
        frame_updater(attractor, dt, collections, config.ticks_per_frame),
        frames=frames,
        interval=config.interval_ms,
        blit=False,
        cache_frame_data=False,
    )

"""Matplotlib rendering of attractor trails."""

from __future__ import annotations

from strange_attractors.viz.render import (
    animate,
    draw_frame,
    fit_limits,
    frame_updater,
    render_snapshot,
    setup_axes,
    trail_segments,
)

__all__ = [
    "animate",
    "draw_frame",
    "fit_limits",
    "frame_updater",
    "render_snapshot",
    "setup_axes",
    "trail_segments",
]

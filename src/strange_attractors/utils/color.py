"""Color helpers for trail gradients."""

from __future__ import annotations

import numpy as np
from matplotlib.colors import hsv_to_rgb as _mpl_hsv_to_rgb


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert one HSV color to RGB.

    Hue wraps around modulo 1; saturation and value are clamped to [0, 1].
    """
    hsv = np.array([h % 1.0, np.clip(s, 0.0, 1.0), np.clip(v, 0.0, 1.0)])
    r, g, b = _mpl_hsv_to_rgb(hsv)
    return float(r), float(g), float(b)


def trail_gradient(
    trail_length: int,
    hue_start: float,
    hue_end: float,
    saturation: float = 1.0,
    value: float = 1.0,
) -> np.ndarray:
    """One RGB color per trail segment, sweeping hue from newest to oldest.

    Returns an array of shape (trail_length - 1, 3). Segment 0 joins ranks
    0 and 1 and gets ``hue_start``; the last segment gets ``hue_end``.
    """
    n_segments = max(trail_length - 1, 0)
    hues = np.linspace(hue_start, hue_end, n_segments) % 1.0
    hsv = np.column_stack([
        hues,
        np.full(n_segments, np.clip(saturation, 0.0, 1.0)),
        np.full(n_segments, np.clip(value, 0.0, 1.0)),
    ])
    return _mpl_hsv_to_rgb(hsv).reshape(n_segments, 3)

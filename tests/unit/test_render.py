"""Tests for the matplotlib rendering adapter (Agg backend)."""
from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation

from strange_attractors.types.simulation import RenderConfig
from strange_attractors.viz.render import (
    animate,
    draw_frame,
    frame_updater,
    render_snapshot,
    setup_axes,
    trail_segments,
)


class TestTrailSegments:
    def test_segment_count(self):
        trail = np.arange(15, dtype=np.float32).reshape(5, 3)
        segments = trail_segments(trail)
        assert segments.shape == (4, 2, 3)

    def test_segments_join_consecutive_ranks(self):
        trail = np.arange(12, dtype=np.float32).reshape(4, 3)
        segments = trail_segments(trail)
        for r in range(3):
            np.testing.assert_array_equal(segments[r, 0], trail[r])
            np.testing.assert_array_equal(segments[r, 1], trail[r + 1])


class TestDrawFrame:
    def test_one_collection_per_trajectory(self, make_attractor):
        attractor = make_attractor(np.random.default_rng(0).uniform(-1, 1, (3, 3)), trail_length=6)
        for _ in range(6):
            attractor.tick(0.01)
        fig, ax = setup_axes(RenderConfig())
        collections = draw_frame(ax, attractor, RenderConfig())
        fig.canvas.draw()
        assert len(collections) == 3
        for lc in collections:
            assert len(lc.get_segments()) == 5
        plt.close(fig)

    def test_single_point_trail_draws_nothing(self, make_attractor):
        attractor = make_attractor([[1.0, 1.0, 1.0], [2.0, 2.0, 2.0]], trail_length=1)
        fig, ax = setup_axes(RenderConfig())
        assert draw_frame(ax, attractor, RenderConfig()) == []
        fig.canvas.draw()
        plt.close(fig)


class TestRenderSnapshot:
    def test_writes_png(self, make_attractor, tmp_output_dir):
        attractor = make_attractor([[1.0, 1.0, 1.0], [2.0, 0.0, -1.0]], trail_length=8)
        for _ in range(10):
            attractor.tick(0.01)
        path = render_snapshot(
            attractor, tmp_output_dir / "frame.png", RenderConfig(figsize=(2.0, 2.0), dpi=50)
        )
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_single_point_trail_still_writes_png(self, make_attractor, tmp_output_dir):
        attractor = make_attractor([[1.0, 1.0, 1.0]], trail_length=1)
        attractor.tick(0.01)
        path = render_snapshot(
            attractor, tmp_output_dir / "dot.png", RenderConfig(figsize=(2.0, 2.0), dpi=50)
        )
        assert path.exists()


class TestAnimate:
    def test_frame_updater_ticks_and_redraws(self, make_attractor):
        attractor = make_attractor([[1.0, 1.0, 1.0]], trail_length=4)
        fig, ax = setup_axes(RenderConfig())
        collections = draw_frame(ax, attractor, RenderConfig())
        update = frame_updater(attractor, 0.01, collections, ticks_per_frame=3)

        returned = update(0)

        assert returned is collections
        assert attractor.tick_count == 3
        fig.canvas.draw()
        assert len(collections[0].get_segments()) == 3
        plt.close(fig)

    def test_animate_builds_animation(self, make_attractor):
        attractor = make_attractor([[1.0, 1.0, 1.0]], trail_length=4)
        anim = animate(attractor, 0.01, RenderConfig(), frames=2)
        assert isinstance(anim, FuncAnimation)
        assert attractor.tick_count == 0
        plt.close("all")

    def test_single_point_trail_animation_still_ticks(self, make_attractor):
        attractor = make_attractor([[1.0, 1.0, 1.0]], trail_length=1)
        anim = animate(attractor, 0.01, RenderConfig(), frames=2)
        assert isinstance(anim, FuncAnimation)
        update = frame_updater(attractor, 0.01, [], ticks_per_frame=2)
        assert update(0) == []
        assert attractor.tick_count == 2
        plt.close("all")

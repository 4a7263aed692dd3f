"""CLI entry point for strange-attractors.

Usage:
    strange-attractors list                        List dynamics and default coefficients
    strange-attractors run [config.yaml]           Run headless and print a summary
    strange-attractors render <out.png> [config]   Run headless and save a snapshot
    strange-attractors animate [config.yaml]       Show an interactive animation
    strange-attractors version                     Show version
"""
from __future__ import annotations

import logging
import sys


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(0)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    if command == "list":
        _run_list()
    elif command == "run":
        _run_headless(args)
    elif command == "render":
        _run_render(args)
    elif command == "animate":
        _run_animate(args)
    elif command in ("version", "--version", "-v"):
        from strange_attractors import __version__
        print(f"strange-attractors {__version__}")
    elif command in ("help", "--help", "-h"):
        print(__doc__)
    else:
        print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)


def _load(path: str | None):
    from strange_attractors.utils.config import load_config
    config = load_config(path)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    return config


def _run_list() -> None:
    """Print every dynamics variant with its default coefficients."""
    from strange_attractors.simulation.dynamics import DYNAMICS

    for kind, cls in DYNAMICS.items():
        coeffs = ", ".join(f"{k}={v:g}" for k, v in cls().parameters.items())
        print(f"  {kind.value:22s} {coeffs}")


def _run_headless(args: list[str]) -> None:
    """Tick the configured attractor and summarize where it ended up."""
    from strange_attractors.simulation.runner import run_simulation

    config = _load(args[0] if args else None)
    with run_simulation(config.simulation) as attractor:
        points = attractor.points

    print(f"\nDynamics: {config.simulation.dynamics.value}")
    print(f"Trajectories: {attractor.n_trajectories}, trail length: {attractor.trail_length}")
    print(f"Ticks: {attractor.tick_count}")
    print(f"Bounding box min: {points.min(axis=0)}")
    print(f"Bounding box max: {points.max(axis=0)}")


def _run_render(args: list[str]) -> None:
    """Tick the configured attractor, then save its trails as an image."""
    if not args:
        print("render requires an output path")
        sys.exit(1)

    import matplotlib
    matplotlib.use("Agg")
    from strange_attractors.simulation.runner import run_simulation
    from strange_attractors.viz.render import render_snapshot

    config = _load(args[1] if len(args) > 1 else None)
    with run_simulation(config.simulation) as attractor:
        path = render_snapshot(attractor, args[0], config.render)
    print(f"Saved {path}")


def _run_animate(args: list[str]) -> None:
    """Open a window animating the configured attractor."""
    import matplotlib.pyplot as plt
    from strange_attractors.simulation.runner import build_attractor
    from strange_attractors.viz.render import animate

    config = _load(args[0] if args else None)
    with build_attractor(config.simulation) as attractor:
        anim = animate(attractor, config.simulation.dt, config.render)  # noqa: F841
        plt.show()


if __name__ == "__main__":
    main()

"""Strange Attractors: N-trajectory chaotic flow simulation with bounded trails."""

__version__ = "0.1.0"

from strange_attractors.simulation.attractor import Attractor, Trajectory
from strange_attractors.simulation.circular_buffer import CircularBuffer
from strange_attractors.simulation.dynamics import DYNAMICS, Dynamics, make_dynamics

__all__ = [
    "Attractor",
    "CircularBuffer",
    "DYNAMICS",
    "Dynamics",
    "Trajectory",
    "make_dynamics",
    "__version__",
]

"""Core data types for the strange attractor engine."""

from strange_attractors.types.simulation import (
    AppConfig,
    DynamicsKind,
    RenderConfig,
    SimulationConfig,
)

__all__ = [
    "AppConfig",
    "DynamicsKind",
    "RenderConfig",
    "SimulationConfig",
]

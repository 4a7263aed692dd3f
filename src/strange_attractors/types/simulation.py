"""Simulation, rendering and application configuration types."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class DynamicsKind(str, Enum):
    HALVORSEN = "halvorsen"
    LORENZ = "lorenz"
    AIZAWA = "aizawa"
    FOUR_WING = "four_wing"
    RABINOVICH_FABRIKANT = "rabinovich_fabrikant"
    THOMAS = "thomas"
    THREE_SCROLL = "three_scroll"
    ROSSLER = "rossler"
    CHEN = "chen"


def _check_bounds(value: tuple[float, float] | None) -> tuple[float, float] | None:
    if value is not None and value[0] > value[1]:
        raise ValueError(f"lower bound {value[0]} exceeds upper bound {value[1]}")
    return value


class SimulationConfig(BaseModel):
    """Configuration for building and driving an attractor."""

    dynamics: DynamicsKind = DynamicsKind.ROSSLER
    parameters: dict[str, float] = Field(default_factory=dict)
    n_trajectories: int = Field(default=100, ge=1)
    trail_length: int = Field(default=100, ge=1)
    dt: float = 0.001
    n_ticks: int = Field(default=1000, ge=0)
    initial_bounds: tuple[float, float] = (-20.0, 20.0)
    reset_bounds: tuple[float, float] | None = (-1.0, 1.0)
    seed: int | None = None
    n_workers: int = Field(default=1, ge=1)

    @field_validator("initial_bounds", "reset_bounds")
    @classmethod
    def _ordered_bounds(cls, value):
        return _check_bounds(value)


class RenderConfig(BaseModel):
    """Trail drawing and animation settings."""

    hue_start: float = 0.33
    hue_end: float = 0.66
    saturation: float = 1.0
    value: float = 1.0
    line_width: float = 1.0
    background: str = "black"
    figsize: tuple[float, float] = (8.0, 8.0)
    dpi: int = 100
    interval_ms: int = 16
    ticks_per_frame: int = Field(default=1, ge=1)


class AppConfig(BaseModel):
    """Top-level configuration for the command line application."""

    log_level: str = "INFO"
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

"""Catalog of 3-D chaotic flows driving the attractor.

Every variant is a frozen record of coefficients plus a derivative function.
``derivatives`` returns the Euler increment, i.e. the right-hand side of the
ODE already multiplied by ``dt``, so the integrator adds it to the current
position as is:

    Halvorsen:             dx = -a*x - 4y - 4z - y^2 (cyclic in x, y, z)
    Lorenz:                dx = sigma(y - x), dy = x(rho - z) - y, dz = xy - beta*z
    Aizawa:                dx = (z - b)x - dy, dy = dx + (z - b)y,
                           dz = c + az - z^3/3 - (x^2 + y^2)(1 - ez) + fzx^3
    Four-Wing:             dx = ax + yz, dy = bx + cy - xz, dz = -z - xy
    Rabinovich-Fabrikant:  dx = y(z - 1 + x^2) + gamma*x,
                           dy = x(3z + 1 - x^2) + gamma*y, dz = -2z(alpha + xy)
    Thomas:                dx = sin(y) - bx (cyclic in x, y, z)
    Three-Scroll:          dx = a(y - x) + dxz, dy = bx - xz + fy, dz = cz + xy - ex^2
    Rossler:               dx = -(y + z), dy = x + ay, dz = b + z(x - c)
    Chen:                  dx = alpha*x - yz, dy = beta*y + xz, dz = delta*z + xy/3

Inputs are float32 scalars or equally shaped float32 arrays with one element
per trajectory. Evaluation is elementwise, so each trajectory's increment
depends only on its own coordinates.
"""
from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from strange_attractors.types.simulation import DynamicsKind

Increment = tuple[np.ndarray, np.ndarray, np.ndarray]


def _f32(value: Any) -> np.ndarray:
    return np.asarray(value, dtype=np.float32)


class Dynamics(ABC):
    """Maps a position and a time step to a positional increment.

    Implementations hold fixed coefficients only. They must not mutate any
    state in ``derivatives``: one instance is shared read-only by every
    trajectory of an attractor within a tick.
    """

    kind: ClassVar[DynamicsKind]

    @abstractmethod
    def derivatives(self, x: Any, y: Any, z: Any, dt: float) -> Increment:
        """Return ``(dx, dy, dz)`` already scaled by ``dt``."""

    @property
    def parameters(self) -> dict[str, float]:
        return {f.name: float(getattr(self, f.name)) for f in dataclasses.fields(self)}


@dataclass(frozen=True)
class Halvorsen(Dynamics):
    """Halvorsen attractor: cyclically symmetric under (x, y, z) -> (y, z, x)."""

    kind: ClassVar[DynamicsKind] = DynamicsKind.HALVORSEN

    a: float = 1.89

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        a = _f32(self.a)
        dx = -a * x - 4 * y - 4 * z - y * y
        dy = -a * y - 4 * z - 4 * x - z * z
        dz = -a * z - 4 * x - 4 * y - x * x
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class Lorenz(Dynamics):
    """Lorenz system with the classic chaotic coefficients."""

    kind: ClassVar[DynamicsKind] = DynamicsKind.LORENZ

    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        sigma, rho, beta = _f32(self.sigma), _f32(self.rho), _f32(self.beta)
        dx = sigma * (y - x)
        dy = x * (rho - z) - y
        dz = x * y - beta * z
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class Aizawa(Dynamics):
    """Aizawa attractor.

    The z equation uses the ``(1 - e*z)`` factor on the ``x^2 + y^2`` term.
    """

    kind: ClassVar[DynamicsKind] = DynamicsKind.AIZAWA

    a: float = 0.95
    b: float = 0.7
    c: float = 0.6
    d: float = 3.5
    e: float = 0.25
    f: float = 0.1

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        a, b, c = _f32(self.a), _f32(self.b), _f32(self.c)
        d, e, f = _f32(self.d), _f32(self.e), _f32(self.f)
        dx = (z - b) * x - d * y
        dy = d * x + (z - b) * y
        dz = (
            c
            + a * z
            - z * z * z / 3
            - (x * x + y * y) * (1 - e * z)
            + f * z * x * x * x
        )
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class FourWing(Dynamics):
    kind: ClassVar[DynamicsKind] = DynamicsKind.FOUR_WING

    a: float = 0.2
    b: float = 0.01
    c: float = -0.4

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        a, b, c = _f32(self.a), _f32(self.b), _f32(self.c)
        dx = a * x + y * z
        dy = b * x + c * y - x * z
        dz = -z - x * y
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class RabinovichFabrikant(Dynamics):
    """Rabinovich-Fabrikant system: multiscroll attractor, diverges easily."""

    kind: ClassVar[DynamicsKind] = DynamicsKind.RABINOVICH_FABRIKANT

    alpha: float = 0.14
    gamma: float = 0.1

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        alpha, gamma = _f32(self.alpha), _f32(self.gamma)
        dx = y * (z - 1 + x * x) + gamma * x
        dy = x * (3 * z + 1 - x * x) + gamma * y
        dz = -2 * z * (alpha + x * y)
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class Thomas(Dynamics):
    """Thomas cyclically symmetric attractor at the critical dissipation b."""

    kind: ClassVar[DynamicsKind] = DynamicsKind.THOMAS

    b: float = 0.208186

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        b = _f32(self.b)
        dx = np.sin(y) - b * x
        dy = np.sin(z) - b * y
        dz = np.sin(x) - b * z
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class ThreeScroll(Dynamics):
    """Three-scroll unified chaotic system (TSUCS)."""

    kind: ClassVar[DynamicsKind] = DynamicsKind.THREE_SCROLL

    a: float = 32.48
    b: float = 45.84
    c: float = 1.18
    d: float = 0.13
    e: float = 0.57
    f: float = 14.7

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        a, b, c = _f32(self.a), _f32(self.b), _f32(self.c)
        d, e, f = _f32(self.d), _f32(self.e), _f32(self.f)
        dx = a * (y - x) + d * x * z
        dy = b * x - x * z + f * y
        dz = c * z + x * y - e * x * x
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class Rossler(Dynamics):
    kind: ClassVar[DynamicsKind] = DynamicsKind.ROSSLER

    a: float = 0.2
    b: float = 0.2
    c: float = 5.7

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        a, b, c = _f32(self.a), _f32(self.b), _f32(self.c)
        dx = -(y + z)
        dy = x + a * y
        dz = b + z * (x - c)
        return dx * dt, dy * dt, dz * dt


@dataclass(frozen=True)
class Chen(Dynamics):
    """Chen-Lee variant of the Chen system."""

    kind: ClassVar[DynamicsKind] = DynamicsKind.CHEN

    alpha: float = 5.0
    beta: float = -10.0
    delta: float = -0.38

    def derivatives(self, x, y, z, dt):
        x, y, z, dt = _f32(x), _f32(y), _f32(z), _f32(dt)
        alpha, beta, delta = _f32(self.alpha), _f32(self.beta), _f32(self.delta)
        dx = alpha * x - y * z
        dy = beta * y + x * z
        dz = delta * z + x * y / 3
        return dx * dt, dy * dt, dz * dt


DYNAMICS: dict[DynamicsKind, type[Dynamics]] = {
    cls.kind: cls
    for cls in (
        Halvorsen,
        Lorenz,
        Aizawa,
        FourWing,
        RabinovichFabrikant,
        Thomas,
        ThreeScroll,
        Rossler,
        Chen,
    )
}


def make_dynamics(
    kind: DynamicsKind | str, parameters: dict[str, float] | None = None
) -> Dynamics:
    """Instantiate a variant by name, overriding selected coefficients."""
    cls = DYNAMICS[DynamicsKind(kind)]
    parameters = dict(parameters or {})
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(parameters) - known)
    if unknown:
        raise ValueError(
            f"Unknown coefficient(s) {unknown} for {cls.__name__}; "
            f"expected a subset of {sorted(known)}"
        )
    return cls(**{name: float(value) for name, value in parameters.items()})

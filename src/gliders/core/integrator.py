"""Fixed-step explicit integrators over any vector space.

``start`` may be anything supporting ``+`` and multiplication/division by a
scalar: :class:`~gliders.core.vector.Vector2`, numpy arrays or plain floats.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

V = TypeVar("V")


class Scheme(str, Enum):
    EULER = "euler"
    MIDPOINT = "midpoint"
    RK4 = "rk4"


def explicit_euler(start: V, f: Callable[[V], V], stepsize: float) -> V:
    k1 = stepsize * f(start)
    return start + k1


def midpoint(start: V, f: Callable[[V], V], stepsize: float) -> V:
    k1 = stepsize * f(start)
    k2 = stepsize * f(start + k1 / 2)
    return start + k2


def rk4(start: V, f: Callable[[V], V], stepsize: float) -> V:
    """Classical four-stage Runge-Kutta step."""

    k1 = stepsize * f(start)
    k2 = stepsize * f(start + k1 / 2)
    k3 = stepsize * f(start + k2 / 2)
    k4 = stepsize * f(start + k3)
    return start + (k1 + 2 * k2 + 2 * k3 + k4) / 6


_STEPPERS = {
    Scheme.EULER: explicit_euler,
    Scheme.MIDPOINT: midpoint,
    Scheme.RK4: rk4,
}


def step(start: V, f: Callable[[V], V], stepsize: float, scheme: Scheme | str = Scheme.MIDPOINT) -> V:
    """Advance ``start`` by one step of ``scheme``."""

    try:
        stepper = _STEPPERS[Scheme(scheme)]
    except ValueError:
        raise ValueError(f"unknown integration scheme {scheme!r}") from None
    return stepper(start, f, stepsize)


def integrate(start: V, f: Callable[[V], V], stepsize: float, steps: int, scheme: Scheme | str = Scheme.MIDPOINT) -> V:
    value = start
    for _ in range(steps):
        value = step(value, f, stepsize, scheme)
    return value


__all__ = ["Scheme", "explicit_euler", "integrate", "midpoint", "rk4", "step"]

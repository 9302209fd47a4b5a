"""Field probe kernels for a set of stationary planets.

The point probes loop over ``planets``, a sequence of ``(x, y, mass, sense)``
tuples where ``sense`` is ``+1`` for counter-clockwise planets and ``-1``
otherwise. For the handful of planets a field holds this is several times
faster than building numpy arrays per probe; :func:`potential_grid` is the
vectorised variant for sampling whole grids.

Squared distances are clamped to ``min_distance ** 2`` so that a probe exactly
at a planet centre yields finite values; the direction of a zero offset is
taken to be the zero vector.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

PlanetTerms = Sequence[tuple[float, float, float, float]]


def gravity(
    px: float,
    py: float,
    planets: PlanetTerms,
    gravitational_constant: float,
    min_distance: float,
) -> tuple[float, float]:
    """``G * sum(-norm(r) / |r|^2 * m)`` with ``r = p - planet``."""

    min_sq = min_distance * min_distance
    gx = gy = 0.0
    for x, y, mass, _ in planets:
        dx = px - x
        dy = py - y
        sq = max(dx * dx + dy * dy, min_sq)
        # -r / |r|^3 * m, so r == 0 gives 0 instead of nan.
        weight = mass / (sq * math.sqrt(sq))
        gx -= weight * dx
        gy -= weight * dy
    return gravitational_constant * gx, gravitational_constant * gy


def potential(
    px: float,
    py: float,
    planets: PlanetTerms,
    gravitational_constant: float,
    min_distance: float,
) -> float:
    min_sq = min_distance * min_distance
    total = 0.0
    for x, y, mass, _ in planets:
        dx = px - x
        dy = py - y
        total += mass / math.sqrt(max(dx * dx + dy * dy, min_sq))
    return -gravitational_constant * total


def angular_potential_gradient(
    px: float,
    py: float,
    planets: PlanetTerms,
    min_distance: float,
) -> tuple[float, float]:
    """Vortex field ``sum(m * sense / |r|^2 * (r_y, -r_x))``."""

    min_sq = min_distance * min_distance
    ax = ay = 0.0
    for x, y, mass, sense in planets:
        dx = px - x
        dy = py - y
        weight = mass * sense / max(dx * dx + dy * dy, min_sq)
        ax += weight * dy
        ay -= weight * dx
    return ax, ay


def weighted_angle_diff(
    a: tuple[float, float],
    b: tuple[float, float],
    planets: PlanetTerms,
) -> float:
    """Sum of per-planet angular displacements ``a -> b`` weighted by ``m * sense``.

    Each displacement is wrapped into ``(-pi, pi]``.
    """

    total = 0.0
    for x, y, mass, sense in planets:
        diff = math.atan2(b[1] - y, b[0] - x) - math.atan2(a[1] - y, a[0] - x)
        if diff > math.pi:
            diff -= 2 * math.pi
        elif diff <= -math.pi:
            diff += 2 * math.pi
        total += diff * mass * sense
    return total


def nearest_planet(px: float, py: float, planets: PlanetTerms) -> tuple[int, float]:
    """Index of the nearest planet and its squared distance."""

    best_index = -1
    best_sq = math.inf
    for index, (x, y, _, _) in enumerate(planets):
        sq = (px - x) ** 2 + (py - y) ** 2
        if sq < best_sq:
            best_index, best_sq = index, sq
    return best_index, best_sq


def potential_grid(
    xs: np.ndarray,
    ys: np.ndarray,
    positions: np.ndarray,
    masses: np.ndarray,
    gravitational_constant: float,
    min_distance: float,
) -> np.ndarray:
    """Potential at every ``(ys[j], xs[i])``, shape ``(len(ys), len(xs))``."""

    values = np.zeros((ys.size, xs.size))
    gx, gy = np.meshgrid(xs, ys)
    min_sq = min_distance * min_distance
    for (x, y), mass in zip(positions, masses):
        sq = np.maximum((gx - x) ** 2 + (gy - y) ** 2, min_sq)
        values -= mass / np.sqrt(sq)
    return gravitational_constant * values


__all__ = [
    "angular_potential_gradient",
    "gravity",
    "nearest_planet",
    "potential",
    "potential_grid",
    "weighted_angle_diff",
]

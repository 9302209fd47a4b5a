"""Planets and the stationary field they generate."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from . import physics
from .config import FIELD_CFG, FieldCfg
from .streams import StreamRole, coin, make_rng
from .vector import Rect, Vector2


@dataclass(frozen=True)
class Planet:
    """Immovable point mass. ``ccw`` selects the sense of its vortex field."""

    position: Vector2
    mass: float
    ccw: bool

    @property
    def sense(self) -> float:
        return 1.0 if self.ccw else -1.0


class FieldModel:
    """Immutable set of planets inside ``bounds`` with field probes.

    The probes are pure and only read the planet data, so one instance can
    be shared by any number of trajectory generators.
    """

    def __init__(self, planets: Iterable[Planet], bounds: Rect, cfg: FieldCfg = FIELD_CFG) -> None:
        self._planets = tuple(planets)
        self._bounds = bounds
        self._cfg = cfg

        self._positions = np.array(
            [(p.position.x, p.position.y) for p in self._planets], dtype=float
        ).reshape(-1, 2)
        self._masses = np.array([p.mass for p in self._planets], dtype=float)
        for array in (self._positions, self._masses):
            array.setflags(write=False)
        # Plain floats for the point probes, called many times per glider step.
        self._terms = tuple(
            (float(p.position.x), float(p.position.y), float(p.mass), p.sense)
            for p in self._planets
        )

    @classmethod
    def from_seed(
        cls,
        count: int,
        bounds: Rect,
        seed: int,
        cfg: FieldCfg = FIELD_CFG,
    ) -> "FieldModel":
        """Place ``count`` planets deterministically from ``seed``.

        Per planet, in index order, the planet stream yields the orbit sense
        coin, the position and then the mass.
        """

        if count < 0:
            raise ValueError(f"planet count must be non-negative, got {count}")
        rng = make_rng(seed, StreamRole.PLANETS, cfg.engine)
        planets = []
        for _ in range(count):
            ccw = coin(rng)
            position = bounds.random_point(rng)
            mass = float(rng.uniform(0.0, cfg.max_mass))
            planets.append(Planet(position, mass, ccw))
        return cls(planets, bounds, cfg)

    @property
    def planets(self) -> tuple[Planet, ...]:
        return self._planets

    @property
    def bounds(self) -> Rect:
        return self._bounds

    @property
    def cfg(self) -> FieldCfg:
        return self._cfg

    @property
    def positions(self) -> np.ndarray:
        return self._positions

    def __len__(self) -> int:
        return len(self._planets)

    def gravity(self, p: Vector2) -> Vector2:
        gx, gy = physics.gravity(
            p.x, p.y, self._terms, self._cfg.gravitational_constant, self._cfg.min_distance
        )
        return Vector2(gx, gy)

    def potential(self, p: Vector2) -> float:
        return physics.potential(
            p.x, p.y, self._terms, self._cfg.gravitational_constant, self._cfg.min_distance
        )

    def angular_potential_gradient(self, p: Vector2) -> Vector2:
        ax, ay = physics.angular_potential_gradient(p.x, p.y, self._terms, self._cfg.min_distance)
        return Vector2(ax, ay)

    def weighted_angle_diff(self, a: Vector2, b: Vector2) -> float:
        return physics.weighted_angle_diff((a.x, a.y), (b.x, b.y), self._terms)

    def nearest_planet(self, p: Vector2) -> tuple[int, float]:
        """Index of the planet nearest to ``p`` and its squared distance."""

        if not self._planets:
            raise ValueError("field has no planets")
        return physics.nearest_planet(p.x, p.y, self._terms)

    def potential_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Potential sampled at every ``(x, y)`` of the grid ``ys x xs``."""

        return physics.potential_grid(
            np.asarray(xs, dtype=float),
            np.asarray(ys, dtype=float),
            self._positions,
            self._masses,
            self._cfg.gravitational_constant,
            self._cfg.min_distance,
        )

    def __repr__(self) -> str:
        return f"FieldModel(planets={len(self._planets)}, bounds={self._bounds})"


__all__ = ["FieldModel", "Planet"]

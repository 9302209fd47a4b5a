"""Small 2D vector and rectangle types used by the field model."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, order=True)
class Vector2:
    """Immutable 2D vector. Ordering is lexicographic by ``(x, y)``."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_array(cls, values) -> "Vector2":
        return cls(float(values[0]), float(values[1]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> "Vector2":
        return Vector2(self.x / factor, self.y / factor)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def sqmag(self) -> float:
        return self.x * self.x + self.y * self.y

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def arg(self) -> float:
        return math.atan2(self.y, self.x)

    def norm(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector maps to itself."""

        length = self.mag()
        if length == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Z component of the 3D cross product."""

        return self.x * other.y - self.y * other.x

    def perp(self) -> "Vector2":
        """Rotate by -90 degrees: ``(x, y) -> (y, -x)``."""

        return Vector2(self.y, -self.x)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its min and max corners."""

    min: Vector2
    max: Vector2

    def __post_init__(self) -> None:
        if not (self.min.x < self.max.x and self.min.y < self.max.y):
            raise ValueError(f"degenerate bounds: min={self.min} max={self.max}")

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        return cls(Vector2(0.0, 0.0), Vector2(float(width), float(height)))

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def contains(self, p: Vector2) -> bool:
        return self.min.x <= p.x <= self.max.x and self.min.y <= p.y <= self.max.y

    def random_point(self, rng: np.random.Generator) -> Vector2:
        x = rng.uniform(self.min.x, self.max.x)
        y = rng.uniform(self.min.y, self.max.y)
        return Vector2(float(x), float(y))


def circle_center(a: Vector2, b: Vector2, c: Vector2, eps: float = 1e-3) -> Vector2 | None:
    """Centre of the circle through ``a``, ``b`` and ``c``.

    Returns ``None`` when the points are (nearly) colinear, i.e. when the
    determinant of ``[[x, y, 1]]`` is smaller than ``eps`` in magnitude.
    """

    rows = np.array(
        [
            [a.sqmag(), a.x, a.y, 1.0],
            [b.sqmag(), b.x, b.y, 1.0],
            [c.sqmag(), c.x, c.y, 1.0],
        ]
    )
    m11 = float(np.linalg.det(rows[:, 1:]))
    if abs(m11) < eps:
        return None

    m12 = float(np.linalg.det(rows[:, [0, 2, 3]]))
    m13 = float(np.linalg.det(rows[:, [0, 1, 3]]))
    return Vector2(0.5 * m12 / m11, -0.5 * m13 / m11)


__all__ = ["Rect", "Vector2", "circle_center"]

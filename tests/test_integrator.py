import math

import numpy as np
import pytest

from gliders.core.integrator import Scheme, explicit_euler, integrate, midpoint, rk4, step
from gliders.core.vector import Vector2

STEPS = 200
H = 2 * math.pi / STEPS


def rotation(p: Vector2) -> Vector2:
    return Vector2(-p.y, p.x)


def revolution_error(scheme: Scheme) -> float:
    start = Vector2(1.0, 0.0)
    end = integrate(start, rotation, H, STEPS, scheme)
    return (end - start).mag()


def test_rk4_closes_the_orbit():
    assert revolution_error(Scheme.RK4) < 1e-6


def test_euler_spirals_outwards():
    end = integrate(Vector2(1.0, 0.0), rotation, H, STEPS, Scheme.EULER)
    assert end.mag() > 1.05


def test_error_ordering():
    euler = revolution_error(Scheme.EULER)
    mid = revolution_error(Scheme.MIDPOINT)
    runge_kutta = revolution_error(Scheme.RK4)
    assert euler > mid > runge_kutta


def test_single_steps_on_exponential_decay():
    def decay(x):
        return -x

    h = 0.1
    assert explicit_euler(1.0, decay, h) == pytest.approx(0.9)
    assert midpoint(1.0, decay, h) == pytest.approx(1 - h + h * h / 2)
    assert rk4(1.0, decay, h) == pytest.approx(math.exp(-h), abs=1e-6)


def test_works_on_numpy_arrays():
    start = np.array([1.0, 0.0])
    end = step(start, lambda p: np.array([-p[1], p[0]]), H, "rk4")
    assert np.linalg.norm(end) == pytest.approx(1.0, abs=1e-9)


def test_step_is_deterministic():
    a = step(Vector2(0.3, 0.4), rotation, 0.05, Scheme.MIDPOINT)
    b = step(Vector2(0.3, 0.4), rotation, 0.05, Scheme.MIDPOINT)
    assert a == b


def test_unknown_scheme():
    with pytest.raises(ValueError):
        step(1.0, lambda x: x, 0.1, "leapfrog")

import math

import pytest

from gliders.core.config import FIELD_CFG
from gliders.core.model import FieldModel, Planet
from gliders.core.vector import Rect, Vector2

G = FIELD_CFG.gravitational_constant
BOUNDS = Rect.from_size(1080.0, 720.0)


def test_same_seed_same_planets():
    a = FieldModel.from_seed(6, BOUNDS, 23)
    b = FieldModel.from_seed(6, BOUNDS, 23)
    assert a.planets == b.planets


def test_different_seed_different_planets():
    a = FieldModel.from_seed(4, BOUNDS, 23)
    b = FieldModel.from_seed(4, BOUNDS, 24)
    assert a.planets != b.planets


def test_generated_planets_respect_bounds_and_mass_range():
    field_model = FieldModel.from_seed(50, BOUNDS, 3)
    assert len(field_model) == 50
    for planet in field_model.planets:
        assert BOUNDS.contains(planet.position)
        assert 0.0 <= planet.mass < FIELD_CFG.max_mass
    assert {planet.ccw for planet in field_model.planets} == {True, False}


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        FieldModel.from_seed(-1, BOUNDS, 1)


def test_empty_field_probes_are_zero():
    field_model = FieldModel.from_seed(0, BOUNDS, 1)
    p = Vector2(10.0, 10.0)
    assert field_model.gravity(p) == Vector2(0.0, 0.0)
    assert field_model.potential(p) == 0.0
    assert field_model.angular_potential_gradient(p) == Vector2(0.0, 0.0)
    assert field_model.weighted_angle_diff(p, Vector2(20.0, 5.0)) == 0.0
    with pytest.raises(ValueError):
        field_model.nearest_planet(p)


@pytest.mark.parametrize("r", [5.0, 20.0, 100.0, 333.0])
def test_gravity_and_potential_match_inverse_square(r):
    mass = 0.7
    field_model = FieldModel([Planet(Vector2(0.0, 0.0), mass, True)], BOUNDS)
    p = Vector2(r / math.sqrt(2), r / math.sqrt(2))

    g = field_model.gravity(p)
    assert g.mag() == pytest.approx(G * mass / r**2, rel=1e-9)
    # Points back towards the planet.
    assert g.dot(p) < 0
    assert g.norm().x == pytest.approx(-p.norm().x)
    assert field_model.potential(p) == pytest.approx(-G * mass / r, rel=1e-9)


def test_symmetric_planets_cancel():
    planets = [
        Planet(Vector2(-40.0, 10.0), 0.5, True),
        Planet(Vector2(40.0, -10.0), 0.5, False),
    ]
    field_model = FieldModel(planets, BOUNDS)
    g = field_model.gravity(Vector2(0.0, 0.0))
    assert g.x == pytest.approx(0.0, abs=1e-12)
    assert g.y == pytest.approx(0.0, abs=1e-12)


def test_probes_finite_at_planet_centre():
    centre = Vector2(200.0, 300.0)
    planets = [Planet(centre, 1.0, True), Planet(Vector2(500.0, 300.0), 1.0, True)]
    field_model = FieldModel(planets, BOUNDS)

    g = field_model.gravity(centre)
    assert g.is_finite()
    # Only the other planet pulls.
    assert g.x == pytest.approx(G / 300.0**2)
    assert math.isfinite(field_model.potential(centre))
    assert field_model.angular_potential_gradient(centre).is_finite()


def test_angular_gradient_is_rotated_and_signed():
    ccw = FieldModel([Planet(Vector2(0.0, 0.0), 2.0, True)], BOUNDS)
    cw = FieldModel([Planet(Vector2(0.0, 0.0), 2.0, False)], BOUNDS)
    p = Vector2(10.0, 0.0)

    grad = ccw.angular_potential_gradient(p)
    assert grad.x == pytest.approx(0.0)
    assert grad.y == pytest.approx(-0.2)
    assert cw.angular_potential_gradient(p) == -grad


def test_weighted_angle_diff():
    field_model = FieldModel([Planet(Vector2(0.0, 0.0), 2.0, True)], BOUNDS)
    quarter = field_model.weighted_angle_diff(Vector2(1.0, 0.0), Vector2(0.0, 1.0))
    assert quarter == pytest.approx(math.pi)

    # Crossing the branch cut of atan2 wraps into (-pi, pi].
    across = field_model.weighted_angle_diff(Vector2(-1.0, 1e-3), Vector2(-1.0, -1e-3))
    assert across == pytest.approx(2 * 2e-3, rel=1e-3)

    cw = FieldModel([Planet(Vector2(0.0, 0.0), 2.0, False)], BOUNDS)
    assert cw.weighted_angle_diff(Vector2(1.0, 0.0), Vector2(0.0, 1.0)) == pytest.approx(-math.pi)


def test_nearest_planet(twin_field):
    index, sq = twin_field.nearest_planet(Vector2(280.0, 100.0))
    assert index == 1
    assert sq == pytest.approx(400.0)


def test_potential_grid_matches_point_potential():
    field_model = FieldModel.from_seed(5, BOUNDS, 11)
    xs = [0.0, 133.0, 540.0, 1080.0]
    ys = [0.0, 360.0, 719.5]
    grid = field_model.potential_grid(xs, ys)
    assert grid.shape == (3, 4)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            assert grid[j, i] == pytest.approx(field_model.potential(Vector2(x, y)), rel=1e-12)


def test_potential_grid_finite_at_planet_centre():
    field_model = FieldModel([Planet(Vector2(200.0, 300.0), 1.0, True)], BOUNDS)
    grid = field_model.potential_grid([200.0], [300.0])
    assert grid[0, 0] == pytest.approx(field_model.potential(Vector2(200.0, 300.0)))

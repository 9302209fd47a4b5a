from __future__ import annotations

import pytest

from gliders.core.model import FieldModel, Planet
from gliders.core.vector import Rect, Vector2


@pytest.fixture
def bounds() -> Rect:
    return Rect(Vector2(0.0, 0.0), Vector2(400.0, 200.0))


@pytest.fixture
def twin_field(bounds: Rect) -> FieldModel:
    """Two equal planets on a horizontal line."""

    planets = [
        Planet(Vector2(100.0, 100.0), 1.0, True),
        Planet(Vector2(300.0, 100.0), 1.0, False),
    ]
    return FieldModel(planets, bounds)


@pytest.fixture
def single_field() -> FieldModel:
    bounds = Rect(Vector2(0.0, 0.0), Vector2(1000.0, 1000.0))
    return FieldModel([Planet(Vector2(500.0, 500.0), 1.0, True)], bounds)

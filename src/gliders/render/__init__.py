"""Rendering helpers for glider fields."""

from .draw import (
    draw_paths,
    draw_planets,
    draw_potential,
    render_scene,
    sample_potential,
)

__all__ = [
    "draw_paths",
    "draw_planets",
    "draw_potential",
    "render_scene",
    "sample_potential",
]

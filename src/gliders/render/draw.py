from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection

from gliders.core.config import RENDER_CFG
from gliders.core.vector import Vector2

if TYPE_CHECKING:  # pragma: no cover
    from gliders.core.config import RenderCfg
    from gliders.core.glider import Glider
    from gliders.core.model import FieldModel


def sample_potential(field_model: "FieldModel", resolution: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Potential on a ``resolution`` x ``resolution`` grid spanning the bounds."""

    bounds = field_model.bounds
    xs = np.linspace(bounds.min.x, bounds.max.x, resolution)
    ys = np.linspace(bounds.min.y, bounds.max.y, resolution)
    return xs, ys, field_model.potential_grid(xs, ys)


def draw_potential(ax: Axes, field_model: "FieldModel", cfg: "RenderCfg" = RENDER_CFG) -> None:
    if len(field_model) == 0:
        return
    xs, ys, values = sample_potential(field_model, cfg.contour_resolution)
    # Contours of -log(-V) spread evenly between the deep wells and the plains.
    shaped = -np.log(np.maximum(-values, 1e-12))
    ax.contour(
        xs,
        ys,
        shaped,
        levels=cfg.contour_levels,
        colors=cfg.contour_color,
        alpha=cfg.contour_alpha,
        linewidths=0.5,
    )


def draw_planets(ax: Axes, field_model: "FieldModel", cfg: "RenderCfg" = RENDER_CFG) -> None:
    for planet in field_model.planets:
        radius = float(np.sqrt(planet.mass)) * cfg.planet_radius_scale
        color = cfg.planet_color_ccw if planet.ccw else cfg.planet_color_cw
        ax.add_patch(plt.Circle((planet.position.x, planet.position.y), radius, color=color))


def draw_paths(
    ax: Axes,
    paths: Iterable[Sequence[Vector2]],
    *,
    color,
    line_width: float,
) -> None:
    segments = [np.array([(p.x, p.y) for p in path]) for path in paths if len(path) > 1]
    if segments:
        ax.add_collection(LineCollection(segments, colors=[color], linewidths=line_width))


def render_scene(
    field_model: "FieldModel",
    gliders: Sequence["Glider"],
    path: str | Path,
    *,
    highlight: Sequence[Vector2] | None = None,
    title: str | None = None,
    cfg: "RenderCfg" = RENDER_CFG,
) -> Path:
    """Draw planets, potential contours and glider paths into a PNG."""

    bounds = field_model.bounds
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(
        figsize=(bounds.width * cfg.inches_per_unit, bounds.height * cfg.inches_per_unit)
    )
    fig.patch.set_facecolor(cfg.background_color)
    ax.set_facecolor(cfg.background_color)

    draw_potential(ax, field_model, cfg)
    draw_paths(
        ax,
        (glider.points for glider in gliders),
        color=cfg.glider_color,
        line_width=cfg.glider_line_width,
    )
    if highlight is not None:
        draw_paths(ax, [highlight], color=cfg.highlight_color, line_width=cfg.highlight_line_width)
    draw_planets(ax, field_model, cfg)

    ax.set_xlim(bounds.min.x, bounds.max.x)
    # Screen convention: y grows downwards.
    ax.set_ylim(bounds.max.y, bounds.min.y)
    ax.set_aspect("equal", "box")
    ax.set_axis_off()
    if title:
        ax.set_title(title, color="#eaf1ff")
    fig.tight_layout()
    fig.savefig(out, dpi=cfg.dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    return out


__all__ = ["draw_paths", "draw_planets", "draw_potential", "render_scene", "sample_potential"]

"""Desirability score of a glider trajectory."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .config import SCORE_CFG, ScoreCfg
from .model import FieldModel
from .vector import Rect, Vector2


@dataclass(frozen=True)
class PathScore:
    """Score breakdown. ``path_length`` is informational and not scored."""

    score: float
    switches: int
    penalty: float
    path_length: float
    out_of_bounds: int
    crashes: int


def score_path(
    field_model: FieldModel,
    bounds: Rect,
    path: Sequence[Vector2],
    cfg: ScoreCfg = SCORE_CFG,
) -> PathScore:
    """Reward switches between orbited planets, penalise exits and crashes.

    The orbited planet is the nearest one, except that a switch only happens
    when ``d_new < cfg.switch_ratio * d_current``. Out-of-bounds points only
    add their penalty.
    """

    if not path:
        return PathScore(0.0, 0, 0.0, 0.0, 0, 0)

    points = np.array([(p.x, p.y) for p in path], dtype=float)
    inside = (
        (points[:, 0] >= bounds.min.x)
        & (points[:, 0] <= bounds.max.x)
        & (points[:, 1] >= bounds.min.y)
        & (points[:, 1] <= bounds.max.y)
    )
    steps = np.zeros(len(points))
    steps[1:] = np.hypot(*(points[1:] - points[:-1]).T)

    if len(field_model):
        offsets = points[:, None, :] - field_model.positions[None, :, :]
        sq_dists = np.einsum("ijk,ijk->ij", offsets, offsets)
    else:
        sq_dists = np.empty((len(points), 0))

    sq_ratio = cfg.switch_ratio * cfg.switch_ratio
    current: int | None = None
    switches = 0
    crashes = 0
    out_of_bounds = 0
    penalty = 0.0
    path_length = 0.0

    for i in range(len(points)):
        if not inside[i]:
            out_of_bounds += 1
            penalty += cfg.out_of_bounds_penalty
            continue

        path_length += steps[i]
        row = sq_dists[i]
        if row.size == 0:
            continue

        nearest = int(np.argmin(row))
        if current is None:
            current = nearest
        elif nearest != current and row[nearest] < sq_ratio * row[current]:
            current = nearest
            switches += 1

        if row[current] < cfg.crash_sq_radius:
            crashes += 1
            penalty += cfg.crash_penalty

    score = switches * cfg.switch_bonus - penalty
    return PathScore(
        score=float(score),
        switches=switches,
        penalty=float(penalty),
        path_length=float(path_length),
        out_of_bounds=out_of_bounds,
        crashes=crashes,
    )


__all__ = ["PathScore", "score_path"]

"""Random search for long trajectories that visit many planets."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, cast

from .config import GLIDER_CFG, SCORE_CFG, SEARCH_CFG, GliderCfg, ScoreCfg, SearchCfg
from .glider import generate_trajectory
from .logging_utils import RunLogger
from .model import FieldModel
from .scoring import score_path
from .streams import StreamRole, coin, make_rng
from .vector import Rect, Vector2


@dataclass(frozen=True)
class ScoredCandidate:
    start_point: Vector2
    score: float
    ccw: bool = False


def find_best_candidate(
    field_model: FieldModel,
    spiral_factor: float,
    max_steps: int,
    bounds: Rect,
    seed: int,
    *,
    search_cfg: SearchCfg = SEARCH_CFG,
    glider_cfg: GliderCfg = GLIDER_CFG,
    score_cfg: ScoreCfg = SCORE_CFG,
    run_logger: Optional[RunLogger] = None,
) -> ScoredCandidate:
    """Score ``search_cfg.max_attempts`` random start points and keep the best.

    Ties go to the later candidate. Replaying the winner needs the same
    ``spiral_factor``, ``max_steps``, ``glider_cfg`` and the returned ``ccw``,
    otherwise the traced path differs from the one that was scored.
    """

    if search_cfg.max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {search_cfg.max_attempts}")

    start_rng = make_rng(seed, StreamRole.SEARCH_SAMPLING, search_cfg.engine)
    sense_rng = make_rng(seed, StreamRole.ORBIT_SENSE, search_cfg.engine)

    best_score = -math.inf
    best: Optional[ScoredCandidate] = None
    for attempt in range(search_cfg.max_attempts):
        start = bounds.random_point(start_rng)
        ccw = coin(sense_rng)
        trajectory = generate_trajectory(
            start, field_model, spiral_factor, max_steps, ccw=ccw, cfg=glider_cfg
        )
        result = score_path(field_model, bounds, trajectory, score_cfg)

        if run_logger is not None:
            run_logger.log_candidate(
                [
                    attempt,
                    start.x,
                    start.y,
                    ccw,
                    result.score,
                    result.switches,
                    result.penalty,
                    len(trajectory),
                ]
            )

        if result.score >= best_score:
            best_score = result.score
            best = ScoredCandidate(start, result.score, ccw)
            if run_logger is not None:
                run_logger.log_event(
                    [attempt, "best", result.score, f"path length {result.path_length:.1f}"]
                )

    return cast(ScoredCandidate, best)


def find_nice_path(
    field_model: FieldModel,
    spiral_factor: float,
    max_steps: int,
    bounds: Rect,
    seed: int,
    *,
    search_cfg: SearchCfg = SEARCH_CFG,
    glider_cfg: GliderCfg = GLIDER_CFG,
    score_cfg: ScoreCfg = SCORE_CFG,
) -> Vector2:
    """Start point of the best scoring trajectory."""

    candidate = find_best_candidate(
        field_model,
        spiral_factor,
        max_steps,
        bounds,
        seed,
        search_cfg=search_cfg,
        glider_cfg=glider_cfg,
        score_cfg=score_cfg,
    )
    return candidate.start_point


__all__ = ["ScoredCandidate", "find_best_candidate", "find_nice_path"]

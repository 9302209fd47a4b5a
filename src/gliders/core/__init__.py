"""Field model, integrators, glider tracing and path search."""

from .config import (
    FIELD_CFG,
    GLIDER_CFG,
    RENDER_CFG,
    RUN_CFG,
    SCORE_CFG,
    SEARCH_CFG,
    FieldCfg,
    GliderCfg,
    RenderCfg,
    RunCfg,
    ScoreCfg,
    SearchCfg,
)
from .glider import Glider, generate_swarm, generate_trajectory, glider_step
from .integrator import Scheme
from .logging_utils import RunLogger
from .model import FieldModel, Planet
from .scoring import PathScore, score_path
from .search import ScoredCandidate, find_best_candidate, find_nice_path
from .streams import StreamRole, make_rng
from .vector import Rect, Vector2, circle_center

__all__ = [
    "FIELD_CFG",
    "GLIDER_CFG",
    "RENDER_CFG",
    "RUN_CFG",
    "SCORE_CFG",
    "SEARCH_CFG",
    "FieldCfg",
    "FieldModel",
    "Glider",
    "GliderCfg",
    "PathScore",
    "Planet",
    "Rect",
    "RenderCfg",
    "RunCfg",
    "RunLogger",
    "Scheme",
    "ScoreCfg",
    "ScoredCandidate",
    "SearchCfg",
    "StreamRole",
    "Vector2",
    "circle_center",
    "find_best_candidate",
    "find_nice_path",
    "generate_swarm",
    "generate_trajectory",
    "glider_step",
    "make_rng",
    "score_path",
]

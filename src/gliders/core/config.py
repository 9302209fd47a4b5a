"""Configuration dataclasses for the glider simulation."""
from __future__ import annotations

from dataclasses import dataclass

from .integrator import Scheme
from .vector import Rect


@dataclass(frozen=True)
class FieldCfg:
    gravitational_constant: float = 2000.0
    max_mass: float = 1.0
    # Planet distances are clamped to this before dividing.
    min_distance: float = 1e-6
    engine: str = "pcg64"


@dataclass(frozen=True)
class GliderCfg:
    step_size: float = 6.0
    scheme: Scheme = Scheme.MIDPOINT
    sq_stall_limit: float = 0.005
    sq_blowup_limit: float = 400.0
    correct_potential: bool = True
    engine: str = "pcg64"


@dataclass(frozen=True)
class ScoreCfg:
    out_of_bounds_penalty: float = 3.0
    switch_bonus: float = 100.0
    # Switch only when the new nearest planet is more than 20% closer than the
    # orbited one: new_distance < switch_ratio * current_distance.
    switch_ratio: float = 0.8
    crash_sq_radius: float = 100.0
    crash_penalty: float = 500.0


@dataclass(frozen=True)
class SearchCfg:
    max_attempts: int = 1000
    engine: str = "pcg64"


@dataclass(frozen=True)
class RunCfg:
    """User-facing parameters for one exploration run."""

    seed: int = 23
    planet_count: int = 4
    width: float = 1080.0
    height: float = 720.0
    max_steps: int = 3000
    spiral_factor: float = 0.0
    gliders: int = 100
    engine: str = "pcg64"

    @property
    def bounds(self) -> Rect:
        return Rect.from_size(self.width, self.height)


@dataclass(frozen=True)
class RenderCfg:
    dpi: int = 150
    inches_per_unit: float = 1.0 / 100.0
    background_color: str = "#1e1e1e"
    planet_color_ccw: str = "#b4c8d2"
    planet_color_cw: str = "#d2b4a0"
    planet_radius_scale: float = 10.0
    glider_color: tuple[float, float, float, float] = (0.78, 0.78, 0.78, 0.4)
    glider_line_width: float = 0.6
    highlight_color: str = "#ffd43b"
    highlight_line_width: float = 1.6
    contour_color: str = "#4a86f7"
    contour_alpha: float = 0.25
    contour_levels: int = 24
    contour_resolution: int = 160


FIELD_CFG = FieldCfg()
GLIDER_CFG = GliderCfg()
SCORE_CFG = ScoreCfg()
SEARCH_CFG = SearchCfg()
RUN_CFG = RunCfg()
RENDER_CFG = RenderCfg()


__all__ = [
    "FIELD_CFG",
    "GLIDER_CFG",
    "RENDER_CFG",
    "RUN_CFG",
    "SCORE_CFG",
    "SEARCH_CFG",
    "FieldCfg",
    "GliderCfg",
    "RenderCfg",
    "RunCfg",
    "ScoreCfg",
    "SearchCfg",
]

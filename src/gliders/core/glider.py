"""Glider trajectories along (drifting) equipotential contours."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from . import integrator
from .config import GLIDER_CFG, GliderCfg
from .model import FieldModel
from .streams import StreamRole, coin, make_rng
from .vector import Rect, Vector2


@dataclass
class Glider:
    start: Vector2
    ccw: bool
    points: list[Vector2] = field(default_factory=list)


def motion_direction(field_model: FieldModel, pos: Vector2, spiral_factor: float, ccw: bool) -> Vector2:
    """Unit vector perpendicular to the blended field at ``pos``.

    The blended field is gravity minus ``spiral_factor`` times the angular
    potential gradient (the negated total gradient). Returns the zero vector
    where that field vanishes.
    """

    blended = field_model.gravity(pos)
    if spiral_factor != 0.0:
        blended = blended - spiral_factor * field_model.angular_potential_gradient(pos)
    motion = blended.perp().norm()
    return -motion if ccw else motion


def correct_potential(
    field_model: FieldModel,
    pos: Vector2,
    desired_potential: float,
    max_sq_offset: float = math.inf,
) -> Vector2:
    """Move ``pos`` along the local gravity so its potential approaches the target.

    Linearising around ``pos``, ``delta potential = offset . -gravity`` and the
    offset is colinear with gravity, so ``offset = diff * g / |g|^2``. The
    gravity is resampled halfway along the offset, midpoint style.

    ``pos`` is returned unchanged when gravity vanishes or when the offset is
    not finite or its squared length exceeds ``max_sq_offset``.
    """

    diff = field_model.potential(pos) - desired_potential

    gravity = field_model.gravity(pos)
    sq = gravity.sqmag()
    if sq == 0.0:
        return pos
    half_offset = diff * gravity / sq / 2
    if not half_offset.is_finite() or 4 * half_offset.sqmag() > max_sq_offset:
        return pos

    gravity = field_model.gravity(pos + half_offset)
    sq = gravity.sqmag()
    if sq == 0.0:
        return pos
    offset = diff * gravity / sq
    if not offset.is_finite() or offset.sqmag() > max_sq_offset:
        return pos
    return pos + offset


def glider_step(
    pos: Vector2,
    desired_potential: float,
    field_model: FieldModel,
    spiral_factor: float = 0.0,
    ccw: bool = False,
    cfg: GliderCfg = GLIDER_CFG,
) -> Vector2:
    """One integration step followed by the potential correction."""

    def velocity(p: Vector2) -> Vector2:
        return motion_direction(field_model, p, spiral_factor, ccw)

    new_pos = integrator.step(pos, velocity, cfg.step_size, cfg.scheme)
    if not cfg.correct_potential:
        return new_pos
    return correct_potential(field_model, new_pos, desired_potential, cfg.sq_blowup_limit)


def generate_trajectory(
    start: Vector2,
    field_model: FieldModel,
    spiral_factor: float,
    max_steps: int,
    *,
    ccw: bool = False,
    cfg: GliderCfg = GLIDER_CFG,
) -> list[Vector2]:
    """Trace a glider from ``start``.

    The returned list begins with ``start`` and holds at most ``max_steps``
    points. Tracing stops early when a step moves less than
    ``sqrt(cfg.sq_stall_limit)`` or more than ``sqrt(cfg.sq_blowup_limit)``;
    the point of that step is still included. A start within
    ``sqrt(cfg.sq_stall_limit)`` of a planet centre sits in the singular
    region of the potential and stalls at once: ``[start, start]``.
    """

    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")
    if cfg.step_size <= 0.0:
        raise ValueError(f"step_size must be positive, got {cfg.step_size}")
    if max_steps == 0:
        return []

    points = [start]
    if len(field_model) == 0:
        return points

    _, sq_nearest = field_model.nearest_planet(start)
    if sq_nearest < cfg.sq_stall_limit:
        if max_steps > 1:
            points.append(start)
        return points

    desired_potential = field_model.potential(start)
    last_pos = start
    while len(points) < max_steps:
        new_pos = glider_step(last_pos, desired_potential, field_model, spiral_factor, ccw, cfg)

        if spiral_factor != 0.0:
            desired_potential += field_model.weighted_angle_diff(last_pos, new_pos) * spiral_factor

        points.append(new_pos)
        sq_dist = (new_pos - last_pos).sqmag()
        if not sq_dist >= cfg.sq_stall_limit:
            break
        if sq_dist > cfg.sq_blowup_limit:
            break
        last_pos = new_pos

    return points


def generate_swarm(
    field_model: FieldModel,
    bounds: Rect,
    count: int,
    seed: int,
    spiral_factor: float,
    max_steps: int,
    cfg: GliderCfg = GLIDER_CFG,
) -> list[Glider]:
    """Trace ``count`` gliders from random start points inside ``bounds``."""

    if count < 0:
        raise ValueError(f"glider count must be non-negative, got {count}")
    start_rng = make_rng(seed, StreamRole.TRAJECTORY_SAMPLING, cfg.engine)
    sense_rng = make_rng(seed, StreamRole.ORBIT_SENSE, cfg.engine)

    gliders = []
    for _ in range(count):
        start = bounds.random_point(start_rng)
        ccw = coin(sense_rng)
        points = generate_trajectory(
            start, field_model, spiral_factor, max_steps, ccw=ccw, cfg=cfg
        )
        gliders.append(Glider(start, ccw, points))
    return gliders


__all__ = [
    "Glider",
    "correct_potential",
    "generate_swarm",
    "generate_trajectory",
    "glider_step",
    "motion_direction",
]

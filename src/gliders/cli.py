"""Command line entry point: trace gliders for a seed and render them."""
from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import List

from gliders.core.config import FIELD_CFG, GLIDER_CFG, RUN_CFG, SEARCH_CFG, RunCfg
from gliders.core.glider import Glider, generate_swarm, generate_trajectory
from gliders.core.integrator import Scheme
from gliders.core.logging_utils import RunLogger
from gliders.core.model import FieldModel
from gliders.core.search import find_best_candidate
from gliders.core.streams import BIT_GENERATORS


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trace massless gliders through a field of stationary planets."
    )
    parser.add_argument("--seed", type=int, default=RUN_CFG.seed, help="Seed for planets and gliders.")
    parser.add_argument("--planets", type=int, default=RUN_CFG.planet_count, help="Number of planets.")
    parser.add_argument("--gliders", type=int, default=RUN_CFG.gliders, help="Number of random gliders to draw.")
    parser.add_argument("--steps", type=int, default=RUN_CFG.max_steps, help="Maximum points per trajectory.")
    parser.add_argument("--spiral", type=float, default=RUN_CFG.spiral_factor, help="Spiral factor (0 disables drift).")
    parser.add_argument("--width", type=float, default=RUN_CFG.width)
    parser.add_argument("--height", type=float, default=RUN_CFG.height)
    parser.add_argument("--engine", choices=sorted(BIT_GENERATORS), default=RUN_CFG.engine)
    parser.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in Scheme],
        default=GLIDER_CFG.scheme.value,
        help="Integration scheme for each glider step.",
    )
    parser.add_argument(
        "--find-nice",
        action="store_true",
        help="Search for the best scoring path and draw only that one.",
    )
    parser.add_argument("--attempts", type=int, default=SEARCH_CFG.max_attempts, help="Search attempts.")
    parser.add_argument("--log-dir", type=Path, default=None, help="Write search diagnostics here.")
    parser.add_argument("--out", type=Path, default=None, help="PNG output path.")
    return parser


def _run_cfg_from_args(args: argparse.Namespace) -> RunCfg:
    return RunCfg(
        seed=args.seed,
        planet_count=args.planets,
        width=args.width,
        height=args.height,
        max_steps=args.steps,
        spiral_factor=args.spiral,
        gliders=args.gliders,
        engine=args.engine,
    )


def main(argv: List[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.planets < 0:
        parser.error("--planets must be non-negative")
    if args.steps < 0 or args.gliders < 0:
        parser.error("--steps and --gliders must be non-negative")
    if args.attempts < 1:
        parser.error("--attempts must be at least 1")

    run = _run_cfg_from_args(args)
    try:
        bounds = run.bounds
    except ValueError as exc:
        parser.error(str(exc))

    field_cfg = replace(FIELD_CFG, engine=run.engine)
    glider_cfg = replace(GLIDER_CFG, engine=run.engine, scheme=Scheme(args.scheme))
    search_cfg = replace(SEARCH_CFG, engine=run.engine, max_attempts=args.attempts)

    field_model = FieldModel.from_seed(run.planet_count, bounds, run.seed, field_cfg)
    print(f"Seed {run.seed}: {len(field_model)} planets in {run.width:g} x {run.height:g}")

    highlight = None
    gliders: list[Glider] = []
    if args.find_nice:
        logger = None
        if args.log_dir is not None:
            logger = RunLogger(args.log_dir)
            logger.write_meta(
                {
                    "seed": run.seed,
                    "planets": run.planet_count,
                    "width": run.width,
                    "height": run.height,
                    "max_steps": run.max_steps,
                    "spiral_factor": run.spiral_factor,
                    "engine": run.engine,
                    "scheme": glider_cfg.scheme.value,
                    "max_attempts": search_cfg.max_attempts,
                }
            )
        try:
            best = find_best_candidate(
                field_model,
                run.spiral_factor,
                run.max_steps,
                bounds,
                run.seed,
                search_cfg=search_cfg,
                glider_cfg=glider_cfg,
                run_logger=logger,
            )
        finally:
            if logger is not None:
                logger.close()
        highlight = generate_trajectory(
            best.start_point,
            field_model,
            run.spiral_factor,
            run.max_steps,
            ccw=best.ccw,
            cfg=glider_cfg,
        )
        print(f" Best score {best.score:g} from {best.start_point} ({len(highlight)} points)")
        if logger is not None:
            print(f" Search log: {logger.run_dir}")
    else:
        gliders = generate_swarm(
            field_model, bounds, run.gliders, run.seed, run.spiral_factor, run.max_steps, glider_cfg
        )
        total = sum(len(glider.points) for glider in gliders)
        print(f" Traced {len(gliders)} gliders, {total} points")

    if args.out is not None:
        from gliders.render import render_scene

        out = render_scene(
            field_model,
            gliders,
            args.out,
            highlight=highlight,
            title=f"seed {run.seed}",
        )
        print(f" Figure saved to {out}")


if __name__ == "__main__":
    main()

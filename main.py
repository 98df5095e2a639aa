"""
Superboids: flocking simulation.

Keys:
    - Q / A: alignment weight up / down
    - W / S: cohesion weight up / down
    - E / D: separation weight up / down
    - Left mouse (held): spawn boids under the pointer
    - ESC: quit
"""

from __future__ import annotations

import argparse
import functools
import logging
from typing import List, Optional

from superboids.constants import BOID_COUNT, FIXED_DT, RENDER_FPS, WINDOW_SIZE, WINDOW_TITLE
from superboids.core.application import Application
from superboids.core.timing import FixedStep
from superboids.flock.settings import BoidSettings, BoundaryMode, NeighborSearch
from superboids.scenes.flock_scene import FlockScene


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Boids flocking simulation")
    parser.add_argument("--boids", type=int, default=BOID_COUNT, help="Initial flock size")
    parser.add_argument(
        "--boundary",
        choices=[m.value for m in BoundaryMode],
        default=BoundaryMode.WRAP.value,
        help="Edge behaviour: teleport across (wrap) or steer away (turn)",
    )
    parser.add_argument(
        "--search",
        choices=[m.value for m in NeighborSearch],
        default=NeighborSearch.MATRIX.value,
        help="Neighbor search strategy",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for spawning")
    parser.add_argument(
        "--catch-up",
        type=int,
        default=1,
        metavar="N",
        help="Max fixed steps per frame (1 = never catch up)",
    )
    parser.add_argument("--width", type=int, default=WINDOW_SIZE[0])
    parser.add_argument("--height", type=int, default=WINDOW_SIZE[1])
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--frames", type=int, default=None, help="Stop after N frames")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> Application:
    settings = BoidSettings(
        boundary=BoundaryMode(args.boundary),
        neighbor_search=NeighborSearch(args.search),
    )

    app = Application(
        width=args.width,
        height=args.height,
        title=WINDOW_TITLE,
        timer=FixedStep(step_seconds=FIXED_DT, max_steps_per_frame=args.catch_up),
        headless=args.headless,
        fps=RENDER_FPS,
    )

    scene = functools.partial(
        FlockScene,
        boid_count=args.boids,
        settings=settings,
        seed=args.seed,
    )
    app.run(scene, max_frames=args.frames)
    return app


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(args)


if __name__ == "__main__":
    main()

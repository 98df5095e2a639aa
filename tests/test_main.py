from main import parse_args, run
from superboids.constants import BOID_COUNT
from superboids.flock.boid import Boid
from superboids.resources.core import SimulationTime


def test_defaults():
    args = parse_args([])

    assert args.boids == BOID_COUNT
    assert args.boundary == "wrap"
    assert args.search == "matrix"
    assert args.catch_up == 1
    assert args.headless is False
    assert args.frames is None


def test_flags():
    args = parse_args(
        ["--boids", "10", "--boundary", "turn", "--search", "grid", "--catch-up", "4"]
    )

    assert (args.boids, args.boundary, args.search, args.catch_up) == (10, "turn", "grid", 4)


def test_headless_run_simulates_every_frame():
    app = run(parse_args(["--headless", "--frames", "3", "--boids", "5", "--seed", "1"]))

    world = app.active_scene.world
    assert app.frame_count == 3
    assert world.get_resource(SimulationTime).step_index == 3
    assert len(list(world.join(Boid))) == 5

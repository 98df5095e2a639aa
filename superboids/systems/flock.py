import logging
import random

from superboids.core.world import World
from superboids.flock.boid import (
    Boid,
    BoidAppearance,
    random_color,
    spawn_at,
    spawn_random,
)
from superboids.flock.events import AdjustWeight, SpawnBoid
from superboids.flock.settings import BoidSettings, adjust_weight
from superboids.flock.tick import tick
from superboids.resources.core import RandomSource, WorldBounds

logger = logging.getLogger(__name__)


def _rng(world: World) -> random.Random:
    source = world.try_resource(RandomSource)
    if not source:
        source = RandomSource(random.Random())
        world.add_resource(source)
    return source.rng


def create_boid(world: World, boid: Boid, rng: random.Random):
    return world.create_entity(boid, BoidAppearance(color=random_color(rng)))


def flock_system(world: World) -> None:
    """
    One fixed step of the flock: snapshot every Boid, compute all
    successors from that snapshot, then commit them in one batch.
    """
    settings = world.try_resource(BoidSettings)
    bounds = world.try_resource(WorldBounds)
    if not (settings and bounds):
        return

    snapshot = world.snapshot(Boid)
    if not snapshot:
        return

    eids = [eid for eid, _ in snapshot]
    successors = tick([boid for _, boid in snapshot], settings, bounds)

    world.commit(zip(eids, successors))


def spawn_system(world: World) -> None:
    """Turns SpawnBoid events into boid entities."""
    events = world.get_events(SpawnBoid)
    if not events:
        return

    bounds = world.try_resource(WorldBounds)
    rng = _rng(world)

    spawned = 0
    for event in events:
        if event.position is not None:
            boid = spawn_at(event.position, rng)
        elif bounds is not None:
            boid = spawn_random(bounds, rng)
        else:
            logger.warning("Dropping SpawnBoid without position: no WorldBounds")
            continue
        create_boid(world, boid, rng)
        spawned += 1

    logger.debug("Spawned %d boids, %d entities", spawned, world.entity_count())


def settings_system(world: World) -> None:
    """Applies AdjustWeight events to the BoidSettings resource."""
    events = world.get_events(AdjustWeight)
    if not events:
        return

    settings = world.get_resource(BoidSettings)
    for event in events:
        settings = adjust_weight(settings, event.field, event.delta)
        logger.info(
            "%s weight -> %.2f", event.field, settings.weight(event.field)
        )

    world.mutate_resource(settings)

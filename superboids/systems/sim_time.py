from superboids.core.world import World
from superboids.resources.core import SimulationTime, WorldBounds
from superboids.resources.rendering import RenderViewport


def simulation_time_system(world: World) -> None:
    if not world.try_resource(SimulationTime):
        world.add_resource(SimulationTime())


def bounds_system(world: World) -> None:
    """Keeps WorldBounds in step with the (possibly resized) viewport."""
    viewport = world.try_resource(RenderViewport)
    if not viewport:
        return

    bounds = WorldBounds.centered(viewport.width, viewport.height)
    if world.try_resource(WorldBounds) != bounds:
        world.add_resource(bounds)

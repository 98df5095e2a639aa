from typing import Dict, Tuple

import pygame

from superboids.constants import (
    ACTION_ALIGNMENT_DOWN,
    ACTION_ALIGNMENT_UP,
    ACTION_COHESION_DOWN,
    ACTION_COHESION_UP,
    ACTION_QUIT,
    ACTION_SEPARATION_DOWN,
    ACTION_SEPARATION_UP,
    SPAWN_MOUSE_BUTTON,
)
from superboids.core.events import AppExit
from superboids.core.world import World
from superboids.flock.events import AdjustWeight, SpawnBoid
from superboids.flock.settings import WEIGHT_STEP
from superboids.input.context import InputContext
from superboids.input.handler import InputHandler
from superboids.resources.core import WorldBounds
from superboids.resources.rendering import RenderViewport

# action -> (weight field, sign)
WEIGHT_ACTIONS: Dict[str, Tuple[str, float]] = {
    ACTION_ALIGNMENT_UP: ("alignment", 1.0),
    ACTION_ALIGNMENT_DOWN: ("alignment", -1.0),
    ACTION_COHESION_UP: ("cohesion", 1.0),
    ACTION_COHESION_DOWN: ("cohesion", -1.0),
    ACTION_SEPARATION_UP: ("separation", 1.0),
    ACTION_SEPARATION_DOWN: ("separation", -1.0),
}


def flock_context() -> InputContext:
    return InputContext(
        "flock",
        {
            pygame.K_ESCAPE: ACTION_QUIT,
            pygame.K_q: ACTION_ALIGNMENT_UP,
            pygame.K_a: ACTION_ALIGNMENT_DOWN,
            pygame.K_w: ACTION_COHESION_UP,
            pygame.K_s: ACTION_COHESION_DOWN,
            pygame.K_e: ACTION_SEPARATION_UP,
            pygame.K_d: ACTION_SEPARATION_DOWN,
        },
    )


def flock_input_system(world: World) -> None:
    """
    Maps this frame's input onto flock events:
    weight keys adjust once per press, a held spawn button spawns a boid
    under the pointer every frame.
    """
    inp = world.try_resource(InputHandler)
    if not inp:
        return

    if inp.just_pressed(ACTION_QUIT):
        world.emit_event(AppExit())

    for action, (field, sign) in WEIGHT_ACTIONS.items():
        if inp.just_pressed(action):
            world.emit_event(AdjustWeight(field, sign * WEIGHT_STEP))

    viewport = world.try_resource(RenderViewport)
    bounds = world.try_resource(WorldBounds)
    if inp.is_mouse_down(SPAWN_MOUSE_BUTTON) and viewport and bounds:
        screen = inp.get_mouse_position(viewport.width, viewport.height)
        world.emit_event(SpawnBoid(bounds.from_normalized(screen)))

    inp.end_frame()

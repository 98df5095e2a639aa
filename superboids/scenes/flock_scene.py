from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Optional

from superboids.constants import BOID_COUNT
from superboids.core.scene import Scene
from superboids.core.scheduler import Stage
from superboids.flock.boid import spawn_random
from superboids.flock.settings import BoidSettings
from superboids.input.handler import InputHandler
from superboids.resources.core import RandomSource, WorldBounds
from superboids.systems.flock import (
    create_boid,
    flock_system,
    settings_system,
    spawn_system,
)
from superboids.systems.input import flock_context, flock_input_system
from superboids.systems.render import draw_system
from superboids.systems.sim_time import bounds_system, simulation_time_system
from superboids.types import SystemId

if TYPE_CHECKING:
    from superboids.core.application import Application

logger = logging.getLogger(__name__)


class FlockScene(Scene):
    def __init__(
        self,
        app: Application,
        boid_count: int = BOID_COUNT,
        settings: Optional[BoidSettings] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(app)
        self.render_enabled = not self.app.headless
        self.boid_count = boid_count
        self.settings = settings or BoidSettings()
        self.rng = random.Random(seed)

        s = self.scheduler
        s.add_system(Stage.STARTUP, simulation_time_system)
        s.add_system(Stage.STARTUP, bounds_system)

        s.add_system(Stage.INPUT, bounds_system)
        s.add_system(Stage.INPUT, flock_input_system)
        s.add_system(
            Stage.INPUT,
            settings_system,
            after=SystemId("flock_input_system"),
        )
        s.add_system(
            Stage.INPUT,
            spawn_system,
            after=[SystemId("flock_input_system"), SystemId("bounds_system")],
        )

        s.add_system(Stage.SIMULATION, flock_system)

        s.add_system(Stage.RENDER, draw_system)

    def on_start(self) -> None:
        self.world.add_resource(self.settings)
        self.world.add_resource(RandomSource(self.rng))

        inp = self.world.try_resource(InputHandler)
        if inp is not None:
            inp.push_context(flock_context())

        super().on_start()

        bounds = self.world.get_resource(WorldBounds)
        for _ in range(self.boid_count):
            create_boid(self.world, spawn_random(bounds, self.rng), self.rng)

        logger.info(
            "Spawned %d boids in %.0fx%.0f (%s boundary)",
            self.boid_count,
            bounds.width,
            bounds.height,
            self.settings.boundary.value,
        )

# superboids/core/application.py
import logging
from dataclasses import replace
from typing import Callable, Optional

import pygame

from superboids.core.events import AppExit
from superboids.core.scene import Scene
from superboids.core.timing import FixedStep
from superboids.input.handler import InputHandler
from superboids.resources.core import SimulationTime
from superboids.resources.rendering import RenderSurface, RenderViewport

logger = logging.getLogger(__name__)


class Application:
    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        title: str = "Superboids",
        timer: Optional[FixedStep] = None,
        headless: bool = False,
        fps: int = 60,
    ):
        self.screen_size = (width, height)
        self.window: pygame.Surface | None = None
        self._title = title
        self.headless = headless
        self.fps = fps

        self.clock: pygame.time.Clock | None = None
        self._pygame_initialized = False
        self.timer = timer or FixedStep()
        self.running = False
        self.active_scene: Optional[Scene] = None
        self.frame_count = 0

    def _ensure_window(self) -> None:
        if self.window is not None or self.headless:
            return

        pygame.init()
        self._pygame_initialized = True

        self.window = pygame.display.set_mode(self.screen_size, pygame.RESIZABLE)
        pygame.display.set_caption(self._title)
        self.clock = pygame.time.Clock()
        logger.info("Opened %dx%d window", *self.screen_size)

    def run(
        self, start_scene: Callable[..., Scene], max_frames: Optional[int] = None
    ) -> None:
        self.change_scene(start_scene)
        self.running = True
        self.frame_count = 0

        self.timer.start()
        logger.info(
            "Running %s (fixed step %.4fs)",
            type(self.active_scene).__name__,
            self.timer.dt,
        )

        try:
            while self.running:
                self._frame()
                self.frame_count += 1
                if max_frames is not None and self.frame_count >= max_frames:
                    self.running = False
        finally:
            sim_time = SimulationTime()
            if self.active_scene:
                self.active_scene.on_exit()
                sim_time = (
                    self.active_scene.world.try_resource(SimulationTime) or sim_time
                )
            if self._pygame_initialized:
                pygame.quit()
                self._pygame_initialized = False
            logger.info(
                "Stopped after %d frames, %d steps (%.2fs simulated)",
                self.frame_count,
                sim_time.step_index,
                sim_time.elapsed_seconds,
            )

    def _frame(self) -> None:
        scene = self.active_scene
        if scene is None:
            self.running = False
            return

        if self.window is not None:
            self._pump_events(scene)

        scene.on_frame()

        # No pacing clock: every frame counts as one target frame interval.
        frame_time = 1.0 / self.fps if self.clock is None else None
        steps = self.timer.advance(frame_time)

        world = scene.world
        for _ in range(steps):
            sim_time = world.try_resource(SimulationTime) or SimulationTime()
            world.add_resource(
                replace(
                    sim_time,
                    elapsed_seconds=sim_time.elapsed_seconds + self.timer.dt,
                    step_index=sim_time.step_index + 1,
                )
            )
            scene.on_update()

        scene.on_render()

        if world.get_events(AppExit):
            self.running = False

        if self.window is not None:
            pygame.display.flip()

        if self.clock is not None:
            self.clock.tick(self.fps)

    def _pump_events(self, scene: Scene) -> None:
        inp = scene.world.try_resource(InputHandler)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.screen_size = (event.w, event.h)
                scene.world.add_resource(RenderViewport(event.w, event.h))
                if self.window is not None:
                    scene.world.add_resource(RenderSurface(self.window))

            if inp:
                inp.process_event(event)

    def change_scene(self, scene_factory: Callable[..., Scene]) -> None:
        if self.active_scene:
            self.active_scene.on_exit()

        self.active_scene = scene_factory(self)
        w, h = self.screen_size
        world = self.active_scene.world
        world.add_resource(RenderViewport(width=w, height=h))
        world.add_resource(InputHandler())

        if self.active_scene.render_enabled:
            self._ensure_window()
            if self.window is not None:
                world.add_resource(RenderSurface(self.window))

        logger.info("Scene -> %s", type(self.active_scene).__name__)
        self.active_scene.on_start()

from __future__ import annotations

from typing import TYPE_CHECKING

from superboids.core.scheduler import Scheduler, Stage
from superboids.core.world import World

if TYPE_CHECKING:
    from superboids.core.application import Application


class Scene:
    """
    A World plus the systems that drive it.

    The application calls on_frame() and on_render() once per rendered
    frame and on_update() once per fixed simulation step.
    """

    render_enabled: bool = True

    def __init__(self, app: Application):
        self.world = World()
        self.scheduler = Scheduler()
        self.app = app

    def on_start(self) -> None:
        """Called when the scene is first activated."""
        self.scheduler.run_stage(Stage.STARTUP, self.world)

    def on_frame(self) -> None:
        """Called once per rendered frame, before any fixed step."""
        self.scheduler.run_stage(Stage.INPUT, self.world)

    def on_update(self) -> None:
        """Called once per fixed step."""
        self.scheduler.run_stage(Stage.SIMULATION, self.world)

    def on_render(self) -> None:
        self.scheduler.run_stage(Stage.RENDER, self.world)

    def on_exit(self) -> None:
        """Called when transitioning away from this scene."""
        pass

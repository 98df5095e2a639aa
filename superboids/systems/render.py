from dataclasses import dataclass
from typing import List

import pygame

from superboids.constants import BACKGROUND_COLOR, TEXT_COLOR
from superboids.core.world import World
from superboids.flock.boid import Boid, BoidAppearance
from superboids.flock.settings import BoidSettings
from superboids.resources.core import WorldBounds
from superboids.resources.rendering import RenderSurface
from superboids.types import Color


@dataclass(frozen=True)
class OverlayFont:
    font: pygame.font.Font


def to_rgb255(color: Color) -> tuple:
    return tuple(max(0, min(255, round(c * 255))) for c in color)


def stats_lines(settings: BoidSettings, boid_count: int) -> List[str]:
    return [
        f"Alignment: {settings.alignment:.2f}",
        f"Cohesion: {settings.cohesion:.2f}",
        f"Separation: {settings.separation:.2f}",
        f"Boids: {boid_count}",
    ]


def draw_system(world: World) -> None:
    target = world.try_resource(RenderSurface)
    bounds = world.try_resource(WorldBounds)
    if not (target and bounds):
        return

    surface = target.surface
    surface.fill(to_rgb255(BACKGROUND_COLOR))

    count = 0
    for _, boid, look in world.join(Boid, BoidAppearance):
        w, h = look.size
        # World is y up and centered; the screen is y down from the corner.
        sx = boid.position.x - bounds.left
        sy = bounds.top - boid.position.y
        rect = pygame.Rect(0, 0, max(1, round(w)), max(1, round(h)))
        rect.center = (round(sx), round(sy))
        pygame.draw.ellipse(surface, to_rgb255(look.color), rect)
        count += 1

    settings = world.try_resource(BoidSettings)
    if settings is None:
        return

    overlay = world.try_resource(OverlayFont)
    if overlay is None:
        overlay = OverlayFont(pygame.font.Font(None, 22))
        world.add_resource(overlay)

    y = 8
    for line in stats_lines(settings, count):
        text = overlay.font.render(line, True, to_rgb255(TEXT_COLOR))
        surface.blit(text, (8, y))
        y += text.get_height() + 2

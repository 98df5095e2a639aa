from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass(frozen=True, slots=True)
class RenderViewport:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class RenderSurface:
    surface: pygame.Surface

from typing import Tuple

from superboids.types import Color

# Display
WINDOW_SIZE: Tuple[int, int] = (1280, 720)
WINDOW_TITLE: str = "Superboids"
BACKGROUND_COLOR: Color = (0.161, 0.157, 0.157)
TEXT_COLOR: Color = (0.9, 0.9, 0.9)
RENDER_FPS: int = 60

# Simulation
BOID_COUNT: int = 100
FIXED_DT: float = 0.01

# Actions
ACTION_QUIT = "QUIT"
ACTION_ALIGNMENT_UP = "ALIGNMENT_UP"
ACTION_ALIGNMENT_DOWN = "ALIGNMENT_DOWN"
ACTION_COHESION_UP = "COHESION_UP"
ACTION_COHESION_DOWN = "COHESION_DOWN"
ACTION_SEPARATION_UP = "SEPARATION_UP"
ACTION_SEPARATION_DOWN = "SEPARATION_DOWN"

SPAWN_MOUSE_BUTTON: int = 1  # left

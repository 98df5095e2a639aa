from typing import List, Optional, Set, Tuple

import pygame

from superboids.input.context import InputContext
from superboids.types import InputAction, Vector2


class InputHandler:
    """
    Turns pygame events into abstract actions.

    Edge state (just_pressed) covers the key presses seen since the last
    end_frame() call. Mouse button state persists until the button is
    released.
    """

    def __init__(self):
        self._context_stack: List[InputContext] = []
        self._just_pressed: Set[InputAction] = set()

        self._mouse_buttons: Set[int] = set()
        self._mouse_pos: Tuple[int, int] = (0, 0)

    def push_context(self, context: InputContext):
        """Add a context to the top of the stack (highest priority)."""
        self._context_stack.append(context)

    def process_event(self, event: pygame.event.Event) -> None:
        """Feed Pygame events here to update state."""
        if event.type == pygame.KEYDOWN:
            action = self._resolve_key(event.key)
            if action:
                self._just_pressed.add(action)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._mouse_buttons.add(event.button)
            self._mouse_pos = event.pos

        elif event.type == pygame.MOUSEBUTTONUP:
            self._mouse_buttons.discard(event.button)
            self._mouse_pos = event.pos

        elif event.type == pygame.MOUSEMOTION:
            self._mouse_pos = event.pos

    def end_frame(self) -> None:
        """Forget this frame's edge-triggered actions."""
        self._just_pressed.clear()

    def just_pressed(self, action: InputAction) -> bool:
        """Returns True if the action went down during this frame."""
        return action in self._just_pressed

    def is_mouse_down(self, button: int = 1) -> bool:
        return button in self._mouse_buttons

    def get_mouse_position(self, width: int, height: int) -> Vector2:
        """
        Return screen space mouse position in a range of 0-1, y up.
        """
        if width <= 0 or height <= 0:
            return Vector2(0.0, 0.0)
        x, y = self._mouse_pos
        return Vector2(x / width, 1.0 - (y / height))

    def _resolve_key(self, key_code: int) -> Optional[InputAction]:
        """Finds the action for a key by walking down the stack."""
        # Iterate backwards (Top -> Bottom)
        for context in reversed(self._context_stack):
            action = context.get_action(key_code)
            if action:
                return action
        return None

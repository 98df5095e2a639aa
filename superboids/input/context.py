from typing import Dict, Optional

from superboids.types import InputAction


class InputContext:
    """
    A named collection of Key -> Action mappings.
    Example:
        flock = InputContext("flock", {K_q: "ALIGNMENT_UP"})
    """

    def __init__(self, name: str, bindings: Dict[int, InputAction] | None = None):
        self.name = name
        # Mapping: Pygame Key Code (int) -> Action String
        self.bindings: Dict[int, InputAction] = dict(bindings) if bindings else {}

    def get_action(self, key: int) -> Optional[InputAction]:
        return self.bindings.get(key)

import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class FixedStep:
    """
    Accumulator-style fixed timestep.

    Each frame adds the real time elapsed since the previous frame to an
    accumulator and reports how many whole fixed steps fit into it.
    max_steps_per_frame caps catch-up: with the default of 1 at most one
    step runs per frame and any further backlog is dropped, keeping only
    the fractional remainder. Raise it to let the simulation catch up on
    missed simulated time instead.
    """

    step_seconds: float = 0.01
    max_frame_time: float = 0.25
    max_steps_per_frame: int = 1
    clock: Callable[[], float] = time.perf_counter

    _last_time: float = field(default=0.0, init=False)
    _accum: float = field(default=0.0, init=False)

    def __post_init__(self):
        if self.step_seconds <= 0.0:
            raise ValueError(
                f"step_seconds must be positive, got {self.step_seconds}"
            )
        if self.max_steps_per_frame < 1:
            raise ValueError(
                f"max_steps_per_frame must be >= 1, got {self.max_steps_per_frame}"
            )

    def start(self) -> None:
        """Call this right before the main loop starts."""
        self._last_time = self.clock()
        self._accum = 0.0

    def advance(self, elapsed: Optional[float] = None) -> int:
        """
        Advances the timer and returns how many fixed steps
        should be run this frame.

        elapsed overrides the clock reading with an explicit frame time.
        """
        if elapsed is None:
            now = self.clock()
            frame_time = now - self._last_time
            self._last_time = now
        else:
            frame_time = elapsed

        # Prevent spiral of death (lag causing more lag)
        frame_time = max(0.0, min(frame_time, self.max_frame_time))

        self._accum += frame_time

        steps = 0
        while self._accum >= self.step_seconds and steps < self.max_steps_per_frame:
            self._accum -= self.step_seconds
            steps += 1

        # Still behind after the cap: drop whole missed steps.
        if self._accum >= self.step_seconds:
            self._accum %= self.step_seconds

        return steps

    @property
    def dt(self) -> float:
        """The fixed delta time (e.g., 0.01 for 100hz)."""
        return self.step_seconds


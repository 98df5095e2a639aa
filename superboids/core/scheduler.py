from __future__ import annotations

import logging
from enum import Enum, auto
from graphlib import CycleError, TopologicalSorter
from typing import Callable, Dict, List, Union

from superboids.core.world import World
from superboids.types import SystemId

logger = logging.getLogger(__name__)


class Stage(Enum):
    STARTUP = auto()  # Run once on scene start
    INPUT = auto()  # Once per rendered frame, before any fixed step
    SIMULATION = auto()  # Once per fixed step
    RENDER = auto()  # Once per rendered frame


SystemFn = Callable[[World], None]


class Scheduler:
    def __init__(self):
        self._registered_systems = []

        self._execution_order: Dict[Stage, List[SystemFn]] = {
            s: [] for s in Stage
        }
        self._is_compiled = False

    def add_system(
        self,
        stage: Stage,
        system: SystemFn,
        name: Union[SystemId, None] = None,
        before: Union[SystemId, List[SystemId], None] = None,
        after: Union[SystemId, List[SystemId], None] = None,
    ) -> None:
        """Register a simple function as a system."""
        if self._is_compiled:
            raise RuntimeError(
                "Cannot add systems after scheduler is compiled."
            )

        sys_name = name or SystemId(getattr(system, "__name__"))

        before_deps = [before] if isinstance(before, str) else (before or [])
        after_deps = [after] if isinstance(after, str) else (after or [])

        self._registered_systems.append(
            {
                "stage": stage,
                "func": system,
                "name": sys_name,
                "before": before_deps,
                "after": after_deps,
            }
        )

    def compile(self) -> None:
        by_stage = {s: [] for s in Stage}
        for entry in self._registered_systems:
            by_stage[entry["stage"]].append(entry)

        for stage, entries in by_stage.items():
            sorter = TopologicalSorter()

            name_map = {}

            # Registration order breaks ties between independent systems.
            for entry in entries:
                name = entry["name"]
                name_map[name] = entry["func"]
                sorter.add(name, *entry["after"])

            for entry in entries:
                name = entry["name"]
                for successor in entry["before"]:
                    sorter.add(successor, name)

            try:
                sorted_names = list(sorter.static_order())
            except CycleError as e:
                raise RuntimeError(
                    f"Cycle detected in stage {stage.name}: {e.args[1]}"
                ) from e

            self._execution_order[stage] = [
                name_map[name] for name in sorted_names if name in name_map
            ]
            if self._execution_order[stage]:
                logger.debug(
                    "Stage %s order: %s",
                    stage.name,
                    [n for n in sorted_names if n in name_map],
                )

        self._is_compiled = True

    def run_stage(self, stage: Stage, world: World) -> None:
        if not self._is_compiled:
            self.compile()

        for system in self._execution_order[stage]:
            system(world)


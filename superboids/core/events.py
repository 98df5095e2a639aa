from collections import defaultdict
from typing import Any, Dict, List, Type, TypeVar

E = TypeVar("E")


class EventManager:
    """
    Per-type FIFO queues. Reading a type drains its queue, so each event
    is delivered to exactly one consumer.
    """

    def __init__(self):
        self._queues: Dict[Type[Any], List[Any]] = defaultdict(list)

    def emit(self, event: Any) -> None:
        self._queues[type(event)].append(event)

    def get(self, event_type: Type[E]) -> List[E]:
        if event_type in self._queues:
            events = self._queues[event_type]
            self._queues[event_type] = []
            return events
        return []


class AppExit:
    """Emit to stop the application at the end of the current frame."""

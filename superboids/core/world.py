from __future__ import annotations

import logging
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Tuple,
    Type,
    TypeVar,
    TypeVarTuple,
    Unpack,
)

from superboids.core.events import EventManager
from superboids.core.resources import ResourceManager
from superboids.types import EntityId

logger = logging.getLogger(__name__)

T = TypeVar("T")
Ev = TypeVar("Ev")
Cs = TypeVarTuple("Cs")  # variadic component types for join()


class World:
    """
    Entity store plus world-global resources and event queues.

    Components are expected to be frozen dataclasses. Updating one means
    replacing the stored instance, so anything read out of the world
    (e.g. a snapshot taken with join()) never changes underneath the reader.
    """

    def __init__(self) -> None:
        self._next_id: int = 1

        # Insertion ordered: iteration follows entity creation order.
        self._entities: Dict[EntityId, Dict[Type[Any], Any]] = {}

        # Managers
        self._resource_manager = ResourceManager()
        self._event_manager = EventManager()

    # RESOURCE MANAGEMENT
    def add_resource(self, resource: Any) -> None:
        """Register a global resource (e.g. Time, Input, Config)."""
        self._resource_manager.add(resource)

    def get_resource(self, resource_type: Type[T]) -> T:
        """Retrieve a resource. Raises KeyError if missing."""
        return self._resource_manager.get(resource_type)

    def try_resource(self, resource_type: Type[T]) -> T | None:
        """Retrieve a resource or returns None."""
        return self._resource_manager.try_get(resource_type)

    def mutate_resource(self, resource: Any) -> None:
        """Update an EXISTING resource with a new instance."""
        res_type = type(resource)

        if res_type not in self._resource_manager:
            raise KeyError(
                f"Resource {res_type.__name__} does not exist. "
                "Use world.add_resource() to initialize global state."
            )

        self._resource_manager.add(resource)

    # EVENT MANAGEMENT
    def emit_event(self, event: Any) -> None:
        """Queues an event signal."""
        self._event_manager.emit(event)

    def get_events(self, event_type: Type[Ev]) -> List[Ev]:
        """Consumes and returns all events of the given type."""
        return self._event_manager.get(event_type)

    # ENTITY MANAGEMENT
    def create_entity(self, *components: Any) -> EntityId:
        """Creates an entity, optionally with starting components."""
        eid = EntityId(self._next_id)
        self._next_id += 1

        self._entities[eid] = {}
        for c in components:
            self.add_component(eid, c)

        return eid

    def delete_entity(self, eid: EntityId) -> None:
        if self._entities.pop(eid, None) is not None:
            logger.debug("Deleted entity %d", eid)

    def entity_count(self) -> int:
        return len(self._entities)

    # COMPONENT MANAGEMENT
    def add_component(self, eid: EntityId, component: object) -> None:
        record = self._entities.get(eid)
        if record is None:
            raise KeyError(f"Entity {eid} does not exist.")
        record[type(component)] = component

    # QUERIES
    def join(
        self,
        *component_types: Unpack[Tuple[Type[Cs], ...]],
    ) -> Iterator[Tuple[EntityId, *Cs]]:
        """
        Yields (eid, comp1, comp2, ...) for every entity owning all the
        requested component types, in entity creation order.
        """
        for eid, record in self._entities.items():
            if all(t in record for t in component_types):
                yield (eid, *(record[t] for t in component_types))

    def snapshot(
        self,
        *component_types: Unpack[Tuple[Type[Cs], ...]],
    ) -> List[Tuple[EntityId, *Cs]]:
        """
        Materialized join(). Safe to hold while the world is mutated,
        since stored components are replaced, never modified.
        """
        return list(self.join(*component_types))

    def commit(self, updates: Iterable[Tuple[EntityId, Any]]) -> None:
        """
        Replace EXISTING components with new instances, in one batch.
        Every pair is validated before anything is written, so a bad pair
        leaves the world untouched.
        """
        pending = list(updates)
        for eid, component in pending:
            record = self._entities.get(eid)
            if record is None:
                raise KeyError(f"Entity {eid} does not exist.")
            if type(component) not in record:
                raise KeyError(
                    f"Entity {eid} cannot mutate {type(component).__name__}: "
                    "Component missing. "
                    "Use world.add_component() to attach new components."
                )

        for eid, component in pending:
            self._entities[eid][type(component)] = component

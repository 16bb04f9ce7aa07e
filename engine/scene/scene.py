"""
Scene container: owns the entities and the frame clock that updates them.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from engine.scene.entity import Entity
from engine.scene.frame import FrameClock


class Scene:
    """
    Root of a running scene.

    Responsibilities:
    - Create entities with unique, increasing ids
    - Provide entity lookup
    - Own the FrameClock whose `updated` signal behaviors connect to
    """

    def __init__(self, fps: int = 60) -> None:
        self.frame = FrameClock(fps=fps)
        self._entities: Dict[int, Entity] = {}
        self._next_id: int = 1

    @property
    def entities(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def create_entity(self, name: str = "") -> Entity:
        entity = Entity(self._next_id, name=name, scene=self)
        self._entities[entity.id] = entity
        self._next_id += 1
        return entity

    def get_entity(self, entity_id: int) -> Optional[Entity]:
        return self._entities.get(entity_id)

    def remove_entity(self, entity_id: int) -> Optional[Entity]:
        """Remove an entity and detach all of its components."""
        entity = self._entities.pop(entity_id, None)
        if entity is None:
            return None
        for component in entity:
            entity.remove_component(component.type_name)
        entity.scene = None
        return entity

    def update(self, frametime: float) -> None:
        """Advance one frame by a fixed frame time."""
        self.frame.step(frametime)

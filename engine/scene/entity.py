"""
Entities and the components attached to them.

An entity hosts at most one component per type name. Behaviors look their
collaborators up by that name and get None back when nothing is attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, Optional

from engine.error_handler import SceneError, get_logger

if TYPE_CHECKING:
    from engine.scene.scene import Scene

log = get_logger("scene")


class Component:
    """
    Base class for anything that can be attached to an Entity.

    Subclasses set `type_name`; that is the key used by
    Entity.get_component().
    """

    type_name: str = "Component"

    def __init__(self) -> None:
        self.entity: Optional[Entity] = None  # assigned when attached

    def on_attached(self) -> None:
        """Called after the component has been added to an entity."""
        pass

    def on_detached(self) -> None:
        """Called right before the component is removed from its entity."""
        pass


class Entity:
    """A scene object holding components keyed by type name."""

    def __init__(self, entity_id: int, name: str = "", scene: Optional["Scene"] = None) -> None:
        self.id = entity_id
        self.name = name
        self.scene = scene
        self._components: Dict[str, Component] = {}

    def __repr__(self) -> str:
        return f"Entity(id={self.id}, name={self.name!r})"

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._components.values()))

    def add_component(self, component: Component) -> Component:
        """
        Attach a component.

        Raises:
            SceneError: if a component of the same type is already attached,
                or the component already belongs to another entity.
        """
        key = component.type_name
        if key in self._components:
            raise SceneError(f"{self!r} already has a {key} component")
        if component.entity is not None:
            raise SceneError(f"{key} component is already attached to {component.entity!r}")

        self._components[key] = component
        component.entity = self
        log.debug("Attached %s to %r", key, self)
        component.on_attached()
        return component

    def get_component(self, type_name: str) -> Optional[Component]:
        return self._components.get(type_name)

    def has_component(self, type_name: str) -> bool:
        return type_name in self._components

    def remove_component(self, type_name: str) -> Optional[Component]:
        """Detach and return the component, or None if it was not attached."""
        component = self._components.get(type_name)
        if component is None:
            return None

        component.on_detached()
        del self._components[type_name]
        component.entity = None
        log.debug("Detached %s from %r", type_name, self)
        return component

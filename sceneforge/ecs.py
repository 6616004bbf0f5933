"""Entity-component core: components, transforms, entities and the world holding them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence, TypeVar

import numpy as np

from .glmath import scale, translate, yaw_pitch_roll

__all__ = [
    "Component",
    "TagComponent",
    "Transform",
    "Entity",
    "World",
    "register_component",
    "component_type",
    "deserialize_component",
]

C = TypeVar("C", bound="Component")

_REGISTRY: dict[str, type["Component"]] = {}


class Component(ABC):
    """Data attached to an entity; the set of components defines the entity's role."""

    type_id: ClassVar[str] = "Component"
    owner: Optional["Entity"] = None

    @abstractmethod
    def deserialize(self, data: Any) -> None:
        """Read the component's data from a JSON-like object."""


class TagComponent(Component):
    """A component with no data; it only marks its entity."""

    def deserialize(self, data: Any) -> None:
        """Tags carry no data, so there is nothing to read."""


def register_component(cls: type[C]) -> type[C]:
    """Make a component class available to ``deserialize_component`` by its ``type_id``."""
    if not (isinstance(cls, type) and issubclass(cls, Component)):
        raise TypeError(f"{cls!r} is not a Component subclass")
    _REGISTRY[cls.type_id] = cls
    return cls


def component_type(type_id: str) -> type[Component]:
    """Return the component class registered under ``type_id``."""
    try:
        return _REGISTRY[type_id]
    except KeyError:
        raise KeyError(f"no component registered as {type_id!r}") from None


def deserialize_component(data: Mapping[str, Any], entity: "Entity") -> Optional[Component]:
    """Create the component named by ``data["type"]`` on ``entity`` and deserialize it.

    Unknown types are ignored and ``None`` is returned.
    """
    if not isinstance(data, Mapping):
        raise TypeError("component data must be an object")
    cls = _REGISTRY.get(data.get("type", ""))
    if cls is None:
        return None
    component = entity.add_component(cls)
    component.deserialize(data)
    return component


def _vec3(value: Any) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected 3 components, got {value!r}")
    return array


@dataclass(eq=False)
class Transform:
    """Position, Euler rotation (radians; x pitch, y yaw, z roll) and scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def to_mat4(self) -> np.ndarray:
        """Return the matrix applying scale, then rotation, then translation."""
        rotation = yaw_pitch_roll(self.rotation[1], self.rotation[0], self.rotation[2])
        return translate(self.position) @ rotation @ scale(self.scale)

    def deserialize(self, data: Mapping[str, Any]) -> None:
        """Read position, rotation (in degrees) and scale, keeping missing ones."""
        if not isinstance(data, Mapping):
            raise TypeError("transform data must be an object")
        self.position = _vec3(data.get("position", self.position))
        self.rotation = np.radians(_vec3(data.get("rotation", np.degrees(self.rotation))))
        self.scale = _vec3(data.get("scale", self.scale))


class Entity:
    """A named node in the scene hierarchy that owns a list of components."""

    def __init__(self, world: Optional["World"] = None) -> None:
        self.world = world
        self.name = ""
        self.parent: Optional[Entity] = None
        self.local_transform = Transform()
        self._components: list[Component] = []

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def _ancestors(self):
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def world_translation(self) -> np.ndarray:
        """Sum of the positions of this entity and all its ancestors."""
        total = np.array(self.local_transform.position, dtype=float)
        for ancestor in self._ancestors():
            total = ancestor.local_transform.position + total
        return total

    def local_to_world_matrix(self) -> np.ndarray:
        """Matrix taking this entity's local space to world space."""
        matrix = self.local_transform.to_mat4()
        for ancestor in self._ancestors():
            matrix = ancestor.local_transform.to_mat4() @ matrix
        return matrix

    def deserialize(self, data: Any) -> None:
        """Read name, transform and components; non-objects are ignored."""
        if not isinstance(data, Mapping):
            return
        self.name = data.get("name", self.name)
        self.local_transform.deserialize(data)
        components = data.get("components")
        if isinstance(components, list):
            for component_data in components:
                deserialize_component(component_data, self)

    def add_component(self, component_type: type[C]) -> C:
        """Create a component of the given class, attach it and return it."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component subclass")
        component = component_type()
        component.owner = self
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> Optional[C]:
        """Return the first component that is an instance of ``component_type``."""
        return next((c for c in self._components if isinstance(c, component_type)), None)

    def component_at(self, index: int) -> Optional[Component]:
        """Return the component at ``index``, or ``None`` if out of range."""
        if 0 <= index < len(self._components):
            return self._components[index]
        return None

    def _detach(self, component: Component) -> None:
        self._components.remove(component)
        component.owner = None

    def delete_component(self, component_type: type[Component]) -> None:
        """Remove the first component that is an instance of ``component_type``."""
        component = self.get_component(component_type)
        if component is not None:
            self._detach(component)

    def delete_component_at(self, index: int) -> None:
        """Remove the component at ``index`` if there is one."""
        component = self.component_at(index)
        if component is not None:
            self._detach(component)

    def remove_component(self, component: Component) -> None:
        """Remove this exact component object if the entity holds it."""
        if any(c is component for c in self._components):
            self._detach(component)

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r})"


class World:
    """The set of entities in a scene, with deferred removal."""

    def __init__(self) -> None:
        self._entities: set[Entity] = set()
        self._marked: set[Entity] = set()

    @property
    def entities(self) -> frozenset[Entity]:
        return frozenset(self._entities)

    @property
    def marked_for_removal(self) -> frozenset[Entity]:
        return frozenset(self._marked)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self):
        return iter(list(self._entities))

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def add(self) -> Entity:
        """Create a new entity owned by this world and return it."""
        entity = Entity(self)
        self._entities.add(entity)
        return entity

    def deserialize(self, data: Any, parent: Optional[Entity] = None) -> None:
        """Add entities from a list of entity objects, recursing into ``children``."""
        if not isinstance(data, list):
            return
        for entity_data in data:
            self._build(entity_data, parent)

    def deserialize_entity(self, data: Any, parent: Optional[Entity] = None) -> Optional[Entity]:
        """Add a single entity (and its children) from an object; ``None`` for non-objects."""
        if not isinstance(data, Mapping):
            return None
        return self._build(data, parent)

    def _build(self, data: Any, parent: Optional[Entity]) -> Entity:
        entity = self.add()
        entity.parent = parent
        entity.deserialize(data)
        if isinstance(data, Mapping) and "children" in data:
            self.deserialize(data["children"], entity)
        return entity

    def mark_for_removal(self, entity: Entity) -> None:
        """Mark an entity of this world and all its descendants for removal."""
        if entity not in self._entities or entity in self._marked:
            return
        self._marked.add(entity)
        for child in [e for e in self._entities if e.parent is entity]:
            self.mark_for_removal(child)

    def delete_marked_entities(self) -> None:
        """Remove every entity that was marked for removal."""
        for entity in self._marked:
            self._entities.discard(entity)
            entity.world = None
        self._marked.clear()

    def clear(self) -> None:
        """Remove all entities."""
        self.delete_marked_entities()
        for entity in self._entities:
            entity.world = None
        self._entities.clear()
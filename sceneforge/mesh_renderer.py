"""Mesh renderer component: draws a loaded mesh with a loaded material at its entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from . import assets
from .ecs import Component, register_component

__all__ = ["MeshRendererComponent"]


def _required_name(data: Mapping[str, Any], key: str) -> str:
    name = data[key]
    if not isinstance(name, str):
        raise TypeError(f"{key!r} must be a string, got {name!r}")
    return name


@register_component
@dataclass(eq=False)
class MeshRendererComponent(Component):
    """Tells a renderer to draw ``mesh`` with ``material`` using the owner's transform."""

    type_id: ClassVar[str] = "Mesh Renderer"

    mesh: Optional[Any] = None
    material: Optional[Any] = None

    def deserialize(self, data: Any) -> None:
        """Look up the mesh and material named by ``mesh`` and ``material``.

        Both keys are required. A name that is not loaded gives ``None``.
        Non-objects are ignored.
        """
        if not isinstance(data, Mapping):
            return
        self.mesh = assets.meshes.get(_required_name(data, "mesh"))
        self.material = assets.materials.get(_required_name(data, "material"))
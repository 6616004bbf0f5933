"""Building a scene: the known component types and loading assets plus entities from config."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .camera import CameraComponent
from .catalog import deserialize_all_assets
from .ecs import Component, World
from .gameplay import (
    BlurTagComponent,
    CoinComponent,
    CollisionComponent,
    FreeCameraControllerComponent,
    HeartTagComponent,
    MovementComponent,
    ObstacleTagComponent,
    PlayerComponent,
    PlayerMovementControllerComponent,
    PostProcessComponent,
    PowerupTagComponent,
    WarnTagComponent,
)
from .light import LightComponent, LightSpectrumComponent
from .mesh_renderer import MeshRendererComponent

__all__ = ["component_types", "load_scene"]

_SCENE_COMPONENTS: tuple[type[Component], ...] = (
    CameraComponent,
    FreeCameraControllerComponent,
    MovementComponent,
    MeshRendererComponent,
    LightComponent,
    PlayerComponent,
    PlayerMovementControllerComponent,
    CoinComponent,
    ObstacleTagComponent,
    PowerupTagComponent,
    HeartTagComponent,
    CollisionComponent,
    PostProcessComponent,
    BlurTagComponent,
    WarnTagComponent,
    LightSpectrumComponent,
)


def component_types() -> dict[str, type[Component]]:
    """Return the component classes a scene file may name, keyed by their type id."""
    return {cls.type_id: cls for cls in _SCENE_COMPONENTS}


def load_scene(config: Any) -> World:
    """Load ``config["assets"]`` into the registries and build a world from ``config["world"]``.

    Both keys are optional; a missing ``world`` gives an empty world.
    """
    if not isinstance(config, Mapping):
        raise TypeError("scene configuration must be an object")
    if "assets" in config:
        deserialize_all_assets(config["assets"])
    world = World()
    if "world" in config:
        world.deserialize(config["world"])
    return world
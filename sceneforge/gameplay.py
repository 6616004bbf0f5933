"""Gameplay components: scoring, collisions, motion, controllers, effects and tags."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

import numpy as np

from .ecs import Component, TagComponent, register_component

__all__ = [
    "CoinComponent",
    "CollisionComponent",
    "GeneratedComponent",
    "MovementComponent",
    "FreeCameraControllerComponent",
    "PlayerMovementControllerComponent",
    "PlayerComponent",
    "PostProcessComponent",
    "ObstacleComponent",
    "BlurTagComponent",
    "HeartTagComponent",
    "ObstacleTagComponent",
    "PowerupTagComponent",
    "WarnTagComponent",
]


def _vec3(value: Any) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected 3 components, got {value!r}")
    return array


@register_component
@dataclass(eq=False)
class CoinComponent(Component):
    """A collectible that adds ``score`` to the player when picked up."""

    type_id: ClassVar[str] = "Coin"
    score: int = 1

    def deserialize(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        self.score = int(data.get("score", self.score))


@register_component
@dataclass(eq=False)
class CollisionComponent(Component):
    """Marks a collidable body, with the sound played on contact."""

    type_id: ClassVar[str] = "Collision"
    detection_radius: float = 1.0
    sound_name: int = 0
    sound_path: str = ""

    def deserialize(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        self.detection_radius = float(data.get("detectionRadius", self.detection_radius))
        self.sound_name = int(data.get("soundName", self.sound_name))
        self.sound_path = str(data.get("soundPath", self.sound_path))


@dataclass(eq=False)
class GeneratedComponent(Component):
    """Marks an entity created by the level generator, destroyed past ``destruction_offset``."""

    type_id: ClassVar[str] = "GeneratedTag"
    destruction_offset: float = -10.0

    def deserialize(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        self.destruction_offset = float(data.get("destructionOffset", self.destruction_offset))


@register_component
@dataclass(eq=False)
class MovementComponent(Component):
    """Linear and angular velocity and acceleration of an entity.

    Angular quantities are read in degrees and stored in radians.
    """

    type_id: ClassVar[str] = "Movement"
    linear_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    linear_acceleration: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_acceleration: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max_linear_velocity_component: float = 1000.0
    max_angular_velocity_component: float = 1000.0
    mass: float = 0.0

    def deserialize(self, data: Any) -> None:
        # A missing angular key converts the current value again, as the scene format does.
        if not isinstance(data, Mapping):
            return
        self.linear_velocity = _vec3(data.get("linearVelocity", self.linear_velocity))
        self.angular_velocity = np.radians(
            _vec3(data.get("angularVelocity", self.angular_velocity))
        )
        self.linear_acceleration = _vec3(
            data.get("linearAcceleration", self.linear_acceleration)
        )
        self.angular_acceleration = np.radians(
            _vec3(data.get("angularAcceleration", self.angular_acceleration))
        )
        self.max_linear_velocity_component = float(
            data.get("maxLinearVelocityComponent", self.max_linear_velocity_component)
        )
        self.max_angular_velocity_component = math.radians(
            float(data.get("maxAngularVelocityComponent", self.max_angular_velocity_component))
        )
        self.mass = float(data.get("mass", self.mass))


@register_component
@dataclass(eq=False)
class FreeCameraControllerComponent(Component):
    """Sensitivities for moving a camera freely with mouse and keyboard."""

    type_id: ClassVar[str] = "Free Camera Controller"
    rotation_sensitivity: float = 0.01
    fov_sensitivity: float = 0.3
    position_sensitivity: np.ndarray = field(default_factory=lambda: np.full(3, 3.0))
    speedup_factor: float = 5.0

    def deserialize(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        self.rotation_sensitivity = float(
            data.get("rotationSensitivity", self.rotation_sensitivity)
        )
        self.fov_sensitivity = float(data.get("fovSensitivity", self.fov_sensitivity))
        self.position_sensitivity = _vec3(
            data.get("positionSensitivity", self.position_sensitivity)
        )
        self.speedup_factor = float(data.get("speedupFactor", self.speedup_factor))


@register_component
@dataclass(eq=False)
class PlayerMovementControllerComponent(FreeCameraControllerComponent):
    """Player controls: free-camera sensitivities plus lateral limit and jump speed."""

    type_id: ClassVar[str] = "Player Movement Controller"
    max_horizontal_distance: float = 2.0
    jump_speed: float = 5.0

    def deserialize(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        super().deserialize(data)
        self.max_horizontal_distance = float(
            data.get("maxHorizontalDistance", self.max_horizontal_distance)
        )
        self.jump_speed = float(data.get("jumpSpeed", self.jump_speed))


@register_component
@dataclass(eq=False)
class PlayerComponent(Component):
    """The player's score and remaining lives."""

    type_id: ClassVar[str] = "Player"
    score: int = 0
    lives: int = 3

    def deserialize(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        self.score = int(data.get("score", self.score))
        self.lives = int(data.get("lives", self.lives))


@register_component
@dataclass(eq=False)
class PostProcessComponent(Component):
    """Selects a post-processing effect and whether it is on."""

    type_id: ClassVar[str] = "PostProcess"
    post_process_index: int = 0
    is_enabled: bool = False

    def deserialize(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        self.is_enabled = bool(data.get("isEnabled", self.is_enabled))
        self.post_process_index = int(data.get("postProcessIndex", self.post_process_index))


@dataclass(eq=False)
class ObstacleComponent(Component):
    """Marks an obstacle; it carries no data."""

    type_id: ClassVar[str] = "Obstacle"

    def deserialize(self, data: Any) -> None:
        """Obstacles carry no data, so there is nothing to read."""


@register_component
class BlurTagComponent(TagComponent):
    """Marks the entity driving the blur effect."""

    type_id: ClassVar[str] = "BlurTag"


@register_component
class HeartTagComponent(TagComponent):
    """Marks a heart pickup."""

    type_id: ClassVar[str] = "HeartTag"


@register_component
class ObstacleTagComponent(TagComponent):
    """Marks an obstacle."""

    type_id: ClassVar[str] = "ObstacleTag"


@register_component
class PowerupTagComponent(TagComponent):
    """Marks a power-up pickup."""

    type_id: ClassVar[str] = "powerupTag"


@register_component
class WarnTagComponent(TagComponent):
    """Marks the entity driving the warning effect."""

    type_id: ClassVar[str] = "WarnTag"
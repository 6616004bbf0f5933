"""Camera component: view and projection matrices for rendering a scene."""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Sequence

import numpy as np

from .ecs import Component, register_component
from .glmath import look_at, ortho, perspective, transform_direction, transform_point

__all__ = ["CameraType", "CameraComponent"]


class CameraType(enum.Enum):
    """How the camera projects the scene."""

    ORTHOGRAPHIC = "orthographic"
    PERSPECTIVE = "perspective"


@register_component
@dataclass(eq=False)
class CameraComponent(Component):
    """Marks its entity as the point of view a renderer draws from."""

    type_id: ClassVar[str] = "Camera"

    camera_type: CameraType = CameraType.PERSPECTIVE
    near: float = 0.01
    far: float = 100.0
    fov_y: float = math.radians(90.0)
    ortho_height: float = 1.0

    def deserialize(self, data: Any) -> None:
        """Read the camera parameters; fovY is given in degrees. Non-objects are ignored."""
        if not isinstance(data, Mapping):
            return
        if data.get("cameraType", "perspective") == "orthographic":
            self.camera_type = CameraType.ORTHOGRAPHIC
        else:
            self.camera_type = CameraType.PERSPECTIVE
        self.near = float(data.get("near", 0.01))
        self.far = float(data.get("far", 100.0))
        self.fov_y = math.radians(float(data.get("fovY", 90.0)))
        self.ortho_height = float(data.get("orthoHeight", 1.0))

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix derived from the owning entity's world transform."""
        if self.owner is None:
            raise RuntimeError("camera component is not attached to an entity")
        model = self.owner.local_to_world_matrix()
        eye = transform_point(model, (0.0, 0.0, 0.0))
        center = transform_point(model, (0.0, 0.0, -1.0))
        up = transform_direction(model, (0.0, 1.0, 0.0))
        return look_at(eye, center, up)

    def projection_matrix(self, viewport_size: Sequence[int]) -> np.ndarray:
        """Return the projection matrix for a viewport of ``(width, height)`` pixels.

        The aspect ratio is the whole-number quotient of width by height.
        """
        width, height = (int(v) for v in viewport_size)
        aspect = float(width // height)
        if self.camera_type is CameraType.ORTHOGRAPHIC:
            half_width = self.ortho_height * aspect / 2.0
            half_height = self.ortho_height / 2.0
            return ortho(-half_width, half_width, -half_height, half_height, self.near, self.far)
        return perspective(self.fov_y, aspect, self.near, self.far)
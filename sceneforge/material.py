"""Materials: a pipeline state, a shader and the uniforms each material kind sends."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from . import assets
from .pipeline_state import PipelineState

__all__ = [
    "Material",
    "TintedMaterial",
    "TexturedMaterial",
    "LitMaterial",
    "create_material_from_type",
]


def _asset_name(data: Mapping[str, Any], key: str, default: str) -> str:
    name = data.get(key, default)
    if not isinstance(name, str):
        raise TypeError(f"{key!r} must be a string, got {name!r}")
    return name


@dataclass(eq=False)
class Material:
    """Base material: pipeline state, shader and whether it is transparent."""

    pipeline_state: PipelineState = field(default_factory=PipelineState)
    shader: Optional[Any] = None
    transparent: bool = False

    def deserialize(self, data: Any) -> None:
        """Read the material; ``shader`` is required and names a loaded shader."""
        if not isinstance(data, Mapping):
            return
        if "pipelineState" in data:
            self.pipeline_state.deserialize(data["pipelineState"])
        shader_name = data["shader"]
        if not isinstance(shader_name, str):
            raise TypeError(f"'shader' must be a string, got {shader_name!r}")
        self.shader = assets.shaders.get(shader_name)
        self.transparent = bool(data.get("transparent", False))


@dataclass(eq=False)
class TintedMaterial(Material):
    """A material that colours the whole object with a single tint."""

    tint: np.ndarray = field(default_factory=lambda: np.ones(4))

    def deserialize(self, data: Any) -> None:
        super().deserialize(data)
        if not isinstance(data, Mapping):
            return
        tint = np.asarray(data.get("tint", (1.0, 1.0, 1.0, 1.0)), dtype=float)
        if tint.shape != (4,):
            raise ValueError("tint must have 4 components")
        self.tint = tint


@dataclass(eq=False)
class TexturedMaterial(TintedMaterial):
    """A tinted material sampling a texture, discarding pixels below an alpha threshold."""

    texture: Optional[Any] = None
    depth_texture: Optional[Any] = None
    sampler: Optional[Any] = None
    alpha_threshold: float = 0.0

    def deserialize(self, data: Any) -> None:
        super().deserialize(data)
        if not isinstance(data, Mapping):
            return
        self.alpha_threshold = float(data.get("alphaThreshold", 0.0))
        self.texture = assets.textures.get(_asset_name(data, "texture", ""))
        self.sampler = assets.samplers.get(_asset_name(data, "sampler", ""))


@dataclass(eq=False)
class LitMaterial(TintedMaterial):
    """A tinted material with the texture maps used for lighting."""

    sampler: Optional[Any] = None
    albedo_map: Optional[Any] = None
    specular_map: Optional[Any] = None
    ambient_occlusion_map: Optional[Any] = None
    roughness_map: Optional[Any] = None
    emissive_map: Optional[Any] = None

    def deserialize(self, data: Any) -> None:
        super().deserialize(data)
        if not isinstance(data, Mapping):
            return
        textures = assets.textures
        self.sampler = assets.samplers.get(_asset_name(data, "sampler", ""))
        self.albedo_map = textures.get(_asset_name(data, "albedo", "albedo"))
        self.specular_map = textures.get(_asset_name(data, "specular", "black"))
        self.emissive_map = textures.get(_asset_name(data, "emissive", "black"))
        self.roughness_map = textures.get(_asset_name(data, "roughness", "black"))
        self.ambient_occlusion_map = textures.get(
            _asset_name(data, "ambient_occlusion", "black")
        )


_MATERIAL_TYPES: dict[str, type[Material]] = {
    "tinted": TintedMaterial,
    "textured": TexturedMaterial,
    "lit": LitMaterial,
}


def create_material_from_type(type_name: str) -> Material:
    """Return a new material of the named kind; unknown names give a plain ``Material``."""
    return _MATERIAL_TYPES.get(type_name, Material)()
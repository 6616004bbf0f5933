"""Loading every kind of asset from a scene's asset description into the shared registries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from . import assets
from .material import Material, create_material_from_type
from .mesh import Mesh
from .mesh_utils import load_obj

__all__ = [
    "ShaderSpec",
    "deserialize_shaders",
    "deserialize_textures",
    "deserialize_samplers",
    "deserialize_meshes",
    "deserialize_materials",
    "deserialize_all_assets",
    "clear_all_assets",
]


@dataclass(frozen=True)
class ShaderSpec:
    """A shader program described by its vertex and fragment shader files."""

    vertex_shader: str = ""
    fragment_shader: str = ""


def _object(description: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(description, Mapping):
        raise TypeError(f"{what} description must be an object, got {description!r}")
    return description


def _path(description: Any, what: str) -> str:
    if not isinstance(description, str):
        raise TypeError(f"{what} description must be a path string, got {description!r}")
    return description


def _shader(description: Any) -> ShaderSpec:
    desc = _object(description, "shader")
    return ShaderSpec(
        vertex_shader=str(desc.get("vs", "")),
        fragment_shader=str(desc.get("fs", "")),
    )


def _sampler(description: Any) -> dict[str, Any]:
    return dict(_object(description, "sampler"))


def _mesh(description: Any) -> Mesh:
    return load_obj(_path(description, "mesh"))


def _material(description: Any) -> Material:
    desc = _object(description, "material")
    material = create_material_from_type(desc.get("type", ""))
    material.deserialize(desc)
    return material


def deserialize_shaders(data: Any) -> None:
    """Load ``{name: {"vs": path, "fs": path}}`` into the shader registry."""
    assets.shaders.deserialize(data, _shader)


def deserialize_textures(data: Any) -> None:
    """Load ``{name: image_path}`` into the texture registry."""
    assets.textures.deserialize(data, lambda description: _path(description, "texture"))


def deserialize_samplers(data: Any) -> None:
    """Load ``{name: {parameter: value}}`` into the sampler registry."""
    assets.samplers.deserialize(data, _sampler)


def deserialize_meshes(data: Any) -> None:
    """Load ``{name: obj_path}`` into the mesh registry, reading each OBJ file."""
    assets.meshes.deserialize(data, _mesh)


def deserialize_materials(data: Any) -> None:
    """Load ``{name: material_description}`` into the material registry.

    Materials refer to shaders, textures and samplers by name, so those must be loaded first.
    """
    assets.materials.deserialize(data, _material)


def deserialize_all_assets(asset_data: Any) -> None:
    """Load shaders, textures, samplers, meshes and then materials from one object."""
    if not isinstance(asset_data, Mapping):
        return
    loaders = (
        ("shaders", deserialize_shaders),
        ("textures", deserialize_textures),
        ("samplers", deserialize_samplers),
        ("meshes", deserialize_meshes),
        ("materials", deserialize_materials),
    )
    for key, loader in loaders:
        if key in asset_data:
            loader(asset_data[key])


def clear_all_assets() -> None:
    """Empty every asset registry."""
    for registry in (
        assets.shaders,
        assets.textures,
        assets.samplers,
        assets.meshes,
        assets.materials,
    ):
        registry.clear()
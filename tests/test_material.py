import numpy as np
import pytest

from sceneforge import assets
from sceneforge.material import (
    LitMaterial,
    Material,
    TexturedMaterial,
    TintedMaterial,
    create_material_from_type,
)
from sceneforge.pipeline_state import ComparisonFunction


@pytest.fixture(autouse=True)
def registries():
    loaders = [assets.shaders, assets.textures, assets.samplers, assets.meshes, assets.materials]
    for loader in loaders:
        loader.clear()
    assets.shaders["basic"] = "basic-shader"
    assets.textures["wood"] = "wood-texture"
    assets.textures["albedo"] = "albedo-texture"
    assets.textures["black"] = "black-texture"
    assets.samplers["linear"] = "linear-sampler"
    yield
    for loader in loaders:
        loader.clear()


@pytest.mark.parametrize(
    "name, cls",
    [("tinted", TintedMaterial), ("textured", TexturedMaterial), ("lit", LitMaterial)],
)
def test_create_known_types(name, cls):
    assert type(create_material_from_type(name)) is cls


@pytest.mark.parametrize("name", ["", "unknown", "Tinted"])
def test_create_unknown_type_gives_base_material(name):
    material = create_material_from_type(name)
    material.deserialize({"shader": "basic", "transparent": True, "tint": [0, 0, 0, 0]})
    assert type(material).__name__ == "Material"
    assert material.shader == "basic-shader"
    assert material.transparent is True
    assert not isinstance(material, TintedMaterial)


def test_material_deserialize():
    material = Material()
    material.deserialize(
        {
            "shader": "basic",
            "transparent": True,
            "pipelineState": {"depthTesting": {"enabled": True, "function": "GL_LESS"}},
        }
    )
    assert material.shader == "basic-shader"
    assert material.transparent is True
    assert material.pipeline_state.depth_testing.enabled is True
    assert material.pipeline_state.depth_testing.function is ComparisonFunction.GL_LESS


def test_material_transparent_defaults_false():
    material = Material(transparent=True)
    material.deserialize({"shader": "basic"})
    assert material.transparent is False


def test_material_unknown_shader_is_none():
    material = Material()
    material.deserialize({"shader": "missing"})
    assert material.shader is None


def test_material_without_shader_raises():
    with pytest.raises(KeyError):
        Material().deserialize({"transparent": True})


def test_material_non_string_shader_raises():
    with pytest.raises(TypeError):
        Material().deserialize({"shader": 3})


def test_non_object_is_ignored():
    material = TexturedMaterial()
    material.deserialize([1, 2, 3])
    assert material.shader is None
    assert material.texture is None
    assert np.array_equal(material.tint, np.ones(4))


def test_tinted_reads_tint():
    material = TintedMaterial()
    material.deserialize({"shader": "basic", "tint": [0.5, 0.25, 1.0, 0.75]})
    assert np.allclose(material.tint, [0.5, 0.25, 1.0, 0.75])
    assert material.shader == "basic-shader"


def test_tinted_default_tint_is_white():
    material = TintedMaterial(tint=np.zeros(4))
    material.deserialize({"shader": "basic"})
    assert np.array_equal(material.tint, np.ones(4))


def test_tinted_bad_tint_raises():
    with pytest.raises(ValueError):
        TintedMaterial().deserialize({"shader": "basic", "tint": [1, 1, 1]})


def test_textured_reads_assets():
    material = TexturedMaterial()
    material.deserialize(
        {"shader": "basic", "texture": "wood", "sampler": "linear", "alphaThreshold": 0.5}
    )
    assert material.texture == "wood-texture"
    assert material.sampler == "linear-sampler"
    assert material.alpha_threshold == 0.5
    assert material.depth_texture is None


def test_textured_missing_assets_are_none():
    material = TexturedMaterial()
    material.deserialize({"shader": "basic"})
    assert material.texture is None
    assert material.sampler is None
    assert material.alpha_threshold == 0.0


def test_lit_default_map_names():
    material = LitMaterial()
    material.deserialize({"shader": "basic", "sampler": "linear"})
    assert material.sampler == "linear-sampler"
    assert material.albedo_map == "albedo-texture"
    assert material.specular_map == "black-texture"
    assert material.emissive_map == "black-texture"
    assert material.roughness_map == "black-texture"
    assert material.ambient_occlusion_map == "black-texture"


def test_lit_explicit_maps():
    material = LitMaterial()
    material.deserialize({"shader": "basic", "albedo": "wood", "specular": "nothing"})
    assert material.albedo_map == "wood-texture"
    assert material.specular_map is None
    assert isinstance(material, TintedMaterial)
    assert np.array_equal(material.tint, np.ones(4))
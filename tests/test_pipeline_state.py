import numpy as np
import pytest

from sceneforge.pipeline_state import (
    BlendEquation,
    BlendFunction,
    ComparisonFunction,
    Face,
    FrontFace,
    PipelineState,
)


def test_deserialized_enums_carry_gl_values():
    state = PipelineState()
    state.deserialize(
        {
            "faceCulling": {"culledFace": "GL_BACK"},
            "depthTesting": {"function": "GL_LEQUAL"},
            "blending": {"destinationFactor": "GL_ONE_MINUS_SRC_ALPHA"},
        }
    )
    assert int(state.face_culling.culled_face) == 0x0405
    assert int(state.depth_testing.function) == 0x0203
    assert int(state.blending.destination_factor) == 0x0303


def test_defaults():
    state = PipelineState()
    assert state.face_culling.enabled is False
    assert state.face_culling.culled_face is Face.GL_BACK
    assert state.face_culling.front_face is FrontFace.GL_CCW
    assert state.depth_testing.function is ComparisonFunction.GL_LEQUAL
    assert state.blending.equation is BlendEquation.GL_FUNC_ADD
    assert state.blending.source_factor is BlendFunction.GL_SRC_ALPHA
    assert state.blending.destination_factor is BlendFunction.GL_ONE_MINUS_SRC_ALPHA
    assert np.array_equal(state.blending.constant_color, np.zeros(4))
    assert state.color_mask == (True, True, True, True)
    assert state.depth_mask is True


def test_deserialize_full():
    state = PipelineState()
    state.deserialize(
        {
            "faceCulling": {"enabled": True, "culledFace": "GL_FRONT", "frontFace": "GL_CW"},
            "depthTesting": {"enabled": True, "function": "GL_LESS"},
            "blending": {
                "enabled": True,
                "equation": "GL_FUNC_SUBTRACT",
                "sourceFactor": "GL_ONE",
                "destinationFactor": "GL_ZERO",
                "constantColor": [0.1, 0.2, 0.3, 0.4],
            },
            "colorMask": [True, False, True, False],
            "depthMask": False,
        }
    )
    assert state.face_culling.enabled is True
    assert state.face_culling.culled_face is Face.GL_FRONT
    assert state.face_culling.front_face is FrontFace.GL_CW
    assert state.depth_testing.enabled is True
    assert state.depth_testing.function is ComparisonFunction.GL_LESS
    assert state.blending.enabled is True
    assert state.blending.equation is BlendEquation.GL_FUNC_SUBTRACT
    assert state.blending.source_factor is BlendFunction.GL_ONE
    assert state.blending.destination_factor is BlendFunction.GL_ZERO
    assert np.allclose(state.blending.constant_color, [0.1, 0.2, 0.3, 0.4])
    assert state.color_mask == (True, False, True, False)
    assert state.depth_mask is False


def test_unknown_enum_names_keep_current_values():
    state = PipelineState()
    state.deserialize({"faceCulling": {"culledFace": "SIDEWAYS"}, "depthTesting": {"function": ""}})
    assert state.face_culling.culled_face is Face.GL_BACK
    assert state.depth_testing.function is ComparisonFunction.GL_LEQUAL


def test_missing_keys_keep_current_values():
    state = PipelineState()
    state.deserialize({"depthTesting": {"enabled": True}})
    state.deserialize({"depthTesting": {"function": "GL_ALWAYS"}})
    assert state.depth_testing.enabled is True
    assert state.depth_testing.function is ComparisonFunction.GL_ALWAYS


@pytest.mark.parametrize("data", [None, [], "state", 7])
def test_non_object_is_ignored(data):
    state = PipelineState()
    state.deserialize(data)
    assert state.depth_mask is True
    assert state.face_culling.enabled is False


def test_non_object_sections_are_ignored():
    state = PipelineState()
    state.deserialize({"faceCulling": True, "blending": [1, 2]})
    assert state.face_culling.enabled is False
    assert state.blending.enabled is False


def test_bad_color_mask_length_raises():
    with pytest.raises(ValueError):
        PipelineState().deserialize({"colorMask": [True, False]})


def test_bad_constant_color_raises():
    with pytest.raises(ValueError):
        PipelineState().deserialize({"blending": {"constantColor": [1, 2, 3]}})


def test_non_string_enum_name_raises():
    with pytest.raises(TypeError):
        PipelineState().deserialize({"faceCulling": {"culledFace": 5}})
"""Render pipeline options a material needs: face culling, depth testing, blending and masks."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

import numpy as np

__all__ = [
    "Face",
    "FrontFace",
    "ComparisonFunction",
    "BlendEquation",
    "BlendFunction",
    "FaceCulling",
    "DepthTesting",
    "Blending",
    "PipelineState",
]

E = TypeVar("E", bound=enum.Enum)


class Face(enum.IntEnum):
    """Which polygon faces are culled."""

    GL_FRONT = 0x0404
    GL_BACK = 0x0405
    GL_FRONT_AND_BACK = 0x0408


class FrontFace(enum.IntEnum):
    """Winding order that marks a polygon as front-facing."""

    GL_CW = 0x0900
    GL_CCW = 0x0901


class ComparisonFunction(enum.IntEnum):
    """Depth comparison functions."""

    GL_NEVER = 0x0200
    GL_LESS = 0x0201
    GL_EQUAL = 0x0202
    GL_LEQUAL = 0x0203
    GL_GREATER = 0x0204
    GL_NOTEQUAL = 0x0205
    GL_GEQUAL = 0x0206
    GL_ALWAYS = 0x0207


class BlendEquation(enum.IntEnum):
    """How source and destination colours are combined."""

    GL_FUNC_ADD = 0x8006
    GL_MIN = 0x8007
    GL_MAX = 0x8008
    GL_FUNC_SUBTRACT = 0x800A
    GL_FUNC_REVERSE_SUBTRACT = 0x800B


class BlendFunction(enum.IntEnum):
    """Blend factors for source and destination."""

    GL_ZERO = 0x0000
    GL_ONE = 0x0001
    GL_SRC_COLOR = 0x0300
    GL_ONE_MINUS_SRC_COLOR = 0x0301
    GL_SRC_ALPHA = 0x0302
    GL_ONE_MINUS_SRC_ALPHA = 0x0303
    GL_DST_ALPHA = 0x0304
    GL_ONE_MINUS_DST_ALPHA = 0x0305
    GL_DST_COLOR = 0x0306
    GL_ONE_MINUS_DST_COLOR = 0x0307
    GL_SRC_ALPHA_SATURATE = 0x0308
    GL_CONSTANT_COLOR = 0x8001
    GL_ONE_MINUS_CONSTANT_COLOR = 0x8002
    GL_CONSTANT_ALPHA = 0x8003
    GL_ONE_MINUS_CONSTANT_ALPHA = 0x8004


def _lookup(enum_cls: type[E], config: Mapping[str, Any], key: str, current: E) -> E:
    name = config.get(key, "")
    if not isinstance(name, str):
        raise TypeError(f"{key!r} must be a string, got {name!r}")
    return enum_cls.__members__.get(name, current)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    return value if isinstance(value, Mapping) else None


@dataclass
class FaceCulling:
    """Whether faces are culled, which ones, and which winding is the front."""

    enabled: bool = False
    culled_face: Face = Face.GL_BACK
    front_face: FrontFace = FrontFace.GL_CCW


@dataclass
class DepthTesting:
    """Whether depth testing is on and the comparison it uses."""

    enabled: bool = False
    function: ComparisonFunction = ComparisonFunction.GL_LEQUAL


@dataclass(eq=False)
class Blending:
    """Whether blending is on, its equation, factors and constant colour."""

    enabled: bool = False
    equation: BlendEquation = BlendEquation.GL_FUNC_ADD
    source_factor: BlendFunction = BlendFunction.GL_SRC_ALPHA
    destination_factor: BlendFunction = BlendFunction.GL_ONE_MINUS_SRC_ALPHA
    constant_color: np.ndarray = field(default_factory=lambda: np.zeros(4))


@dataclass(eq=False)
class PipelineState:
    """All fixed-function options used when drawing with a material."""

    face_culling: FaceCulling = field(default_factory=FaceCulling)
    depth_testing: DepthTesting = field(default_factory=DepthTesting)
    blending: Blending = field(default_factory=Blending)
    color_mask: tuple[bool, bool, bool, bool] = (True, True, True, True)
    depth_mask: bool = True

    def deserialize(self, data: Any) -> None:
        """Read options from an object; missing or unknown values keep their current setting."""
        if not isinstance(data, Mapping):
            return

        config = _section(data, "faceCulling")
        if config is not None:
            culling = self.face_culling
            culling.enabled = bool(config.get("enabled", culling.enabled))
            culling.culled_face = _lookup(Face, config, "culledFace", culling.culled_face)
            culling.front_face = _lookup(FrontFace, config, "frontFace", culling.front_face)

        config = _section(data, "depthTesting")
        if config is not None:
            depth = self.depth_testing
            depth.enabled = bool(config.get("enabled", depth.enabled))
            depth.function = _lookup(ComparisonFunction, config, "function", depth.function)

        config = _section(data, "blending")
        if config is not None:
            blend = self.blending
            blend.enabled = bool(config.get("enabled", blend.enabled))
            blend.equation = _lookup(BlendEquation, config, "equation", blend.equation)
            blend.source_factor = _lookup(
                BlendFunction, config, "sourceFactor", blend.source_factor
            )
            blend.destination_factor = _lookup(
                BlendFunction, config, "destinationFactor", blend.destination_factor
            )
            color = np.asarray(config.get("constantColor", blend.constant_color), dtype=float)
            if color.shape != (4,):
                raise ValueError("constantColor must have 4 components")
            blend.constant_color = color

        mask = tuple(bool(v) for v in data.get("colorMask", self.color_mask))
        if len(mask) != 4:
            raise ValueError("colorMask must have 4 components")
        self.color_mask = mask  # type: ignore[assignment]
        self.depth_mask = bool(data.get("depthMask", self.depth_mask))
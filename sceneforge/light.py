"""Light components: directional, point, spot and sky lights, and hue-cycling lights."""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

import numpy as np

from .ecs import Component, register_component

__all__ = [
    "LightType",
    "Attenuation",
    "SpotAngle",
    "SkyLight",
    "LightComponent",
    "LightSpectrumComponent",
]

_HUE_AXIS = np.array([0.57735, 0.57735, 0.57735])


def _vec3(value: Any) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected 3 components, got {value!r}")
    return array


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, Mapping):
        raise TypeError(f"{key!r} must be an object")
    return value


class LightType(enum.Enum):
    """The kind of light source."""

    DIRECTIONAL = "directional"
    POINT = "point"
    SPOT = "spot"
    SKY = "sky"


@dataclass
class Attenuation:
    """Distance falloff coefficients for point and spot lights."""

    quadratic: float = 0.0
    linear: float = 0.0
    constant: float = 1.0


@dataclass
class SpotAngle:
    """Inner and outer cone angles of a spot light, in radians."""

    inner: float = 0.0
    outer: float = 0.0


@dataclass(eq=False)
class SkyLight:
    """Ambient colours from above, around and below."""

    top_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    middle_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    bottom_color: np.ndarray = field(default_factory=lambda: np.zeros(3))


@register_component
@dataclass(eq=False)
class LightComponent(Component):
    """A light source placed at its owning entity."""

    type_id: ClassVar[str] = "Light"

    type_light: LightType = LightType.DIRECTIONAL
    enabled: bool = True
    color: np.ndarray = field(default_factory=lambda: np.ones(3))
    direction: np.ndarray = field(default_factory=lambda: np.zeros(3))
    attenuation: Attenuation = field(default_factory=Attenuation)
    spot_angle: SpotAngle = field(default_factory=SpotAngle)
    sky_light: SkyLight = field(default_factory=SkyLight)

    def deserialize(self, data: Any) -> None:
        """Read the light; raises ``ValueError`` for an unknown ``typeLight``."""
        if not isinstance(data, Mapping):
            return
        kind = data.get("typeLight", "")
        self.enabled = bool(data.get("enabled", self.enabled))
        self.color = _vec3(data.get("color", self.color))
        if kind == "directional":
            self.type_light = LightType.DIRECTIONAL
            self.direction = _vec3(data.get("direction", self.direction))
        elif kind == "point":
            self.type_light = LightType.POINT
            self.attenuation = self._read_attenuation(data)
        elif kind == "spot":
            self.type_light = LightType.SPOT
            self.direction = _vec3(data.get("direction", self.direction))
            angles = _section(data, "spot_angle")
            self.spot_angle = SpotAngle(
                inner=math.radians(float(angles.get("inner", 0.0))),
                outer=math.radians(float(angles.get("outer", 0.0))),
            )
            self.attenuation = self._read_attenuation(data)
        elif kind == "sky":
            self.type_light = LightType.SKY
            sky = _section(data, "sky_light")
            self.sky_light = SkyLight(
                top_color=_vec3(sky.get("top_color", (0.0, 0.0, 0.0))),
                middle_color=_vec3(sky.get("middle_color", (0.0, 0.0, 0.0))),
                bottom_color=_vec3(sky.get("bottom_color", (0.0, 0.0, 0.0))),
            )
        else:
            raise ValueError(f"Unknown light type {kind}")

    @staticmethod
    def _read_attenuation(data: Mapping[str, Any]) -> Attenuation:
        values = _section(data, "attenuation")
        return Attenuation(
            quadratic=float(values.get("quadratic", 0.0)),
            linear=float(values.get("linear", 0.0)),
            constant=float(values.get("constant", 1.0)),
        )


@register_component
@dataclass(eq=False)
class LightSpectrumComponent(LightComponent):
    """A light whose colour cycles through hues over time."""

    type_id: ClassVar[str] = "LightSpectrum"

    def color_at(self, time: float) -> np.ndarray:
        """Return the light colour rotated in hue by ``time`` radians."""
        color = np.asarray(self.color, dtype=float)
        cos_angle = math.cos(time)
        return (
            color * cos_angle
            + np.cross(_HUE_AXIS, color) * math.sin(time)
            + _HUE_AXIS * np.dot(_HUE_AXIS, color) * (1.0 - cos_angle)
        )
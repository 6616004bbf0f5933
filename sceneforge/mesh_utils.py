"""Building meshes: loading Wavefront OBJ files and generating spheres."""

from __future__ import annotations

import logging
import math
import os
from typing import Sequence, Union

from .mesh import Mesh, Vertex

__all__ = ["MeshLoadError", "load_obj", "sphere"]

_log = logging.getLogger(__name__)

_WHITE = (1.0, 1.0, 1.0)


class MeshLoadError(Exception):
    """Raised when a mesh file cannot be read or parsed."""


def _resolve(index_text: str, count: int, what: str, where: str) -> int:
    try:
        index = int(index_text)
    except ValueError:
        raise MeshLoadError(f"{where}: invalid {what} index {index_text!r}") from None
    if index == 0:
        raise MeshLoadError(f"{where}: {what} index must not be zero")
    resolved = index - 1 if index > 0 else count + index
    if not 0 <= resolved < count:
        raise MeshLoadError(f"{where}: {what} index {index} out of range")
    return resolved


def _numbers(parts: Sequence[str], where: str) -> list[float]:
    try:
        return [float(p) for p in parts]
    except ValueError:
        raise MeshLoadError(f"{where}: invalid number in {' '.join(parts)!r}") from None


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value * 255)))


def load_obj(filename: Union[str, os.PathLike]) -> Mesh:
    """Load an ``.obj`` file into a mesh, merging identical vertices.

    Polygons are split into triangle fans. Missing normals and texture coordinates
    default to zero; vertices without a colour are white.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as error:
        raise MeshLoadError(f'Failed to load obj file "{filename}": {error}') from error

    positions: list[tuple[float, float, float]] = []
    colors: list[tuple[float, float, float]] = []
    normals: list[tuple[float, float, float]] = []
    texcoords: list[tuple[float, float]] = []

    vertices: list[Vertex] = []
    elements: list[int] = []
    vertex_map: dict[Vertex, int] = {}

    def corner(token: str, where: str) -> Vertex:
        fields = token.split("/")
        if len(fields) > 3 or not fields[0]:
            raise MeshLoadError(f"{where}: invalid face vertex {token!r}")
        v = _resolve(fields[0], len(positions), "vertex", where)
        tex_coord = (0.0, 0.0)
        normal = (0.0, 0.0, 0.0)
        if len(fields) > 1 and fields[1]:
            tex_coord = texcoords[_resolve(fields[1], len(texcoords), "texcoord", where)]
        if len(fields) > 2 and fields[2]:
            normal = normals[_resolve(fields[2], len(normals), "normal", where)]
        r, g, b = colors[v]
        return Vertex(
            position=positions[v],
            color=(_to_byte(r), _to_byte(g), _to_byte(b), 255),
            tex_coord=tex_coord,
            normal=normal,
        )

    def emit(vertex: Vertex) -> None:
        index = vertex_map.get(vertex)
        if index is None:
            index = len(vertices)
            vertex_map[vertex] = index
            vertices.append(vertex)
        elements.append(index)

    for number, raw in enumerate(lines, start=1):
        where = f"{filename}:{number}"
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *parts = line.split()
        if keyword == "v":
            values = _numbers(parts, where)
            if len(values) < 3:
                raise MeshLoadError(f"{where}: vertex needs at least 3 coordinates")
            positions.append((values[0], values[1], values[2]))
            colors.append(tuple(values[3:6]) if len(values) >= 6 else _WHITE)  # type: ignore[arg-type]
        elif keyword == "vn":
            values = _numbers(parts, where)
            if len(values) < 3:
                raise MeshLoadError(f"{where}: normal needs 3 components")
            normals.append((values[0], values[1], values[2]))
        elif keyword == "vt":
            values = _numbers(parts, where)
            if not values:
                raise MeshLoadError(f"{where}: texture coordinate needs a component")
            texcoords.append((values[0], values[1] if len(values) > 1 else 0.0))
        elif keyword == "f":
            if len(parts) < 3:
                raise MeshLoadError(f"{where}: face needs at least 3 vertices")
            corners = [corner(token, where) for token in parts]
            for i in range(1, len(corners) - 1):
                emit(corners[0])
                emit(corners[i])
                emit(corners[i + 1])
        elif keyword not in {"o", "g", "s", "usemtl", "mtllib", "l", "p"}:
            _log.warning('Ignoring unknown statement %r while loading obj file "%s"', keyword, filename)

    return Mesh(vertices, elements)


def sphere(segments: Sequence[int]) -> Mesh:
    """Create a unit sphere with triangles wound counter-clockwise seen from outside.

    ``segments`` is ``(longitude, latitude)`` divisions.
    """
    seg_x, seg_y = (int(s) for s in segments)
    if seg_x < 1 or seg_y < 1:
        raise ValueError("sphere needs at least one segment in each direction")

    vertices: list[Vertex] = []
    for lat in range(seg_y + 1):
        v = lat / seg_y
        pitch = v * math.pi - math.pi / 2
        cos_p, sin_p = math.cos(pitch), math.sin(pitch)
        for lng in range(seg_x + 1):
            u = lng / seg_x
            yaw = u * 2 * math.pi
            normal = (cos_p * math.cos(yaw), sin_p, cos_p * math.sin(yaw))
            vertices.append(
                Vertex(position=normal, color=(255, 255, 255, 255), tex_coord=(u, v), normal=normal)
            )

    elements: list[int] = []
    for lat in range(1, seg_y + 1):
        start = lat * (seg_x + 1)
        for lng in range(1, seg_x + 1):
            prev = lng - 1
            elements.extend(
                (
                    lng + start,
                    lng + start - seg_x - 1,
                    prev + start - seg_x - 1,
                    prev + start - seg_x - 1,
                    prev + start,
                    lng + start,
                )
            )
    return Mesh(vertices, elements)
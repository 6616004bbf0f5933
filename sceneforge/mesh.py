"""Vertex data and triangle meshes built from vertices and element indices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

__all__ = ["Vertex", "Mesh"]


def _floats(values: Iterable[float], size: int, what: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{what} must have {size} components, got {len(result)}")
    return result


def _color(values: Iterable[int]) -> tuple[int, int, int, int]:
    result = tuple(int(v) for v in values)
    if len(result) != 4:
        raise ValueError(f"color must have 4 components, got {len(result)}")
    if any(not 0 <= c <= 255 for c in result):
        raise ValueError(f"color components must be within 0..255, got {result}")
    return result  # type: ignore[return-value]


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, RGBA8 colour, texture coordinates and normal.

    Vertices are immutable and hashable so they can be used to merge duplicates.
    """

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    color: tuple[int, int, int, int] = (255, 255, 255, 255)
    tex_coord: tuple[float, float] = (0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3, "position"))
        object.__setattr__(self, "color", _color(self.color))
        object.__setattr__(self, "tex_coord", _floats(self.tex_coord, 2, "tex_coord"))
        object.__setattr__(self, "normal", _floats(self.normal, 3, "normal"))


@dataclass(frozen=True, eq=False)
class Mesh:
    """An indexed triangle mesh: every three elements name the vertices of one triangle."""

    vertices: tuple[Vertex, ...] = field(default_factory=tuple)
    elements: tuple[int, ...] = field(default_factory=tuple)

    def __init__(self, vertices: Sequence[Vertex], elements: Sequence[int]) -> None:
        object.__setattr__(self, "vertices", tuple(vertices))
        object.__setattr__(self, "elements", tuple(int(e) for e in elements))

    @property
    def element_count(self) -> int:
        """Number of element indices drawn."""
        return len(self.elements)

    def triangles(self) -> Iterator[tuple[Vertex, Vertex, Vertex]]:
        """Yield each complete triangle as a triple of vertices."""
        indices = iter(self.elements)
        for a, b, c in zip(indices, indices, indices):
            yield self.vertices[a], self.vertices[b], self.vertices[c]

    def __repr__(self) -> str:
        return f"Mesh(vertices={len(self.vertices)}, elements={self.element_count})"
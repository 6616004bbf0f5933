"""Named asset registries that shaders, textures, samplers, meshes and materials are loaded into."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

__all__ = [
    "AssetLoader",
    "shaders",
    "textures",
    "samplers",
    "meshes",
    "materials",
]

T = TypeVar("T")


class AssetLoader(Generic[T]):
    """Holds loaded assets of one kind, each identified by a unique name.

    The loader owns its assets: ``clear`` releases them, closing any asset
    that has a ``close()`` method.
    """

    def __init__(self, kind: str = "asset") -> None:
        self.kind = kind
        self._assets: dict[str, T] = {}

    def get(self, name: str) -> Optional[T]:
        """Return the asset called ``name``, or ``None`` if there is none."""
        return self._assets.get(name)

    def deserialize(self, data: Any, factory: Callable[[Any], T]) -> None:
        """Load ``{name: description}`` pairs, building each asset with ``factory``.

        Anything other than an object is ignored. A name already in use is replaced.
        """
        if not isinstance(data, Mapping):
            return
        for name, description in data.items():
            self._assets[name] = factory(description)

    def clear(self) -> None:
        """Release every asset and empty the registry."""
        for asset in self._assets.values():
            close = getattr(asset, "close", None)
            if callable(close):
                close()
        self._assets.clear()

    def __setitem__(self, name: str, asset: T) -> None:
        self._assets[name] = asset

    def __contains__(self, name: object) -> bool:
        return name in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._assets))

    def __repr__(self) -> str:
        return f"AssetLoader(kind={self.kind!r}, assets={len(self._assets)})"


shaders: AssetLoader[Any] = AssetLoader("shader")
textures: AssetLoader[Any] = AssetLoader("texture")
samplers: AssetLoader[Any] = AssetLoader("sampler")
meshes: AssetLoader[Any] = AssetLoader("mesh")
materials: AssetLoader[Any] = AssetLoader("material")
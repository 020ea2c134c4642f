"""A name-keyed registry of shaders."""

from __future__ import annotations

from typing import Callable, Protocol


class _Shader(Protocol):
    @property
    def name(self) -> str: ...


ShaderLoader = Callable[[str], _Shader]


class ShaderLibrary:
    """Holds shaders by name; ``loader`` builds a shader from a file path."""

    def __init__(self, loader: ShaderLoader | None = None) -> None:
        self._loader = loader
        self._shaders: dict[str, _Shader] = {}

    def add(self, shader: _Shader, name: str | None = None) -> None:
        """Register a shader under ``name``, or its own name when not given."""
        key = shader.name if name is None else name
        if key in self._shaders:
            raise ValueError(f"Shader already exists: {key!r}")
        self._shaders[key] = shader

    def load(self, fpath: str, name: str | None = None) -> _Shader:
        """Build a shader from ``fpath``, register it and return it."""
        if self._loader is None:
            raise RuntimeError("no shader loader configured")
        shader = self._loader(str(fpath))
        self.add(shader, name)
        return shader

    def get(self, name: str) -> _Shader:
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"Shader not found: {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._shaders
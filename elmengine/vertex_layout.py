"""Vertex attribute types and the layout of interleaved vertex buffers."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Iterable, Iterator


class ShaderDataType(enum.Enum):
    """Types a vertex attribute can have."""

    NONE = 0
    BOOL = enum.auto()
    INT = enum.auto()
    INT2 = enum.auto()
    INT3 = enum.auto()
    INT4 = enum.auto()
    FLOAT = enum.auto()
    FLOAT2 = enum.auto()
    FLOAT3 = enum.auto()
    FLOAT4 = enum.auto()
    MAT3 = enum.auto()
    MAT4 = enum.auto()


_SIZES = {
    ShaderDataType.BOOL: 1,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
}

_COMPONENTS = {
    ShaderDataType.BOOL: 1,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3,  # 3 * float3
    ShaderDataType.MAT4: 4,  # 4 * float4
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size of one attribute of this type in bytes."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


@dataclass
class VertexBufferElement:
    """One named attribute within a vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.size = shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        """Number of components the attribute is split into."""
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"unknown shader data type: {self.data_type!r}") from None


class VertexBufferLayout:
    """Ordered attributes with their byte offsets and the total stride."""

    def __init__(self, elements: Iterable[VertexBufferElement] = ()) -> None:
        self._elements: list[VertexBufferElement] = []
        offset = 0
        for element in elements:
            placed = copy.copy(element)
            placed.offset = offset
            offset += placed.size
            self._elements.append(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        """Bytes from one vertex to the next."""
        return self._stride

    @property
    def elements(self) -> list[VertexBufferElement]:
        return list(self._elements)

    def __iter__(self) -> Iterator[VertexBufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)
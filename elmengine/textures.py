"""Texture and frame-buffer descriptions, and sprites cut from atlases."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Protocol


class TextureWrap(enum.Enum):
    CLAMP = enum.auto()
    CLAMP_TO_EDGE = enum.auto()
    REPEAT = enum.auto()


class TextureFilter(enum.Enum):
    NEAREST = enum.auto()
    LINEAR = enum.auto()


@dataclass(frozen=True)
class Texture2DSpecification:
    """Sampling settings for a 2D texture."""

    wrap_s: TextureWrap = TextureWrap.REPEAT
    wrap_t: TextureWrap = TextureWrap.REPEAT
    min_filter: TextureFilter = TextureFilter.LINEAR
    mag_filter: TextureFilter = TextureFilter.NEAREST


class _SizedTexture(Protocol):
    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


UV = tuple[float, float]


@dataclass(frozen=True)
class SubTexture2D:
    """A region of a texture given by four corner UVs, counter-clockwise from bottom-left."""

    texture: _SizedTexture
    uvs: tuple[UV, UV, UV, UV]

    @staticmethod
    def from_atlas(
        texture: _SizedTexture, sprite_width: int, sprite_height: int, x: int, y: int
    ) -> SubTexture2D:
        """The sprite at column ``x`` and row ``y``, rows counted from the top."""
        texture_width = float(texture.width)
        texture_height = float(texture.height)
        if texture_width == 0.0 or texture_height == 0.0:
            raise ValueError("texture must have non-zero size")

        fx = sprite_width / texture_width
        fy = sprite_height / texture_height

        left = fx * x
        right = fx * x + fx
        bottom = 1.0 - (fy * y + fy)
        top = 1.0 - fy * y

        return SubTexture2D(
            texture,
            ((left, bottom), (right, bottom), (right, top), (left, top)),
        )


class FrameBufferTextureFormat(enum.Enum):
    NONE = 0
    RGBA8 = enum.auto()
    RED_INT = enum.auto()
    DEPTH24STENCIL8 = enum.auto()


@dataclass(frozen=True)
class FrameBufferTextureSpecification:
    """One attachment of a frame buffer."""

    texture_format: FrameBufferTextureFormat = FrameBufferTextureFormat.NONE
    wrap_r: TextureWrap = TextureWrap.CLAMP_TO_EDGE
    wrap_s: TextureWrap = TextureWrap.CLAMP_TO_EDGE
    wrap_t: TextureWrap = TextureWrap.CLAMP_TO_EDGE
    min_filter: TextureFilter = TextureFilter.LINEAR
    mag_filter: TextureFilter = TextureFilter.NEAREST


@dataclass
class FrameBufferSpecification:
    """Size, attachments and sample count of a frame buffer.

    Attachments may be given as formats or as full specifications.
    """

    width: int
    height: int
    attachments: list[FrameBufferTextureSpecification] = field(default_factory=list)
    samples: int = 1

    def __post_init__(self) -> None:
        self.attachments = [_as_attachment(item) for item in self.attachments]


def _as_attachment(
    item: FrameBufferTextureSpecification | FrameBufferTextureFormat,
) -> FrameBufferTextureSpecification:
    if isinstance(item, FrameBufferTextureSpecification):
        return item
    if isinstance(item, FrameBufferTextureFormat):
        return FrameBufferTextureSpecification(item)
    raise TypeError(f"not a frame buffer attachment: {item!r}")


def _attachments(items: Iterable[object]) -> list[FrameBufferTextureSpecification]:
    return [_as_attachment(item) for item in items]  # type: ignore[arg-type]
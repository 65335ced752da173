"""Draw primitives: textured or colored rectangles and quads, and text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from pobruntime.geometry import Point, Quad, Rect, Vector


@dataclass(frozen=True)
class RectTexture:
    """A texture region mapped onto a rectangle."""

    texture_id: int
    uv: Rect
    layer_idx: int = 0


@dataclass(frozen=True)
class QuadTexture:
    """A texture region mapped onto a quad."""

    texture_id: int
    uv: Quad
    layer_idx: int = 0


@dataclass(frozen=True)
class RectPrimitive:
    """An axis-aligned rectangle, plain or textured."""

    rect: Rect
    color: Any
    texture: Optional[RectTexture] = None

    def translate(self, by: Vector) -> RectPrimitive:
        """This rectangle moved by a vector."""
        return replace(self, rect=self.rect.translate(by))


@dataclass(frozen=True)
class QuadPrimitive:
    """A four-cornered shape, plain or textured."""

    quad: Quad
    color: Any
    texture: Optional[QuadTexture] = None

    def translate(self, by: Vector) -> QuadPrimitive:
        """This quad moved by a vector."""
        return replace(self, quad=self.quad.translate(by))


@dataclass(frozen=True)
class TextPrimitive:
    """A laid-out text placed at a position.

    ``layout`` has ``rows``, each with ``glyphs`` carrying ``rect``, ``uv`` and ``color``.
    """

    pos: Point
    layout: Any

    def translate(self, by: Vector) -> TextPrimitive:
        """This text moved by a vector."""
        return replace(self, pos=self.pos.translate(by))


DrawPrimitive = Union[RectPrimitive, QuadPrimitive, TextPrimitive]


@dataclass(frozen=True)
class ClippedPrimitive:
    """A primitive of which only the part inside ``clip_rect`` is drawn."""

    clip_rect: Rect
    primitive: DrawPrimitive


def texture_id(primitive: DrawPrimitive) -> int:
    """The texture a primitive is drawn with; untextured shapes and text use texture 0."""
    if isinstance(primitive, (RectPrimitive, QuadPrimitive)) and primitive.texture is not None:
        return primitive.texture.texture_id
    return 0
"""Turning draw primitives into meshes, batching where clip and texture match."""

from __future__ import annotations

from typing import Iterable

from pobruntime.geometry import Point, Quad, Rect, Size
from pobruntime.mesh import ClippedMesh, Mesh
from pobruntime.primitives import (
    ClippedPrimitive,
    QuadPrimitive,
    RectPrimitive,
    TextPrimitive,
    texture_id,
)


def _normalize(uv: Rect, atlas_size: Size) -> Rect:
    """Pixel coordinates in the font atlas as fractions of its size."""
    width, height = atlas_size.width, atlas_size.height
    return Rect(
        Point(uv.min.x / width, uv.min.y / height),
        Point(uv.max.x / width, uv.max.y / height),
    )


def _rect_as_quad(rect: Rect) -> Quad:
    return Quad(rect.top_left(), rect.top_right(), rect.bottom_right(), rect.bottom_left())


class Tessellator:
    """Converts clipped primitives into clipped meshes.

    Untextured shapes sample ``white_uv`` of texture 0.
    """

    def __init__(self, white_uv: Rect | None = None) -> None:
        self.white_uv = white_uv if white_uv is not None else Rect.zero()

    def convert_clipped_primitives(
        self, clipped_primitives: Iterable[ClippedPrimitive], font_atlas_size: Size
    ) -> list[ClippedMesh]:
        meshes: list[ClippedMesh] = []
        for clipped_primitive in clipped_primitives:
            self.convert_clipped_primitive(clipped_primitive, font_atlas_size, meshes)
        return meshes

    def convert_clipped_primitive(
        self,
        clipped_primitive: ClippedPrimitive,
        font_atlas_size: Size,
        out_clipped_meshes: list[ClippedMesh],
    ) -> None:
        """Append a primitive to the last mesh if clip and texture match, else to a new one."""
        clip_rect = clipped_primitive.clip_rect
        primitive = clipped_primitive.primitive
        if clip_rect.is_empty():
            return

        last = out_clipped_meshes[-1] if out_clipped_meshes else None
        if (
            last is None
            or last.clip_rect != clip_rect
            or last.mesh.texture_id != texture_id(primitive)
        ):
            last = ClippedMesh(clip_rect, Mesh())
            out_clipped_meshes.append(last)

        if isinstance(primitive, RectPrimitive):
            self._convert_rect(primitive, last.mesh)
        elif isinstance(primitive, QuadPrimitive):
            self._convert_quad(primitive, last.mesh)
        elif isinstance(primitive, TextPrimitive):
            self._convert_text(primitive, font_atlas_size, last.mesh)
        else:
            raise TypeError(f"Unsupported primitive: {primitive!r}")

        # A new mesh stays empty when text adds no glyphs; empty meshes are not drawn.
        if last.mesh.is_empty():
            out_clipped_meshes.pop()

    def _convert_rect(self, primitive: RectPrimitive, out: Mesh) -> None:
        tex = primitive.texture
        if tex is None:
            tex_id, uv, layer_idx = 0, self.white_uv, 0
        else:
            tex_id, uv, layer_idx = tex.texture_id, tex.uv, tex.layer_idx
        out.add_rect(primitive.rect, uv, primitive.color, layer_idx)
        out.texture_id = tex_id

    def _convert_quad(self, primitive: QuadPrimitive, out: Mesh) -> None:
        tex = primitive.texture
        if tex is None:
            tex_id, uv, layer_idx = 0, _rect_as_quad(self.white_uv), 0
        else:
            tex_id, uv, layer_idx = tex.texture_id, tex.uv, tex.layer_idx
        out.add_quad(primitive.quad, uv, primitive.color, layer_idx)
        out.texture_id = tex_id

    def _convert_text(self, primitive: TextPrimitive, font_atlas_size: Size, out: Mesh) -> None:
        offset = primitive.pos.to_vector()
        for row in primitive.layout.rows:
            for glyph in row.glyphs:
                out.add_rect(
                    glyph.rect.translate(offset),
                    _normalize(glyph.uv, font_atlas_size),
                    glyph.color,
                    0,
                )
"""Triangle meshes built from rectangles and quads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pobruntime.geometry import Point, Quad, Rect

#: Two triangles covering four vertices given in the order
#: top-left, top-right, bottom-right, bottom-left.
_QUAD_INDICES = (0, 1, 3, 1, 2, 3)


@dataclass(frozen=True)
class Vertex:
    """One vertex: position, texture coordinate, color and texture layer."""

    pos: Point
    uv: Point
    color: Any
    layer_idx: int = 0


@dataclass
class Mesh:
    """Vertices and triangle indices drawn with one texture."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    texture_id: int = 0

    def _add_corners(self, positions, uvs, color: Any, layer_idx: int) -> None:
        base = len(self.vertices)
        self.indices.extend(base + i for i in _QUAD_INDICES)
        self.vertices.extend(
            Vertex(pos, uv, color, layer_idx) for pos, uv in zip(positions, uvs)
        )

    def add_rect(self, rect: Rect, uv: Rect, color: Any, layer_idx: int) -> None:
        """Append a rectangle as two triangles."""
        self._add_corners(
            (rect.top_left(), rect.top_right(), rect.bottom_right(), rect.bottom_left()),
            (uv.top_left(), uv.top_right(), uv.bottom_right(), uv.bottom_left()),
            color,
            layer_idx,
        )

    def add_quad(self, quad: Quad, uv: Quad, color: Any, layer_idx: int) -> None:
        """Append a quad as two triangles."""
        self._add_corners(tuple(quad), tuple(uv), color, layer_idx)

    def is_empty(self) -> bool:
        return not self.vertices and not self.indices


@dataclass
class ClippedMesh:
    """A mesh of which only the part inside ``clip_rect`` is drawn."""

    clip_rect: Rect
    mesh: Mesh = field(default_factory=Mesh)
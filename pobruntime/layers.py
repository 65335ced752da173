"""Draw primitives grouped by layer, in viewport-relative coordinates."""

from __future__ import annotations

from typing import Iterator

from pobruntime.geometry import Rect
from pobruntime.primitives import (
    ClippedPrimitive,
    QuadPrimitive,
    RectPrimitive,
    TextPrimitive,
)


class Layers:
    """Holds the draw primitives of each layer.

    A primitive goes into the current layer. Its position is relative to the
    current viewport; it is moved to screen position and clipped by the viewport.
    """

    def __init__(self) -> None:
        self._layers: dict[tuple[int, int], list[ClippedPrimitive]] = {}
        self._current_layer = (0, 0)
        self.viewport = Rect.zero()

    @property
    def current_layer(self) -> tuple[int, int]:
        return self._current_layer

    def reset(self) -> None:
        self._current_layer = (0, 0)
        self._layers.clear()

    def consume_layers(self) -> Iterator[ClippedPrimitive]:
        """Take all primitives and yield them in drawing order."""
        layers, self._layers = self._layers, {}
        for key in sorted(layers):
            yield from layers[key]

    def set_viewport(self, viewport: Rect) -> None:
        self.viewport = viewport

    def set_draw_layer(self, layer: int, sublayer: int) -> None:
        self._current_layer = (layer, sublayer)

    def set_draw_sublayer(self, sublayer: int) -> None:
        self.set_draw_layer(self._current_layer[0], sublayer)

    def add_rect(self, rect: RectPrimitive) -> None:
        self._push(rect.translate(self.viewport.min.to_vector()))

    def add_quad(self, quad: QuadPrimitive) -> None:
        self._push(quad.translate(self.viewport.min.to_vector()))

    def add_text(self, text: TextPrimitive, is_absolute_position: bool) -> None:
        if not is_absolute_position:
            text = text.translate(self.viewport.min.to_vector())
        self._push(text)

    def _push(self, primitive) -> None:
        self._layers.setdefault(self._current_layer, []).append(
            ClippedPrimitive(self.viewport, primitive)
        )
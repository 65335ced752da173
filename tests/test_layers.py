from dataclasses import dataclass

from pobruntime.geometry import Point, Quad, Rect, Size
from pobruntime.layers import Layers
from pobruntime.primitives import QuadPrimitive, RectPrimitive, TextPrimitive

COLOR = (9, 9, 9, 9)
VIEWPORT = Rect(Point(10.0, 20.0), Point(110.0, 220.0))


@dataclass(frozen=True)
class _Layout:
    rows: tuple = ()


def _rect(n: float) -> RectPrimitive:
    return RectPrimitive(Rect(Point(n, n), Point(n + 1.0, n + 1.0)), COLOR)


def test_rect_is_translated_and_clipped_by_viewport():
    layers = Layers()
    layers.set_viewport(VIEWPORT)
    prim = _rect(1.0)
    layers.add_rect(prim)
    (out,) = list(layers.consume_layers())
    assert out.clip_rect == VIEWPORT
    assert out.primitive.rect == prim.rect.translate(VIEWPORT.min.to_vector())


def test_quad_is_translated():
    layers = Layers()
    layers.set_viewport(VIEWPORT)
    prim = QuadPrimitive(Quad.from_size(Size(4.0, 4.0)), COLOR)
    layers.add_quad(prim)
    (out,) = list(layers.consume_layers())
    assert out.primitive.quad == prim.quad.translate(VIEWPORT.min.to_vector())


def test_text_absolute_position_not_translated():
    layers = Layers()
    layers.set_viewport(VIEWPORT)
    text = TextPrimitive(Point(3.0, 4.0), _Layout())
    layers.add_text(text, True)
    layers.add_text(text, False)
    absolute, relative = list(layers.consume_layers())
    assert absolute.primitive.pos == text.pos
    assert relative.primitive.pos == text.pos.translate(VIEWPORT.min.to_vector())


def test_layers_are_consumed_in_order():
    layers = Layers()
    a, b, c, d = _rect(1.0), _rect(2.0), _rect(3.0), _rect(4.0)
    layers.set_draw_layer(1, 0)
    layers.add_rect(a)
    layers.set_draw_layer(0, 5)
    layers.add_rect(b)
    layers.set_draw_layer(0, 0)
    layers.add_rect(c)
    layers.set_draw_layer(-1, 3)
    layers.add_rect(d)
    got = [p.primitive for p in layers.consume_layers()]
    assert got == [d, c, b, a]


def test_insertion_order_kept_within_layer():
    layers = Layers()
    prims = [_rect(float(n)) for n in range(5)]
    for prim in prims:
        layers.add_rect(prim)
    assert [p.primitive for p in layers.consume_layers()] == prims


def test_set_draw_sublayer_keeps_layer():
    layers = Layers()
    layers.set_draw_layer(4, 1)
    layers.set_draw_sublayer(7)
    assert layers.current_layer == (4, 7)


def test_consume_empties_layers():
    layers = Layers()
    layers.add_rect(_rect(1.0))
    assert len(list(layers.consume_layers())) == 1
    assert list(layers.consume_layers()) == []


def test_reset_clears_and_resets_layer():
    layers = Layers()
    layers.set_draw_layer(3, 3)
    layers.add_rect(_rect(1.0))
    layers.reset()
    assert layers.current_layer == (0, 0)
    assert list(layers.consume_layers()) == []
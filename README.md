# pobruntime

Building blocks for a Path of Building runtime, in pure Python with no
dependencies beyond the standard library.

## Modules

- `pobruntime.geometry`: immutable `Point`, `Vector`, `Size`, `Rect` (an
  axis-aligned box given by `min` and `max` corners) and `Quad` (four points
  in drawing order). `Rect` has corner accessors (`top_left()`,
  `top_right()`, `bottom_left()`, `bottom_right()`), `is_empty()` and
  `translate()`; `Quad` has `zero()`, `from_size()` and `translate()`.
- `pobruntime.input`: `InputState` tracks held keys (`KeyCode`), held mouse
  buttons (`MouseButton`), the modifier flags (`Modifiers`) and the cursor
  position. `is_double_click(button, now=None)` reports whether a press
  comes less than 0.4 seconds after the previous press of the same button.
  `str_as_keycode`, `keycode_as_str`, `str_as_mousebutton` and
  `mousebutton_as_str` convert between codes and the names scripts use
  (`"RETURN"`, `"PAGEUP"`, `"LEFTBUTTON"`, `"MOUSE4"` and so on). Name
  lookups ignore case; letters convert back to lower case, and a few keys
  with no name of their own map onto existing ones (`EQUAL` gives `"+"`,
  `NUMPAD_ENTER` gives `"RETURN"`).
- `pobruntime.primitives`: frozen draw primitives `RectPrimitive`,
  `QuadPrimitive` (each optionally textured with `RectTexture` or
  `QuadTexture`) and `TextPrimitive`, plus `ClippedPrimitive` and
  `texture_id(primitive)`. Untextured shapes and text use texture `0`.
- `pobruntime.layers`: `Layers` collects primitives per `(layer, sublayer)`.
  Positions are taken relative to the current viewport, which also becomes
  the clip rectangle. Text can opt out of the offset with
  `is_absolute_position=True`. `consume_layers()` empties the collection and
  yields its primitives ordered by `(layer, sublayer)`, in insertion order
  within each one.
- `pobruntime.mesh`: `Vertex`, `Mesh` (vertices, triangle indices and a
  texture id; `add_rect` and `add_quad` append two triangles each) and
  `ClippedMesh`.
- `pobruntime.tessellator`: `Tessellator` turns clipped primitives into
  clipped meshes. Consecutive primitives with the same clip rectangle and
  texture share a mesh; primitives with an empty clip rectangle are dropped,
  and so are meshes left without vertices. Untextured shapes sample the
  `white_uv` rectangle given to the constructor (all zeros by default). Glyph
  texture coordinates are divided by the font atlas size.

A `TextPrimitive`'s `layout` can be any object with a `rows` attribute. Each
row has `glyphs`, and each glyph has `rect` (a `Rect`), `uv` (a `Rect` in
atlas pixels) and `color`. Colors are passed through as given.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from pobruntime.geometry import Point, Rect, Size
from pobruntime.layers import Layers
from pobruntime.primitives import RectPrimitive
from pobruntime.tessellator import Tessellator

layers = Layers()
layers.set_viewport(Rect(Point(10.0, 10.0), Point(210.0, 110.0)))
layers.set_draw_layer(1, 0)
layers.add_rect(RectPrimitive(Rect(Point(0.0, 0.0), Point(50.0, 20.0)), (255, 255, 255, 255)))

meshes = Tessellator().convert_clipped_primitives(layers.consume_layers(), Size(1024.0, 1024.0))
for clipped in meshes:
    print(clipped.clip_rect, len(clipped.mesh.vertices), len(clipped.mesh.indices))
# one mesh: 4 vertices, 6 indices; the rectangle now spans (10, 10) to (60, 30)
```

## What this package does not do

It opens no window, reads no real input devices and draws nothing on
screen. `InputState` is fed by the caller, and the meshes from `Tessellator`
are plain data for a renderer to upload. There is no text layout, no image
loading or texture storage, no script host and no command-line program.

## Running the tests

```
pytest
```
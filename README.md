# surfcad

Small, dependency-free building blocks for an interactive surface modeller.

## Modules

- `surfcad.intersect_math`: geometry helpers.
  - `BoundingBox(lo, hi)` and the overlap tests `aabb` (3D) and `aabb2`
    (XY plane). Boxes that only touch do not overlap.
  - `bezier_basis(t)` returns the four cubic Bernstein values and their
    derivatives at `t`.
  - `uv_dist(uvuv, du, dv)` estimates the 3D distance between two parameter
    pairs on a surface from its partial derivatives.
  - Unit conversions `u_to_w`, `w_to_u`, `u_to_mm`, `mm_to_u`, `uw_to_uh`.
- `surfcad.rectpack`: a skyline rectangle packer for texture atlases.
  `RectPacker(width, height, num_nodes)` packs `Rect` objects in place with
  `pack(rects)`, which returns whether all of them fit. Rectangles that do not
  fit get `was_packed = False` and coordinates `MAX_VAL`. Choose the placement
  rule with `set_heuristic(Heuristic.BOTTOM_LEFT)` (the default) or
  `Heuristic.BEST_FIT`; `set_allow_out_of_mem(True)` turns off width
  quantization.
- `surfcad.textedit`: `TextEditState` keeps the cursor, selection, insert mode
  and undo history of one text field. It handles `click`, `drag`, `cut`,
  `paste` and `key`, where a key is a character (a one-character string or a
  character code) or a `Key` value, optionally combined with `Key.SHIFT` to
  extend the selection.
- `surfcad.textedit_layout`: `StringBuffer`, a monospaced editable text that
  wraps only at newlines, and the layout queries `locate_coord`,
  `find_charpos`, `move_word_left` and `move_word_right`. Any object with
  `len()`, `layout_row`, `get_width`, `get_char`, `delete_chars` and
  `insert_chars` can stand in for `StringBuffer`.
- `surfcad.textedit_undo`: `UndoState`, a bounded undo/redo history (99
  records and 999 stored characters by default) that drops its oldest entries
  when full.

## Installation

```
pip install surfcad
```

## Examples

Packing rectangles:

```python
from surfcad.rectpack import Heuristic, Rect, RectPacker

packer = RectPacker(64, 64, 64)
packer.set_heuristic(Heuristic.BEST_FIT)
rects = [Rect(id=0, w=10, h=20), Rect(id=1, w=30, h=5)]
all_packed = packer.pack(rects)
for r in rects:
    print(r.id, r.x, r.y, r.was_packed)
```

Editing text:

```python
from surfcad.textedit import Key, TextEditState
from surfcad.textedit_layout import StringBuffer

text = StringBuffer("hello", char_width=8.0, line_height=16.0)
state = TextEditState(single_line=True)
state.key(text, Key.TEXTEND)
state.paste(text, " world")
print(text.text)          # hello world
state.key(text, Key.LEFT | Key.SHIFT)
state.key(text, Key.BACKSPACE)
print(text.text)          # hello worl
state.key(text, Key.UNDO)
state.key(text, Key.UNDO)
print(text.text)          # hello
```

Overlap tests and Bezier basis:

```python
from surfcad.intersect_math import BoundingBox, aabb, bezier_basis

a = BoundingBox(lo=(0, 0, 0), hi=(1, 1, 1))
b = BoundingBox(lo=(0.5, 0.5, 0.5), hi=(2, 2, 2))
print(aabb(a, b))           # True
values, derivatives = bezier_basis(0.5)
```

## What the package does not do

It has no renderer, window or scene, and it does not trace intersection curves
between surfaces: `surfcad.intersect_math` only offers the bounding-box tests,
basis functions and distance estimate that such a tracer would build on. The
text-edit engine draws nothing; it only updates the text and the editing state.

## Running the tests

```
pip install -e ".[test]"
pytest
```
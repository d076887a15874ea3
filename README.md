# spritesmith

A small library for building pixel sprites in code. A sprite holds a
timeline of animation frames. Each frame holds a stack of layers, and each
layer is an RGBA pixel image. Strokes on the canvas can be undone and redone.
Whole projects are saved to and loaded from JSON files. The `.ssp` extension
is customary, but any path works.

The library needs only the standard library.

## Installation

```
pip install .
```

## Modules

- `spritesmith.layer`: `Layer` is one RGBA image of fixed size.
  - `draw_pixel(color, x, y)` sets one pixel. Points outside the image are
    ignored.
  - `pixel(x, y)` reads one pixel and raises `IndexError` outside the image.
  - `mirror()` flips the image horizontally.
  - `rotate()` turns the image 90 degrees clockwise and swaps width and
    height.
  - `to_json()` and `from_json()` / `set_from_json()` convert a layer to
    JSON data and back.
  - `copy()` returns an independent copy.
  - Two layers compare equal when their size and pixels match.

  The module also has `normalize_color`, which accepts `(r, g, b)` or
  `(r, g, b, a)` with values 0 to 255 and raises `ValueError` otherwise, and
  the `TRANSPARENT` colour.
- `spritesmith.layermodel`: `LayerModel` holds the layers of one frame.
  Index 0 is the bottom layer.
  - A new model starts with one blank layer, which is the active layer.
    `draw_pixel` draws on the active layer.
  - `add_layer()` appends a blank layer. `duplicate_layer(layer)` appends a
    copy of `layer`.
  - `remove_layer(index)` ignores out-of-range indices. `get_layer(index)`
    raises `IndexError` for them.
  - `top_layer()` returns the highest layer.
  - `mirror_layer()` and `rotate_layer()` act on the bottom layer and call
    the callbacks registered with `on_layer_changed`.
  - The model supports `len()` and iteration.
- `spritesmith.frame`: `Frame(width, height, layer_count=1)` is one
  animation frame built on a `LayerModel`, which is stored as `frame.layers`.
- `spritesmith.framemodel`: `FrameModel` is the timeline.
  - `add_frame()`, `duplicate_frame(frame)`, `remove_frame(index)` and
    `get_frame(index)` manage the frames. `get_frame` raises `IndexError`
    for an index out of range.
  - `send_next_frame()` steps through the frames in a loop, passes each one
    to the callbacks registered with `on_next_frame`, and returns it.
  - `update_framerate(value)` stores `value` as `interval` and
    `int(value / 100)` as `framerate`.
  - `from_json` logs a warning and returns an empty timeline when the
    `frames` array is missing.
- `spritesmith.commands`: `UndoStack` and the commands it holds.
  - `push` applies the command it is given and drops any commands that were
    undone.
  - `undo`, `redo`, `can_undo` and `can_redo` move through the history.
  - The commands are `AddFrameCommand`, `AddLayerCommand` and
    `LayerEditCommand`. The last one restores a layer from JSON taken before
    and after an edit.
- `spritesmith.sprite`: `Sprite(canvas_size, layer_count=0)` is a square
  sprite whose timeline is `sprite.frames`.
  - `save(path)` writes the timeline as indented JSON.
  - `load(path)` replaces the timeline. It raises `ValueError` when the
    file is not a JSON object, and an `OSError` when the file cannot be
    read.
  - `frame_preview(index)` returns a copy of a frame's top layer.
  - Callbacks registered with `on_display_frame` receive a copy of the top
    layer of each frame that the timeline sends with `send_next_frame`.
- `spritesmith.editor`: `SpriteEditor` is a canvas grid with no GUI.
  - `press(x, y)` starts a stroke. `move(x, y)` continues it. `release()`
    records the stroke as one undoable `LayerEditCommand`.
  - `undo()` and `redo()` move through those strokes.
  - `mirror_layer()` flips the bottom layer of the current frame.
  - `contents()` returns the colours shown on the grid, row by row.
  - Callbacks registered with `on_pixel_clicked` receive each drawn cell.
  - The default colour is opaque red.
- `spritesmith.tool`: `Tool(editor, layers)` follows the cells drawn on an
  editor.
  - `set_color` selects a colour for both the tool and the editor.
  - `on_edit()` draws that colour at the last drawn cell.
  - `set_erase()` switches to transparent and erases that cell.

## Example

```python
from spritesmith.sprite import Sprite
from spritesmith.editor import SpriteEditor

sprite = Sprite(16, 1)
editor = SpriteEditor(sprite)
editor.set_color((0, 128, 255))      # alpha defaults to 255

editor.press(3, 4)
editor.move(4, 4)
editor.release()

editor.undo()
editor.redo()

sprite.save("drawing.ssp")

restored = Sprite(16, 1)
restored.load("drawing.ssp")
assert restored.frames.get_frame(0).top_layer().pixel(4, 4) == (0, 128, 255, 255)
```

## File format

A project file is a JSON object with `width`, `height` and a `frames` array.
Each frame has `width`, `height` and a `layers` array. Each layer has
`width`, `height`, `active` and a `pixels` array. The pixels are listed row
by row, each as `{"r": ..., "g": ..., "b": ..., "a": ...}`.

## What it does not do

This is a model library only. It has no window, no colour picker, no
canvas-size dialog and no command-line program. Nothing plays the animation
on a timer: call `FrameModel.send_next_frame()` yourself, at the pace given
by `interval`. It does not export images in formats such as PNG; projects
are stored only as JSON.

## Tests

```
pip install .[test]
pytest
```
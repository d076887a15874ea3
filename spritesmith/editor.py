"""The pixel canvas: drawing, mirroring and undoable edits on a sprite."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .commands import LayerEditCommand, UndoStack
from .frame import Frame
from .layer import Color, normalize_color
from .sprite import Sprite

DEFAULT_COLOR: Color = (255, 0, 0, 255)


class SpriteEditor:
    """A grid of cells showing one frame of a sprite, edited cell by cell."""

    def __init__(self, sprite: Sprite) -> None:
        self.color: Color = DEFAULT_COLOR
        self.current_frame = 0
        self.undo_stack = UndoStack()
        self._unedited_json: dict[str, Any] | None = None
        self._pressed = False
        self._pixel_listeners: list[Callable[[int, int], None]] = []
        self.set_sprite(sprite)

    def set_sprite(self, sprite: Sprite) -> None:
        """Edit ``sprite``; the grid takes the sprite's canvas size."""
        self.sprite = sprite
        self.rows = sprite.canvas_dimension
        self.columns = sprite.canvas_dimension

    def set_color(self, color: Iterable[int]) -> None:
        """Set the colour used for drawing."""
        self.color = normalize_color(color)

    def _frame(self) -> Frame:
        return self.sprite.frames.get_frame(self.current_frame)

    def press(self, x: int, y: int) -> None:
        """Start a stroke at cell ``(x, y)``."""
        self._frame()
        self._unedited_json = self._frame().top_layer().to_json()
        self._pressed = True
        self._change_cell_color(x, y)

    def move(self, x: int, y: int) -> None:
        """Continue a stroke at cell ``(x, y)``; ignored when no stroke is active."""
        if self._pressed:
            self._change_cell_color(x, y)

    def release(self) -> None:
        """End a stroke and record it as one undoable edit."""
        self._pressed = False
        layer = self._frame().top_layer()
        edited = layer.to_json()
        unedited = self._unedited_json if self._unedited_json is not None else edited
        self.undo_stack.push(LayerEditCommand(layer, unedited, edited))
        self._unedited_json = edited

    def undo(self) -> None:
        """Undo the last stroke."""
        self.undo_stack.undo()

    def redo(self) -> None:
        """Redo the last undone stroke."""
        self.undo_stack.redo()

    def mirror_layer(self) -> None:
        """Flip the bottom layer of the current frame horizontally."""
        self._frame().layers.get_layer(0).mirror()

    def contents(self) -> list[list[Color]]:
        """Return the colours shown on the grid, row by row."""
        layer = self._frame().top_layer()
        return [
            [layer.pixel(x, y) for x in range(layer.width)]
            for y in range(layer.height)
        ]

    def on_pixel_clicked(self, callback: Callable[[int, int], None]) -> None:
        """Register ``callback`` to receive the cell of each drawn pixel."""
        self._pixel_listeners.append(callback)

    def _change_cell_color(self, x: int, y: int) -> None:
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            return
        self._frame().layers.draw_pixel(self.color, x, y)
        for callback in list(self._pixel_listeners):
            callback(x, y)
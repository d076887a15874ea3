"""Drawing tools acting on a layer stack at the last clicked cell."""

from __future__ import annotations

from typing import Iterable

from .editor import SpriteEditor
from .layer import TRANSPARENT, Color, normalize_color
from .layermodel import LayerModel


class Tool:
    """Applies the selected colour, or erases, at the last clicked cell."""

    def __init__(self, editor: SpriteEditor, layers: LayerModel) -> None:
        self.editor = editor
        self.layers = layers
        self.color: Color | None = None
        self.x: int | None = None
        self.y: int | None = None
        editor.on_pixel_clicked(self.set_pixel_pos)

    def on_edit(self) -> None:
        """Draw the current colour at the current cell, once both are known."""
        if self.color is None or self.x is None or self.y is None:
            return
        self.layers.draw_pixel(self.color, self.x, self.y)

    def set_pixel_pos(self, x: int, y: int) -> None:
        """Remember the cell the next edit applies to."""
        self.x = x
        self.y = y

    def set_color(self, color: Iterable[int]) -> None:
        """Select a drawing colour for the tool and the editor."""
        self.color = normalize_color(color)
        self.editor.set_color(self.color)

    def set_erase(self) -> None:
        """Switch to transparent drawing and erase the current cell."""
        self.color = TRANSPARENT
        self.editor.set_color(TRANSPARENT)
        self.on_edit()
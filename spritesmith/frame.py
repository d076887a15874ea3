"""One frame of a sprite animation: a stack of layers."""

from __future__ import annotations

from typing import Any, Mapping

from .layer import Layer
from .layermodel import LayerModel


class Frame:
    """A single animation frame holding its layers in a :class:`LayerModel`."""

    def __init__(self, width: int, height: int, layer_count: int = 1) -> None:
        self.frame_index = 0
        self.layers = LayerModel(width, height)
        for _ in range(layer_count - 1):
            self.layers.add_layer()

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Frame":
        """Rebuild a frame from the JSON produced by :meth:`to_json`."""
        frame = cls.__new__(cls)
        frame.frame_index = 0
        frame.layers = LayerModel.from_json(data)
        return frame

    def copy(self) -> "Frame":
        """Return an independent copy of this frame and its layers."""
        clone = Frame.__new__(Frame)
        clone.frame_index = self.frame_index
        clone.layers = self.layers.copy()
        return clone

    def add_layer(self, layer: Layer | None = None) -> None:
        """Append a blank layer, or a copy of ``layer`` when one is given."""
        if layer is None:
            self.layers.add_layer()
        else:
            self.layers.duplicate_layer(layer)

    def remove_layer(self, index: int) -> None:
        """Remove the layer at ``index``; out-of-range indices are ignored."""
        self.layers.remove_layer(index)

    def top_layer(self) -> Layer:
        """Return the layer that is shown, the highest one."""
        return self.layers.top_layer()

    def to_json(self) -> dict[str, Any]:
        """Return the frame's layers as JSON data."""
        return self.layers.to_json()

    def __repr__(self) -> str:
        return f"Frame(layers={len(self.layers)})"
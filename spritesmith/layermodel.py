"""An ordered stack of layers belonging to one frame."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping

from .layer import Layer, _to_int


class LayerModel:
    """Holds the layers of a frame; index 0 is the bottom layer."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self.layers: list[Layer] = [Layer(width, height)]
        self.active_layer: Layer | None = self.layers[-1]
        self._listeners: list[Callable[[], None]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "LayerModel":
        """Rebuild a model from its JSON form; the last layer becomes active."""
        model = cls.__new__(cls)
        model._width = _to_int(data.get("width"))
        model._height = _to_int(data.get("height"))
        model.layers = []
        model.active_layer = None
        model._listeners = []
        entries = data.get("layers")
        if isinstance(entries, list):
            for entry in entries:
                if isinstance(entry, Mapping):
                    model.layers.append(Layer.from_json(entry))
                    model.active_layer = model.layers[-1]
        return model

    def copy(self) -> "LayerModel":
        """Return a deep copy whose active layer is the bottom layer."""
        clone = LayerModel.__new__(LayerModel)
        clone._width = self._width
        clone._height = self._height
        clone.layers = [layer.copy() for layer in self.layers]
        clone.active_layer = clone.layers[0] if clone.layers else None
        clone._listeners = []
        return clone

    def add_layer(self) -> None:
        """Append a blank layer."""
        self.layers.append(Layer(self._width, self._height))

    def duplicate_layer(self, layer: Layer) -> None:
        """Append a copy of ``layer``."""
        self.layers.append(layer.copy())

    def remove_layer(self, index: int) -> None:
        """Remove the layer at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.layers):
            del self.layers[index]

    def get_layer(self, index: int) -> Layer:
        """Return the layer at ``index``."""
        if not 0 <= index < len(self.layers):
            raise IndexError("Layer index out of range")
        return self.layers[index]

    def set_active_layer(self, index: int) -> None:
        """Mark the layer at ``index`` active; out-of-range indices are ignored."""
        if 0 <= index < len(self.layers):
            self.layers[index].active = True

    def top_layer(self) -> Layer:
        """Return the highest layer."""
        return self.get_layer(len(self.layers) - 1)

    def draw_pixel(self, color: Iterable[int], x: int, y: int) -> None:
        """Draw a pixel on the active layer."""
        if self.active_layer is None:
            raise LookupError("no active layer")
        self.active_layer.draw_pixel(color, x, y)

    def to_json(self) -> dict[str, Any]:
        """Return the model's size and all layers as JSON data."""
        return {
            "width": self._width,
            "height": self._height,
            "layers": [layer.to_json() for layer in self.layers],
        }

    def mirror_layer(self) -> None:
        """Mirror the bottom layer and notify listeners."""
        self.get_layer(0).mirror()
        self._notify()

    def rotate_layer(self) -> None:
        """Rotate the bottom layer and notify listeners."""
        self.get_layer(0).rotate()
        self._notify()

    def on_layer_changed(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` to run after a layer is mirrored or rotated."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    def __len__(self) -> int:
        return len(self.layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self.layers)
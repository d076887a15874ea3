"""A single raster layer of a sprite frame."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

Color = tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)


def _to_int(value: Any) -> int:
    """Read a JSON value as an integer, treating anything else as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def normalize_color(color: Iterable[int]) -> Color:
    """Return ``color`` as an RGBA tuple, adding full alpha to RGB input."""
    components = tuple(color)
    if len(components) == 3:
        components = (*components, 255)
    if len(components) != 4:
        raise ValueError(f"colour needs 3 or 4 components, got {len(components)}")
    for component in components:
        if isinstance(component, bool) or not isinstance(component, int):
            raise ValueError(f"colour component {component!r} is not an integer")
        if not 0 <= component <= 255:
            raise ValueError(f"colour component {component} is outside 0..255")
    return components  # type: ignore[return-value]


class Layer:
    """An RGBA image of fixed size that the user draws on."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("layer dimensions must not be negative")
        self.width = width
        self.height = height
        self.active = False
        self._pixels: list[list[Color]] = [
            [TRANSPARENT] * width for _ in range(height)
        ]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Layer":
        """Build a layer from its JSON form; missing pixels stay transparent."""
        width = max(_to_int(data.get("width")), 0)
        height = max(_to_int(data.get("height")), 0)
        layer = cls(width, height)
        pixels = data.get("pixels")
        if not isinstance(pixels, list):
            pixels = []
        coords = ((x, y) for y in range(height) for x in range(width))
        for (x, y), entry in zip(coords, pixels):
            if not isinstance(entry, Mapping):
                entry = {}
            rgba = tuple(_to_int(entry.get(key)) for key in ("r", "g", "b", "a"))
            try:
                layer._pixels[y][x] = normalize_color(rgba)
            except ValueError:
                continue
        return layer

    def copy(self) -> "Layer":
        """Return an independent copy of this layer's size and image."""
        clone = Layer(0, 0)
        clone.width = self.width
        clone.height = self.height
        clone._pixels = [list(row) for row in self._pixels]
        return clone

    def pixel(self, x: int, y: int) -> Color:
        """Return the colour at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the layer")
        return self._pixels[y][x]

    def draw_pixel(self, color: Iterable[int], x: int, y: int) -> None:
        """Set the colour at ``(x, y)``; points outside the layer are ignored."""
        rgba = normalize_color(color)
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y][x] = rgba

    def mirror(self) -> None:
        """Flip the image horizontally."""
        self._pixels = [row[::-1] for row in self._pixels]

    def rotate(self) -> None:
        """Rotate the image 90 degrees clockwise."""
        old = self._pixels
        old_height = self.height
        self._pixels = [
            [old[old_height - 1 - c][r] for c in range(old_height)]
            for r in range(self.width)
        ]
        self.width, self.height = old_height, self.width

    def to_json(self) -> dict[str, Any]:
        """Return the layer's size, active flag and row-major RGBA pixels."""
        return {
            "width": self.width,
            "height": self.height,
            "active": self.active,
            "pixels": [
                {"r": r, "g": g, "b": b, "a": a}
                for row in self._pixels
                for (r, g, b, a) in row
            ],
        }

    def set_from_json(self, data: Mapping[str, Any]) -> None:
        """Replace size and image with those stored in ``data``."""
        loaded = Layer.from_json(data)
        self.width = loaded.width
        self.height = loaded.height
        self._pixels = loaded._pixels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._pixels == other._pixels
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Layer(width={self.width}, height={self.height}, active={self.active})"
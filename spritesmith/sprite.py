"""The sprite: a timeline of frames with saving, loading and previews."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Callable

from .frame import Frame
from .framemodel import FrameModel
from .layer import Layer

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike


class Sprite:
    """A square sprite whose frames each hold a stack of layers."""

    def __init__(self, canvas_size: int, layer_count: int = 0) -> None:
        self.canvas_dimension = canvas_size
        self.layer_count = layer_count
        self.current_frame = 0
        self._display_listeners: list[Callable[[Layer], None]] = []
        self.frames = FrameModel(canvas_size, canvas_size)
        self.frames.on_next_frame(self.send_frame)

    def save(self, path: PathLike) -> None:
        """Write the sprite's frames to ``path`` as a JSON document."""
        document = json.dumps(self.frames.to_json(), indent=4)
        Path(path).write_text(document + "\n", encoding="utf-8")
        logger.debug("Saved file: %s", path)

    def load(self, path: PathLike) -> None:
        """Replace the sprite's frames with those stored in ``path``."""
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as error:
            raise ValueError(f"invalid JSON file: {path}") from error
        if not isinstance(data, dict):
            raise ValueError(f"invalid JSON file: {path}")
        self.frames = FrameModel.from_json(data)
        self.frames.on_next_frame(self.send_frame)

    def frame_preview(self, index: int) -> Layer:
        """Return a copy of the image shown for the frame at ``index``."""
        return self.frames.get_frame(index).top_layer().copy()

    def send_frame(self, frame: Frame) -> Layer:
        """Pass a copy of ``frame``'s shown image to display listeners and return it."""
        image = frame.top_layer().copy()
        for callback in list(self._display_listeners):
            callback(image)
        return image

    def update_framerate(self, framerate: int) -> None:
        """Change the framerate of the animation preview."""
        self.frames.update_framerate(framerate)

    def on_display_frame(self, callback: Callable[[Layer], None]) -> None:
        """Register ``callback`` to receive each image of the animation preview."""
        self._display_listeners.append(callback)

    def __repr__(self) -> str:
        return f"Sprite(canvas_size={self.canvas_dimension}, frames={len(self.frames)})"
"""The animation timeline: an ordered list of frames."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Mapping

from .frame import Frame
from .layer import _to_int

logger = logging.getLogger(__name__)

DEFAULT_FRAMERATE = 1000


class FrameModel:
    """Holds the frames of a sprite and cycles through them for previews."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.frames: list[Frame] = [Frame(width, height)]
        self.framerate = DEFAULT_FRAMERATE
        self.interval = DEFAULT_FRAMERATE
        self.next_frame_index = 0
        self._listeners: list[Callable[[Frame], None]] = []

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "FrameModel":
        """Rebuild a timeline from JSON; invalid data yields an empty timeline."""
        model = cls.__new__(cls)
        model.width = 0
        model.height = 0
        model.frames = []
        model.framerate = DEFAULT_FRAMERATE
        model.interval = DEFAULT_FRAMERATE
        model.next_frame_index = 0
        model._listeners = []
        entries = data.get("frames")
        if isinstance(entries, list):
            model.width = _to_int(data.get("width"))
            model.height = _to_int(data.get("height"))
            model.frames = [
                Frame.from_json(entry) for entry in entries if isinstance(entry, Mapping)
            ]
        else:
            logger.warning("Invalid or missing 'frames' array in JSON")
        return model

    def add_frame(self) -> None:
        """Append a blank frame of the timeline's size."""
        self.frames.append(Frame(self.width, self.height))

    def duplicate_frame(self, frame: Frame) -> None:
        """Append a copy of ``frame``."""
        self.frames.append(frame.copy())

    def remove_frame(self, index: int) -> None:
        """Remove the frame at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.frames):
            del self.frames[index]

    def get_frame(self, index: int) -> Frame:
        """Return the frame at ``index``."""
        if not 0 <= index < len(self.frames):
            raise IndexError("Frame index out of range")
        return self.frames[index]

    def update_framerate(self, framerate: int) -> None:
        """Set the preview framerate and the interval between frames."""
        self.framerate = int(framerate / 100)
        self.interval = framerate

    def send_next_frame(self) -> Frame:
        """Hand the next preview frame to the listeners and return it."""
        if self.next_frame_index >= len(self.frames):
            self.next_frame_index = 0
        frame = self.get_frame(self.next_frame_index)
        for callback in list(self._listeners):
            callback(frame)
        logger.debug("nextFrame: %d", self.next_frame_index)
        self.next_frame_index += 1
        return frame

    def on_next_frame(self, callback: Callable[[Frame], None]) -> None:
        """Register ``callback`` to receive each frame sent for preview."""
        self._listeners.append(callback)

    def to_json(self) -> dict[str, Any]:
        """Return the canvas size and all frames as JSON data."""
        return {
            "width": self.width,
            "height": self.height,
            "frames": [frame.to_json() for frame in self.frames],
        }

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)
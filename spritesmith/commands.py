"""Undoable edits to the timeline, the layer stack and layer images."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Mapping

from .frame import Frame
from .framemodel import FrameModel
from .layer import Layer
from .layermodel import LayerModel


class UndoCommand(ABC):
    """An edit that can be undone and done again."""

    text: str = ""

    @abstractmethod
    def undo(self) -> None:
        """Revert the edit."""

    @abstractmethod
    def redo(self) -> None:
        """Apply the edit."""


class UndoStack:
    """A history of commands; pushing a command applies it."""

    def __init__(self) -> None:
        self._commands: list[UndoCommand] = []
        self._index = 0

    def push(self, command: UndoCommand) -> None:
        """Apply ``command`` and record it, dropping any undone commands."""
        del self._commands[self._index:]
        command.redo()
        self._commands.append(command)
        self._index = len(self._commands)

    def undo(self) -> None:
        """Undo the last applied command, if any."""
        if self._index > 0:
            self._index -= 1
            self._commands[self._index].undo()

    def redo(self) -> None:
        """Re-apply the last undone command, if any."""
        if self._index < len(self._commands):
            self._commands[self._index].redo()
            self._index += 1

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


class AddFrameCommand(UndoCommand):
    """A frame added to the timeline."""

    def __init__(
        self, frame_model: FrameModel, frame_json: Mapping[str, Any], frame_index: int
    ) -> None:
        self.frame_model = frame_model
        self.frame_json = copy.deepcopy(dict(frame_json))
        self.frame_index = frame_index
        self.text = "Frame added"

    def undo(self) -> None:
        self.frame_model.remove_frame(self.frame_index)

    def redo(self) -> None:
        self.frame_model.duplicate_frame(Frame.from_json(self.frame_json))


class AddLayerCommand(UndoCommand):
    """A layer added to a layer stack."""

    def __init__(
        self, layer_model: LayerModel, layer_json: Mapping[str, Any], layer_index: int
    ) -> None:
        self.layer_model = layer_model
        self.layer_json = copy.deepcopy(dict(layer_json))
        self.layer_index = layer_index
        self.text = "Layer Added"

    def undo(self) -> None:
        self.layer_model.remove_layer(self.layer_index)

    def redo(self) -> None:
        self.layer_model.duplicate_layer(Layer.from_json(self.layer_json))


class LayerEditCommand(UndoCommand):
    """A change to a layer's image, stored as before and after JSON."""

    def __init__(
        self,
        layer: Layer,
        unedited_json: Mapping[str, Any],
        edited_json: Mapping[str, Any],
    ) -> None:
        self.layer = layer
        self.unedited_json = copy.deepcopy(dict(unedited_json))
        self.edited_json = copy.deepcopy(dict(edited_json))
        self.text = "Sprite edited"

    def undo(self) -> None:
        self.layer.set_from_json(self.unedited_json)

    def redo(self) -> None:
        self.layer.set_from_json(self.edited_json)
"""Layered, animated pixel sprites with undoable edits and JSON project files."""

__version__ = "0.1.0"
__all__ = ["commands", "editor", "frame", "framemodel", "layer", "layermodel", "sprite", "tool"]
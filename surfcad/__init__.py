"""Bounding boxes, Bezier basis, rectangle packing and a text-editing engine with undo."""

__version__ = "0.1.0"
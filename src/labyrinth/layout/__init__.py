"""Rectangles, rectangle adapters and the box grid."""

from .adapters import RectangleAdapter, RectangleLike, register_rectangle_adapter
from .geometry import Rectangle, Space
from .grid import Grid, BoxRange, MARGIN_FACTOR

__all__ = [
    "RectangleAdapter",
    "RectangleLike",
    "register_rectangle_adapter",
    "Rectangle",
    "Space",
    "Grid",
    "BoxRange",
    "MARGIN_FACTOR",
]

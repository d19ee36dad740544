"""labyrinth: grid geometry engine for a box-marking labyrinth editor."""

from ._version import __version__
from .config import LabyrinthConfig
from .core.convert import approx_convert, convert
from .core.errors import (
    ConversionError,
    InternalError,
    LabyrinthError,
    ScreenUnavailableError,
)
from .board import BoxState, MarkedBox, MarkedBoxStore
from .layout.adapters import register_rectangle_adapter
from .layout.geometry import Rectangle, Space
from .layout.grid import Grid
from .logging_config import configure_logging
from .state import LabyrinthState

__all__ = [
    "__version__",
    "LabyrinthConfig",
    "convert",
    "approx_convert",
    "ConversionError",
    "InternalError",
    "LabyrinthError",
    "ScreenUnavailableError",
    "BoxState",
    "MarkedBox",
    "MarkedBoxStore",
    "register_rectangle_adapter",
    "Rectangle",
    "Space",
    "Grid",
    "configure_logging",
    "LabyrinthState",
]

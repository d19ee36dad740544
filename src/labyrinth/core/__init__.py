"""Numeric conversion and error types."""

from .errors import (
    LabyrinthError,
    ConversionError,
    InternalError,
    ScreenUnavailableError,
)
from .convert import convert, approx_convert, resolve_dtype

__all__ = [
    "LabyrinthError",
    "ConversionError",
    "InternalError",
    "ScreenUnavailableError",
    "convert",
    "approx_convert",
    "resolve_dtype",
]

"""Error types raised by the geometry engine."""

from __future__ import annotations

from typing import Any

import numpy as np


def format_value(value: Any) -> str:
    """Render an offending value the same way regardless of its numpy wrapping."""
    if isinstance(value, np.generic):
        value = value.item()
    return repr(value)


class LabyrinthError(Exception):
    """Base class for all labyrinth errors."""


class ConversionError(LabyrinthError, ValueError):
    """A value cannot be represented in the requested numeric domain."""

    def __init__(self, value: Any) -> None:
        self.value = format_value(value)
        super().__init__(
            f'Conversion error or overflow while converting "{self.value}"'
        )


class InternalError(LabyrinthError):
    """A grid or box index invariant was violated."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = "An internal error occurred"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ScreenUnavailableError(LabyrinthError):
    """The windowing layer could not obtain a display surface."""

    def __init__(self) -> None:
        super().__init__("Could not get default screen")

"""Geometric primitives for the grid engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from ..core.convert import Number, DTypeLike, approx_convert, convert, resolve_dtype
from .adapters import FIELDS, build_rectangle, rectangle_tuple, register_rectangle_adapter


class Space(Enum):
    """Coordinate system a rectangle lives in."""

    SCREEN = "screen"  # pixels of the drawing surface
    GRID = "grid"      # box indices


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle over a numeric domain.

    ``(x, y)`` is the top-left corner. Every field is validated against
    ``dtype`` on construction; width and height are never negative, and a
    zero width or height is a valid rectangle without pixel area.
    """

    x: Number
    y: Number
    width: Number
    height: Number
    dtype: np.dtype = field(default=np.dtype(np.uint32))
    space: Space = Space.SCREEN

    def __post_init__(self) -> None:
        dtype = resolve_dtype(self.dtype)
        object.__setattr__(self, "dtype", dtype)
        for name in FIELDS:
            object.__setattr__(self, name, convert(getattr(self, name), dtype))
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rectangle width and height must be non-negative, "
                f"got width={self.width}, height={self.height}."
            )

    # --- construction -----------------------------------------------------

    @classmethod
    def from_tuple(
        cls,
        values: tuple[Any, Any, Any, Any],
        dtype: DTypeLike = np.uint32,
        space: Space = Space.SCREEN,
    ) -> Rectangle:
        x, y, width, height = values
        return cls(x, y, width, height, dtype=dtype, space=space)

    @classmethod
    def convert_from(
        cls,
        rectangle: Any,
        dtype: DTypeLike = np.uint32,
        space: Space = Space.SCREEN,
    ) -> Rectangle:
        """Convert any rectangle-like value into ``dtype`` without losing information.

        Fields are converted in the order x, y, width, height; the first
        one that does not fit raises ``ConversionError``.
        """
        values = tuple(convert(v, dtype) for v in rectangle_tuple(rectangle))
        return cls.from_tuple(values, dtype=dtype, space=space)

    @classmethod
    def approx_from(
        cls,
        rectangle: Any,
        dtype: DTypeLike = np.uint32,
        space: Space = Space.SCREEN,
    ) -> Rectangle:
        """Like :meth:`convert_from`, but fractional precision may be dropped."""
        values = tuple(approx_convert(v, dtype) for v in rectangle_tuple(rectangle))
        return cls.from_tuple(values, dtype=dtype, space=space)

    @classmethod
    def from_extents(
        cls,
        x0: Any,
        y0: Any,
        x1: Any,
        y1: Any,
        dtype: DTypeLike = np.uint32,
    ) -> Rectangle:
        """Build a rectangle from corner extents, e.g. a drawing context's clip.

        Inverted extents collapse to zero width or height.
        """
        width = x1 - x0 if x1 >= x0 else 0
        height = y1 - y0 if y1 >= y0 else 0
        return cls.approx_from((x0, y0, width, height), dtype=dtype)

    # --- derived quantities -----------------------------------------------

    @property
    def top_left_x(self) -> Number:
        return self.x

    @property
    def top_left_y(self) -> Number:
        return self.y

    @property
    def bottom_right_x(self) -> Number:
        return self.x + self.width

    @property
    def bottom_right_y(self) -> Number:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """True when the rectangle covers no pixel area."""
        return self.width == 0 or self.height == 0

    def contains(self, px: Number, py: Number) -> bool:
        """Half-open containment: the bottom/right edges are outside."""
        return (
            self.x <= px < self.bottom_right_x
            and self.y <= py < self.bottom_right_y
        )

    # --- conversion -------------------------------------------------------

    def to_tuple(self) -> tuple[Number, Number, Number, Number]:
        return (self.x, self.y, self.width, self.height)

    def convert_to(self, kind: type = tuple, dtype: DTypeLike | None = None) -> Any:
        """Project into another rectangle representation over ``dtype``."""
        target = self.dtype if dtype is None else resolve_dtype(dtype)
        values = tuple(convert(v, target) for v in self.to_tuple())
        return self._build(kind, values, target)

    def approx_to(self, kind: type = tuple, dtype: DTypeLike | None = None) -> Any:
        """Like :meth:`convert_to`, but fractional precision may be dropped."""
        target = self.dtype if dtype is None else resolve_dtype(dtype)
        values = tuple(approx_convert(v, target) for v in self.to_tuple())
        return self._build(kind, values, target)

    def astype(self, dtype: DTypeLike, approx: bool = False) -> Rectangle:
        """Return the same rectangle in another numeric domain."""
        if approx:
            return self.approx_to(Rectangle, dtype)
        return self.convert_to(Rectangle, dtype)

    def _build(self, kind: type, values: tuple, dtype: np.dtype) -> Any:
        if isinstance(kind, type) and issubclass(kind, Rectangle):
            return kind.from_tuple(values, dtype=dtype, space=self.space)
        return build_rectangle(kind, values)

    def as_array(self) -> np.ndarray:
        """The four fields as a 1-D array in this rectangle's dtype."""
        return np.array(self.to_tuple(), dtype=self.dtype)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    # --- intersection -----------------------------------------------------

    def overlaps(self, other: Rectangle) -> bool:
        """Boundary-inclusive overlap test: touching edges count."""
        self._check_compatible(other)
        return (
            other.bottom_right_x >= self.x
            and other.x <= self.bottom_right_x
            and other.bottom_right_y >= self.y
            and other.y <= self.bottom_right_y
        )

    def intersect(self, other: Rectangle) -> Rectangle | None:
        """Return the intersection of both rectangles, or None if disjoint.

        Rectangles that only touch produce a zero-width or zero-height
        result rather than None.
        """
        if not self.overlaps(other):
            return None
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.bottom_right_x, other.bottom_right_x)
        bottom = min(self.bottom_right_y, other.bottom_right_y)
        return Rectangle(
            left, top, right - left, bottom - top,
            dtype=self.dtype, space=self.space,
        )

    def _check_compatible(self, other: Rectangle) -> None:
        if not isinstance(other, Rectangle):
            raise TypeError(
                f"Expected a Rectangle, got {type(other).__name__}. "
                "Convert it with Rectangle.convert_from() first."
            )
        if other.space is not self.space:
            raise TypeError(
                f"Cannot combine {self.space.value} and {other.space.value} "
                "rectangles."
            )
        if other.dtype != self.dtype:
            raise TypeError(
                f"Cannot combine rectangles over '{self.dtype}' and "
                f"'{other.dtype}'. Convert one of them first."
            )


register_rectangle_adapter(
    Rectangle,
    Rectangle.to_tuple,
    lambda values: Rectangle.from_tuple(values),
)

"""Grid: maps a square box grid onto a pixel-space rectangle.

Boundary policy: a pixel belongs to a box only when it lies strictly
inside it. Pixels on the outer border or on an internal grid line belong
to no box. Drawn boxes are inset by one pixel on every side so adjacent
boxes never share a border pixel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..core.convert import DTypeLike, convert, resolve_dtype
from ..core.errors import InternalError
from .geometry import Rectangle, Space

_LOG = logging.getLogger(__name__)

MARGIN_FACTOR = 32
BORDER_SIZE = 1
MIN_BOX_SIZE = 2 * BORDER_SIZE

BoxIndex = tuple[int, int]
BoxRange = tuple[range, range]

EMPTY_RANGE: BoxRange = (range(0, 0), range(0, 0))


def _pixel_point(point: Any) -> tuple[int, int]:
    px, py = point
    return convert(px, np.uint32), convert(py, np.uint32)


def _screen_rectangle(rectangle: Any) -> Rectangle:
    if (
        isinstance(rectangle, Rectangle)
        and rectangle.space is Space.SCREEN
        and rectangle.dtype == np.dtype(np.uint32)
    ):
        return rectangle
    return Rectangle.convert_from(rectangle, np.uint32)


@dataclass(frozen=True)
class Grid:
    """A labyrinth area subdivided into ``x_box_cnt`` by ``y_box_cnt`` boxes.

    Grids are immutable. A resize builds a new grid with :meth:`create`.
    """

    box_size: int
    x_box_cnt: int
    y_box_cnt: int
    area: Rectangle

    def __post_init__(self) -> None:
        if self.box_size < MIN_BOX_SIZE:
            raise ValueError(
                f"box_size must be at least {MIN_BOX_SIZE}, got {self.box_size}."
            )
        if (
            self.area.width != self.x_box_cnt * self.box_size
            or self.area.height != self.y_box_cnt * self.box_size
        ):
            raise ValueError(
                f"Grid area {self.area.width}x{self.area.height} does not match "
                f"{self.x_box_cnt}x{self.y_box_cnt} boxes of {self.box_size}px."
            )

    @classmethod
    def create(
        cls,
        box_size: int,
        total_width: int,
        total_height: int,
        margin_factor: int = MARGIN_FACTOR,
    ) -> Grid:
        """Center the largest whole-box area inside a ``total_width`` x ``total_height`` surface.

        A margin of ``total / margin_factor`` pixels is kept on each side.
        Surfaces too small for a single box produce a grid without boxes.
        """
        box_size = convert(box_size, np.uint32)
        total_width = convert(total_width, np.uint32)
        total_height = convert(total_height, np.uint32)
        if margin_factor < 1:
            raise ValueError(f"margin_factor must be positive, got {margin_factor}.")
        if box_size < MIN_BOX_SIZE:
            raise ValueError(
                f"box_size must be at least {MIN_BOX_SIZE}, got {box_size}."
            )

        left_margin = total_width // margin_factor
        top_margin = total_height // margin_factor
        width = (total_width - 2 * left_margin) // box_size * box_size
        height = (total_height - 2 * top_margin) // box_size * box_size
        area = Rectangle(
            total_width // 2 - width // 2,
            total_height // 2 - height // 2,
            width,
            height,
        )
        grid = cls(
            box_size=box_size,
            x_box_cnt=width // box_size,
            y_box_cnt=height // box_size,
            area=area,
        )
        _LOG.log(
            logging.INFO if grid.is_empty else logging.DEBUG,
            "Grid %dx%d boxes of %dpx at %s for %dx%d surface",
            grid.x_box_cnt, grid.y_box_cnt, box_size, area.to_tuple(),
            total_width, total_height,
        )
        return grid

    @property
    def box_count(self) -> int:
        return self.x_box_cnt * self.y_box_cnt

    @property
    def is_empty(self) -> bool:
        """True when the grid has no clickable area."""
        return self.x_box_cnt == 0 or self.y_box_cnt == 0

    # --- point queries ----------------------------------------------------

    def is_inside(self, point: Any) -> bool:
        """Closed test: the outer border counts as inside."""
        px, py = _pixel_point(point)
        return (
            self.area.x <= px <= self.area.bottom_right_x
            and self.area.y <= py <= self.area.bottom_right_y
        )

    def is_on_axis(self, point: Any) -> bool:
        """True when ``point`` lies on a grid line (border included)."""
        if not self.is_inside(point):
            return False
        px, py = _pixel_point(point)
        return (
            (px - self.area.x) % self.box_size == 0
            or (py - self.area.y) % self.box_size == 0
        )

    def pixel_to_box(self, point: Any) -> BoxIndex | None:
        """Return the box strictly containing ``point``, or None.

        Points on the border, on a grid line, or outside the area map to None.
        Negative or fractional coordinates raise ``ConversionError``.
        """
        px, py = _pixel_point(point)
        if self.is_empty:
            return None
        rel_x = px - self.area.x
        rel_y = py - self.area.y
        if not (0 < rel_x < self.area.width and 0 < rel_y < self.area.height):
            return None
        if rel_x % self.box_size == 0 or rel_y % self.box_size == 0:
            return None
        return (rel_x // self.box_size, rel_y // self.box_size)

    def box_to_pixel(
        self, x_box: int, y_box: int, dtype: DTypeLike = np.uint32
    ) -> Rectangle:
        """Pixel rectangle drawn for a box, inset by one pixel on each side.

        Raises ``InternalError`` for indices outside the grid.
        """
        if not (0 <= x_box < self.x_box_cnt and 0 <= y_box < self.y_box_cnt):
            raise InternalError(
                f"box ({x_box}, {y_box}) outside {self.x_box_cnt}x{self.y_box_cnt} grid"
            )
        rectangle = Rectangle(
            self.area.x + self.box_size * x_box + BORDER_SIZE,
            self.area.y + self.box_size * y_box + BORDER_SIZE,
            self.box_size - 2 * BORDER_SIZE,
            self.box_size - 2 * BORDER_SIZE,
        )
        if resolve_dtype(dtype) != rectangle.dtype:
            return rectangle.astype(dtype)
        return rectangle

    # --- area queries -----------------------------------------------------

    def _coerce(self, value: int, origin: int, extent: int, leading: bool) -> int:
        """Pull a coordinate strictly inside a box along one axis."""
        value = min(max(value, origin + 1), origin + extent - 1)
        if (value - origin) % self.box_size == 0:
            value += 1 if leading else -1
        return value

    def pixel_rectangle_to_box_range(self, rectangle: Any) -> BoxRange:
        """Half-open box index ranges covering a pixel rectangle.

        Corners are coerced into the grid area instead of being rejected, so
        any clip rectangle yields a valid, possibly empty, pair of ranges.
        """
        clip = _screen_rectangle(rectangle)
        if self.is_empty or clip.intersect(self.area) is None:
            return EMPTY_RANGE

        area = self.area
        top_left = (
            self._coerce(clip.top_left_x, area.x, area.width, leading=True),
            self._coerce(clip.top_left_y, area.y, area.height, leading=True),
        )
        bottom_right = (
            self._coerce(clip.bottom_right_x, area.x, area.width, leading=False),
            self._coerce(clip.bottom_right_y, area.y, area.height, leading=False),
        )
        first = self.pixel_to_box(top_left)
        last = self.pixel_to_box(bottom_right)
        if first is None or last is None:
            raise InternalError(
                f"coerced corners {top_left}, {bottom_right} are not inside a box"
            )
        x_end = max(first[0], min(last[0] + 1, self.x_box_cnt))
        y_end = max(first[1], min(last[1] + 1, self.y_box_cnt))
        return range(first[0], x_end), range(first[1], y_end)

    def pixel_area_to_box_area(self, rectangle: Any) -> Rectangle | None:
        """Grid-space rectangle spanned by the boxes under a pixel rectangle."""
        x_range, y_range = self.pixel_rectangle_to_box_range(rectangle)
        if not x_range or not y_range:
            return None
        return Rectangle(
            x_range.start, y_range.start, len(x_range), len(y_range),
            space=Space.GRID,
        )

    def grid_lines(self, rectangle: Any) -> list[Rectangle]:
        """Grid line segments visible inside a clip rectangle.

        Vertical lines come first, then horizontal ones; each is a
        zero-width or zero-height rectangle already clipped.
        """
        if self.is_empty:
            return []
        visible = _screen_rectangle(rectangle).intersect(self.area)
        if visible is None:
            return []

        area = self.area
        box = self.box_size
        lines: list[Rectangle] = []

        first_x = -(-(visible.x - area.x) // box)
        last_x = min(self.x_box_cnt + 1, (visible.bottom_right_x - area.x) // box + 1)
        for index in range(first_x, last_x):
            line = Rectangle(area.x + index * box, area.y, 0, area.height)
            part = visible.intersect(line)
            if part is not None:
                lines.append(part)

        first_y = -(-(visible.y - area.y) // box)
        last_y = min(self.y_box_cnt + 1, (visible.bottom_right_y - area.y) // box + 1)
        for index in range(first_y, last_y):
            line = Rectangle(area.x, area.y + index * box, area.width, 0)
            part = visible.intersect(line)
            if part is not None:
                lines.append(part)

        return lines

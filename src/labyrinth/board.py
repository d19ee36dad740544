"""MarkedBoxStore: per-box state for one grid, backed by a numpy array."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator

import numpy as np

from .core.convert import approx_convert
from .layout.geometry import Rectangle
from .layout.grid import BoxRange, Grid

_LOG = logging.getLogger(__name__)


class BoxState(IntEnum):
    """State of a single box. ``EMPTY`` is the default."""

    EMPTY = 0
    WALL = 1


@dataclass(frozen=True)
class MarkedBox:
    """One box as seen during iteration."""

    x_box: int
    y_box: int
    state: BoxState
    rectangle: Rectangle


class BoxView:
    """Finite, restartable view over the boxes of a store.

    Iterates row by row (``y_box`` outer, ``x_box`` inner). Every call to
    ``iter()`` starts from the first box again and reads the current states.
    """

    __slots__ = ("_store", "_x_range", "_y_range")

    def __init__(self, store: MarkedBoxStore, box_range: BoxRange | None = None) -> None:
        grid = store.grid
        if box_range is None:
            box_range = (range(grid.x_box_cnt), range(grid.y_box_cnt))
        x_range, y_range = box_range
        if x_range.step != 1 or y_range.step != 1:
            raise ValueError(
                f"Box ranges must be contiguous (step 1), got {x_range} and {y_range}."
            )
        # clipped to the grid
        self._x_range = range(max(0, x_range.start), min(x_range.stop, grid.x_box_cnt))
        self._y_range = range(max(0, y_range.start), min(y_range.stop, grid.y_box_cnt))
        self._store = store

    def __iter__(self) -> Iterator[MarkedBox]:
        grid = self._store.grid
        cells = self._store._cells
        for y_box in self._y_range:
            for x_box in self._x_range:
                yield MarkedBox(
                    x_box=x_box,
                    y_box=y_box,
                    state=BoxState(int(cells[x_box, y_box])),
                    rectangle=grid.box_to_pixel(x_box, y_box),
                )

    def __len__(self) -> int:
        return len(self._x_range) * len(self._y_range)

    def __repr__(self) -> str:
        return f"BoxView(x={self._x_range}, y={self._y_range})"


class MarkedBoxStore:
    """Dense 2-D box state addressed by ``(x_box, y_box)``.

    The store owns its grid: a resize replaces both together.
    """

    __slots__ = ("_grid", "_cells")

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._cells: np.ndarray = np.full(
            (grid.x_box_cnt, grid.y_box_cnt), BoxState.EMPTY, dtype=np.uint8
        )

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def shape(self) -> tuple[int, int]:
        return self._cells.shape

    def _in_bounds(self, x_box: int, y_box: int) -> bool:
        return 0 <= x_box < self._grid.x_box_cnt and 0 <= y_box < self._grid.y_box_cnt

    def get(self, x_box: int, y_box: int) -> BoxState | None:
        """State of a box, or None for indices outside the grid."""
        if not self._in_bounds(x_box, y_box):
            return None
        return BoxState(int(self._cells[x_box, y_box]))

    def put(self, x_box: int, y_box: int, state: BoxState) -> BoxState | None:
        """Store ``state`` and return the previous one.

        Returns None and changes nothing for indices outside the grid.
        """
        previous = self.get(x_box, y_box)
        if previous is None:
            return None
        self._cells[x_box, y_box] = BoxState(state)
        return previous

    def set_state(self, pixel_point: Any, new_state: BoxState) -> Rectangle | None:
        """Set the box under a pixel position and report what to redraw.

        Returns the pixel rectangle of the box when its state changed, None
        when the point hits no box or the box already had ``new_state``.
        Fractional positions are truncated to the containing pixel; negative
        positions raise ``ConversionError``.
        """
        px, py = pixel_point
        pixel = (approx_convert(px, np.uint32), approx_convert(py, np.uint32))
        index = self._grid.pixel_to_box(pixel)
        if index is None:
            return None
        new_state = BoxState(new_state)
        previous = self.put(index[0], index[1], new_state)
        if previous is None or previous == new_state:
            return None
        _LOG.debug("Box %s: %s -> %s", index, previous.name, new_state.name)
        return self._grid.box_to_pixel(*index)

    def boxes(self, box_range: BoxRange | None = None) -> BoxView:
        """Lazy view of all boxes, or of those inside ``box_range``."""
        return BoxView(self, box_range)

    def count(self, state: BoxState = BoxState.WALL) -> int:
        return int(np.count_nonzero(self._cells == BoxState(state)))

    def marked_mask(self) -> np.ndarray:
        """Boolean (x_box_cnt, y_box_cnt) array of WALL boxes, read-only."""
        mask = self._cells == BoxState.WALL
        mask.flags.writeable = False
        return mask

    def clear(self) -> None:
        self._cells.fill(BoxState.EMPTY)

    def __repr__(self) -> str:
        return (
            f"MarkedBoxStore({self._grid.x_box_cnt}x{self._grid.y_box_cnt}, "
            f"marked={self.count()})"
        )

"""LabyrinthState: the core's entry points for the windowing layer.

The state is either *absent* (no surface area, no grid) or *present* (a
grid and its marked-box store). Every resize replaces the pair as a whole.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

import numpy as np

from .board import BoxState, MarkedBoxStore
from .config import LabyrinthConfig
from .layout.geometry import Rectangle
from .layout.grid import Grid
from .logging_config import configure_logging

_LOG = logging.getLogger(__name__)

PRIMARY_BUTTON = 1
SECONDARY_BUTTON = 3

BUTTON_STATES = {
    PRIMARY_BUTTON: BoxState.WALL,
    SECONDARY_BUTTON: BoxState.EMPTY,
}


class VisibleBoxes:
    """Restartable sequence of ``(rectangle, state)`` pairs inside a clip.

    Each rectangle is the box's drawn rectangle cut down to the clip.
    """

    __slots__ = ("_store", "_clip")

    def __init__(self, store: MarkedBoxStore | None, clip: Rectangle) -> None:
        self._store = store
        self._clip = clip

    def __iter__(self) -> Iterator[tuple[Rectangle, BoxState]]:
        if self._store is None:
            return
        box_range = self._store.grid.pixel_rectangle_to_box_range(self._clip)
        for box in self._store.boxes(box_range):
            part = self._clip.intersect(box.rectangle)
            if part is not None:
                yield part, box.state


class LabyrinthState:
    """Owns the grid/store pair and translates input into redraw requests."""

    def __init__(self, config: LabyrinthConfig | None = None) -> None:
        self.config = config if config is not None else LabyrinthConfig()
        configure_logging(self.config.log_level)
        self._store: MarkedBoxStore | None = None

    @property
    def store(self) -> MarkedBoxStore | None:
        return self._store

    @property
    def grid(self) -> Grid | None:
        return self._store.grid if self._store is not None else None

    @property
    def is_present(self) -> bool:
        return self._store is not None

    def on_resize(self, rectangle: Any) -> None:
        """Rebuild the grid for a new surface size, or drop it for a zero size."""
        surface = Rectangle.convert_from(rectangle, np.uint32)
        if surface.width > 0 and surface.height > 0:
            grid = Grid.create(
                self.config.box_size,
                surface.width,
                surface.height,
                margin_factor=self.config.margin_factor,
            )
            self._store = MarkedBoxStore(grid)
            _LOG.debug("Surface %dx%d: new %r", surface.width, surface.height, self._store)
        else:
            self._store = None
            _LOG.info("Surface %dx%d has no area, grid dropped", surface.width, surface.height)

    def on_point_interaction(
        self, pixel_point: tuple[float, float], desired_state: BoxState
    ) -> Rectangle | None:
        """Apply ``desired_state`` under a pointer position.

        Returns the rectangle to redraw, or None when nothing changed.
        """
        if self._store is None:
            return None
        return self._store.set_state(pixel_point, desired_state)

    def on_button_press(
        self, button: int, position: tuple[float, float]
    ) -> Rectangle | None:
        """Primary button builds a wall, secondary clears it, others are ignored."""
        state = BUTTON_STATES.get(button)
        if state is None:
            return None
        return self.on_point_interaction(position, state)

    def on_motion(
        self,
        position: tuple[float, float],
        primary_held: bool = False,
        secondary_held: bool = False,
    ) -> Rectangle | None:
        """Drag painting: the primary button wins when both are held."""
        if primary_held:
            return self.on_point_interaction(position, BoxState.WALL)
        if secondary_held:
            return self.on_point_interaction(position, BoxState.EMPTY)
        return None

    def visible_boxes(self, clip: Any) -> VisibleBoxes:
        return VisibleBoxes(self._store, Rectangle.convert_from(clip, np.uint32))

    def grid_lines(self, clip: Any) -> list[Rectangle]:
        if self._store is None:
            return []
        return self._store.grid.grid_lines(clip)

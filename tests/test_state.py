"""Tests for LabyrinthState."""

import logging

import pytest

from labyrinth.config import LabyrinthConfig
from labyrinth.core.errors import ConversionError
from labyrinth.board import BoxState
from labyrinth.layout.geometry import Rectangle
from labyrinth.state import LabyrinthState


class TestResize:
    def test_starts_absent(self):
        s = LabyrinthState()
        assert not s.is_present
        assert s.grid is None
        assert s.store is None

    def test_positive_size_builds_grid(self, state):
        assert state.is_present
        assert (state.grid.x_box_cnt, state.grid.y_box_cnt) == (5, 5)

    def test_zero_dimension_drops_grid(self, state):
        state.on_resize((0, 0, 0, 400))
        assert not state.is_present

    def test_resize_replaces_store(self, state):
        state.on_point_interaction((114, 114), BoxState.WALL)
        old = state.store
        state.on_resize((0, 0, 400, 400))
        assert state.store is not old
        assert state.store.count() == 0

    def test_uses_configured_box_size(self):
        s = LabyrinthState(LabyrinthConfig(box_size=32))
        s.on_resize((0, 0, 400, 400))
        assert s.grid.box_size == 32
        assert s.grid.x_box_cnt == 11

    def test_accepts_rectangle(self):
        s = LabyrinthState()
        s.on_resize(Rectangle(0, 0, 400, 400))
        assert s.is_present

    def test_negative_size(self):
        s = LabyrinthState()
        with pytest.raises(ConversionError):
            s.on_resize((0, 0, -1, 400))


class TestInteraction:
    def test_absent_ignores_input(self):
        assert LabyrinthState().on_point_interaction((10.0, 10.0), BoxState.WALL) is None

    def test_point_interaction(self, state):
        rect = state.on_point_interaction((114.5, 114.5), BoxState.WALL)
        assert rect == state.grid.box_to_pixel(1, 1)
        assert state.on_point_interaction((114.5, 114.5), BoxState.WALL) is None

    def test_primary_button_marks(self, state):
        assert state.on_button_press(1, (114.0, 114.0)) is not None
        assert state.store.get(1, 1) is BoxState.WALL

    def test_secondary_button_clears(self, state):
        state.on_button_press(1, (114.0, 114.0))
        assert state.on_button_press(3, (114.0, 114.0)) is not None
        assert state.store.get(1, 1) is BoxState.EMPTY

    def test_other_buttons_ignored(self, state):
        assert state.on_button_press(2, (114.0, 114.0)) is None
        assert state.store.count() == 0

    def test_drag_with_primary(self, state):
        state.on_motion((114.0, 114.0), primary_held=True)
        state.on_motion((180.0, 114.0), primary_held=True)
        assert state.store.count(BoxState.WALL) == 2

    def test_drag_with_secondary(self, state):
        state.on_motion((114.0, 114.0), primary_held=True)
        state.on_motion((114.0, 114.0), secondary_held=True)
        assert state.store.count(BoxState.WALL) == 0

    def test_primary_wins(self, state):
        state.on_motion((114.0, 114.0), primary_held=True, secondary_held=True)
        assert state.store.get(1, 1) is BoxState.WALL

    def test_motion_without_buttons(self, state):
        assert state.on_motion((114.0, 114.0)) is None


class TestVisibleBoxes:
    def test_whole_area(self, state):
        pairs = list(state.visible_boxes((0, 0, 400, 400)))
        assert len(pairs) == 25
        assert pairs[0] == (state.grid.box_to_pixel(0, 0), BoxState.EMPTY)

    def test_clipped_to_region(self, state):
        state.on_point_interaction((114, 114), BoxState.WALL)
        pairs = list(state.visible_boxes((100, 100, 10, 10)))
        assert pairs == [
            (Rectangle(100, 100, 3, 3), BoxState.EMPTY),
            (Rectangle(105, 100, 5, 3), BoxState.EMPTY),
            (Rectangle(100, 105, 3, 5), BoxState.EMPTY),
            (Rectangle(105, 105, 5, 5), BoxState.WALL),
        ]

    def test_restartable(self, state):
        boxes = state.visible_boxes((0, 0, 400, 400))
        assert list(boxes) == list(boxes)

    def test_outside(self, state):
        assert list(state.visible_boxes((0, 0, 10, 10))) == []

    def test_absent(self):
        assert list(LabyrinthState().visible_boxes((0, 0, 10, 10))) == []


class TestGridLines:
    def test_lines(self, state):
        assert len(state.grid_lines((0, 0, 400, 400))) == 12

    def test_absent(self):
        assert LabyrinthState().grid_lines((0, 0, 400, 400)) == []


class TestLogging:
    def test_logger_level_follows_config(self):
        LabyrinthState(LabyrinthConfig(log_level="DEBUG"))
        logger = logging.getLogger("labyrinth")
        assert logger.level == logging.DEBUG
        assert logger.handlers

    def test_default_level(self):
        LabyrinthState()
        assert logging.getLogger("labyrinth").level == logging.WARNING

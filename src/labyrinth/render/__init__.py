"""Drawing instructions derived from the grid state."""

from .palette import Palette
from .plan import DrawPlan, FillCommand, LineSegment, build_draw_plan

__all__ = ["Palette", "DrawPlan", "FillCommand", "LineSegment", "build_draw_plan"]

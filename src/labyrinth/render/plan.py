"""DrawPlan: renderer-independent drawing instructions for a clip region."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..layout.geometry import Rectangle
from ..state import LabyrinthState
from .palette import RGB, Palette


@dataclass(frozen=True)
class LineSegment:
    """A grid line in float drawing coordinates."""

    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True)
class FillCommand:
    """A filled box rectangle in float drawing coordinates."""

    x: float
    y: float
    width: float
    height: float
    color: RGB


@dataclass
class DrawPlan:
    """Everything a renderer needs to repaint one clip region."""

    clip: Rectangle | None
    line_color: RGB
    lines: list[LineSegment] = field(default_factory=list)
    fills: list[FillCommand] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines and not self.fills

    def to_dict(self) -> dict:
        return {
            "clip": self.clip.to_dict() if self.clip is not None else None,
            "lineColor": list(self.line_color),
            "lines": [[s.x0, s.y0, s.x1, s.y1] for s in self.lines],
            "fills": [
                {"x": f.x, "y": f.y, "width": f.width, "height": f.height,
                 "color": list(f.color)}
                for f in self.fills
            ],
        }


def build_draw_plan(
    state: LabyrinthState,
    clip_extents: tuple[float, float, float, float],
    palette: Palette | None = None,
) -> DrawPlan:
    """Compute the lines and fills needed to repaint ``clip_extents``.

    ``clip_extents`` is ``(x0, y0, x1, y1)`` as reported by a drawing
    context; fractional extents are truncated to whole pixels.
    """
    if palette is None:
        palette = Palette.from_config(state.config)
    grid = state.grid
    if grid is None:
        return DrawPlan(clip=None, line_color=palette.line)

    draw_area = Rectangle.from_extents(*clip_extents)
    visible = draw_area.intersect(grid.area)
    plan = DrawPlan(clip=visible, line_color=palette.line)
    if visible is None:
        return plan

    for line in state.grid_lines(visible):
        part = line.approx_to(Rectangle, np.float64)
        plan.lines.append(LineSegment(
            part.top_left_x, part.top_left_y, part.bottom_right_x, part.bottom_right_y,
        ))

    for rectangle, box_state in state.visible_boxes(visible):
        x, y, width, height = rectangle.approx_to(tuple, np.float64)
        plan.fills.append(FillCommand(x, y, width, height, palette.color_of(box_state)))

    return plan

"""LabyrinthConfig: explicit run configuration passed to the state object."""

from __future__ import annotations

import param

from .layout.grid import MARGIN_FACTOR

BOX_SIZES = [16, 32, 64, 128]
DEFAULT_BOX_SIZE = 64
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class LabyrinthConfig(param.Parameterized):
    """User-selectable settings for one labyrinth window.

    Values are validated by param on assignment, so an unsupported box
    size raises ``ValueError`` immediately.
    """

    box_size = param.Selector(
        default=DEFAULT_BOX_SIZE,
        objects=BOX_SIZES,
        doc="Edge length of a box in pixels.",
    )
    margin_factor = param.Integer(
        default=MARGIN_FACTOR,
        bounds=(1, None),
        doc="The margin on each side is the surface size divided by this.",
    )

    # --- Palette (any matplotlib colour spec) ---
    empty_color = param.String(default="white")
    wall_color = param.String(default="blue")
    line_color = param.String(default="black")

    log_level = param.Selector(default="WARNING", objects=LOG_LEVELS)

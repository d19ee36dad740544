"""Palette: resolves configured colour names to float RGB triples."""

from __future__ import annotations

from dataclasses import dataclass

from matplotlib.colors import to_rgb

from ..config import LabyrinthConfig
from ..board import BoxState

RGB = tuple[float, float, float]


@dataclass(frozen=True)
class Palette:
    """Float RGB colours (0..1) for box states and grid lines."""

    empty: RGB
    wall: RGB
    line: RGB

    @classmethod
    def from_config(cls, config: LabyrinthConfig) -> Palette:
        """Resolve the config's colour specs; unknown names raise ``ValueError``."""
        return cls(
            empty=_resolve(config.empty_color),
            wall=_resolve(config.wall_color),
            line=_resolve(config.line_color),
        )

    def color_of(self, state: BoxState) -> RGB:
        if state == BoxState.WALL:
            return self.wall
        return self.empty


def _resolve(spec: str) -> RGB:
    try:
        r, g, b = to_rgb(spec)
    except ValueError:
        raise ValueError(
            f"Unknown colour '{spec}'. Use a matplotlib colour name or hex "
            f"string like 'blue' or '#0000ff'."
        ) from None
    return (float(r), float(g), float(b))

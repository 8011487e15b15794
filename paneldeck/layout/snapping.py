"""Grid snapping for panel positions."""

from __future__ import annotations

import math
from dataclasses import replace

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import Position

from .models import PanelLayout


def snap_to_grid(
    position: Position,
    grid_size: float,
    magnetic_threshold: float = LAYOUT_RULES.snap_threshold,
) -> Position:
    """Round each axis to the nearest grid line if it is close enough.

    An axis further than *magnetic_threshold* from its nearest grid line
    keeps its value.  A non-positive *grid_size* disables snapping.
    """
    if grid_size <= 0:
        return position

    # Halves round up, not to even.
    snapped_x = math.floor(position.x / grid_size + 0.5) * grid_size
    snapped_y = math.floor(position.y / grid_size + 0.5) * grid_size

    return Position(
        x=snapped_x if abs(position.x - snapped_x) <= magnetic_threshold else position.x,
        y=snapped_y if abs(position.y - snapped_y) <= magnetic_threshold else position.y,
    )


def snap_layout_to_grid(panels: list[PanelLayout], grid_size: float) -> list[PanelLayout]:
    """Snap every panel onto the grid regardless of distance."""
    # Half a cell is the furthest any point lies from its nearest line.
    return [
        replace(p, position=snap_to_grid(p.position, grid_size, grid_size / 2))
        for p in panels
    ]

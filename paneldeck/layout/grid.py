"""Occupancy grid — quantizes panels onto cells and finds free rectangles.

The grid covers a viewport rectangle with square cells of a caller-chosen
size.  A cell is occupied when any part of any panel touches it, which
makes the free-space answer conservative: a region reported free really
is free, at the cost of losing up to one cell of precision per edge.

The free-space search is a single greedy pass.  It returns a set of
disjoint free rectangles whose shape depends on scan order; it is not a
minimum or maximum decomposition and callers must not rely on that.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import Padding, Size, ViewportBounds, calculate_viewport_bounds

from .models import AvailableSpace, LayoutError, PanelLayout, Region


log = logging.getLogger(__name__)


# Cell states
FREE = 0
OCCUPIED = 1


class OccupancyGrid:
    """A 2-D boolean grid over a viewport rectangle.

    Grid cell (gx, gy) covers the world rectangle starting at
    ``(origin_x + gx * cell_size, origin_y + gy * cell_size)``.
    """

    def __init__(self, bounds: ViewportBounds, cell_size: float) -> None:
        if cell_size <= 0:
            raise LayoutError("cell_size", f"must be > 0, got {cell_size}")
        self.cell_size = cell_size
        self.origin_x = bounds.x
        self.origin_y = bounds.y
        self.extent_x = max(0.0, bounds.width)
        self.extent_y = max(0.0, bounds.height)
        self.width = max(0, int(math.ceil(bounds.width / cell_size)))
        self.height = max(0, int(math.ceil(bounds.height / cell_size)))
        self._cells = bytearray(self.width * self.height)

    # ── Cell queries ───────────────────────────────────────────────

    def in_bounds(self, gx: int, gy: int) -> bool:
        return 0 <= gx < self.width and 0 <= gy < self.height

    def is_free(self, gx: int, gy: int) -> bool:
        if not self.in_bounds(gx, gy):
            return False
        return self._cells[gy * self.width + gx] == FREE

    def is_occupied(self, gx: int, gy: int) -> bool:
        if not self.in_bounds(gx, gy):
            return True
        return self._cells[gy * self.width + gx] != FREE

    @property
    def occupied_count(self) -> int:
        return sum(1 for v in self._cells if v != FREE)

    # ── Marking ────────────────────────────────────────────────────

    def mark_panel(self, panel: PanelLayout) -> None:
        """Mark every cell touched by the panel's rectangle.

        The far edge uses ``floor`` rather than ``ceil - 1``, so a panel
        ending exactly on a cell boundary also claims the next cell.
        """
        cs = self.cell_size
        gx_min = int(math.floor((panel.position.x - self.origin_x) / cs))
        gy_min = int(math.floor((panel.position.y - self.origin_y) / cs))
        gx_max = min(self.width - 1, int(math.floor((panel.right - self.origin_x) / cs)))
        gy_max = min(self.height - 1, int(math.floor((panel.bottom - self.origin_y) / cs)))

        for gy in range(max(0, gy_min), gy_max + 1):
            row = gy * self.width
            for gx in range(max(0, gx_min), gx_max + 1):
                self._cells[row + gx] = OCCUPIED

    def mark_panels(self, panels: Iterable[PanelLayout]) -> None:
        for p in panels:
            self.mark_panel(p)

    # ── Free-space search ──────────────────────────────────────────

    def free_regions(self) -> list[Region]:
        """Greedy maximal-empty-rectangle scan in row-major order.

        Each unvisited free cell seeds a search that tries every height
        from 1 row down, extends the width as far as the whole block stays
        free and unvisited, and keeps the largest block.  The winner is
        marked visited so later seeds cannot reuse its cells.
        """
        visited = bytearray(self.width * self.height)
        regions: list[Region] = []
        cs = self.cell_size

        for gy in range(self.height):
            for gx in range(self.width):
                idx = gy * self.width + gx
                if self._cells[idx] != FREE or visited[idx]:
                    continue
                w, h = self._grow_from(gx, gy, visited)
                if w <= 0 or h <= 0:
                    continue
                for vy in range(gy, gy + h):
                    row = vy * self.width
                    for vx in range(gx, gx + w):
                        visited[row + vx] = 1
                # The last column/row may be a partial cell; clip to the bounds.
                width = min((gx + w) * cs, self.extent_x) - gx * cs
                height = min((gy + h) * cs, self.extent_y) - gy * cs
                regions.append(Region(
                    x=self.origin_x + gx * cs,
                    y=self.origin_y + gy * cs,
                    width=width,
                    height=height,
                    area=width * height,
                ))
        return regions

    def _grow_from(
        self, sx: int, sy: int, visited: bytearray,
    ) -> tuple[int, int]:
        """Return (width, height) in cells of the best block at (sx, sy)."""
        best_w = best_h = 0
        height = 1
        while sy + height <= self.height:
            width = 0
            for x in range(sx, self.width):
                if any(
                    self._cells[y * self.width + x] != FREE
                    or visited[y * self.width + x]
                    for y in range(sy, sy + height)
                ):
                    break
                width += 1

            if width * height > best_w * best_h:
                best_w, best_h = width, height

            if width == 0:
                break
            height += 1
        return best_w, best_h


# ── Public helpers ─────────────────────────────────────────────────


def calculate_available_space(
    panels: Iterable[PanelLayout],
    container_size: Size,
    padding: Padding | None = None,
    cell_size: float = LAYOUT_RULES.placement_cell_size,
) -> AvailableSpace:
    """Decompose the free part of the padded viewport into rectangles."""
    bounds = calculate_viewport_bounds(container_size, padding)
    grid = OccupancyGrid(bounds, cell_size)
    grid.mark_panels(panels)
    regions = grid.free_regions()

    total_area = sum(r.area for r in regions)
    largest = None
    for r in regions:
        if largest is None or r.area > largest.area:
            largest = r

    log.debug(
        "Available space: %d region(s), %.0f units² free on a %d×%d grid",
        len(regions), total_area, grid.width, grid.height,
    )
    return AvailableSpace(regions=regions, total_area=total_area, largest_region=largest)


def find_large_gaps(
    panels: Iterable[PanelLayout],
    container_size: Size,
    cell_size: float = LAYOUT_RULES.gap_cell_size,
    min_cells: int = LAYOUT_RULES.gap_min_cells,
) -> list[Region]:
    """Free rectangles larger than *min_cells* cells, largest first.

    Runs over the whole container (no padding) at a coarse resolution;
    used for gap reporting in layout metrics.
    """
    bounds = ViewportBounds(x=0, y=0, width=container_size.width, height=container_size.height)
    grid = OccupancyGrid(bounds, cell_size)
    grid.mark_panels(panels)
    min_area = cell_size * cell_size * min_cells
    gaps = [r for r in grid.free_regions() if r.area > min_area]
    gaps.sort(key=lambda r: r.area, reverse=True)
    return gaps

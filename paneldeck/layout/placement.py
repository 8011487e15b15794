"""Placement solver — picks a position for a new panel.

Strategy, in order:
  1. overlap allowed      align inside the padded viewport
  2. largest free region  align inside it when the panel fits
  3. any fitting region   the largest one that fits, aligned inside it
  4. cascade              diagonal probes from the viewport origin

The cascade has a bounded attempt budget.  When every probe fails the
solver returns the clamped base position even if it overlaps; placement
never raises for lack of space.
"""

from __future__ import annotations

import logging
from typing import Sequence

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import (
    Padding, Position, Size, ViewportBounds,
    calculate_viewport_bounds, constrain_position, overlaps, rect_inside,
)

from .grid import calculate_available_space
from .models import ALIGNMENTS, Alignment, LayoutError, PanelLayout, Region


log = logging.getLogger(__name__)


def _as_padding(padding: Padding | float | None) -> Padding:
    if padding is None:
        return Padding.uniform(10)
    if isinstance(padding, Padding):
        return padding
    return Padding.uniform(float(padding))


# ── Alignment ──────────────────────────────────────────────────────


def aligned_position(
    size: Size, bounds: ViewportBounds | Region, alignment: Alignment,
) -> Position:
    """Place a rectangle of *size* flush against the aligned edge(s)."""
    if alignment == "top-left":
        return Position(bounds.x, bounds.y)
    if alignment == "top-right":
        return Position(bounds.x + bounds.width - size.width, bounds.y)
    if alignment == "bottom-left":
        return Position(bounds.x, bounds.y + bounds.height - size.height)
    if alignment == "bottom-right":
        return Position(
            bounds.x + bounds.width - size.width,
            bounds.y + bounds.height - size.height,
        )
    if alignment == "center":
        return Position(
            bounds.x + (bounds.width - size.width) / 2,
            bounds.y + (bounds.height - size.height) / 2,
        )
    raise LayoutError("alignment", f"expected one of {ALIGNMENTS}, got {alignment!r}")


# ── Cascade fallback ───────────────────────────────────────────────


def cascade_position(
    size: Size,
    existing_panels: Sequence[PanelLayout],
    bounds: ViewportBounds,
    *,
    base_inset: float = LAYOUT_RULES.cascade_base_inset,
    step: float = LAYOUT_RULES.cascade_step,
) -> Position:
    """Probe diagonal offsets for a spot that fits and overlaps nothing."""
    base = Position(bounds.x + base_inset, bounds.y + base_inset)
    attempts = len(existing_panels) + LAYOUT_RULES.cascade_extra_attempts

    for i in range(attempts):
        candidate = Position(base.x + i * step, base.y + i * step)
        if not rect_inside(candidate, size, bounds):
            continue
        if any(overlaps(candidate, size, p.position, p.size) for p in existing_panels):
            continue
        log.debug("Cascade accepted attempt %d at (%.1f, %.1f)", i, candidate.x, candidate.y)
        return candidate

    fallback = constrain_position(base, size, bounds)
    log.debug(
        "Cascade exhausted %d attempts for %.0f×%.0f; using (%.1f, %.1f)",
        attempts, size.width, size.height, fallback.x, fallback.y,
    )
    return fallback


# ── Main entry point ───────────────────────────────────────────────


def find_optimal_position(
    size: Size,
    existing_panels: Sequence[PanelLayout],
    container_size: Size,
    padding: Padding | float | None = None,
    *,
    alignment: Alignment = "top-left",
    avoid_overlap: bool = True,
    prefer_largest_space: bool = True,
    cell_size: float = LAYOUT_RULES.placement_cell_size,
) -> Position:
    """Choose a position for a panel of *size* among *existing_panels*.

    Parameters
    ----------
    size : Size
        Requested panel size.
    existing_panels : Sequence[PanelLayout]
        Obstacles already in the viewport.
    container_size : Size
        Full container size before padding.
    padding : Padding | float | None
        Viewport inset; a number applies to all four sides (default 10).
    alignment : str
        One of ``top-left``, ``top-right``, ``bottom-left``,
        ``bottom-right``, ``center``.
    avoid_overlap : bool
        When False, simply align inside the viewport.
    prefer_largest_space : bool
        Try the single largest free region first.
    cell_size : float
        Occupancy-grid resolution for the free-space search.

    Returns
    -------
    Position
        Top-left corner for the new panel.  Only the cascade fallback
        may return a position that overlaps an existing panel.
    """
    if alignment not in ALIGNMENTS:
        raise LayoutError("alignment", f"expected one of {ALIGNMENTS}, got {alignment!r}")

    bounds = calculate_viewport_bounds(container_size, _as_padding(padding))

    if not avoid_overlap:
        return aligned_position(size, bounds, alignment)

    space = calculate_available_space(
        existing_panels, container_size, bounds.padding, cell_size=cell_size,
    )

    if prefer_largest_space and space.largest_region is not None:
        region = space.largest_region
        if region.fits(size):
            return aligned_position(size, region, alignment)

    suitable = [r for r in space.regions if r.fits(size)]
    if suitable:
        region = max(suitable, key=lambda r: r.area)
        return aligned_position(size, region, alignment)

    log.debug(
        "No free region fits %.0f×%.0f among %d panel(s); cascading",
        size.width, size.height, len(existing_panels),
    )
    return cascade_position(size, existing_panels, bounds)

"""Layout optimizer — re-place, snap and compact a whole panel set."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Sequence

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import Padding, Position, Size, overlaps

from .metrics import count_overlaps
from .models import SORT_KEYS, LayoutError, OptimizationOptions, PanelLayout
from .placement import find_optimal_position
from .snapping import snap_to_grid


log = logging.getLogger(__name__)


def sort_panels(panels: Sequence[PanelLayout], sort_by: str | None) -> list[PanelLayout]:
    """Return panels in optimizer order (stable)."""
    ordered = list(panels)
    if sort_by is None or sort_by == "usage":
        # No usage data reaches the engine; keep caller order.
        return ordered
    if sort_by == "size":
        ordered.sort(key=lambda p: p.area, reverse=True)
    elif sort_by == "creation":
        ordered.sort(key=lambda p: p.title.casefold())
    elif sort_by == "type":
        ordered.sort(key=lambda p: p.component)
    else:
        raise LayoutError("sort_by", f"expected one of {SORT_KEYS} or None, got {sort_by!r}")
    return ordered


def _distance_from_origin(pos: Position) -> float:
    return math.hypot(pos.x, pos.y)


def compact_layout(
    panels: Sequence[PanelLayout],
    container_size: Size,
    padding: float,
    step: float = LAYOUT_RULES.compaction_step,
) -> list[PanelLayout]:
    """Nudge each panel toward the origin without creating overlaps.

    Panels are visited in order and each move is checked against the
    *current* positions of all other panels, so panels moved earlier in
    the pass constrain the ones after them.  The result depends on the
    input order and is not a global optimum.
    """
    compacted = list(panels)

    for i, panel in enumerate(compacted):
        best = panel.position
        best_distance = _distance_from_origin(best)

        x = padding
        while x <= panel.position.x:
            y = padding
            while y <= panel.position.y:
                candidate = Position(x, y)
                distance = _distance_from_origin(candidate)
                if (
                    distance < best_distance
                    and x + panel.size.width <= container_size.width
                    and y + panel.size.height <= container_size.height
                    and not any(
                        overlaps(candidate, panel.size, other.position, other.size)
                        for j, other in enumerate(compacted)
                        if j != i
                    )
                ):
                    best = candidate
                    best_distance = distance
                y += step
            x += step

        if best != panel.position:
            log.debug(
                "Compacted %s from (%.1f, %.1f) to (%.1f, %.1f)",
                panel.id, panel.position.x, panel.position.y, best.x, best.y,
            )
            compacted[i] = replace(panel, position=best)

    return compacted


def optimize_layout(
    panels: Sequence[PanelLayout],
    options: OptimizationOptions,
) -> list[PanelLayout]:
    """Rearrange *panels* to reduce overlap and wasted space.

    Panels are sorted per ``options.sort_by`` and, unless relative
    positions are preserved, re-placed one by one with the placement
    solver using the already re-placed panels as obstacles.  Positions
    are optionally snapped to the grid and the result optionally
    compacted toward the origin.

    With ``minimize_overlaps`` the result never has more overlapping
    pairs than the input: if re-placement made things worse the input
    positions are kept, unsnapped, in ``sort_by`` order (compacted when
    compaction is on).
    """
    ordered = sort_panels(panels, options.sort_by)
    padding = Padding.uniform(options.padding)

    if options.preserve_relative_positions:
        log.info("Optimized %d panel(s) (positions preserved)", len(ordered))
        return ordered

    repositioned: list[PanelLayout] = []
    for panel in ordered:
        pos = find_optimal_position(
            panel.size,
            repositioned,
            options.container_size,
            padding,
            avoid_overlap=options.minimize_overlaps,
            prefer_largest_space=True,
        )
        if options.align_to_grid:
            pos = snap_to_grid(pos, options.grid_size)
        repositioned.append(replace(panel, position=pos))

    result = repositioned
    if options.compact_layout:
        result = compact_layout(result, options.container_size, options.padding)

    if options.minimize_overlaps:
        before = count_overlaps(list(panels))
        after = count_overlaps(result)
        if after > before:
            log.warning(
                "Re-placement raised overlaps from %d to %d; keeping input arrangement",
                before, after,
            )
            result = ordered
            if options.compact_layout:
                result = compact_layout(result, options.container_size, options.padding)

    log.info(
        "Optimized %d panel(s): sort=%s compact=%s grid=%s",
        len(result), options.sort_by, options.compact_layout, options.align_to_grid,
    )
    return result

"""Layout validation — structural checks and per-panel constraint checks."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import Size, ViewportBounds, constrain_position, constrain_size

from .metrics import calculate_layout_metrics, overlapping_pairs
from .models import ConstraintCheck, PanelLayout, ValidationResult


def validate_layout(panels: Sequence[PanelLayout], container_size: Size) -> ValidationResult:
    """Check a panel set for structural problems.

    Only duplicate ids and negative positions are errors.  Panels past
    the container, undersized panels and overlaps are warnings, since a
    layout may be temporarily in that state while the user drags.
    """
    result = ValidationResult()

    # ── Ids must be unique ──
    seen_ids: set[str] = set()
    for p in panels:
        if p.id in seen_ids:
            result.errors.append(f"Duplicate panel ID: {p.id}")
        seen_ids.add(p.id)

    # ── Bounds and size ──
    floor = LAYOUT_RULES.min_usable_size
    for p in panels:
        if p.position.x < 0 or p.position.y < 0:
            result.errors.append(f"Panel {p.id} has negative position")

        if p.right > container_size.width or p.bottom > container_size.height:
            result.warnings.append(f"Panel {p.id} extends beyond container bounds")

        if p.size.width < floor or p.size.height < floor:
            result.warnings.append(f"Panel {p.id} is very small and may be unusable")

    # ── Overlaps ──
    for a, b in overlapping_pairs(panels):
        result.warnings.append(f"Panels {a.id} and {b.id} overlap")

    # ── Suggestions ──
    if len(panels) > LAYOUT_RULES.max_recommended_panels:
        result.suggestions.append(
            "Consider reducing the number of panels for better performance"
        )

    metrics = calculate_layout_metrics(panels, container_size)
    if metrics.utilization > LAYOUT_RULES.dense_utilization_pct:
        result.suggestions.append(
            "Layout is very dense - consider increasing container size "
            "or reducing panel sizes"
        )
    if metrics.overlapping_panels > 0:
        result.suggestions.append("Run layout optimization to resolve overlapping panels")

    return result


def validate_panel_constraints(panel: PanelLayout, bounds: ViewportBounds) -> ConstraintCheck:
    """Check one panel against viewport bounds and its own constraints.

    When anything is violated, ``adjusted_panel`` holds a copy moved back
    inside the bounds and resized to satisfy the constraints.  The
    panel's constraints themselves are never changed.
    """
    check = ConstraintCheck()
    cons = panel.constraints

    if panel.position.x < bounds.x or panel.position.y < bounds.y:
        check.violations.append("Panel position is outside viewport bounds")

    if panel.right > bounds.x + bounds.width or panel.bottom > bounds.y + bounds.height:
        check.violations.append("Panel extends beyond viewport bounds")

    if panel.size.width < cons.min_size.width or panel.size.height < cons.min_size.height:
        check.violations.append("Panel size is below minimum constraints")

    if cons.max_size is not None and (
        panel.size.width > cons.max_size.width or panel.size.height > cons.max_size.height
    ):
        check.violations.append("Panel size exceeds maximum constraints")

    pb = cons.position_bounds
    if pb is not None and (
        panel.position.x < pb.left or panel.position.y < pb.top
        or panel.right > pb.right or panel.bottom > pb.bottom
    ):
        check.violations.append("Panel is outside its position bounds")

    if not check.violations:
        return check

    position = constrain_position(panel.position, panel.size, bounds)
    if pb is not None:
        position = constrain_position(
            position, panel.size,
            ViewportBounds(x=pb.left, y=pb.top, width=pb.right - pb.left, height=pb.bottom - pb.top),
        )
    size = constrain_size(panel.size, cons.min_size, cons.max_size, bounds, position)
    check.adjusted_panel = replace(panel, position=position, size=size)
    return check

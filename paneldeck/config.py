"""Shared tunables for the layout engine.

Every stage that quantizes, probes or judges a layout (gap finder,
placement solver, optimizer, validator, serializer) reads its defaults
from the single ``LAYOUT_RULES`` instance below, so placement and
metrics stay consistent with each other.

All distances are in viewport units (CSS pixels in the shell).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutRules:
    """Numeric rules for panel placement and layout diagnostics."""

    placement_cell_size: float = 20.0
    """Occupancy-grid cell size used when looking for free space to place
    a panel.  Smaller cells are more precise but slower."""

    gap_cell_size: float = 50.0
    """Coarser cell size used to report gaps in layout metrics."""

    gap_min_cells: int = 4
    """A reported gap must cover strictly more than this many gap cells."""

    cascade_base_inset: float = 20.0
    """Offset of the first cascade candidate from the viewport origin."""

    cascade_step: float = 30.0
    """Diagonal step between consecutive cascade candidates."""

    cascade_extra_attempts: int = 10
    """Cascade probes ``len(existing) + cascade_extra_attempts`` positions."""

    compaction_step: float = 10.0
    """Grid pitch of candidate positions probed during compaction."""

    snap_threshold: float = 10.0
    """Magnetic distance within which a position snaps to a grid line."""

    min_usable_size: float = 100.0
    """Panels narrower or shorter than this are flagged as unusable."""

    default_min_width: float = 200.0
    default_min_height: float = 150.0
    """Minimum size assigned to imported panels without constraints."""

    default_z_index: int = 100

    max_recommended_panels: int = 20
    """Above this count the validator suggests trimming the layout."""

    dense_utilization_pct: float = 80.0
    """Above this utilization the validator reports a dense layout."""

    slow_operation_ms: float = 100.0
    large_panel_count: int = 50
    """Thresholds for operation-monitor advisories."""

    export_version: str = "1.0.0"


# Shared defaults read by every layout module.
LAYOUT_RULES = LayoutRules()

"""Layout engine — finds space for panels and keeps arrangements healthy.

Submodules:
  models        Panel/result dataclasses and LayoutError.
  grid          Occupancy grid and greedy free-rectangle search.
  snapping      Grid snapping of positions.
  placement     Placement solver (alignment, free regions, cascade).
  optimizer     Whole-layout re-placement and compaction.
  metrics       Utilization, density, overlap and gap statistics.
  validation    Structural layout checks and per-panel constraint checks.
  serialization Versioned export / lenient import.
  preview       SVG thumbnails.
  monitor       Operation timing.
"""

from .models import (
    PositionBounds, PanelConstraints, PanelMetadata, PanelLayout,
    Region, AvailableSpace, OptimizationOptions, LayoutMetrics,
    ValidationResult, ConstraintCheck, ImportResult, LayoutPreview,
    OperationMetrics, LayoutError, ALIGNMENTS, SORT_KEYS, PANEL_COMPONENTS,
)
from .grid import OccupancyGrid, calculate_available_space, find_large_gaps
from .snapping import snap_to_grid, snap_layout_to_grid
from .placement import find_optimal_position
from .optimizer import optimize_layout, compact_layout, sort_panels
from .metrics import calculate_layout_metrics, count_overlaps
from .validation import validate_layout, validate_panel_constraints
from .serialization import (
    export_layout, export_layout_json, import_layout, panel_to_dict, parse_panel,
)
from .preview import generate_layout_preview
from .monitor import measure_operation

__all__ = [
    # Models
    "PositionBounds", "PanelConstraints", "PanelMetadata", "PanelLayout",
    "Region", "AvailableSpace", "OptimizationOptions", "LayoutMetrics",
    "ValidationResult", "ConstraintCheck", "ImportResult", "LayoutPreview",
    "OperationMetrics", "LayoutError", "ALIGNMENTS", "SORT_KEYS", "PANEL_COMPONENTS",
    # Free space
    "OccupancyGrid", "calculate_available_space", "find_large_gaps",
    # Placement / optimization
    "snap_to_grid", "snap_layout_to_grid", "find_optimal_position",
    "optimize_layout", "compact_layout", "sort_panels",
    # Diagnostics
    "calculate_layout_metrics", "count_overlaps",
    "validate_layout", "validate_panel_constraints",
    # Serialization
    "export_layout", "export_layout_json", "import_layout",
    "panel_to_dict", "parse_panel",
    # Misc
    "generate_layout_preview", "measure_operation",
]

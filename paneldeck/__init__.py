"""paneldeck — panel layout and space-allocation engine.

Pure functions over panel records and a container size:

  geometry  — positions, sizes, overlap and clamping primitives
  layout    — free-space search, placement, optimization, metrics,
              validation and import/export of panel arrangements
  config    — shared numeric rules (grid sizes, thresholds, defaults)
"""

from .config import LAYOUT_RULES, LayoutRules
from .geometry import Position, Size, Padding, ViewportBounds
from .layout import (
    PanelLayout, PanelConstraints, PanelMetadata, OptimizationOptions, LayoutError,
    calculate_available_space, find_optimal_position, optimize_layout,
    calculate_layout_metrics, validate_layout, export_layout, import_layout,
)

__all__ = [
    "LAYOUT_RULES", "LayoutRules",
    "Position", "Size", "Padding", "ViewportBounds",
    "PanelLayout", "PanelConstraints", "PanelMetadata", "OptimizationOptions", "LayoutError",
    "calculate_available_space", "find_optimal_position", "optimize_layout",
    "calculate_layout_metrics", "validate_layout", "export_layout", "import_layout",
]

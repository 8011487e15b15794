"""Layout dataclasses — panels, free-space regions, results and options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import Position, Size, ViewportBounds


Alignment = Literal["top-left", "top-right", "bottom-left", "bottom-right", "center"]
ALIGNMENTS: tuple[str, ...] = ("top-left", "top-right", "bottom-left", "bottom-right", "center")

SortKey = Literal["size", "creation", "usage", "type"]
SORT_KEYS: tuple[str, ...] = ("size", "creation", "usage", "type")

# Panel kinds known to the shell; other strings are carried through untouched.
PANEL_COMPONENTS: tuple[str, ...] = ("smart-hub", "ai-chat", "task-manager", "productivity")


# ── Panels ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PositionBounds:
    """Absolute edges a panel is allowed to move within."""

    left: float
    top: float
    right: float
    bottom: float


def _default_min_size() -> Size:
    return Size(LAYOUT_RULES.default_min_width, LAYOUT_RULES.default_min_height)


@dataclass(frozen=True)
class PanelConstraints:
    min_size: Size = field(default_factory=_default_min_size)
    max_size: Size | None = None
    position_bounds: PositionBounds | None = None


@dataclass(frozen=True)
class PanelMetadata:
    title: str
    description: str | None = None
    icon: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class PanelLayout:
    """A positioned, resizable panel inside the viewport.

    The engine never mutates a panel; every operation that moves or
    resizes one returns a new record via ``dataclasses.replace``.
    """

    id: str
    component: str
    position: Position
    size: Size
    z_index: int = LAYOUT_RULES.default_z_index
    visible: bool = True
    constraints: PanelConstraints = field(default_factory=PanelConstraints)
    metadata: PanelMetadata | None = None

    @property
    def area(self) -> float:
        return self.size.width * self.size.height

    @property
    def right(self) -> float:
        return self.position.x + self.size.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.size.height

    @property
    def center(self) -> Position:
        return Position(
            self.position.x + self.size.width / 2,
            self.position.y + self.size.height / 2,
        )

    @property
    def title(self) -> str:
        """Display title, falling back to the id."""
        if self.metadata and self.metadata.title:
            return self.metadata.title
        return self.id


# ── Free space ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Region:
    """A free rectangle found by the gap finder."""

    x: float
    y: float
    width: float
    height: float
    area: float

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def fits(self, size: Size) -> bool:
        return self.width >= size.width and self.height >= size.height


@dataclass
class AvailableSpace:
    """Disjoint free rectangles at one grid resolution (not optimal)."""

    regions: list[Region]
    total_area: float
    largest_region: Region | None


# ── Options / results ──────────────────────────────────────────────


@dataclass(frozen=True)
class OptimizationOptions:
    container_size: Size
    grid_size: float = 20.0
    padding: float = 20.0
    preserve_relative_positions: bool = False
    minimize_overlaps: bool = True
    compact_layout: bool = True
    align_to_grid: bool = True
    sort_by: SortKey | None = "size"


@dataclass
class LayoutMetrics:
    """Read-only snapshot of a layout, recomputed on demand."""

    total_panels: int
    total_area: float
    used_area: float
    free_area: float
    utilization: float          # percent of container area
    average_panel_size: Size
    panel_density: float        # panels per 100×100 units
    overlapping_panels: int     # overlapping pairs
    bounding_box: ViewportBounds
    center_of_mass: Position
    gaps: list[Region]
    covered_area: float = 0.0   # union area, overlaps counted once


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        # Warnings never invalidate a layout.
        return len(self.errors) == 0


@dataclass
class ConstraintCheck:
    """Outcome of checking one panel against its bounds and constraints."""

    violations: list[str] = field(default_factory=list)
    adjusted_panel: PanelLayout | None = None

    @property
    def valid(self) -> bool:
        return len(self.violations) == 0


@dataclass
class ImportResult:
    success: bool
    panels: list[PanelLayout] | None = None
    error: str | None = None
    metadata: dict[str, Any] | None = None
    skipped: int = 0            # malformed panel records dropped on import


@dataclass
class LayoutPreview:
    svg: str
    bounding_box: ViewportBounds


@dataclass
class OperationMetrics:
    operation: str
    operation_time_ms: float = 0.0
    panel_count: int = 0
    optimization_suggestions: list[str] = field(default_factory=list)


class LayoutError(Exception):
    """Raised when a layout operation is called with an invalid argument."""

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid '{parameter}': {reason}")

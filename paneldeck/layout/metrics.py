"""Layout metrics — utilization, density, overlaps, gaps."""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import box as shapely_box
from shapely.ops import unary_union

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import Position, Size, ViewportBounds, bounding_box, panels_overlap

from .grid import find_large_gaps
from .models import LayoutMetrics, PanelLayout


def count_overlaps(panels: Sequence[PanelLayout]) -> int:
    """Number of overlapping pairs (exhaustive pairwise check)."""
    n = 0
    for i in range(len(panels)):
        for j in range(i + 1, len(panels)):
            if panels_overlap(panels[i], panels[j]):
                n += 1
    return n


def overlapping_pairs(panels: Sequence[PanelLayout]) -> list[tuple[PanelLayout, PanelLayout]]:
    return [
        (panels[i], panels[j])
        for i in range(len(panels))
        for j in range(i + 1, len(panels))
        if panels_overlap(panels[i], panels[j])
    ]


def covered_area(panels: Sequence[PanelLayout]) -> float:
    """Area covered by the union of all panels."""
    boxes = [
        shapely_box(p.position.x, p.position.y, p.right, p.bottom)
        for p in panels
        if p.size.width > 0 and p.size.height > 0
    ]
    if not boxes:
        return 0.0
    return unary_union(boxes).area


def calculate_layout_metrics(
    panels: Sequence[PanelLayout],
    container_size: Size,
    gap_cell_size: float = LAYOUT_RULES.gap_cell_size,
) -> LayoutMetrics:
    """Compute a metrics snapshot for *panels* in a container.

    ``used_area`` sums panel areas, so overlapping panels count twice;
    ``covered_area`` is the union and counts shared area once.
    """
    total_area = container_size.width * container_size.height

    if not panels:
        return LayoutMetrics(
            total_panels=0,
            total_area=total_area,
            used_area=0.0,
            free_area=total_area,
            utilization=0.0,
            average_panel_size=Size(0, 0),
            panel_density=0.0,
            overlapping_panels=0,
            bounding_box=ViewportBounds(x=0, y=0, width=0, height=0),
            center_of_mass=Position(0, 0),
            gaps=[],
        )

    n = len(panels)
    used_area = sum(p.area for p in panels)
    average = Size(
        width=sum(p.size.width for p in panels) / n,
        height=sum(p.size.height for p in panels) / n,
    )
    centroid = Position(
        x=sum(p.center.x for p in panels) / n,
        y=sum(p.center.y for p in panels) / n,
    )

    return LayoutMetrics(
        total_panels=n,
        total_area=total_area,
        used_area=used_area,
        free_area=total_area - used_area,
        utilization=(used_area / total_area) * 100 if total_area > 0 else 0.0,
        average_panel_size=average,
        panel_density=n / (total_area / 10000) if total_area > 0 else 0.0,
        overlapping_panels=count_overlaps(panels),
        bounding_box=bounding_box(panels),
        center_of_mass=centroid,
        gaps=find_large_gaps(panels, container_size, cell_size=gap_cell_size),
        covered_area=covered_area(panels),
    )

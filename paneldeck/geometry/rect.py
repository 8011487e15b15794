"""Axis-aligned rectangle primitives for panel geometry.

All coordinates are viewport units, origin top-left, X grows right and
Y grows down.  A rectangle is described by its top-left ``Position`` and
its ``Size``; every helper here is a pure function.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol

from shapely.geometry import box as shapely_box


# ── Value types ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Top-left corner of a rectangle."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """Width and height of a rectangle (never negative)."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Padding:
    """Inset subtracted from each side of a container."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> Padding:
        return cls(top=value, right=value, bottom=value, left=value)


@dataclass(frozen=True)
class ViewportBounds:
    """Usable rectangle of a container after padding."""

    x: float
    y: float
    width: float
    height: float
    padding: Padding | None = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class _HasRect(Protocol):
    position: Position
    size: Size


# ── Overlap / containment ──────────────────────────────────────────


def _as_box(pos: Position, size: Size):
    return shapely_box(pos.x, pos.y, pos.x + size.width, pos.y + size.height)


def overlaps(
    a_pos: Position, a_size: Size,
    b_pos: Position, b_size: Size,
) -> bool:
    """True if two rectangles share an area of non-zero measure.

    Rectangles touching only along an edge or at a corner do not
    overlap, and degenerate (zero-width or zero-height) rectangles never
    overlap anything.

    Runs in the inner loops of cascade probing and compaction, so it
    sticks to interval arithmetic.
    """
    if a_size.width <= 0 or a_size.height <= 0 or b_size.width <= 0 or b_size.height <= 0:
        return False
    return (
        a_pos.x < b_pos.x + b_size.width
        and b_pos.x < a_pos.x + a_size.width
        and a_pos.y < b_pos.y + b_size.height
        and b_pos.y < a_pos.y + a_size.height
    )


def panels_overlap(a: _HasRect, b: _HasRect) -> bool:
    """Overlap test for anything carrying ``position`` and ``size``."""
    return overlaps(a.position, a.size, b.position, b.size)


def rect_inside(pos: Position, size: Size, bounds: ViewportBounds) -> bool:
    """Check if a rectangle lies inside the bounds (edges may touch)."""
    outer = shapely_box(bounds.x, bounds.y, bounds.right, bounds.bottom)
    return outer.covers(_as_box(pos, size))


# ── Clamping ───────────────────────────────────────────────────────


def constrain_position(
    pos: Position, size: Size, bounds: ViewportBounds,
) -> Position:
    """Clamp *pos* so ``[pos, pos + size]`` lies inside *bounds*.

    When *size* is larger than the bounds on an axis, the rectangle is
    pinned to the bounds origin on that axis and overhangs the far edge.
    """
    max_x = bounds.x + bounds.width - size.width
    max_y = bounds.y + bounds.height - size.height
    return Position(
        x=max(bounds.x, min(max_x, pos.x)),
        y=max(bounds.y, min(max_y, pos.y)),
    )


def constrain_size(
    size: Size,
    min_size: Size,
    max_size: Size | None,
    bounds: ViewportBounds,
    position: Position | None = None,
) -> Size:
    """Clamp *size* between the min/max limits and the viewport.

    The minimum always wins: a panel whose minimum does not fit in the
    remaining viewport keeps its minimum and extends past the edge.
    """
    width = max(min_size.width, size.width)
    height = max(min_size.height, size.height)

    if max_size is not None:
        width = min(max_size.width, width)
        height = min(max_size.height, height)

    if position is not None:
        width = min(width, bounds.x + bounds.width - position.x)
        height = min(height, bounds.y + bounds.height - position.y)

    return Size(
        width=max(min_size.width, width),
        height=max(min_size.height, height),
    )


# ── Bounds ─────────────────────────────────────────────────────────


def calculate_viewport_bounds(
    container_size: Size, padding: Padding | None = None,
) -> ViewportBounds:
    """Usable bounds of a container after removing *padding*."""
    padding = padding or Padding()
    return ViewportBounds(
        x=padding.left,
        y=padding.top,
        width=container_size.width - padding.left - padding.right,
        height=container_size.height - padding.top - padding.bottom,
        padding=padding,
    )


def get_panel_bounds(panel: _HasRect) -> ViewportBounds:
    """Bounds rectangle occupied by a single panel."""
    return ViewportBounds(
        x=panel.position.x,
        y=panel.position.y,
        width=panel.size.width,
        height=panel.size.height,
    )


def bounding_box(panels: Iterable[_HasRect]) -> ViewportBounds | None:
    """Smallest rectangle containing every panel, or None when empty."""
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for p in panels:
        min_x = min(min_x, p.position.x)
        min_y = min(min_y, p.position.y)
        max_x = max(max_x, p.position.x + p.size.width)
        max_y = max(max_y, p.position.y + p.size.height)
    if min_x == math.inf:
        return None
    return ViewportBounds(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)


def calculate_minimum_bounds(panels: Iterable[_HasRect]) -> ViewportBounds:
    """Bounds needed to show every panel; 800×600 for an empty layout."""
    bbox = bounding_box(panels)
    if bbox is None:
        return ViewportBounds(x=0, y=0, width=800, height=600)
    return bbox

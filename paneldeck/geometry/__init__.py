from .rect import (
    Position,
    Size,
    Padding,
    ViewportBounds,
    overlaps,
    panels_overlap,
    rect_inside,
    constrain_position,
    constrain_size,
    calculate_viewport_bounds,
    get_panel_bounds,
    bounding_box,
    calculate_minimum_bounds,
)

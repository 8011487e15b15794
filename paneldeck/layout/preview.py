"""SVG thumbnail of a layout for workspace pickers."""

from __future__ import annotations

from typing import Sequence

from paneldeck.geometry import Size, ViewportBounds, bounding_box

from .models import LayoutPreview, PanelLayout


PALETTE = ("#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6", "#06b6d4")


def generate_layout_preview(
    panels: Sequence[PanelLayout],
    preview_size: Size = Size(200, 150),
) -> LayoutPreview:
    """Render the layout bounding box scaled into *preview_size*.

    The layout keeps its aspect ratio and fills 90% of the tighter
    preview axis, centred.  Colours cycle through ``PALETTE``.
    """
    pw, ph = preview_size.width, preview_size.height
    bbox = bounding_box(panels)

    if bbox is None or bbox.width <= 0 or bbox.height <= 0:
        svg = (
            f'<svg width="{pw:g}" height="{ph:g}" xmlns="http://www.w3.org/2000/svg">'
            f'<rect width="100%" height="100%" fill="#f3f4f6"/></svg>'
        )
        return LayoutPreview(
            svg=svg,
            bounding_box=bbox or ViewportBounds(x=0, y=0, width=pw, height=ph),
        )

    scale = min(pw / bbox.width, ph / bbox.height) * 0.9
    off_x = (pw - bbox.width * scale) / 2
    off_y = (ph - bbox.height * scale) / 2

    elements = [
        f'<rect width="{pw:g}" height="{ph:g}" fill="#f9fafb" '
        f'stroke="#e5e7eb" stroke-width="1"/>'
    ]
    for i, p in enumerate(panels):
        color = PALETTE[i % len(PALETTE)]
        x = (p.position.x - bbox.x) * scale + off_x
        y = (p.position.y - bbox.y) * scale + off_y
        elements.append(
            f'<rect x="{x:.2f}" y="{y:.2f}" width="{p.size.width * scale:.2f}" '
            f'height="{p.size.height * scale:.2f}" fill="{color}" fill-opacity="0.7" '
            f'stroke="{color}" stroke-width="1" rx="2"/>'
        )

    svg = (
        f'<svg width="{pw:g}" height="{ph:g}" xmlns="http://www.w3.org/2000/svg">'
        + "".join(elements)
        + "</svg>"
    )
    return LayoutPreview(svg=svg, bounding_box=bbox)

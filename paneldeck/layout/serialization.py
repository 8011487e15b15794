"""Layout serialization — versioned export and lenient import.

The exported shape is the persisted format shared with storage, so it
keeps the shell's camelCase keys::

    {
      "version": "1.0.0",
      "timestamp": 1760000000000,
      "metadata": {"name": ..., "description": ..., "tags": [...], "panelCount": 4},
      "panels": [
        {"id": "chat", "component": "ai-chat",
         "position": {"x": 20, "y": 20}, "size": {"width": 400, "height": 300},
         "zIndex": 100, "visible": true,
         "constraints": {"minSize": {"width": 200, "height": 150}},
         "metadata": {"title": "Chat"}}
      ]
    }

Import never raises.  A malformed document yields a failed
``ImportResult``; individual malformed panel records are skipped and
counted in ``ImportResult.skipped``.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from datetime import datetime
from typing import Any, Mapping, Sequence

from paneldeck.config import LAYOUT_RULES
from paneldeck.geometry import Position, Size

from .models import (
    ImportResult, PanelConstraints, PanelLayout, PanelMetadata, PositionBounds,
)


log = logging.getLogger(__name__)


# ── Export ─────────────────────────────────────────────────────────


def _size_to_dict(s: Size) -> dict:
    return {"width": s.width, "height": s.height}


def _constraints_to_dict(c: PanelConstraints) -> dict:
    d: dict[str, Any] = {"minSize": _size_to_dict(c.min_size)}
    if c.max_size is not None:
        d["maxSize"] = _size_to_dict(c.max_size)
    if c.position_bounds is not None:
        pb = c.position_bounds
        d["positionBounds"] = {
            "left": pb.left, "top": pb.top, "right": pb.right, "bottom": pb.bottom,
        }
    return d


def panel_to_dict(p: PanelLayout) -> dict:
    """Serialize a PanelLayout to a JSON-safe dict."""
    d: dict[str, Any] = {
        "id": p.id,
        "component": p.component,
        "position": {"x": p.position.x, "y": p.position.y},
        "size": _size_to_dict(p.size),
        "zIndex": p.z_index,
        "visible": p.visible,
        "constraints": _constraints_to_dict(p.constraints),
    }
    if p.metadata is not None:
        m = p.metadata
        d["metadata"] = {
            "title": m.title,
            **({"description": m.description} if m.description is not None else {}),
            **({"icon": m.icon} if m.icon is not None else {}),
            **({"color": m.color} if m.color is not None else {}),
        }
    return d


def export_layout(
    panels: Sequence[PanelLayout],
    metadata: Mapping[str, Any] | None = None,
    *,
    timestamp: int | None = None,
) -> dict:
    """Build the versioned export record for *panels*.

    *metadata* may carry ``name``, ``description`` and ``tags``; missing
    entries get defaults.  *timestamp* is milliseconds since the epoch
    and defaults to now.
    """
    metadata = metadata or {}
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return {
        "version": LAYOUT_RULES.export_version,
        "timestamp": timestamp,
        "metadata": {
            "name": metadata.get("name")
            or f"Layout Export {datetime.now():%Y-%m-%d %H:%M:%S}",
            "description": metadata.get("description") or "Exported layout configuration",
            "tags": list(metadata.get("tags") or []),
            "panelCount": len(panels),
        },
        "panels": [panel_to_dict(p) for p in panels],
    }


def export_layout_json(
    panels: Sequence[PanelLayout],
    metadata: Mapping[str, Any] | None = None,
    *,
    timestamp: int | None = None,
) -> str:
    """Same as :func:`export_layout`, rendered as indented JSON text."""
    return json.dumps(export_layout(panels, metadata, timestamp=timestamp), indent=2)


# ── Import ─────────────────────────────────────────────────────────


def _parse_size(data: Mapping[str, Any]) -> Size:
    return Size(width=float(data["width"]), height=float(data["height"]))


def _parse_constraints(data: Mapping[str, Any] | None) -> PanelConstraints:
    if not data:
        return PanelConstraints()
    min_size = data.get("minSize")
    max_size = data.get("maxSize")
    pb = data.get("positionBounds")
    return PanelConstraints(
        min_size=_parse_size(min_size) if min_size else PanelConstraints().min_size,
        max_size=_parse_size(max_size) if max_size else None,
        position_bounds=PositionBounds(
            left=float(pb["left"]), top=float(pb["top"]),
            right=float(pb["right"]), bottom=float(pb["bottom"]),
        ) if pb else None,
    )


def _parse_metadata(data: Mapping[str, Any] | None) -> PanelMetadata | None:
    if not data:
        return None
    return PanelMetadata(
        title=str(data.get("title") or ""),
        description=data.get("description"),
        icon=data.get("icon"),
        color=data.get("color"),
    )


def _generated_id() -> str:
    return f"imported_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def parse_panel(data: Mapping[str, Any]) -> PanelLayout:
    """Parse one exported panel record, filling defaults for optional fields.

    Raises ``KeyError``, ``TypeError``, ``ValueError`` or
    ``AttributeError`` on a malformed record; :func:`import_layout`
    turns those into skipped entries.
    """
    pos = data["position"]
    size = _parse_size(data["size"])
    if size.width <= 0 or size.height <= 0:
        raise ValueError(f"panel size must be positive, got {size.width}×{size.height}")
    z_index = data.get("zIndex")
    return PanelLayout(
        id=str(data.get("id") or _generated_id()),
        component=str(data["component"]),
        position=Position(x=float(pos["x"]), y=float(pos["y"])),
        size=size,
        z_index=int(z_index) if z_index is not None else LAYOUT_RULES.default_z_index,
        visible=data.get("visible") is not False,
        constraints=_parse_constraints(data.get("constraints")),
        metadata=_parse_metadata(data.get("metadata")),
    )


def import_layout(data: str | bytes | Mapping[str, Any]) -> ImportResult:
    """Parse an exported layout (JSON text or an already-decoded dict).

    Panel records missing ``component``, ``position`` or ``size``, or
    whose fields cannot be parsed, are dropped rather than failing the
    whole import; the number dropped is reported in ``skipped``.
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except (ValueError, TypeError, RecursionError) as e:
            return ImportResult(success=False, error=f"Failed to parse layout: {e}")

    if not isinstance(data, Mapping):
        return ImportResult(success=False, error="Invalid layout format: missing panels array")

    raw_panels = data.get("panels")
    if not isinstance(raw_panels, list):
        return ImportResult(success=False, error="Invalid layout format: missing panels array")

    panels: list[PanelLayout] = []
    skipped = 0
    for i, entry in enumerate(raw_panels):
        if not isinstance(entry, Mapping) or not (
            entry.get("component") and entry.get("position") and entry.get("size")
        ):
            skipped += 1
            continue
        try:
            panels.append(parse_panel(entry))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log.debug("Panel record %d unparseable: %s", i, e)
            skipped += 1

    if skipped:
        log.warning("Skipped %d malformed panel record(s) during import", skipped)

    metadata = data.get("metadata")
    log.info(
        "Imported %d panel(s) from layout version %s",
        len(panels), data.get("version", "unknown"),
    )
    return ImportResult(
        success=True,
        panels=panels,
        metadata=dict(metadata) if isinstance(metadata, Mapping) else None,
        skipped=skipped,
    )

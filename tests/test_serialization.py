"""Tests for layout export / import."""

from __future__ import annotations

import json
import unittest

from paneldeck.geometry import Size
from paneldeck.layout import (
    PanelConstraints,
    PositionBounds,
    export_layout,
    export_layout_json,
    import_layout,
    panel_to_dict,
)
from tests.dashboard_fixture import make_dashboard, panel


class TestExport(unittest.TestCase):

    def test_envelope(self):
        data = export_layout(
            make_dashboard(),
            {"name": "Morning", "tags": ["focus"]},
            timestamp=1760000000000,
        )
        self.assertEqual(data["version"], "1.0.0")
        self.assertEqual(data["timestamp"], 1760000000000)
        self.assertEqual(data["metadata"]["name"], "Morning")
        self.assertEqual(data["metadata"]["description"], "Exported layout configuration")
        self.assertEqual(data["metadata"]["tags"], ["focus"])
        self.assertEqual(data["metadata"]["panelCount"], 4)
        self.assertEqual(len(data["panels"]), 4)

    def test_default_name(self):
        data = export_layout([])
        self.assertTrue(data["metadata"]["name"].startswith("Layout Export "))
        self.assertIsInstance(data["timestamp"], int)

    def test_panel_record(self):
        chat = make_dashboard()[1]
        self.assertEqual(panel_to_dict(chat), {
            "id": "chat",
            "component": "ai-chat",
            "position": {"x": 640, "y": 20},
            "size": {"width": 600, "height": 700},
            "zIndex": 110,
            "visible": True,
            "constraints": {
                "minSize": {"width": 300, "height": 250},
                "maxSize": {"width": 1200, "height": 1000},
            },
            "metadata": {"title": "AI Chat"},
        })

    def test_metadata_omitted_when_absent(self):
        self.assertNotIn("metadata", panel_to_dict(panel("bare", 0, 0, 200, 200)))

    def test_json_text(self):
        text = export_layout_json(make_dashboard(), timestamp=1)
        self.assertEqual(json.loads(text)["timestamp"], 1)


class TestImport(unittest.TestCase):

    def test_round_trip(self):
        original = make_dashboard() + [
            panel(
                "pinned", 0, 900, 300, 150, "productivity", z_index=0,
                constraints=PanelConstraints(
                    min_size=Size(100, 100),
                    position_bounds=PositionBounds(0, 800, 1920, 1080),
                ),
            ),
        ]
        result = import_layout(export_layout_json(original))

        self.assertTrue(result.success)
        self.assertEqual(result.skipped, 0)
        self.assertEqual(len(result.panels), len(original))
        for before, after in zip(original, result.panels):
            self.assertEqual(after.id, before.id)
            self.assertEqual(after.component, before.component)
            self.assertEqual(after.position, before.position)
            self.assertEqual(after.size, before.size)
            self.assertEqual(after.z_index, before.z_index)
            self.assertEqual(after.visible, before.visible)
            self.assertEqual(after.constraints, before.constraints)
            self.assertEqual(after.metadata, before.metadata)

    def test_accepts_decoded_dict(self):
        result = import_layout(export_layout(make_dashboard()))
        self.assertTrue(result.success)
        self.assertEqual(result.metadata["panelCount"], 4)

    def test_invalid_json(self):
        result = import_layout("{not json")
        self.assertFalse(result.success)
        self.assertTrue(result.error.startswith("Failed to parse layout"))

    def test_deeply_nested_json(self):
        result = import_layout("[" * 100000)
        self.assertFalse(result.success)
        self.assertIsNone(result.panels)
        self.assertTrue(result.error.startswith("Failed to parse layout"))

    def test_missing_panels(self):
        for doc in ({"version": "1.0.0"}, {"panels": {"a": 1}}, [1, 2, 3]):
            result = import_layout(doc)
            self.assertFalse(result.success)
            self.assertIsNone(result.panels)
            self.assertIn("missing panels array", result.error)

    def test_malformed_records_skipped(self):
        doc = {
            "panels": [
                {"id": "good", "component": "ai-chat",
                 "position": {"x": 1, "y": 2}, "size": {"width": 300, "height": 200}},
                {"id": "no-size", "component": "ai-chat", "position": {"x": 1, "y": 2}},
                {"id": "no-kind", "position": {"x": 1, "y": 2}, "size": {"width": 3, "height": 4}},
                {"id": "bad-pos", "component": "ai-chat",
                 "position": {"x": "left"}, "size": {"width": 3, "height": 4}},
                "not a record",
            ],
        }
        with self.assertLogs("paneldeck.layout.serialization", level="WARNING"):
            result = import_layout(doc)
        self.assertTrue(result.success)
        self.assertEqual([p.id for p in result.panels], ["good"])
        self.assertEqual(result.skipped, 4)

    def test_non_positive_size_skipped(self):
        doc = {"panels": [
            {"id": "flat", "component": "ai-chat",
             "position": {"x": 0, "y": 0}, "size": {"width": 0, "height": 200}},
            {"id": "inverted", "component": "ai-chat",
             "position": {"x": 0, "y": 0}, "size": {"width": 300, "height": -5}},
            {"id": "ok", "component": "ai-chat",
             "position": {"x": 0, "y": 0}, "size": {"width": 300, "height": 200}},
        ]}
        with self.assertLogs("paneldeck.layout.serialization", level="WARNING"):
            result = import_layout(doc)
        self.assertEqual([p.id for p in result.panels], ["ok"])
        self.assertEqual(result.skipped, 2)

    def test_defaults_filled(self):
        doc = {"panels": [
            {"component": "task-manager",
             "position": {"x": 0, "y": 0}, "size": {"width": 300, "height": 200}},
        ]}
        p = import_layout(json.dumps(doc)).panels[0]
        self.assertTrue(p.id.startswith("imported_"))
        self.assertEqual(p.z_index, 100)
        self.assertTrue(p.visible)
        self.assertEqual(p.constraints.min_size, Size(200, 150))
        self.assertIsNone(p.constraints.max_size)
        self.assertIsNone(p.metadata)

    def test_generated_ids_unique(self):
        entry = {"component": "ai-chat",
                 "position": {"x": 0, "y": 0}, "size": {"width": 300, "height": 200}}
        panels = import_layout({"panels": [entry, entry]}).panels
        self.assertNotEqual(panels[0].id, panels[1].id)

    def test_explicit_false_visibility_kept(self):
        doc = {"panels": [
            {"id": "hidden", "component": "ai-chat", "visible": False,
             "position": {"x": 0, "y": 0}, "size": {"width": 300, "height": 200}},
        ]}
        self.assertFalse(import_layout(doc).panels[0].visible)


if __name__ == "__main__":
    unittest.main()

"""Tests for the rectangle primitives in paneldeck.geometry."""

from __future__ import annotations

import itertools
import unittest

from paneldeck.geometry import (
    Padding,
    Position,
    Size,
    ViewportBounds,
    bounding_box,
    calculate_minimum_bounds,
    calculate_viewport_bounds,
    constrain_position,
    constrain_size,
    get_panel_bounds,
    overlaps,
    panels_overlap,
    rect_inside,
)
from tests.dashboard_fixture import make_dashboard, panel


class TestOverlap(unittest.TestCase):

    def test_edge_contact_is_not_overlap(self):
        self.assertFalse(overlaps(Position(0, 0), Size(100, 100), Position(100, 0), Size(100, 100)))
        self.assertFalse(overlaps(Position(0, 0), Size(100, 100), Position(0, 100), Size(100, 100)))

    def test_corner_contact_is_not_overlap(self):
        self.assertFalse(overlaps(Position(0, 0), Size(100, 100), Position(100, 100), Size(50, 50)))

    def test_partial_overlap(self):
        self.assertTrue(overlaps(Position(0, 0), Size(100, 100), Position(99, 99), Size(10, 10)))

    def test_containment_is_overlap(self):
        self.assertTrue(overlaps(Position(0, 0), Size(100, 100), Position(10, 10), Size(5, 5)))

    def test_coincident_rectangles_overlap(self):
        self.assertTrue(overlaps(Position(5, 5), Size(10, 10), Position(5, 5), Size(10, 10)))

    def test_degenerate_rectangle_never_overlaps(self):
        self.assertFalse(overlaps(Position(0, 0), Size(0, 100), Position(-10, 0), Size(50, 50)))

    def test_symmetric(self):
        rects = [
            (Position(0, 0), Size(100, 100)),
            (Position(100, 0), Size(100, 100)),
            (Position(50, 50), Size(100, 100)),
            (Position(-20, 90), Size(40, 40)),
            (Position(200, 200), Size(10, 10)),
        ]
        for (ap, asz), (bp, bsz) in itertools.product(rects, repeat=2):
            self.assertEqual(overlaps(ap, asz, bp, bsz), overlaps(bp, bsz, ap, asz))

    def test_panels_overlap(self):
        a = panel("a", 0, 0, 100, 100)
        b = panel("b", 50, 50, 100, 100)
        c = panel("c", 100, 0, 100, 100)
        self.assertTrue(panels_overlap(a, b))
        self.assertFalse(panels_overlap(a, c))

    def test_rect_inside_allows_edge_contact(self):
        bounds = ViewportBounds(0, 0, 100, 100)
        self.assertTrue(rect_inside(Position(0, 0), Size(100, 100), bounds))
        self.assertFalse(rect_inside(Position(1, 0), Size(100, 100), bounds))


class TestConstrain(unittest.TestCase):

    def setUp(self):
        self.bounds = ViewportBounds(10, 10, 500, 400)

    def test_position_inside_unchanged(self):
        self.assertEqual(
            constrain_position(Position(50, 60), Size(100, 100), self.bounds),
            Position(50, 60),
        )

    def test_position_clamped_to_far_edge(self):
        self.assertEqual(
            constrain_position(Position(480, 390), Size(100, 100), self.bounds),
            Position(410, 310),
        )

    def test_position_clamped_to_origin(self):
        self.assertEqual(
            constrain_position(Position(-50, 0), Size(100, 100), self.bounds),
            Position(10, 10),
        )

    def test_oversized_rect_pinned_to_origin(self):
        pos = constrain_position(Position(200, 200), Size(800, 600), self.bounds)
        self.assertEqual(pos, Position(10, 10))

    def test_size_raised_to_minimum(self):
        size = constrain_size(Size(50, 50), Size(200, 150), None, self.bounds)
        self.assertEqual(size, Size(200, 150))

    def test_size_capped_at_maximum(self):
        size = constrain_size(Size(900, 900), Size(100, 100), Size(300, 250), self.bounds)
        self.assertEqual(size, Size(300, 250))

    def test_size_capped_by_viewport(self):
        size = constrain_size(Size(400, 300), Size(100, 100), None, self.bounds, Position(310, 210))
        self.assertEqual(size, Size(200, 200))

    def test_minimum_wins_over_viewport(self):
        # Only 60×60 remains at this position but the minimum is 200×150.
        size = constrain_size(Size(400, 300), Size(200, 150), None, self.bounds, Position(450, 350))
        self.assertEqual(size, Size(200, 150))


class TestBounds(unittest.TestCase):

    def test_viewport_bounds_subtract_padding(self):
        b = calculate_viewport_bounds(Size(1000, 800), Padding(top=10, right=20, bottom=30, left=40))
        self.assertEqual((b.x, b.y, b.width, b.height), (40, 10, 940, 760))

    def test_viewport_bounds_default_padding(self):
        b = calculate_viewport_bounds(Size(1000, 800))
        self.assertEqual((b.x, b.y, b.width, b.height), (0, 0, 1000, 800))

    def test_uniform_padding(self):
        self.assertEqual(Padding.uniform(5), Padding(5, 5, 5, 5))

    def test_panel_bounds(self):
        b = get_panel_bounds(panel("p", 10, 20, 300, 200))
        self.assertEqual((b.x, b.y, b.right, b.bottom), (10, 20, 310, 220))

    def test_bounding_box(self):
        bbox = bounding_box(make_dashboard())
        self.assertEqual((bbox.x, bbox.y, bbox.right, bbox.bottom), (20, 20, 1900, 840))
        self.assertIsNone(bounding_box([]))

    def test_minimum_bounds_default_when_empty(self):
        b = calculate_minimum_bounds([])
        self.assertEqual((b.width, b.height), (800, 600))


if __name__ == "__main__":
    unittest.main()

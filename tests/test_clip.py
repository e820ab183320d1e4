from __future__ import annotations

import unittest

from plotinum_plot.clip import SLOP, clip_half_plane, clip_polyline, is_left, isect
from plotinum_plot.geometry import Point, Rect


SQUARE = Rect(min=Point(0.0, 0.0), size=Point(10.0, 10.0))


def _pts(*xy: tuple[float, float]) -> list[Point]:
    return [Point(x, y) for x, y in xy]


class IsectTests(unittest.TestCase):
    def test_vertical_clip_line(self) -> None:
        p = isect(Point(0.0, 0.0), Point(10.0, 0.0), Point(5.0, 0.0), Point(1.0, 0.0))
        self.assertEqual(p, Point(5.0, 0.0))

    def test_diagonal_segment(self) -> None:
        p = isect(Point(0.0, 0.0), Point(4.0, 8.0), Point(0.0, 2.0), Point(0.0, 1.0))
        self.assertEqual(p, Point(1.0, 2.0))


class ClipPolylineTests(unittest.TestCase):
    def test_inside_polyline_is_unchanged(self) -> None:
        pts = _pts((1.0, 1.0), (9.0, 2.0), (5.0, 9.0), (2.0, 3.0))
        self.assertEqual(clip_polyline(SQUARE, pts), [pts])

    def test_points_on_the_boundary_are_kept(self) -> None:
        pts = _pts((0.0, 0.0), (10.0, 10.0), (0.0, 10.0 + SLOP / 2))
        self.assertEqual(clip_polyline(SQUARE, pts), [pts])

    def test_outside_polyline_is_dropped(self) -> None:
        pts = _pts((-5.0, -5.0), (-1.0, 20.0), (15.0, 20.0))
        self.assertEqual(clip_polyline(SQUARE, pts), [])

    def test_crossing_line_is_cut_at_both_edges(self) -> None:
        out = clip_polyline(SQUARE, _pts((-5.0, 5.0), (15.0, 5.0)))
        self.assertEqual(out, [_pts((0.0, 5.0), (10.0, 5.0))])

    def test_exit_and_reentry_splits_into_runs(self) -> None:
        pts = _pts((5.0, 5.0), (5.0, 15.0), (8.0, 15.0), (8.0, 5.0))
        out = clip_polyline(SQUARE, pts)
        self.assertEqual(out, [_pts((5.0, 5.0), (5.0, 10.0)), _pts((8.0, 10.0), (8.0, 5.0))])

    def test_line_through_corner_keeps_touching_point(self) -> None:
        out = clip_polyline(SQUARE, _pts((-2.0, 8.0), (4.0, 14.0)))
        self.assertEqual(len(out), 1)
        self.assertEqual(len(out[0]), 2)
        self.assertAlmostEqual(out[0][0].x, 0.0)
        self.assertAlmostEqual(out[0][0].y, 10.0)
        self.assertAlmostEqual(out[0][1].x, 0.0)
        self.assertAlmostEqual(out[0][1].y, 10.0)

    def test_degenerate_inputs(self) -> None:
        self.assertEqual(clip_polyline(SQUARE, []), [])
        self.assertEqual(clip_polyline(SQUARE, _pts((5.0, 5.0))), [])

    def test_runs_do_not_alias_input(self) -> None:
        pts = _pts((1.0, 1.0), (2.0, 2.0))
        out = clip_polyline(SQUARE, pts)
        out[0].append(Point(3.0, 3.0))
        self.assertEqual(len(pts), 2)

    def test_single_half_plane(self) -> None:
        out = clip_half_plane(is_left, Point(10.0, 0.0), Point(-1.0, 0.0), _pts((0.0, 0.0), (20.0, 0.0), (0.0, 1.0)))
        self.assertEqual(out, [_pts((0.0, 0.0), (10.0, 0.0)), _pts((10.0, 0.5), (0.0, 1.0))])


if __name__ == "__main__":
    unittest.main()

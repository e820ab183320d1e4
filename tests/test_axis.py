from __future__ import annotations

import math
import unittest

from plotinum_plot.axis import Axis, AxisLabel, AxisTicks, HorizontalAxis, VerticalAxis
from plotinum_plot.draw_area import DrawArea
from plotinum_plot.geometry import Point, Rect
from plotinum_plot.styles import TextStyle
from plotinum_plot.ticks import Tick, constant_ticks

from plot_fakes import FixedFont, RecordingCanvas


def _axis(cls: type[Axis], label: str = "") -> Axis:
    axis = cls(
        label=AxisLabel(style=TextStyle(font=FixedFont(12.0)), text=label),  # type: ignore[arg-type]
        tick=AxisTicks(label=TextStyle(font=FixedFont(10.0))),  # type: ignore[arg-type]
    )
    axis.min = 0.0
    axis.max = 100.0
    return axis


def _area() -> tuple[DrawArea, RecordingCanvas]:
    canvas = RecordingCanvas()
    return DrawArea(canvas=canvas, rect=Rect(min=Point(0.0, 0.0), size=Point(100.0, 100.0))), canvas


class AxisTests(unittest.TestCase):
    def test_default_range_is_empty(self) -> None:
        axis = Axis(label=AxisLabel(style=None), tick=AxisTicks(label=None))  # type: ignore[arg-type]
        self.assertEqual(axis.min, math.inf)
        self.assertEqual(axis.max, -math.inf)

    def test_norm_and_mapping(self) -> None:
        axis = _axis(HorizontalAxis)
        da, _ = _area()
        self.assertEqual(axis.norm(25.0), 0.25)
        self.assertEqual(axis.x(da, 75.0), 75.0)
        self.assertEqual(axis.y(da, 100.0), 100.0)


class HorizontalAxisTests(unittest.TestCase):
    def test_size_sums_label_ticks_line_and_padding(self) -> None:
        self.assertAlmostEqual(_axis(HorizontalAxis, "X").size(), 12.0 + 8.0 + 8.0 + 0.5 + 5.0)
        self.assertAlmostEqual(_axis(HorizontalAxis).size(), 8.0 + 8.0 + 0.5 + 5.0)

    def test_size_without_ticks(self) -> None:
        axis = _axis(HorizontalAxis)
        axis.tick.marker = constant_ticks([])
        self.assertAlmostEqual(axis.size(), 5.5)

    def test_draw_places_axis_line_above_ticks(self) -> None:
        axis = _axis(HorizontalAxis, "X")
        da, canvas = _area()
        axis.draw(da)
        strokes = canvas.strokes()
        axis_line = strokes[-1]
        self.assertAlmostEqual(axis_line[0][1], 28.0)
        self.assertEqual((axis_line[0][0], axis_line[1][0]), (0.0, 100.0))
        self.assertAlmostEqual(axis.size() - axis.padding - axis.line_style.width / 2, axis_line[0][1])

        ticks = strokes[:-1]
        self.assertEqual(len(ticks), 5)
        major, minor = ticks[0], ticks[1]
        self.assertAlmostEqual(major[0][1], 20.0)
        self.assertAlmostEqual(minor[0][1], 24.0)
        self.assertAlmostEqual(minor[1][1], 28.0)
        self.assertEqual(minor[0][0], 25.0)

    def test_draw_labels_major_ticks_only(self) -> None:
        axis = _axis(HorizontalAxis, "X")
        da, canvas = _area()
        axis.draw(da)
        self.assertEqual([t[2] for t in canvas.texts()], ["X", "0", "50", "100"])

    def test_glyph_box_for_right_most_major_label(self) -> None:
        (box,) = _axis(HorizontalAxis).glyph_boxes()
        self.assertEqual(box.x, 1.0)
        self.assertEqual(box.rect.min.x, -7.5)
        self.assertEqual(box.rect.size.x, 15.0)

    def test_no_glyph_boxes_without_major_ticks(self) -> None:
        axis = _axis(HorizontalAxis)
        axis.tick.marker = constant_ticks([Tick(10.0), Tick(20.0)])
        self.assertEqual(axis.glyph_boxes(), [])


class VerticalAxisTests(unittest.TestCase):
    def test_size_includes_widest_label_and_space(self) -> None:
        self.assertAlmostEqual(_axis(VerticalAxis, "Y").size(), 12.0 + 15.0 + 5.0 + 8.0 + 0.5 + 5.0)

    def test_label_is_drawn_rotated(self) -> None:
        axis = _axis(VerticalAxis, "Y")
        da, canvas = _area()
        axis.draw(da)
        ops = canvas.ops()
        start = ops.index("push")
        self.assertEqual(ops[start + 1], "rotate")
        self.assertAlmostEqual(canvas.calls[start + 1][1], math.pi / 2)
        self.assertIn("pop", ops[start:])
        self.assertEqual(canvas.texts()[0][2], "Y")

    def test_axis_line_matches_size(self) -> None:
        axis = _axis(VerticalAxis, "Y")
        da, canvas = _area()
        axis.draw(da)
        axis_line = canvas.strokes()[-1]
        self.assertAlmostEqual(axis_line[0][0], axis.size() - axis.padding - axis.line_style.width / 2)
        self.assertEqual((axis_line[0][1], axis_line[1][1]), (0.0, 100.0))

    def test_glyph_box_for_top_major_label(self) -> None:
        (box,) = _axis(VerticalAxis).glyph_boxes()
        self.assertEqual(box.y, 1.0)
        self.assertEqual(box.rect.min.y, -4.0)
        self.assertEqual(box.rect.size.y, 8.0)


if __name__ == "__main__":
    unittest.main()

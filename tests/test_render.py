from __future__ import annotations

import math
import unittest

from plotinum_plot.draw_area import DrawArea
from plotinum_plot.geometry import Point, Rect
from plotinum_plot.render import draw_glyph, fill_text, set_line_style, stroke_clipped_line, stroke_line
from plotinum_plot.styles import CharacterGlyph, GlyphStyle, LineStyle, RingGlyph, TextStyle

from plot_fakes import FixedFont, RecordingCanvas


def _area() -> tuple[DrawArea, RecordingCanvas]:
    canvas = RecordingCanvas()
    return DrawArea(canvas=canvas, rect=Rect(min=Point(0.0, 0.0), size=Point(10.0, 10.0))), canvas


class RenderTests(unittest.TestCase):
    def test_set_line_style_forwards_color_width_and_dashes(self) -> None:
        da, canvas = _area()
        set_line_style(da, LineStyle(color=(1, 2, 3, 255), width=2.0, dashes=(1.0, 2.0), dash_offset=0.5))
        self.assertEqual(
            canvas.calls,
            [("set_color", (1, 2, 3, 255)), ("set_line_width", 2.0), ("set_line_dash", [1.0, 2.0], 0.5)],
        )

    def test_glyph_outside_area_is_skipped(self) -> None:
        da, canvas = _area()
        draw_glyph(da, GlyphStyle(), Point(11.0, 5.0))
        self.assertEqual(canvas.calls, [])

    def test_circle_fills_and_ring_strokes(self) -> None:
        da, canvas = _area()
        draw_glyph(da, GlyphStyle(radius=2.0), Point(5.0, 5.0))
        draw_glyph(da, GlyphStyle(shape=RingGlyph(), radius=2.0), Point(5.0, 5.0))
        drawn = [c for c in canvas.calls if c[0] in ("fill", "stroke")]
        self.assertEqual([c[0] for c in drawn], ["fill", "stroke"])
        arc = drawn[0][1].comps[1]
        self.assertEqual((arc.op, arc.x, arc.y, arc.radius), ("arc", 5.0, 5.0, 2.0))
        self.assertAlmostEqual(arc.angle, 2 * math.pi)

    def test_letter_glyph_is_centered_on_point(self) -> None:
        da, canvas = _area()
        sty = GlyphStyle(shape=CharacterGlyph("A"), radius=5.0, font=FixedFont(10.0))  # type: ignore[arg-type]
        draw_glyph(da, sty, Point(5.0, 5.0))
        self.assertEqual(canvas.texts(), [(2.5, 3.0, "A")])

    def test_stroke_line_ignores_empty_input(self) -> None:
        da, canvas = _area()
        stroke_line(da, LineStyle())
        self.assertEqual(canvas.calls, [])

    def test_clipped_line_strokes_each_visible_run(self) -> None:
        da, canvas = _area()
        pts = [Point(5.0, 5.0), Point(5.0, 15.0), Point(8.0, 15.0), Point(8.0, 5.0)]
        stroke_clipped_line(da, LineStyle(), *pts)
        self.assertEqual(canvas.strokes(), [[(5.0, 5.0), (5.0, 10.0)], [(8.0, 10.0), (8.0, 5.0)]])

    def test_fill_text_lays_out_lines_bottom_up(self) -> None:
        da, canvas = _area()
        sty = TextStyle(font=FixedFont(10.0))  # type: ignore[arg-type]
        fill_text(da, sty, 0.0, 0.0, 0.0, 0.0, "ab\ncd\n")
        texts = canvas.texts()
        self.assertEqual([t[2] for t in texts], ["ab", "cd"])
        self.assertAlmostEqual(texts[0][1], 12.0)
        self.assertAlmostEqual(texts[1][1], 2.0)

    def test_fill_text_alignment_offsets(self) -> None:
        da, canvas = _area()
        sty = TextStyle(font=FixedFont(10.0))  # type: ignore[arg-type]
        fill_text(da, sty, 50.0, 0.0, -0.5, -0.5, "abcd")
        ((x, y, _),) = canvas.texts()
        self.assertAlmostEqual(x, 40.0)
        self.assertAlmostEqual(y, -4.0 - 8.0 + 10.0)

    def test_fill_text_skips_empty_text(self) -> None:
        da, canvas = _area()
        fill_text(da, TextStyle(font=FixedFont(10.0)), 0.0, 0.0, 0.0, 0.0, "\n")  # type: ignore[arg-type]
        self.assertEqual(canvas.calls, [])


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import math

from plotinum_vg import Length, Path

from plotinum_plot.clip import clip_polyline
from plotinum_plot.draw_area import DrawArea
from plotinum_plot.geometry import Point
from plotinum_plot.styles import CharacterGlyph, CircleGlyph, GlyphStyle, LineStyle, RingGlyph, TextStyle, text_n_lines


GLYPH_OUTLINE_WIDTH: Length = 0.5


def set_line_style(da: DrawArea, sty: LineStyle) -> None:
    da.canvas.set_color(sty.color)
    da.canvas.set_line_width(sty.width)
    da.canvas.set_line_dash(list(sty.dashes), sty.dash_offset)


def _circle_path(pt: Point, radius: Length) -> Path:
    p = Path()
    p.move(pt.x + radius, pt.y)
    p.arc(pt.x, pt.y, radius, 0.0, 2 * math.pi)
    p.close()
    return p


def draw_glyph(da: DrawArea, sty: GlyphStyle, pt: Point) -> None:
    """Draws a glyph at pt; points outside the area are skipped."""
    if not da.contains(pt):
        return

    set_line_style(da, LineStyle(color=sty.color, width=GLYPH_OUTLINE_WIDTH))
    shape = sty.shape
    if isinstance(shape, CircleGlyph):
        da.canvas.fill(_circle_path(pt, sty.radius))
    elif isinstance(shape, RingGlyph):
        da.canvas.stroke(_circle_path(pt, sty.radius))
    elif isinstance(shape, CharacterGlyph):
        if sty.font is None:
            return
        x = pt.x - sty.font.width(shape.code) / 2
        y = pt.y + sty.font.extents().descent
        da.canvas.fill_text(sty.font, x, y, shape.code)


def stroke_line(da: DrawArea, sty: LineStyle, *pts: Point) -> None:
    if len(pts) == 0:
        return
    set_line_style(da, sty)
    p = Path()
    p.move(pts[0].x, pts[0].y)
    for pt in pts[1:]:
        p.line(pt.x, pt.y)
    da.canvas.stroke(p)


def stroke_line2(da: DrawArea, sty: LineStyle, x0: Length, y0: Length, x1: Length, y1: Length) -> None:
    stroke_line(da, sty, Point(x0, y0), Point(x1, y1))


def stroke_clipped_line(da: DrawArea, sty: LineStyle, *pts: Point) -> None:
    """Strokes the parts of the line inside the area, each as its own path."""
    for run in clip_polyline(da.rect, pts):
        stroke_line(da, sty, *run)


def fill_text(
    da: DrawArea,
    sty: TextStyle,
    x: Length,
    y: Length,
    xalign: float,
    yalign: float,
    text: str,
) -> None:
    """Fills lines of text with (x, y) the bottom left before alignment.

    The text is offset by its width times xalign and its height times yalign.
    """
    text = text.rstrip("\n")
    if len(text) == 0:
        return

    da.canvas.set_color(sty.color)

    ht = sty.height(text)
    y += ht * yalign - sty.font.extents().ascent
    nl = text_n_lines(text)
    for i, line in enumerate(text.split("\n")):
        xoffs = xalign * sty.font.width(line)
        da.canvas.fill_text(sty.font, x + xoffs, y + (nl - i) * sty.font.size, line)

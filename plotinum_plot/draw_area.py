from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Sequence

from plotinum_vg import Canvas, EpsCanvas, Length, RasterCanvas
from plotinum_vg.raster import DEFAULT_DPI

from plotinum_plot.geometry import Point, Rect


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphBox:
    """Location of a glyph in normalized coordinates and the offset/size of its bounds.

    `rect.min` is the offset of the glyph's minimum drawing point from the
    glyph location, in device lengths.
    """

    x: float = 0.0
    y: float = 0.0
    rect: Rect = field(default_factory=Rect)


@dataclass(frozen=True)
class DrawArea:
    """A section of a canvas, given by `rect`, to which drawing takes place.

    Derived areas (cropped or squished) share the same canvas.
    """

    canvas: Canvas
    rect: Rect

    @property
    def min(self) -> Point:
        return self.rect.min

    @property
    def max(self) -> Point:
        return self.rect.max

    @property
    def size(self) -> Point:
        return self.rect.size

    def center(self) -> Point:
        mx = self.max
        return Point(
            x=(mx.x - self.min.x) / 2 + self.min.x,
            y=(mx.y - self.min.y) / 2 + self.min.y,
        )

    def contains(self, p: Point) -> bool:
        mx = self.max
        return self.min.x <= p.x <= mx.x and self.min.y <= p.y <= mx.y

    def x(self, u: float) -> Length:
        """Maps u on the unit interval to the area's x range; values outside [0, 1] extrapolate."""
        return u * (self.max.x - self.min.x) + self.min.x

    def y(self, u: float) -> Length:
        return u * (self.max.y - self.min.y) + self.min.y

    def crop(self, minx: Length, miny: Length, maxx: Length, maxy: Length) -> "DrawArea":
        """Returns an area with the given lengths added to the min and max of this one."""
        lo = Point(self.min.x + minx, self.min.y + miny)
        size = Point(self.max.x + maxx - lo.x, self.max.y + maxy - lo.y)
        return DrawArea(canvas=self.canvas, rect=Rect(min=lo, size=size))

    def squish_x(self, boxes: Sequence[GlyphBox]) -> "DrawArea":
        """Returns an area narrowed so every glyph box stays inside this one.

        Glyph box x locations are on the unit interval, 0 being the left of
        the area and 1 the right.
        """
        if len(boxes) == 0:
            return self
        n, m = _squish_interval(
            self.min.x,
            self.max.x,
            [(b.x, b.rect.min.x, b.rect.size.x) for b in boxes],
        )
        out = DrawArea(canvas=self.canvas, rect=Rect(min=Point(n, self.min.y), size=Point(m - n, self.size.y)))
        LOGGER.debug("squish_x %s -> %s", self.rect, out.rect)
        return out

    def squish_y(self, boxes: Sequence[GlyphBox]) -> "DrawArea":
        """Like squish_x, with 0 the bottom of the area and 1 the top."""
        if len(boxes) == 0:
            return self
        n, m = _squish_interval(
            self.min.y,
            self.max.y,
            [(b.y, b.rect.min.y, b.rect.size.y) for b in boxes],
        )
        out = DrawArea(canvas=self.canvas, rect=Rect(min=Point(self.min.x, n), size=Point(self.size.x, m - n)))
        LOGGER.debug("squish_y %s -> %s", self.rect, out.rect)
        return out


def _squish_interval(lo: Length, hi: Length, boxes: list[tuple[float, Length, Length]]) -> tuple[Length, Length]:
    """Solves for the positions (n, m) of units 0 and 1 on one axis.

    Each box is (anchor, offset, extent). The box reaching furthest below
    `lo` ends up touching `lo`, and the one reaching furthest above `hi`
    ends up touching `hi`.
    """
    boxes = boxes + [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)]

    def at(u: float) -> Length:
        return u * (hi - lo) + lo

    left = right = 0.0
    minv, maxv = math.inf, -math.inf
    for anchor, offset, extent in boxes:
        if (v := at(anchor) + offset) < minv:
            left, minv = anchor, v
        if (v := at(anchor) + offset + extent) > maxv:
            right, maxv = anchor, v

    # Only ever pull glyphs inwards; never widen the mapping past the area.
    if minv >= lo:
        minv = lo
    if maxv <= hi:
        maxv = hi

    if left == right:
        raise ArithmeticError(f"cannot squish: extreme glyphs share the anchor {left}")

    # Where the left and right anchors must land.
    l = at(left) + (lo - minv)
    r = at(right) - (maxv - hi)
    scale = (r - l) / (right - left)
    n = l - left * scale
    return n, n + scale


def new_draw_area(canvas: Canvas, width: Length, height: Length) -> DrawArea:
    return DrawArea(canvas=canvas, rect=Rect(min=Point(0.0, 0.0), size=Point(width, height)))


def new_png_draw_area(width: Length, height: Length, *, dpi: float = DEFAULT_DPI) -> tuple[DrawArea, RasterCanvas]:
    canvas = RasterCanvas(width, height, dpi=dpi)
    return new_draw_area(canvas, width, height), canvas


def new_eps_draw_area(width: Length, height: Length, title: str = "") -> tuple[DrawArea, EpsCanvas]:
    canvas = EpsCanvas(width, height, title=title)
    return new_draw_area(canvas, width, height), canvas

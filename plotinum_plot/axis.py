from __future__ import annotations

from dataclasses import dataclass, field
import math

from plotinum_vg import Length, make_font

from plotinum_plot.config import PlotConfig
from plotinum_plot.draw_area import DrawArea, GlyphBox
from plotinum_plot.geometry import Point, Rect
from plotinum_plot.render import fill_text, stroke_line2
from plotinum_plot.styles import LineStyle, TextStyle
from plotinum_plot.ticks import Tick, TickMarker, default_ticks, tick_label_height, tick_label_width


@dataclass
class AxisLabel:
    style: TextStyle
    text: str = ""


@dataclass
class AxisTicks:
    label: TextStyle
    line_style: LineStyle = field(default_factory=LineStyle)
    # Length of a major tick mark; minor marks are half as long.
    length: Length = 8.0
    marker: TickMarker = default_ticks


@dataclass
class Axis:
    """Horizontal or vertical axis of a plot.

    The default range is (inf, -inf) so any finite value widens it.
    """

    label: AxisLabel
    tick: AxisTicks
    min: float = math.inf
    max: float = -math.inf
    line_style: LineStyle = field(default_factory=LineStyle)
    # Padding between the axis line and the data.
    padding: Length = 5.0

    @classmethod
    def from_config(cls, config: PlotConfig) -> "Axis":
        label_font = make_font(config.font_name, config.label_font_size)
        tick_font = make_font(config.font_name, config.tick_font_size)
        return cls(
            label=AxisLabel(style=TextStyle(font=label_font)),
            tick=AxisTicks(
                label=TextStyle(font=tick_font),
                line_style=LineStyle(width=config.line_width),
                length=config.tick_length,
            ),
            line_style=LineStyle(width=config.line_width),
            padding=config.padding,
        )

    def norm(self, v: float) -> float:
        """Fraction of the axis range at v: 0 at min, 1 at max."""
        return (v - self.min) / (self.max - self.min)

    def x(self, da: DrawArea, v: float) -> Length:
        return da.x(self.norm(v))

    def y(self, da: DrawArea, v: float) -> Length:
        return da.y(self.norm(v))

    def marks(self) -> list[Tick]:
        return self.tick.marker(self.min, self.max)

    def _label_extent(self) -> Length:
        if self.label.text == "":
            return 0.0
        return self.label.style.height(self.label.text) - self.label.style.font.extents().descent

    def _major_extreme(self) -> Tick | None:
        top: Tick | None = None
        for t in self.marks():
            if t.minor:
                continue
            if top is None or t.value > top.value:
                top = t
        return top


class HorizontalAxis(Axis):
    """Axis drawn along the bottom of a plot."""

    def size(self) -> Length:
        h = self._label_extent()
        marks = self.marks()
        if len(marks) > 0:
            h += self.tick.length + tick_label_height(self.tick.label, marks)
        h += self.line_style.width / 2
        h += self.padding
        return h

    def draw(self, da: DrawArea) -> None:
        y = da.min.y
        if self.label.text != "":
            y -= self.label.style.font.extents().descent
            fill_text(da, self.label.style, da.center().x, y, -0.5, 0, self.label.text)
            y += self.label.style.height(self.label.text)
        marks = self.marks()
        if len(marks) > 0:
            for t in marks:
                if t.minor:
                    continue
                fill_text(da, self.tick.label, self.x(da, t.value), y, -0.5, 0, t.label)
            y += tick_label_height(self.tick.label, marks)

            length = self.tick.length
            for t in marks:
                x = self.x(da, t.value)
                stroke_line2(da, self.tick.line_style, x, y + t.length_offset(length), x, y + length)
            y += length
        stroke_line2(da, self.line_style, da.min.x, y, da.max.x, y)

    def glyph_boxes(self) -> list[GlyphBox]:
        """Box of the right-most major tick label so squishing keeps it on the plot."""
        right = self._major_extreme()
        if right is None:
            return []
        w = self.tick.label.width(right.label)
        return [GlyphBox(x=self.norm(right.value), rect=Rect(min=Point(x=-w / 2), size=Point(x=w)))]


class VerticalAxis(Axis):
    """Axis drawn up the left side of a plot."""

    def size(self) -> Length:
        w = self._label_extent()
        marks = self.marks()
        if len(marks) > 0:
            if (lwidth := tick_label_width(self.tick.label, marks)) > 0:
                w += lwidth
                w += self.tick.label.width(" ")
            w += self.tick.length
        w += self.line_style.width / 2
        w += self.padding
        return w

    def draw(self, da: DrawArea) -> None:
        x = da.min.x
        if self.label.text != "":
            x += self.label.style.height(self.label.text)
            da.canvas.push()
            da.canvas.rotate(math.pi / 2)
            fill_text(da, self.label.style, da.center().y, -x, -0.5, 0, self.label.text)
            da.canvas.pop()
            x -= self.label.style.font.extents().descent
        marks = self.marks()
        if len(marks) > 0:
            if (lwidth := tick_label_width(self.tick.label, marks)) > 0:
                x += lwidth
            major = False
            for t in marks:
                if t.minor:
                    continue
                fill_text(da, self.tick.label, x, self.y(da, t.value), -1, -0.5, t.label)
                major = True
            if major:
                x += self.tick.label.width(" ")
            length = self.tick.length
            for t in marks:
                y = self.y(da, t.value)
                stroke_line2(da, self.tick.line_style, x + t.length_offset(length), y, x + length, y)
            x += length
        stroke_line2(da, self.line_style, x, da.min.y, x, da.max.y)

    def glyph_boxes(self) -> list[GlyphBox]:
        """Box of the top-most major tick label, normalized along the axis."""
        top = self._major_extreme()
        if top is None:
            return []
        h = self.tick.label.height(top.label)
        return [GlyphBox(y=self.norm(top.value), rect=Rect(min=Point(y=-h / 2), size=Point(y=h)))]

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from pathlib import Path
from typing import Any, Callable, Protocol

import numpy as np

from plotinum_vg import RGBA, WHITE, Length, make_font

from plotinum_plot.axis import HorizontalAxis, VerticalAxis
from plotinum_plot.config import PlotConfig
from plotinum_plot.draw_area import DrawArea, GlyphBox, new_eps_draw_area, new_png_draw_area
from plotinum_plot.errors import PlotConfigError, PlotDataError
from plotinum_plot.geometry import Point, Rect, rect_path
from plotinum_plot.render import draw_glyph, fill_text, stroke_clipped_line
from plotinum_plot.styles import GlyphStyle, LineStyle, TextStyle, glyph_shape


LOGGER = logging.getLogger(__name__)


def xy_array(x: Any, y: Any) -> np.ndarray:
    """Returns the finite (x, y) pairs as an (n, 2) float array."""
    xs = np.asarray(x, dtype=np.float64).reshape(-1)
    ys = np.asarray(y, dtype=np.float64).reshape(-1)
    if xs.shape != ys.shape:
        raise PlotDataError(f"x and y length mismatch: {xs.size} != {ys.size}")
    mask = np.isfinite(xs) & np.isfinite(ys)
    if xs.size > 0 and not np.any(mask):
        raise PlotDataError("series contains no finite points")
    return np.stack([xs[mask], ys[mask]], axis=1)


class DataItem(Protocol):
    def data_range(self) -> tuple[float, float, float, float] | None:
        ...

    def glyph_boxes(self, plot: "Plot") -> list[GlyphBox]:
        ...

    def plot(self, da: DrawArea, plot: "Plot") -> None:
        ...


def _range(xy: np.ndarray) -> tuple[float, float, float, float] | None:
    if xy.shape[0] == 0:
        return None
    lo = xy.min(axis=0)
    hi = xy.max(axis=0)
    return (float(lo[0]), float(hi[0]), float(lo[1]), float(hi[1]))


@dataclass
class Line:
    xy: np.ndarray
    style: LineStyle = field(default_factory=LineStyle)

    @classmethod
    def from_xy(cls, x: Any, y: Any, style: LineStyle | None = None) -> "Line":
        return cls(xy=xy_array(x, y), style=style or LineStyle())

    def data_range(self) -> tuple[float, float, float, float] | None:
        return _range(self.xy)

    def glyph_boxes(self, plot: "Plot") -> list[GlyphBox]:
        return []

    def plot(self, da: DrawArea, plot: "Plot") -> None:
        pts = [Point(plot.x.x(da, float(vx)), plot.y.y(da, float(vy))) for vx, vy in self.xy]
        stroke_clipped_line(da, self.style, *pts)


@dataclass
class Scatter:
    xy: np.ndarray
    style: GlyphStyle = field(default_factory=GlyphStyle)

    @classmethod
    def from_xy(cls, x: Any, y: Any, style: GlyphStyle | None = None) -> "Scatter":
        return cls(xy=xy_array(x, y), style=style or GlyphStyle())

    def data_range(self) -> tuple[float, float, float, float] | None:
        return _range(self.xy)

    def glyph_boxes(self, plot: "Plot") -> list[GlyphBox]:
        r = self.style.radius
        box = Rect(min=Point(-r, -r), size=Point(2 * r, 2 * r))
        return [GlyphBox(x=plot.x.norm(float(vx)), y=plot.y.norm(float(vy)), rect=box) for vx, vy in self.xy]

    def plot(self, da: DrawArea, plot: "Plot") -> None:
        for vx, vy in self.xy:
            draw_glyph(da, self.style, Point(plot.x.x(da, float(vx)), plot.y.y(da, float(vy))))


@dataclass
class Plot:
    """Axes, title and data items drawn together into one draw area."""

    x: HorizontalAxis
    y: VerticalAxis
    title_style: TextStyle
    config: PlotConfig = field(default_factory=PlotConfig)
    title: str = ""
    background: RGBA = WHITE
    items: list[DataItem] = field(default_factory=list)

    @classmethod
    def new(cls, config: PlotConfig | None = None) -> "Plot":
        config = config or PlotConfig()
        return cls(
            x=HorizontalAxis.from_config(config),
            y=VerticalAxis.from_config(config),
            title_style=TextStyle(font=make_font(config.font_name, config.title_font_size)),
            config=config,
        )

    def default_glyph_style(self) -> GlyphStyle:
        return GlyphStyle(
            shape=glyph_shape(self.config.glyph_shape),
            radius=self.config.glyph_radius,
            font_name=self.config.font_name,
        )

    def add(self, *items: DataItem) -> "Plot":
        """Adds items, widening the axis ranges to include their data."""
        for item in items:
            rng = item.data_range()
            if rng is not None:
                xmin, xmax, ymin, ymax = rng
                self.x.min = min(self.x.min, xmin)
                self.x.max = max(self.x.max, xmax)
                self.y.min = min(self.y.min, ymin)
                self.y.max = max(self.y.max, ymax)
            self.items.append(item)
        return self

    def draw(self, da: DrawArea) -> None:
        self._check_ranges()

        da.canvas.set_color(self.background)
        da.canvas.fill(rect_path(da.rect))

        if self.title != "":
            fill_text(da, self.title_style, da.center().x, da.max.y, -0.5, -1, self.title)
            da = da.crop(0, 0, 0, -self.title_style.height(self.title) - self.config.padding)

        xboxes = self.x.glyph_boxes()
        yboxes = self.y.glyph_boxes()
        for item in self.items:
            boxes = item.glyph_boxes(self)
            xboxes.extend(boxes)
            yboxes.extend(boxes)

        ywidth = self.y.size()
        xheight = self.x.size()
        self.x.draw(_squish("x", da.crop(ywidth, 0, 0, 0).squish_x, xboxes))
        self.y.draw(_squish("y", da.crop(0, xheight, 0, 0).squish_y, yboxes))

        data_area = _squish("x", da.crop(ywidth, xheight, 0, 0).squish_x, xboxes)
        data_area = _squish("y", data_area.squish_y, yboxes)
        LOGGER.debug("plot data area %s", data_area.rect)
        for item in self.items:
            item.plot(data_area, self)

    def save(self, path: str | Path, width: Length | None = None, height: Length | None = None) -> None:
        """Draws the plot to a .png or .eps file."""
        out = Path(path)
        w = width if width is not None else self.config.width
        h = height if height is not None else self.config.height
        suffix = out.suffix.lower()
        if suffix == ".png":
            da, raster = new_png_draw_area(w, h, dpi=self.config.dpi)
            self.draw(da)
            raster.save_png(out)
        elif suffix == ".eps":
            da, eps = new_eps_draw_area(w, h, title=self.title)
            self.draw(da)
            eps.save(out)
        else:
            raise PlotConfigError(f"unsupported output format: {out.suffix or out.name}")

    def _check_ranges(self) -> None:
        for name, axis in (("x", self.x), ("y", self.y)):
            if not (math.isfinite(axis.min) and math.isfinite(axis.max)) or axis.max <= axis.min:
                raise PlotConfigError(f"invalid {name} axis range: [{axis.min}, {axis.max}]")


def _squish(name: str, squish: Callable[[list[GlyphBox]], DrawArea], boxes: list[GlyphBox]) -> DrawArea:
    try:
        return squish(boxes)
    except ArithmeticError as exc:
        raise PlotConfigError(f"{name} axis glyphs do not fit in the plot area: {exc}") from exc

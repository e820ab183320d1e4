from plotinum_plot.axis import Axis, AxisLabel, AxisTicks, HorizontalAxis, VerticalAxis
from plotinum_plot.clip import SLOP, clip_polyline, isect
from plotinum_plot.config import PlotConfig, load_config
from plotinum_plot.draw_area import DrawArea, GlyphBox, new_draw_area, new_eps_draw_area, new_png_draw_area
from plotinum_plot.errors import PlotConfigError, PlotDataError
from plotinum_plot.geometry import Point, Rect, rect_path
from plotinum_plot.plot import Line, Plot, Scatter, xy_array
from plotinum_plot.styles import (
    CharacterGlyph,
    CircleGlyph,
    GlyphShape,
    GlyphStyle,
    LineStyle,
    RingGlyph,
    TextStyle,
    glyph_shape,
)
from plotinum_plot.ticks import Tick, constant_ticks, default_ticks, format_tick_label

__all__ = [
    "Axis",
    "AxisLabel",
    "AxisTicks",
    "CharacterGlyph",
    "CircleGlyph",
    "DrawArea",
    "GlyphBox",
    "GlyphShape",
    "GlyphStyle",
    "HorizontalAxis",
    "Line",
    "LineStyle",
    "Plot",
    "PlotConfig",
    "PlotConfigError",
    "PlotDataError",
    "Point",
    "Rect",
    "RingGlyph",
    "SLOP",
    "Scatter",
    "TextStyle",
    "Tick",
    "VerticalAxis",
    "clip_polyline",
    "constant_ticks",
    "default_ticks",
    "format_tick_label",
    "glyph_shape",
    "isect",
    "load_config",
    "new_draw_area",
    "new_eps_draw_area",
    "new_png_draw_area",
    "rect_path",
    "xy_array",
]

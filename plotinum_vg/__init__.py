from plotinum_vg.canvas import BLACK, RGBA, TRANSPARENT, WHITE, Canvas, coerce_color
from plotinum_vg.eps import EpsCanvas
from plotinum_vg.font import DEFAULT_FONT_NAME, Font, FontError, FontExtents, make_font
from plotinum_vg.path import Path, PathComp
from plotinum_vg.raster import RasterCanvas
from plotinum_vg.units import Length, centimeters, inches, millimeters, points

__all__ = [
    "BLACK",
    "Canvas",
    "DEFAULT_FONT_NAME",
    "EpsCanvas",
    "Font",
    "FontError",
    "FontExtents",
    "Length",
    "Path",
    "PathComp",
    "RGBA",
    "RasterCanvas",
    "TRANSPARENT",
    "WHITE",
    "centimeters",
    "coerce_color",
    "inches",
    "make_font",
    "millimeters",
    "points",
]

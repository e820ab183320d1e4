from __future__ import annotations


class PlotConfigError(ValueError):
    """Invalid plot configuration: bad glyph shape, axis range, config file or output format."""


class PlotDataError(ValueError):
    """Data handed to a plot cannot be drawn."""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from pathlib import Path
import tomllib
from typing import Any

from plotinum_vg import DEFAULT_FONT_NAME, Length, inches, points

from plotinum_plot.errors import PlotConfigError
from plotinum_plot.styles import glyph_shape


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotConfig:
    font_name: str = DEFAULT_FONT_NAME
    title_font_size: Length = points(12)
    label_font_size: Length = points(12)
    tick_font_size: Length = points(10)
    padding: Length = points(5)
    tick_length: Length = points(8)
    line_width: Length = points(1)
    glyph_radius: Length = points(2.5)
    glyph_shape: str = "circle"
    width: Length = inches(4)
    height: Length = inches(4)
    dpi: float = 96.0


# toml table -> {toml key: (field name, scale to points)}
_TABLES: dict[str, dict[str, tuple[str, float]]] = {
    "figure": {
        "font": ("font_name", 1.0),
        "title_font_size": ("title_font_size", 1.0),
        "width_in": ("width", inches(1)),
        "height_in": ("height", inches(1)),
        "dpi": ("dpi", 1.0),
    },
    "axis": {
        "label_font_size": ("label_font_size", 1.0),
        "tick_font_size": ("tick_font_size", 1.0),
        "padding": ("padding", 1.0),
        "tick_length": ("tick_length", 1.0),
        "line_width": ("line_width", 1.0),
    },
    "glyph": {
        "radius": ("glyph_radius", 1.0),
        "shape": ("glyph_shape", 1.0),
    },
}
_STRING_FIELDS = {"font_name", "glyph_shape"}
_NON_NEGATIVE_FIELDS = {"padding", "tick_length", "line_width", "glyph_radius"}


def load_config(path: str | Path) -> PlotConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise PlotConfigError(f"malformed plot config {config_path}: {exc}") from exc
    return config_from_mapping(raw)


def config_from_mapping(raw: dict[str, Any]) -> PlotConfig:
    updates: dict[str, Any] = {}
    for table, value in raw.items():
        keys = _TABLES.get(table)
        if keys is None:
            LOGGER.warning("ignoring unknown plot config table `%s`", table)
            continue
        if not isinstance(value, dict):
            raise PlotConfigError(f"`{table}` must be a table")
        for key, item in value.items():
            if key not in keys:
                LOGGER.warning("ignoring unknown plot config key `%s.%s`", table, key)
                continue
            name, scale = keys[key]
            updates[name] = _coerce_field(f"{table}.{key}", name, item, scale)
    config = replace(PlotConfig(), **updates)
    glyph_shape(config.glyph_shape)
    return config


def _coerce_field(where: str, name: str, value: Any, scale: float) -> Any:
    if name in _STRING_FIELDS:
        if not isinstance(value, str) or not value:
            raise PlotConfigError(f"`{where}` must be a non-empty string")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PlotConfigError(f"`{where}` must be a number")
    out = float(value) * scale
    if name in _NON_NEGATIVE_FIELDS:
        if out < 0:
            raise PlotConfigError(f"`{where}` must be >= 0")
    elif out <= 0:
        raise PlotConfigError(f"`{where}` must be > 0")
    return out


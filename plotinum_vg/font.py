from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from pathlib import Path

from PIL import ImageFont

from plotinum_vg.units import Length


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "default"
DEFAULT_POSTSCRIPT_FONT = "Helvetica"
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)

# Faces used for measurement are loaded this many times larger than the
# requested size so integer metrics keep sub-point precision.
_MEASURE_SCALE = 16.0


class FontError(ValueError):
    pass


@dataclass(frozen=True)
class FontExtents:
    # ascent is above the baseline, descent is negative (below it).
    ascent: Length
    descent: Length
    height: Length


@dataclass(frozen=True)
class Font:
    name: str
    size: Length

    def width(self, text: str) -> Length:
        face = _load_face(self.name, self.size * _MEASURE_SCALE)
        return float(face.getlength(text)) / _MEASURE_SCALE

    def extents(self) -> FontExtents:
        face = _load_face(self.name, self.size * _MEASURE_SCALE)
        ascent, descent = face.getmetrics()
        return FontExtents(
            ascent=ascent / _MEASURE_SCALE,
            descent=-descent / _MEASURE_SCALE,
            height=(ascent + descent) / _MEASURE_SCALE,
        )

    def face(self, pixel_size: float) -> ImageFont.FreeTypeFont:
        return _load_face(self.name, pixel_size)

    @property
    def postscript_name(self) -> str:
        if self.name == DEFAULT_FONT_NAME:
            return DEFAULT_POSTSCRIPT_FONT
        return Path(self.name).stem.replace(" ", "")


def make_font(name: str, size: Length) -> Font:
    """Resolves a font once so that drawing never fails on a bad descriptor."""
    if size <= 0:
        raise FontError(f"font size must be > 0, got {size}")
    if not name or not name.strip():
        raise FontError("font name must be a non-empty string")
    font = Font(name=name.strip(), size=float(size))
    try:
        _load_face(font.name, font.size * _MEASURE_SCALE)
    except OSError as exc:
        raise FontError(f"unable to load font `{name}`: {exc}") from exc
    return font


@lru_cache(maxsize=128)
def _load_face(name: str, size: float) -> ImageFont.FreeTypeFont:
    size = max(1.0, float(size))
    if name == DEFAULT_FONT_NAME:
        face = ImageFont.load_default(size=size)
    else:
        face = ImageFont.truetype(str(_resolve_font_path(name)), size=size)
    if not isinstance(face, ImageFont.FreeTypeFont):
        raise FontError("Pillow was built without FreeType support")
    return face


@lru_cache(maxsize=64)
def _resolve_font_path(name: str) -> Path:
    direct = Path(name).expanduser()
    if direct.is_file():
        return direct
    wanted = name.lower().replace(" ", "")
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            for path in sorted(base.rglob(ext)):
                if path.stem.lower().replace(" ", "") == wanted:
                    return path
    LOGGER.warning("font `%s` not found in %d font directories", name, len(FONT_DIRS))
    raise FontError(f"font not found: {name}")

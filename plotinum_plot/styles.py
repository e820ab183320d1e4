from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from plotinum_vg import BLACK, DEFAULT_FONT_NAME, RGBA, Font, Length, make_font

from plotinum_plot.errors import PlotConfigError


@dataclass(frozen=True)
class LineStyle:
    color: RGBA = BLACK
    width: Length = 1.0
    dashes: tuple[Length, ...] = ()
    dash_offset: Length = 0.0

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("line width must be >= 0")


@dataclass(frozen=True)
class TextStyle:
    font: Font
    color: RGBA = BLACK

    def width(self, text: str) -> Length:
        """Width of the widest line of text."""
        text = text.rstrip("\n")
        return max((self.font.width(line) for line in text.split("\n")), default=0.0)

    def height(self, text: str) -> Length:
        n = text_n_lines(text)
        if n == 0:
            return 0.0
        e = self.font.extents()
        return e.height * (n - 1) + e.ascent


def text_n_lines(text: str) -> int:
    text = text.rstrip("\n")
    if len(text) == 0:
        return 0
    return text.count("\n") + 1


@dataclass(frozen=True)
class CircleGlyph:
    """A filled circle."""


@dataclass(frozen=True)
class RingGlyph:
    """An outlined circle."""


@dataclass(frozen=True)
class CharacterGlyph:
    """An uppercase ASCII letter drawn centered on the point."""

    code: str

    def __post_init__(self) -> None:
        if len(self.code) != 1 or not ("A" <= self.code <= "Z"):
            raise PlotConfigError(f"invalid glyph shape: {self.code!r}")


GlyphShape: TypeAlias = CircleGlyph | RingGlyph | CharacterGlyph


def glyph_shape(value: str) -> GlyphShape:
    """Parses "circle", "ring" or a single uppercase letter."""
    if value == "circle":
        return CircleGlyph()
    if value == "ring":
        return RingGlyph()
    return CharacterGlyph(value)


@dataclass(frozen=True)
class GlyphStyle:
    color: RGBA = BLACK
    shape: GlyphShape = field(default_factory=CircleGlyph)
    radius: Length = 2.0
    font_name: str = DEFAULT_FONT_NAME
    # Resolved at construction for letter glyphs so drawing cannot fail.
    font: Font | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.shape, (CircleGlyph, RingGlyph, CharacterGlyph)):
            raise PlotConfigError(f"invalid glyph shape: {self.shape!r}")
        if self.radius < 0:
            raise ValueError("glyph radius must be >= 0")
        if isinstance(self.shape, CharacterGlyph) and self.font is None and self.radius > 0:
            object.__setattr__(self, "font", make_font(self.font_name, self.radius * 2))

from __future__ import annotations

from typing import Protocol, Sequence

from plotinum_vg.font import Font
from plotinum_vg.path import Path
from plotinum_vg.units import Length


RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int], alpha: float = 1.0) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        a = int(max(0.0, min(1.0, alpha)) * 255)
        return (int(r), int(g), int(b), a)
    if len(color) == 4:
        r, g, b, a = color
        out_a = int(max(0.0, min(1.0, alpha)) * a)
        return (int(r), int(g), int(b), out_a)
    raise ValueError(f"color must have 3 or 4 components, got {len(color)}")


class Canvas(Protocol):
    """Drawing capability consumed by the layout engine.

    Coordinates are lengths in points with the origin at the bottom left and
    y increasing upwards. Later commands draw over earlier ones.
    """

    def set_line_width(self, width: Length) -> None:
        ...

    def set_line_dash(self, pattern: Sequence[Length], offset: Length) -> None:
        ...

    def set_color(self, color: RGBA) -> None:
        ...

    def rotate(self, radians: float) -> None:
        ...

    def translate(self, x: Length, y: Length) -> None:
        ...

    def push(self) -> None:
        ...

    def pop(self) -> None:
        ...

    def stroke(self, path: Path) -> None:
        ...

    def fill(self, path: Path) -> None:
        ...

    def fill_text(self, font: Font, x: Length, y: Length, text: str) -> None:
        ...

from __future__ import annotations

import logging
import math
from pathlib import Path as FilePath
from typing import Sequence

from plotinum_vg.canvas import BLACK, RGBA
from plotinum_vg.font import Font
from plotinum_vg.path import Path
from plotinum_vg.units import Length


LOGGER = logging.getLogger(__name__)


class EpsCanvas:
    """Canvas writing Encapsulated PostScript operators."""

    def __init__(self, width: Length, height: Length, title: str = "") -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas width and height must be > 0")
        self.width = float(width)
        self.height = float(height)
        self.title = title
        self._lines: list[str] = []
        self._color: RGBA = BLACK
        self._font: tuple[str, float] | None = None
        self._depth = 0

    def set_line_width(self, width: Length) -> None:
        if width < 0:
            raise ValueError("line width must be >= 0")
        self._emit(f"{_num(width)} setlinewidth")

    def set_line_dash(self, pattern: Sequence[Length], offset: Length) -> None:
        dashes = " ".join(_num(d) for d in pattern)
        self._emit(f"[{dashes}] {_num(offset)} setdash")

    def set_color(self, color: RGBA) -> None:
        self._color = color
        r, g, b = (c / 255.0 for c in color[:3])
        self._emit(f"{_num(r)} {_num(g)} {_num(b)} setrgbcolor")

    def rotate(self, radians: float) -> None:
        self._emit(f"{_num(math.degrees(radians))} rotate")

    def translate(self, x: Length, y: Length) -> None:
        self._emit(f"{_num(x)} {_num(y)} translate")

    def push(self) -> None:
        self._depth += 1
        self._emit("gsave")

    def pop(self) -> None:
        if self._depth == 0:
            raise RuntimeError("pop without matching push")
        self._depth -= 1
        self._emit("grestore")
        # grestore also restores the current font.
        self._font = None

    def stroke(self, path: Path) -> None:
        if self._trace(path):
            self._emit("stroke")

    def fill(self, path: Path) -> None:
        if self._trace(path):
            self._emit("fill")

    def fill_text(self, font: Font, x: Length, y: Length, text: str) -> None:
        if not text:
            return
        key = (font.postscript_name, font.size)
        if self._font != key:
            self._emit(f"/{font.postscript_name} findfont {_num(font.size)} scalefont setfont")
            self._font = key
        self._emit(f"{_num(x)} {_num(y)} moveto")
        self._emit(f"({_escape(text)}) show")

    def to_eps(self) -> str:
        header = [
            "%!PS-Adobe-3.0 EPSF-3.0",
            "%%Creator: plotinum",
            f"%%Title: {self.title}",
            f"%%BoundingBox: 0 0 {int(math.ceil(self.width))} {int(math.ceil(self.height))}",
            f"%%HiResBoundingBox: 0 0 {_num(self.width)} {_num(self.height)}",
            "%%EndComments",
        ]
        return "\n".join(header + self._lines + ["showpage", "%%EOF", ""])

    def save(self, path: str | FilePath) -> None:
        out = FilePath(path)
        out.write_text(self.to_eps(), encoding="latin-1", errors="replace")
        LOGGER.info("wrote eps (%d operators) to %s", len(self._lines), out)

    def _trace(self, path: Path) -> bool:
        if len(path) == 0:
            return False
        self._emit("newpath")
        for comp in path.comps:
            if comp.op == "move":
                self._emit(f"{_num(comp.x)} {_num(comp.y)} moveto")
            elif comp.op == "line":
                self._emit(f"{_num(comp.x)} {_num(comp.y)} lineto")
            elif comp.op == "arc":
                start = math.degrees(comp.start)
                end = math.degrees(comp.start + comp.angle)
                op = "arc" if comp.angle >= 0 else "arcn"
                self._emit(f"{_num(comp.x)} {_num(comp.y)} {_num(comp.radius)} {_num(start)} {_num(end)} {op}")
            else:
                self._emit("closepath")
        return True

    def _emit(self, line: str) -> None:
        self._lines.append(line)


def _num(value: float) -> str:
    out = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return "0" if out in ("", "-0") else out


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")

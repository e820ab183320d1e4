from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import math
from pathlib import Path as FilePath
from typing import Callable, Sequence

import numpy as np
from PIL import Image, ImageDraw

from plotinum_vg.canvas import BLACK, RGBA, WHITE
from plotinum_vg.font import Font
from plotinum_vg.path import Path
from plotinum_vg.units import POINTS_PER_INCH, Length


LOGGER = logging.getLogger(__name__)
DEFAULT_DPI = 96.0


@dataclass(frozen=True)
class _GraphicsState:
    color: RGBA = BLACK
    line_width: Length = 1.0
    dashes: tuple[Length, ...] = ()
    dash_offset: Length = 0.0
    matrix: np.ndarray = field(default_factory=lambda: np.eye(3, dtype=np.float64))


class RasterCanvas:
    """Pillow backed canvas measured in points, origin at the bottom left."""

    def __init__(self, width: Length, height: Length, *, dpi: float = DEFAULT_DPI, background: RGBA = WHITE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas width and height must be > 0")
        if dpi <= 0:
            raise ValueError("dpi must be > 0")
        self._scale = dpi / POINTS_PER_INCH
        self._px_w = max(1, int(math.ceil(width * self._scale)))
        self._px_h = max(1, int(math.ceil(height * self._scale)))
        self._device = np.asarray(
            [[self._scale, 0.0, 0.0], [0.0, -self._scale, float(self._px_h)], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )
        self._image = Image.new("RGBA", (self._px_w, self._px_h), background)
        self._state = _GraphicsState()
        self._stack: list[_GraphicsState] = []

    @property
    def pixel_size(self) -> tuple[int, int]:
        return (self._px_w, self._px_h)

    def set_line_width(self, width: Length) -> None:
        if width < 0:
            raise ValueError("line width must be >= 0")
        self._state = replace(self._state, line_width=float(width))

    def set_line_dash(self, pattern: Sequence[Length], offset: Length) -> None:
        if any(d < 0 for d in pattern):
            raise ValueError("dash lengths must be >= 0")
        self._state = replace(self._state, dashes=tuple(float(d) for d in pattern), dash_offset=float(offset))

    def set_color(self, color: RGBA) -> None:
        self._state = replace(self._state, color=tuple(int(c) for c in color))  # type: ignore[arg-type]

    def rotate(self, radians: float) -> None:
        c, s = math.cos(radians), math.sin(radians)
        rot = np.asarray([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
        self._state = replace(self._state, matrix=self._state.matrix @ rot)

    def translate(self, x: Length, y: Length) -> None:
        tr = np.asarray([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]], dtype=np.float64)
        self._state = replace(self._state, matrix=self._state.matrix @ tr)

    def push(self) -> None:
        self._stack.append(self._state)

    def pop(self) -> None:
        if not self._stack:
            raise RuntimeError("pop without matching push")
        self._state = self._stack.pop()

    def stroke(self, path: Path) -> None:
        if self._state.line_width <= 0:
            return
        width_px = max(1, int(round(self._state.line_width * self._scale)))
        dashes = [d * self._scale for d in self._state.dashes]
        offset = self._state.dash_offset * self._scale

        def paint(draw: ImageDraw.ImageDraw) -> None:
            for pts, closed in path.flatten(tolerance=0.5 / self._scale):
                px = self._to_pixels(pts)
                if closed:
                    px.append(px[0])
                if len(px) < 2:
                    continue
                for run in _dash_runs(px, dashes, offset):
                    draw.line(run, fill=self._state.color, width=width_px, joint="curve")

        self._paint(paint)

    def fill(self, path: Path) -> None:
        def paint(draw: ImageDraw.ImageDraw) -> None:
            for pts, _ in path.flatten(tolerance=0.5 / self._scale):
                px = self._to_pixels(pts)
                if len(px) >= 3:
                    draw.polygon(px, fill=self._state.color)

        self._paint(paint)

    def fill_text(self, font: Font, x: Length, y: Length, text: str) -> None:
        if not text:
            return
        face = font.face(font.size * self._scale)
        anchor = self._to_pixels([(x, y)])[0]
        m = self._state.matrix
        angle = math.degrees(math.atan2(m[1, 0], m[0, 0]))
        layer = Image.new("RGBA", self._image.size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).text(anchor, text, font=face, fill=self._state.color, anchor="ls")
        if abs(angle) > 1e-9:
            layer = layer.rotate(angle, resample=Image.Resampling.BICUBIC, center=anchor)
        self._image.alpha_composite(layer)

    def to_rgba(self) -> np.ndarray:
        return np.asarray(self._image, dtype=np.uint8).copy()

    def save_png(self, path: str | FilePath) -> None:
        out = FilePath(path)
        self._image.save(out, format="PNG")
        LOGGER.info("wrote %dx%d png to %s", self._px_w, self._px_h, out)

    def _paint(self, paint: Callable[[ImageDraw.ImageDraw], None]) -> None:
        if self._state.color[3] >= 255:
            paint(ImageDraw.Draw(self._image))
            return
        if self._state.color[3] <= 0:
            return
        layer = Image.new("RGBA", self._image.size, (0, 0, 0, 0))
        paint(ImageDraw.Draw(layer))
        self._image.alpha_composite(layer)

    def _to_pixels(self, pts: Sequence[tuple[float, float]]) -> list[tuple[float, float]]:
        if len(pts) == 0:
            return []
        arr = np.ones((3, len(pts)), dtype=np.float64)
        arr[0:2, :] = np.asarray(pts, dtype=np.float64).T
        out = (self._device @ self._state.matrix) @ arr
        return [(float(px), float(py)) for px, py in zip(out[0], out[1], strict=True)]


def _dash_runs(
    pts: list[tuple[float, float]],
    dashes: list[float],
    offset: float,
) -> list[list[tuple[float, float]]]:
    if not dashes or sum(dashes) <= 0:
        return [pts]
    if len(dashes) % 2 == 1:
        dashes = dashes * 2
    period = sum(dashes)
    # Position inside the dash pattern, and whether that dash is drawn.
    pos = offset % period
    idx = 0
    while pos >= dashes[idx]:
        pos -= dashes[idx]
        idx = (idx + 1) % len(dashes)
    remaining = dashes[idx] - pos

    runs: list[list[tuple[float, float]]] = []
    cur: list[tuple[float, float]] = [pts[0]] if idx % 2 == 0 else []
    for (x0, y0), (x1, y1) in zip(pts, pts[1:]):
        seg = math.hypot(x1 - x0, y1 - y0)
        done = 0.0
        while seg - done > remaining:
            done += remaining
            t = done / seg
            p = (x0 + (x1 - x0) * t, y0 + (y1 - y0) * t)
            if idx % 2 == 0:
                cur.append(p)
                runs.append(cur)
                cur = []
            else:
                cur = [p]
            idx = (idx + 1) % len(dashes)
            remaining = dashes[idx]
        remaining -= seg - done
        if idx % 2 == 0:
            cur.append((x1, y1))
    if len(cur) > 1:
        runs.append(cur)
    return runs

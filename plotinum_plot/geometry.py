from __future__ import annotations

from dataclasses import dataclass

from plotinum_vg import Length, Path


@dataclass(frozen=True)
class Point:
    x: Length = 0.0
    y: Length = 0.0

    def dot(self, q: "Point") -> Length:
        return self.x * q.x + self.y * q.y

    def plus(self, q: "Point") -> "Point":
        return Point(self.x + q.x, self.y + q.y)

    def minus(self, q: "Point") -> "Point":
        return Point(self.x - q.x, self.y - q.y)

    def scale(self, s: float) -> "Point":
        return Point(self.x * s, self.y * s)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned region; max is derived from min and size."""

    min: Point = Point()
    size: Point = Point()

    @property
    def max(self) -> Point:
        return Point(self.min.x + self.size.x, self.min.y + self.size.y)


def rect_path(r: Rect) -> Path:
    p = Path()
    p.move(r.min.x, r.min.y)
    p.line(r.max.x, r.min.y)
    p.line(r.max.x, r.max.y)
    p.line(r.min.x, r.max.y)
    p.close()
    return p

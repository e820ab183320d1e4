from __future__ import annotations

from typing import Callable, Sequence

from plotinum_plot.geometry import Point, Rect


# Slop for floating point equality, about the square root of 1e-15.
SLOP = 3e-8

InsideFn = Callable[[Point, Point], bool]


def is_left(p: Point, clip: Point) -> bool:
    return p.x <= clip.x + SLOP


def is_right(p: Point, clip: Point) -> bool:
    return p.x >= clip.x - SLOP


def is_below(p: Point, clip: Point) -> bool:
    return p.y <= clip.y + SLOP


def is_above(p: Point, clip: Point) -> bool:
    return p.y >= clip.y - SLOP


def isect(p0: Point, p1: Point, clip: Point, norm: Point) -> Point:
    """Returns the intersection of p0→p1 with the line through `clip` with normal `norm`."""
    # t = (norm · (p0 - clip)) / (norm · (p0 - p1))
    t = p0.minus(clip).dot(norm) / p0.minus(p1).dot(norm)
    return p1.minus(p0).scale(t).plus(p0)


def clip_half_plane(inside: InsideFn, clip: Point, norm: Point, pts: Sequence[Point]) -> list[list[Point]]:
    """Clips one polyline against a single half-plane, splitting it where it leaves."""
    lines: list[list[Point]] = []
    cur: list[Point] = []
    for i in range(1, len(pts)):
        p, q = pts[i - 1], pts[i]
        p_in, q_in = inside(p, clip), inside(q, clip)
        if p_in and q_in:
            cur.append(p)
        elif p_in:
            cur.append(p)
            cur.append(isect(p, q, clip, norm))
            lines.append(cur)
            cur = []
        elif q_in:
            cur.append(isect(p, q, clip, norm))
        if q_in and i == len(pts) - 1:
            cur.append(q)
    if len(cur) > 1:
        lines.append(cur)
    return lines


def clip_polyline(rect: Rect, pts: Sequence[Point]) -> list[list[Point]]:
    """Returns the visible runs of a polyline clipped to `rect`."""
    lo, hi = rect.min, rect.max
    planes: list[tuple[InsideFn, Point, Point]] = [
        (is_left, Point(hi.x, lo.y), Point(-1.0, 0.0)),
        (is_above, Point(lo.x, lo.y), Point(0.0, -1.0)),
        (is_right, Point(lo.x, lo.y), Point(1.0, 0.0)),
        (is_below, Point(lo.x, hi.y), Point(0.0, 1.0)),
    ]
    lines: list[list[Point]] = [list(pts)]
    for inside, clip, norm in planes:
        clipped: list[list[Point]] = []
        for line in lines:
            clipped.extend(clip_half_plane(inside, clip, norm, line))
        lines = clipped
    return lines

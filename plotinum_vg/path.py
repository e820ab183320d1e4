from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Literal

from plotinum_vg.units import Length


PathOp = Literal["move", "line", "arc", "close"]


@dataclass(frozen=True)
class PathComp:
    op: PathOp
    x: Length = 0.0
    y: Length = 0.0
    radius: Length = 0.0
    start: float = 0.0
    angle: float = 0.0


@dataclass
class Path:
    """Sequence of path components in canvas coordinates.

    Arcs are centered at (x, y) and sweep `angle` radians counter-clockwise
    from `start`. As in PostScript, an arc is joined to the current point by
    a straight segment.
    """

    comps: list[PathComp] = field(default_factory=list)

    def move(self, x: Length, y: Length) -> None:
        self.comps.append(PathComp(op="move", x=x, y=y))

    def line(self, x: Length, y: Length) -> None:
        self.comps.append(PathComp(op="line", x=x, y=y))

    def arc(self, x: Length, y: Length, radius: Length, start: float, angle: float) -> None:
        self.comps.append(PathComp(op="arc", x=x, y=y, radius=radius, start=start, angle=angle))

    def close(self) -> None:
        self.comps.append(PathComp(op="close"))

    def __len__(self) -> int:
        return len(self.comps)

    def flatten(self, tolerance: Length = 0.25) -> list[tuple[list[tuple[float, float]], bool]]:
        """Returns (points, closed) runs with arcs replaced by line segments."""
        runs: list[tuple[list[tuple[float, float]], bool]] = []
        cur: list[tuple[float, float]] = []
        for comp in self.comps:
            if comp.op == "move":
                if len(cur) > 0:
                    runs.append((cur, False))
                cur = [(comp.x, comp.y)]
            elif comp.op == "line":
                cur.append((comp.x, comp.y))
            elif comp.op == "arc":
                cur.extend(_arc_points(comp, tolerance))
            else:
                if len(cur) > 0:
                    runs.append((cur, True))
                    cur = [cur[0]]
        if len(cur) > 1:
            runs.append((cur, False))
        return runs


def _arc_points(comp: PathComp, tolerance: Length) -> list[tuple[float, float]]:
    r = abs(comp.radius)
    if r == 0:
        return [(comp.x, comp.y)]
    # Chord sagitta r*(1-cos(step/2)) bounded by the tolerance.
    tol = min(max(tolerance, 1e-6), r)
    step = 2.0 * math.acos(1.0 - tol / r)
    n = max(4, int(math.ceil(abs(comp.angle) / step)))
    pts = []
    for i in range(n + 1):
        theta = comp.start + comp.angle * i / n
        pts.append((comp.x + r * math.cos(theta), comp.y + r * math.sin(theta)))
    return pts

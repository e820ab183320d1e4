from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable, Sequence

import numpy as np

from plotinum_vg import Length

from plotinum_plot.styles import TextStyle


@dataclass(frozen=True)
class Tick:
    value: float
    # An empty label marks a minor tick.
    label: str = ""

    @property
    def minor(self) -> bool:
        return self.label == ""

    def length_offset(self, length: Length) -> Length:
        """Offset to the start of the tick line; minor ticks are half length."""
        if self.minor:
            return length / 2
        return 0.0


TickMarker = Callable[[float, float], list[Tick]]


def format_tick_label(v: float) -> str:
    """Formats v with the fewest digits that read back as the same float.

    Exponent form is used when the decimal exponent is below -4 or at least 6.
    """
    v = float(v)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    sci = np.format_float_scientific(v, trim="-", exp_digits=2)
    exp = int(sci.rsplit("e", 1)[1])
    if exp < -4 or exp >= 6:
        return sci
    return np.format_float_positional(v, trim="-")


def default_ticks(vmin: float, vmax: float) -> list[Tick]:
    """Five evenly spaced ticks with labels at the ends and the middle."""
    span = vmax - vmin
    mid = vmin + span / 2
    return [
        Tick(vmin, format_tick_label(vmin)),
        Tick(vmin + span / 4),
        Tick(mid, format_tick_label(mid)),
        Tick(vmin + 3 * span / 4),
        Tick(vmax, format_tick_label(vmax)),
    ]


def constant_ticks(ticks: Sequence[Tick]) -> TickMarker:
    fixed = tuple(ticks)

    def marker(vmin: float, vmax: float) -> list[Tick]:
        return list(fixed)

    return marker


def tick_label_height(sty: TextStyle, ticks: Sequence[Tick]) -> Length:
    return max((sty.height(t.label) for t in ticks if not t.minor), default=0.0)


def tick_label_width(sty: TextStyle, ticks: Sequence[Tick]) -> Length:
    return max((sty.width(t.label) for t in ticks if not t.minor), default=0.0)

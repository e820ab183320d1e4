from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from plotinum_plot import CharacterGlyph, GlyphStyle, Line, LineStyle, Plot, Scatter, Tick, constant_ticks


def build_plot() -> Plot:
    # A damped wave whose y axis is pinned narrower than the data, so the
    # line leaves and re-enters the plot area and is clipped into runs.
    x = np.linspace(0.0, 12.0, 200)
    y = np.exp(-x / 6.0) * np.cos(2.0 * x) * 3.0

    plot = Plot.new()
    plot.title = "Damped wave\n(clipped to [-1.5, 1.5])"
    plot.x.label.text = "t"
    plot.y.label.text = "amplitude"
    plot.add(Line.from_xy(x, y, LineStyle(color=(200, 60, 30, 255), width=1.5, dashes=(4.0, 2.0))))
    peaks = x[::25]
    plot.add(Scatter.from_xy(peaks, np.clip(y[::25], -1.5, 1.5), GlyphStyle(shape=CharacterGlyph("P"), radius=4.0)))

    plot.y.min, plot.y.max = -1.5, 1.5
    plot.y.tick.marker = constant_ticks([Tick(-1.5, "-1.5"), Tick(0.0, "0"), Tick(0.75), Tick(1.5, "1.5")])
    return plot


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a clipped line plot.")
    parser.add_argument("--out", type=Path, default=Path("clipped_series.png"))
    args = parser.parse_args()
    build_plot().save(args.out)
    print(f"wrote {args.out}")


if __name__ == "__main__":
    main()

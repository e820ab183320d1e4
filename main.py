from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from plotinum_plot import Line, LineStyle, Plot, PlotConfig, PlotDataError, Scatter, default_ticks, format_tick_label, load_config


LOGGER = logging.getLogger("plotinum")


def load_columns(path: Path) -> tuple[np.ndarray, np.ndarray]:
    """Loads x/y columns from a comma or whitespace separated file; one column is y against its index."""
    if not path.exists():
        raise FileNotFoundError(f"data file not found: {path}")
    first = ""
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            if line.strip() and not line.lstrip().startswith("#"):
                first = line
                break
    delimiter = "," if "," in first else None
    data = np.loadtxt(path, delimiter=delimiter, ndmin=2, comments="#", dtype=np.float64)
    if data.shape[0] == 0:
        raise PlotDataError(f"no rows in {path}")
    if data.shape[1] == 1:
        return np.arange(data.shape[0], dtype=np.float64), data[:, 0]
    return data[:, 0], data[:, 1]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="plotinum")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a two-column data file to .png or .eps.")
    render.add_argument("data", type=Path)
    render.add_argument("--out", type=Path, required=True)
    render.add_argument("--config", type=Path, default=None, help="TOML plot config.")
    render.add_argument("--title", default="")
    render.add_argument("--x-label", default="")
    render.add_argument("--y-label", default="")
    render.add_argument("--scatter", action="store_true", help="Draw glyphs instead of a line.")

    ticks = sub.add_parser("ticks", help="Print the default ticks for a range.")
    ticks.add_argument("min", type=float)
    ticks.add_argument("max", type=float)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        config = load_config(args.config) if args.config is not None else PlotConfig()
        x, y = load_columns(args.data)
        plot = Plot.new(config)
        plot.title = args.title
        plot.x.label.text = args.x_label
        plot.y.label.text = args.y_label
        if args.scatter:
            plot.add(Scatter.from_xy(x, y, plot.default_glyph_style()))
        else:
            plot.add(Line.from_xy(x, y, LineStyle(width=config.line_width)))
        plot.save(args.out)
        LOGGER.info("rendered %d points from %s", x.size, args.data)
        print(f"wrote {args.out}")
        return

    if args.command == "ticks":
        for t in default_ticks(args.min, args.max):
            print(f"{format_tick_label(t.value)}\t{t.label}")
        return

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    main()

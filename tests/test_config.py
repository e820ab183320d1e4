from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from plotinum_plot.config import PlotConfig, config_from_mapping, load_config
from plotinum_plot.errors import PlotConfigError


class PlotConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = PlotConfig()
        self.assertEqual(config.label_font_size, 12.0)
        self.assertEqual(config.tick_font_size, 10.0)
        self.assertEqual(config.padding, 5.0)
        self.assertEqual(config.tick_length, 8.0)
        self.assertEqual(config.width, 288.0)
        self.assertEqual(config.glyph_shape, "circle")

    def test_load_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "plot.toml"
            path.write_text(
                "[figure]\nwidth_in = 6\nheight_in = 3.5\ndpi = 150\n\n"
                "[axis]\ntick_length = 4\npadding = 0\n\n"
                '[glyph]\nshape = "X"\nradius = 3\n',
                encoding="utf-8",
            )
            config = load_config(path)
        self.assertEqual(config.width, 432.0)
        self.assertEqual(config.height, 252.0)
        self.assertEqual(config.dpi, 150.0)
        self.assertEqual(config.tick_length, 4.0)
        self.assertEqual(config.padding, 0.0)
        self.assertEqual(config.glyph_shape, "X")
        self.assertEqual(config.glyph_radius, 3.0)
        self.assertEqual(config.label_font_size, 12.0)

    def test_unknown_keys_are_logged_and_ignored(self) -> None:
        with self.assertLogs("plotinum_plot.config", level="WARNING") as logs:
            config = config_from_mapping({"axis": {"colour": "red"}, "legend": {}})
        self.assertEqual(config, PlotConfig())
        self.assertEqual(len(logs.records), 2)

    def test_invalid_values_raise(self) -> None:
        bad = [
            {"axis": {"padding": "wide"}},
            {"axis": {"padding": -1}},
            {"axis": {"line_width": True}},
            {"figure": {"dpi": 0}},
            {"figure": {"font": ""}},
            {"glyph": {"shape": "hexagon"}},
            {"axis": 3},
        ]
        for raw in bad:
            with self.subTest(raw=raw):
                with self.assertRaises(PlotConfigError):
                    config_from_mapping(raw)

    def test_malformed_toml_raises_config_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "plot.toml"
            path.write_text("[axis\n", encoding="utf-8")
            with self.assertRaises(PlotConfigError):
                load_config(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/plot.toml")


if __name__ == "__main__":
    unittest.main()

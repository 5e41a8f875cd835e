"""
Tests for EditorConfig.

Tests cover:
- Defaults
- Validation of fit margin, rounding policy, window and outline sizes
- Dictionary conversion
- Pillow format names
"""

import math
import unittest

from CE_Libs.editor_config import EditorConfig


class TestEditorConfig(unittest.TestCase):
    """Test EditorConfig dataclass."""

    def test_config_creation_default(self):
        config = EditorConfig()

        self.assertEqual(config.fit_margin, 0.95)
        self.assertEqual(config.pixel_rounding, "floor")
        self.assertTrue(config.escape_exits)
        self.assertTrue(config.save_on_exit)
        self.assertEqual(config.output_path, "coral-editor-out.png")
        self.assertEqual(config.save_format, "PNG")
        self.assertEqual((config.window_width, config.window_height), (200, 200))

    def test_config_creation_custom(self):
        config = EditorConfig(fit_margin=1.0, pixel_rounding="round", escape_exits=False)

        self.assertEqual(config.fit_margin, 1.0)
        self.assertEqual(config.pixel_rounding, "round")
        self.assertFalse(config.escape_exits)

    def test_rejects_out_of_range_margin(self):
        for margin in (0.0, -0.5, 1.01, math.nan):
            with self.assertRaises(ValueError):
                EditorConfig(fit_margin=margin)

    def test_rejects_unknown_rounding(self):
        with self.assertRaises(ValueError):
            EditorConfig(pixel_rounding="ceil")

    def test_rejects_empty_output_path(self):
        with self.assertRaises(ValueError):
            EditorConfig(output_path="  ")

    def test_rejects_bad_window_size(self):
        with self.assertRaises(ValueError):
            EditorConfig(window_width=0)

    def test_rejects_bad_outline_width(self):
        with self.assertRaises(ValueError):
            EditorConfig(outline_width=0)

    def test_config_to_dict(self):
        data = EditorConfig(fit_margin=0.8).to_dict()

        self.assertEqual(data["fit_margin"], 0.8)
        self.assertEqual(data["pixel_rounding"], "floor")

    def test_config_from_dict_ignores_unknown_keys(self):
        config = EditorConfig.from_dict({"fit_margin": 0.5, "zoom": 3, "output_path": "x.png"})

        self.assertEqual(config.fit_margin, 0.5)
        self.assertEqual(config.output_path, "x.png")

    def test_from_dict_validates(self):
        with self.assertRaises(ValueError):
            EditorConfig.from_dict({"fit_margin": 2.0})

    def test_rejects_unsupported_save_format(self):
        with self.assertRaises(ValueError):
            EditorConfig(save_format="WEBPX")

    def test_accepts_formats_pillow_can_write(self):
        for save_format in ("png", "JPG", "JPEG", "bmp"):
            EditorConfig(save_format=save_format)

    def test_pillow_format(self):
        self.assertEqual(EditorConfig(save_format="jpg").pillow_format, "JPEG")
        self.assertEqual(EditorConfig(save_format="png").pillow_format, "PNG")


if __name__ == "__main__":
    unittest.main()

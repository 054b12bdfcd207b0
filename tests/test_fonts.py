import tempfile
import unittest
from pathlib import Path
from unittest import mock

from PIL import Image

from meme_editor import fonts
from meme_editor.errors import FontResolutionError
from meme_editor.meme_text_renderer import MemeTextRenderer, stroke_pixels, to_rgb
from meme_editor.models import Rect, TextOverlay, TextOverlayStyle


class LoadFontTests(unittest.TestCase):
    def test_missing_family_falls_back(self):
        font = fonts.load_font("no-such-font-family", 32)
        self.assertIsNotNone(font)
        self.assertEqual(font.size, 32)

    def test_missing_family_in_strict_mode(self):
        with self.assertRaises(FontResolutionError) as ctx:
            fonts.load_font("no-such-font-family", 32, allow_fallback=False)
        self.assertIn("no-such-font-family", str(ctx.exception))
        self.assertEqual(ctx.exception.fallback, fonts.FALLBACK_FONT_FAMILY)

    def test_font_dirs_are_searched_first(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "Impact.ttf"
            path.touch()
            sentinel = object()
            with mock.patch.object(fonts.ImageFont, "truetype", return_value=sentinel) as truetype:
                found = fonts.load_font("Impact", 20, font_dirs=(tmp,), allow_fallback=False)
            self.assertIs(found, sentinel)
            truetype.assert_called_once_with(str(path), 20)

    def tearDown(self):
        fonts._load_family.cache_clear()


class MemeTextRendererTests(unittest.TestCase):
    def test_stroke_width_is_a_percentage_of_font_size(self):
        self.assertEqual(stroke_pixels(TextOverlayStyle(stroke_width=-3.0), 40), 1)
        self.assertEqual(stroke_pixels(TextOverlayStyle(stroke_width=-3.0), 100), 3)
        self.assertEqual(stroke_pixels(TextOverlayStyle(stroke_width=5.0), 100), 5)
        self.assertEqual(stroke_pixels(TextOverlayStyle(stroke_width=0), 100), 0)

    def test_colors_accept_names_and_tuples(self):
        self.assertEqual(to_rgb("white"), (255, 255, 255))
        self.assertEqual(to_rgb("#000000"), (0, 0, 0))
        self.assertEqual(to_rgb((10, 20, 30, 255)), (10, 20, 30))

    def test_long_caption_shrinks_to_fit(self):
        renderer = MemeTextRenderer(Image.new("RGB", (200, 100)))
        style = TextOverlayStyle(font_family="no-such-font-family", font_size=60, min_font_size=8)
        font, _ = renderer._fit_text("ONE DOES NOT SIMPLY", style, 200)
        self.assertLess(font.size, 60)
        self.assertGreaterEqual(font.size, 8)

    def test_short_caption_keeps_its_size(self):
        renderer = MemeTextRenderer(Image.new("RGB", (600, 100)))
        style = TextOverlayStyle(font_family="no-such-font-family", font_size=30, min_font_size=8)
        font, stroke = renderer._fit_text("HI", style, 600)
        self.assertEqual(font.size, 30)
        self.assertEqual(stroke, 1)

    def test_blank_caption_draws_nothing(self):
        image = Image.new("RGB", (100, 50), (1, 2, 3))
        MemeTextRenderer(image).draw_overlay(TextOverlay("", Rect(0, 0, 100, 50)))
        self.assertEqual(image.getcolors(), [(5000, (1, 2, 3))])

    def test_multi_line_caption_is_drawn_on_one_line(self):
        image = Image.new("RGB", (400, 100), (1, 2, 3))
        style = TextOverlayStyle(font_family="no-such-font-family")
        MemeTextRenderer(image).draw_overlay(TextOverlay("TOP\nTEXT", Rect(0, 0, 400, 100), style))
        self.assertIn((255, 255, 255), {color for _, color in image.getcolors(maxcolors=40000)})


if __name__ == "__main__":
    unittest.main()

import base64
import unittest
from io import BytesIO
from unittest import mock

from PIL import Image

from meme_editor.errors import MissingImageError
from meme_editor.imaging import encode_image, image_format, open_image, to_data_url


class ImagingTests(unittest.TestCase):
    def test_open_applies_exif_orientation(self):
        exif = Image.Exif()
        exif[0x0112] = 6
        buffered = BytesIO()
        Image.new("RGB", (40, 20), (10, 20, 30)).save(buffered, format="jpeg", exif=exif.tobytes())
        buffered.seek(0)

        image = open_image(buffered)
        self.assertEqual(image.size, (20, 40))

    def test_open_rejects_non_images(self):
        with self.assertRaises(MissingImageError):
            open_image(BytesIO(b"not an image"))

    def test_open_rejects_missing_files(self):
        with self.assertRaises(MissingImageError):
            open_image("/nonexistent/photo.png")

    def test_open_rejects_truncated_data(self):
        buffered = BytesIO()
        Image.effect_noise((120, 160), 64).convert("RGB").save(buffered, format="png")
        data = buffered.getvalue()
        with self.assertRaises(MissingImageError):
            open_image(BytesIO(data[: len(data) // 2]))

    def test_open_rejects_decompression_bombs(self):
        buffered = BytesIO()
        Image.new("RGB", (120, 160)).save(buffered, format="png")
        buffered.seek(0)
        with mock.patch.object(Image, "MAX_IMAGE_PIXELS", 100), self.assertRaises(MissingImageError):
            open_image(buffered)

    def test_image_format_from_name(self):
        self.assertEqual(image_format("cat.JPG"), "jpeg")
        self.assertEqual(image_format("cat.png"), "png")
        self.assertEqual(image_format("cat.gif"), "png")
        self.assertEqual(image_format("cat", "jpeg"), "jpeg")

    def test_jpeg_export_drops_alpha(self):
        data = encode_image(Image.new("RGBA", (8, 8), (255, 0, 0, 128)), "jpeg")
        self.assertEqual(Image.open(BytesIO(data)).format, "JPEG")

    def test_data_url(self):
        url = to_data_url(Image.new("RGB", (4, 4)), "png")
        prefix = "data:image/png;base64,"
        self.assertTrue(url.startswith(prefix))
        decoded = Image.open(BytesIO(base64.b64decode(url[len(prefix):])))
        self.assertEqual(decoded.size, (4, 4))


if __name__ == "__main__":
    unittest.main()

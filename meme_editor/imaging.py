"""Getting photos in and finished memes out.

The renderer only works on decoded, in-memory images; decoding uploads and encoding
results happens here, outside of it.
"""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from PIL import Image, ImageOps

from meme_editor.errors import MissingImageError

format_ext = {
    "png": "png",
    "jpg": "jpeg",
    "jpeg": "jpeg",
}

content_types = {
    "png": "image/png",
    "jpeg": "image/jpeg",
}


def open_image(source: str | Path | BinaryIO) -> Image.Image:
    """Decode ``source`` fully into memory, upright per its EXIF orientation."""
    try:
        with Image.open(source) as img:
            img.load()
            return ImageOps.exif_transpose(img)
    except (Image.DecompressionBombError, OSError) as exc:
        raise MissingImageError(f"Could not read the photo: {exc}") from exc


def image_format(filename: str, default: str = "png") -> str:
    return format_ext.get(filename.rsplit(".", 1)[-1].lower(), default)


def encode_image(image: Image.Image, fmt: str = "png") -> bytes:
    buffered = BytesIO()
    if fmt == "jpeg" and image.mode != "RGB":
        image = image.convert("RGB")
    image.save(buffered, format=fmt)
    return buffered.getvalue()


def to_data_url(image: Image.Image, fmt: str = "png") -> str:
    encoded_string = base64.b64encode(encode_image(image, fmt)).decode("utf-8")
    return f"data:{content_types[fmt]};base64,{encoded_string}"

"""Font family lookup.

A family is looked up as ``<family>.ttf``, ``.otf`` or ``.ttc`` inside each configured
font directory, then handed to Pillow as-is so it can search the system font
directories. When the family cannot be found the documented fallback is
``DejaVuSans-Bold`` and, failing that, Pillow's bundled default font at the same size.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from PIL import ImageFont

from meme_editor.errors import FontResolutionError

logger = logging.getLogger(__name__)

FALLBACK_FONT_FAMILY = "DejaVuSans-Bold"
FONT_EXTENSIONS = (".ttf", ".otf", ".ttc")

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def _candidates(family: str, font_dirs: tuple[str, ...]) -> list[str]:
    paths = []
    for font_dir in font_dirs:
        for ext in FONT_EXTENSIONS:
            path = Path(font_dir) / f"{family}{ext}"
            if path.exists():
                paths.append(str(path))
    paths.append(family)
    if not family.lower().endswith(FONT_EXTENSIONS):
        paths.append(f"{family}.ttf")
    return paths


@lru_cache(maxsize=256)
def _load_family(family: str, size: int, font_dirs: tuple[str, ...]) -> ImageFont.FreeTypeFont | None:
    for candidate in _candidates(family, font_dirs):
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    return None


def load_font(
    family: str,
    size: int,
    font_dirs: tuple[str, ...] = (),
    allow_fallback: bool = True,
) -> Font:
    font = _load_family(family, size, font_dirs)
    if font is not None:
        return font

    if not allow_fallback:
        raise FontResolutionError(family, FALLBACK_FONT_FAMILY)

    logger.warning("font %r not found, falling back to %s", family, FALLBACK_FONT_FAMILY)
    font = _load_family(FALLBACK_FONT_FAMILY, size, font_dirs)
    if font is not None:
        return font
    return ImageFont.load_default(size)

"""Meme editor: a photo, two captions, one flattened image."""

from meme_editor.errors import FontResolutionError, InvalidCanvasError, MemeRenderError, MissingImageError
from meme_editor.models import (
    ChromeRegion,
    ContentMode,
    MemeRenderRequest,
    MemeResult,
    Rect,
    Size,
    TextAlignment,
    TextOverlay,
    TextOverlayStyle,
)
from meme_editor.renderer import MemeRenderer

__all__ = [
    "ChromeRegion",
    "ContentMode",
    "FontResolutionError",
    "InvalidCanvasError",
    "MemeRenderError",
    "MemeRenderRequest",
    "MemeRenderer",
    "MemeResult",
    "MissingImageError",
    "Rect",
    "Size",
    "TextAlignment",
    "TextOverlay",
    "TextOverlayStyle",
]

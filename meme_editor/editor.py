"""Glue between an editing surface (web form, command line) and the renderer.

Caption placeholders and screen layout are decided here so the renderer only ever
sees finished requests.
"""

from __future__ import annotations

from PIL import Image

from meme_editor.conf import MemeEditorConfig
from meme_editor.errors import InvalidCanvasError, MissingImageError
from meme_editor.geometry import chrome_bars, text_bands
from meme_editor.models import ContentMode, MemeRenderRequest, Size, TextOverlay, TextOverlayStyle
from meme_editor.renderer import MemeRenderer

DEFAULT_TOP_TEXT = "TOP"
DEFAULT_BOTTOM_TEXT = "BOTTOM"


def caption(value: str | None, placeholder: str) -> str:
    """A caption the user never touched keeps its placeholder; a cleared one stays blank."""
    return placeholder if value is None else value


def compose_request(
    image: Image.Image | None,
    top_text: str,
    bottom_text: str,
    config: MemeEditorConfig,
    canvas: Size | None = None,
    nav_bar_height: int = 0,
    tool_bar_height: int = 0,
    content_mode: ContentMode = ContentMode.SCALE_TO_FILL,
    style: TextOverlayStyle | None = None,
) -> MemeRenderRequest:
    if canvas is None:
        if image is None:
            raise MissingImageError()
        # The photo fills the space between the bars.
        canvas = Size(image.width, image.height + nav_bar_height + tool_bar_height)
    if canvas.width * canvas.height > config.max_canvas_pixels:
        raise InvalidCanvasError(
            f"Canvas {canvas.width}x{canvas.height} is larger than {config.max_canvas_pixels} pixels"
        )

    style = style or config.text_style()
    top_band, bottom_band = text_bands(canvas, config.text_band_ratio)
    return MemeRenderRequest(
        image=image,
        canvas_size=canvas,
        top=TextOverlay(top_text, top_band, style),
        bottom=TextOverlay(bottom_text, bottom_band, style),
        chrome=chrome_bars(canvas, nav_bar_height, tool_bar_height),
        content_mode=content_mode,
    )


def renderer_for(config: MemeEditorConfig) -> MemeRenderer:
    return MemeRenderer(font_dirs=config.font_dirs, allow_font_fallback=not config.strict_fonts)

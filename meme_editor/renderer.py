"""Flattens a photo and its two captions into the finished meme."""

from __future__ import annotations

import logging
import time

from PIL import Image

from meme_editor.errors import InvalidCanvasError, MissingImageError
from meme_editor.geometry import editing_frame, fit_image, hide_chrome
from meme_editor.meme_text_renderer import MemeTextRenderer, to_rgb
from meme_editor.models import MemeRenderRequest, MemeResult, Rect, Size

logger = logging.getLogger(__name__)


class MemeRenderer:
    """Renders what the editor shows, minus the navigation bar and toolbar.

    The photo is drawn into its editing frame grown by every chrome region, so it
    takes over the space the bars covered. Captions keep the positions they have on
    the canvas. A render holds no state between calls and never modifies the request.
    """

    def __init__(self, font_dirs: tuple[str, ...] = (), allow_font_fallback: bool = True) -> None:
        self.font_dirs = tuple(font_dirs)
        self.allow_font_fallback = allow_font_fallback

    def image_frame(self, request: MemeRenderRequest) -> Rect:
        """Frame the photo is drawn into once the chrome is hidden."""
        canvas = request.canvas_size
        if canvas.width <= 0 or canvas.height <= 0:
            raise InvalidCanvasError(f"Canvas must be positive, got {canvas.width}x{canvas.height}")

        frame = request.image_frame or editing_frame(canvas, request.chrome)
        if frame.width <= 0 or frame.height <= 0:
            raise InvalidCanvasError(f"Image frame must be positive, got {frame.width}x{frame.height}")
        return hide_chrome(frame, canvas, request.chrome)

    def render(self, request: MemeRenderRequest) -> MemeResult:
        started = time.perf_counter()
        source = request.image
        if source is None or source.width <= 0 or source.height <= 0:
            raise MissingImageError()

        frame = self.image_frame(request)
        canvas_size = request.canvas_size
        canvas = Image.new("RGB", (canvas_size.width, canvas_size.height), to_rgb(request.background_color))

        text_renderer = MemeTextRenderer(canvas, self.font_dirs, self.allow_font_fallback)
        for overlay in request.overlays:
            text_renderer.resolve_fonts(overlay)

        target = fit_image(Size(source.width, source.height), frame, request.content_mode)
        photo = source.resize((target.width, target.height), Image.Resampling.LANCZOS)
        if photo.mode in ("RGBA", "LA") or (photo.mode == "P" and "transparency" in photo.info):
            photo = photo.convert("RGBA")
            canvas.paste(photo, target.as_box(), photo)
        else:
            canvas.paste(photo.convert("RGB"), target.as_box())

        for overlay in request.overlays:
            text_renderer.draw_overlay(overlay)

        logger.info(
            "rendered %dx%d meme in %.1fms",
            canvas_size.width,
            canvas_size.height,
            (time.perf_counter() - started) * 1000,
        )
        return MemeResult(image=canvas, image_frame=target)

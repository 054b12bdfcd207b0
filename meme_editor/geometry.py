"""Layout math for the editor: where the photo sits with and without the bars."""

from __future__ import annotations

from collections.abc import Iterable

from meme_editor.errors import InvalidCanvasError
from meme_editor.models import ChromeRegion, ContentMode, Rect, Size


def is_top_chrome(region: ChromeRegion, canvas: Size) -> bool:
    return region.rect.center_y < canvas.height / 2


def chrome_heights(canvas: Size, chrome: Iterable[ChromeRegion]) -> tuple[int, int]:
    """Return (top, bottom) chrome heights."""
    top = bottom = 0
    for region in chrome:
        if is_top_chrome(region, canvas):
            top += region.height
        else:
            bottom += region.height
    return top, bottom


def editing_frame(canvas: Size, chrome: Iterable[ChromeRegion] = ()) -> Rect:
    """Frame of the photo while the bars are on screen."""
    top, bottom = chrome_heights(canvas, chrome)
    height = canvas.height - top - bottom
    if height <= 0:
        raise InvalidCanvasError(
            f"Chrome ({top + bottom}px) leaves no room on a {canvas.height}px tall canvas"
        )
    return Rect(0, top, canvas.width, height)


def hide_chrome(frame: Rect, canvas: Size, chrome: Iterable[ChromeRegion]) -> Rect:
    """Grow ``frame`` into the space the bars occupied.

    The origin moves up by the top bars and the height grows by every bar, the same
    adjustment a view makes when it hides its navigation bar and toolbar.
    """
    top, bottom = chrome_heights(canvas, chrome)
    return Rect(frame.x, frame.y - top, frame.width, frame.height + top + bottom)


def fit_image(image_size: Size, frame: Rect, mode: ContentMode) -> Rect:
    """Rectangle the image is scaled into so it shows in ``frame`` per ``mode``."""
    if mode == ContentMode.SCALE_TO_FILL:
        return frame

    scale_x = frame.width / image_size.width
    scale_y = frame.height / image_size.height
    if mode == ContentMode.ASPECT_FIT:
        scale = min(scale_x, scale_y)
    else:
        scale = max(scale_x, scale_y)

    width = max(1, round(image_size.width * scale))
    height = max(1, round(image_size.height * scale))
    return Rect(
        frame.x + (frame.width - width) // 2,
        frame.y + (frame.height - height) // 2,
        width,
        height,
    )


def text_bands(canvas: Size, band_ratio: float = 0.15, padding_ratio: float = 0.04) -> tuple[Rect, Rect]:
    """Default (top, bottom) caption regions, laid out on the final canvas."""
    pad = int(canvas.height * padding_ratio)
    band = max(1, int(canvas.height * band_ratio))
    top = Rect(0, pad, canvas.width, band)
    bottom = Rect(0, canvas.height - pad - band, canvas.width, band)
    return top, bottom


def chrome_bars(canvas: Size, nav_bar_height: int = 0, tool_bar_height: int = 0) -> tuple[ChromeRegion, ...]:
    """Navigation bar along the top edge and toolbar along the bottom edge."""
    bars = []
    if nav_bar_height > 0:
        bars.append(ChromeRegion(Rect(0, 0, canvas.width, nav_bar_height), name="navigation"))
    if tool_bar_height > 0:
        bars.append(
            ChromeRegion(
                Rect(0, canvas.height - tool_bar_height, canvas.width, tool_bar_height),
                name="toolbar",
            )
        )
    return tuple(bars)

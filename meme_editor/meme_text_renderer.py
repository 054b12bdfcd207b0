from __future__ import annotations

from PIL import Image, ImageChops, ImageColor, ImageDraw

from meme_editor.fonts import Font, load_font
from meme_editor.models import Color, TextAlignment, TextOverlay, TextOverlayStyle

ANCHORS = {
    TextAlignment.LEFT: "lm",
    TextAlignment.CENTER: "mm",
    TextAlignment.RIGHT: "rm",
}


def to_rgb(color: Color) -> tuple[int, int, int]:
    if isinstance(color, str):
        return ImageColor.getcolor(color, "RGB")
    return tuple(color[:3])


def stroke_pixels(style: TextOverlayStyle, font_size: int) -> int:
    """Stroke width in pixels; ``style.stroke_width`` is a percentage of the font size."""
    if not style.stroke_width:
        return 0
    return max(1, round(abs(style.stroke_width) * font_size / 100))


class MemeTextRenderer:
    """Draws meme captions onto an image.

    Each caption is a single line placed in its overlay's region:

    1. The font is resolved from the style's family (see :mod:`meme_editor.fonts`).
    2. If the style sets ``min_font_size``, the size shrinks until the line fits the
       region's width.
    3. The line is centred vertically in the region and aligned horizontally per the
       style, then drawn with the stroke convention of :class:`TextOverlayStyle`.
    """

    def __init__(
        self,
        image: Image.Image,
        font_dirs: tuple[str, ...] = (),
        allow_font_fallback: bool = True,
    ) -> None:
        self._image = image
        self._draw = ImageDraw.Draw(image)
        self._font_dirs = font_dirs
        self._allow_font_fallback = allow_font_fallback

    def font_for(self, style: TextOverlayStyle, size: int | None = None) -> Font:
        return load_font(
            style.font_family,
            size or style.font_size,
            self._font_dirs,
            self._allow_font_fallback,
        )

    def _text_width(self, text: str, font: Font, stroke: int) -> int:
        bbox = self._draw.textbbox((0, 0), text, font=font, stroke_width=stroke)
        return bbox[2] - bbox[0]

    def _fit_text(self, text: str, style: TextOverlayStyle, max_width: int) -> tuple[Font, int]:
        """Return the largest font (and its stroke) whose line fits ``max_width``."""
        min_size = style.min_font_size
        if min_size is None or min_size >= style.font_size:
            return self.font_for(style), stroke_pixels(style, style.font_size)

        for size in range(style.font_size, min_size - 1, -1):
            font = self.font_for(style, size)
            stroke = stroke_pixels(style, size)
            if self._text_width(text, font, stroke) <= max_width:
                return font, stroke

        return self.font_for(style, min_size), stroke_pixels(style, min_size)

    def _draw_outlined_text(
        self,
        xy: tuple[float, float],
        text: str,
        font: Font,
        style: TextOverlayStyle,
        stroke: int,
    ) -> None:
        anchor = ANCHORS[style.alignment]
        fill = to_rgb(style.fill_color)
        stroke_fill = to_rgb(style.stroke_color)

        if style.stroke_width > 0:
            # Outline only: the stroked glyphs minus the glyph bodies.
            outer = Image.new("L", self._image.size, 0)
            inner = Image.new("L", self._image.size, 0)
            ImageDraw.Draw(outer).text(
                xy, text, fill=255, font=font, anchor=anchor, stroke_width=stroke, stroke_fill=255
            )
            ImageDraw.Draw(inner).text(xy, text, fill=255, font=font, anchor=anchor)
            outline = ImageChops.subtract(outer, inner)
            self._image.paste(stroke_fill, (0, 0, *self._image.size), outline)
            return

        self._draw.text(
            xy=xy,
            text=text,
            font=font,
            fill=fill,
            stroke_fill=stroke_fill,
            stroke_width=stroke,
            anchor=anchor,
        )

    def resolve_fonts(self, overlay: TextOverlay) -> None:
        """Fail before any drawing if the overlay's font cannot be loaded."""
        if overlay.text:
            self.font_for(overlay.style)

    def draw_overlay(self, overlay: TextOverlay) -> None:
        """Draw ``overlay`` inside its region. Blank captions draw nothing."""
        text = " ".join(overlay.text.splitlines())
        if not text:
            return

        region = overlay.region
        style = overlay.style
        font, stroke = self._fit_text(text, style, region.width - 2 * stroke_pixels(style, style.font_size))

        if style.alignment == TextAlignment.LEFT:
            x = region.x + stroke
        elif style.alignment == TextAlignment.RIGHT:
            x = region.x + region.width - stroke
        else:
            x = region.center_x
        self._draw_outlined_text((x, region.center_y), text, font, style, stroke)

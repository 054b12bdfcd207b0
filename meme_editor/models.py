"""Value types passed into and out of the meme renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from PIL import Image

Color = str | tuple[int, ...]


class TextAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ContentMode(str, Enum):
    SCALE_TO_FILL = "scale_to_fill"
    ASPECT_FIT = "aspect_fit"
    ASPECT_FILL = "aspect_fill"


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def as_box(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass(frozen=True)
class ChromeRegion:
    """A bar that is part of the editing layout but never part of the meme."""

    rect: Rect
    name: str = ""

    @property
    def height(self) -> int:
        return self.rect.height


@dataclass(frozen=True)
class TextOverlayStyle:
    """Shared look of the meme captions.

    ``stroke_width`` is a percentage of the font size. A negative value strokes the
    outside of the glyph outline and keeps the fill; a positive value draws the
    outline alone.
    """

    fill_color: Color = (255, 255, 255)
    stroke_color: Color = (0, 0, 0)
    stroke_width: float = -3.0
    font_family: str = "HelveticaNeue-CondensedBlack"
    font_size: int = 40
    alignment: TextAlignment = TextAlignment.CENTER
    min_font_size: int | None = None


DEFAULT_STYLE = TextOverlayStyle()


@dataclass(frozen=True)
class TextOverlay:
    text: str
    region: Rect
    style: TextOverlayStyle = DEFAULT_STYLE


@dataclass(frozen=True)
class MemeRenderRequest:
    image: Image.Image | None
    canvas_size: Size
    top: TextOverlay | None = None
    bottom: TextOverlay | None = None
    chrome: tuple[ChromeRegion, ...] = field(default_factory=tuple)
    image_frame: Rect | None = None
    content_mode: ContentMode = ContentMode.SCALE_TO_FILL
    background_color: Color = (0, 0, 0)

    @property
    def overlays(self) -> list[TextOverlay]:
        return [overlay for overlay in (self.top, self.bottom) if overlay is not None]


@dataclass(frozen=True)
class MemeResult:
    image: Image.Image
    image_frame: Rect

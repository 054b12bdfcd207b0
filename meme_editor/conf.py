"""Editor settings, read from ``settings.MEME_EDITOR`` over built-in defaults."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

from django.conf import settings

from meme_editor.models import TextOverlayStyle


@dataclass(frozen=True)
class MemeEditorConfig:
    image_dir: Path | None = None
    font_dirs: tuple[str, ...] = ()
    strict_fonts: bool = False
    font_family: str = "HelveticaNeue-CondensedBlack"
    font_size: int = 40
    stroke_width: float = -3.0
    min_font_size: int | None = 16
    nav_bar_height: int = 44
    tool_bar_height: int = 44
    text_band_ratio: float = 0.15
    max_upload_bytes: int = 10 * 1024 * 1024
    max_canvas_pixels: int = 40_000_000
    export_format: str = "png"

    def text_style(self) -> TextOverlayStyle:
        return TextOverlayStyle(
            font_family=self.font_family,
            font_size=self.font_size,
            stroke_width=self.stroke_width,
            min_font_size=self.min_font_size,
        )


def get_config() -> MemeEditorConfig:
    raw = getattr(settings, "MEME_EDITOR", {}) or {}
    known = {f.name for f in fields(MemeEditorConfig)}
    values = {}
    for key, value in raw.items():
        name = key.lower()
        if name in known:
            values[name] = value

    if values.get("image_dir") is not None:
        values["image_dir"] = Path(values["image_dir"])
    if "font_dirs" in values:
        values["font_dirs"] = tuple(str(path) for path in values["font_dirs"])
    if values.get("export_format") not in (None, "png", "jpeg"):
        values["export_format"] = "png"
    return MemeEditorConfig(**values)

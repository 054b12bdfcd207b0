import logging
from pathlib import Path

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views import View

from meme_editor.conf import MemeEditorConfig, get_config
from meme_editor.editor import (
    DEFAULT_BOTTOM_TEXT,
    DEFAULT_TOP_TEXT,
    caption,
    compose_request,
    renderer_for,
)
from meme_editor.errors import InvalidCanvasError, MemeRenderError, MissingImageError
from meme_editor.imaging import content_types, encode_image, image_format, open_image, to_data_url
from meme_editor.models import ContentMode, Size

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg")


def image_list(image_dir: Path | None) -> list[str]:
    if image_dir is None or not image_dir.is_dir():
        return []
    return sorted(path.name for path in image_dir.iterdir() if path.suffix.lower() in IMAGE_SUFFIXES)


def get_file_path(file: str, image_dir: Path | None) -> Path | None:
    if image_dir is None:
        return None
    path = image_dir / Path(file).name
    return path if path.is_file() else None


def _int_field(request: HttpRequest, name: str, default: int | None) -> int | None:
    value = request.POST.get(name)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidCanvasError(f"{name} must be a whole number") from exc


class IndexView(View):
    template_name = "index.html"

    def get(self, request: HttpRequest) -> HttpResponse:
        config = get_config()
        ctx = {
            "image_list": image_list(config.image_dir),
            "top_text": DEFAULT_TOP_TEXT,
            "bottom_text": DEFAULT_BOTTOM_TEXT,
            "content_modes": [mode.value for mode in ContentMode],
        }
        return render(request, self.template_name, context=ctx)


class MemeView(View):
    template_name = "meme.html"

    def _acquire(self, request: HttpRequest, config: MemeEditorConfig):
        upload = request.FILES.get("image")
        if upload is not None:
            if upload.size > config.max_upload_bytes:
                raise MissingImageError("That photo is too large, please choose a smaller one.")
            return open_image(upload), upload.name

        file = request.POST.get("file")
        if file:
            file_path = get_file_path(file, config.image_dir)
            if file_path is None:
                raise MissingImageError()
            return open_image(file_path), file_path.name

        raise MissingImageError()

    def post(self, request: HttpRequest) -> HttpResponse:
        config = get_config()
        top_text = caption(request.POST.get("top_text"), DEFAULT_TOP_TEXT)
        bottom_text = caption(request.POST.get("bottom_text"), DEFAULT_BOTTOM_TEXT)
        ctx = {
            "top_text": top_text,
            "bottom_text": bottom_text,
            "file": request.POST.get("file", ""),
            "content_modes": [mode.value for mode in ContentMode],
        }

        try:
            content_mode = ContentMode(request.POST.get("content_mode") or ContentMode.SCALE_TO_FILL)
        except ValueError:
            content_mode = ContentMode.SCALE_TO_FILL
        ctx["content_mode"] = content_mode.value

        try:
            image, name = self._acquire(request, config)
            nav_bar_height = _int_field(request, "nav_bar_height", config.nav_bar_height)
            tool_bar_height = _int_field(request, "tool_bar_height", config.tool_bar_height)
            width = _int_field(request, "canvas_width", image.width)
            height = _int_field(request, "canvas_height", image.height + nav_bar_height + tool_bar_height)
            meme_request = compose_request(
                image,
                top_text,
                bottom_text,
                config,
                canvas=Size(width, height),
                nav_bar_height=nav_bar_height,
                tool_bar_height=tool_bar_height,
                content_mode=content_mode,
            )
            result = renderer_for(config).render(meme_request)
        except MemeRenderError as exc:
            logger.warning("meme not rendered: %s", exc)
            ctx["error"] = str(exc)
            return render(request, self.template_name, context=ctx, status=400)

        fmt = image_format(name, config.export_format)
        if request.POST.get("share") == "true":
            response = HttpResponse(encode_image(result.image, fmt), content_type=content_types[fmt])
            response["Content-Disposition"] = f'attachment; filename="meme.{fmt}"'
            return response

        ctx["data_url"] = to_data_url(result.image, fmt)
        ctx["export_name"] = f"meme.{fmt}"
        return render(request, self.template_name, context=ctx)

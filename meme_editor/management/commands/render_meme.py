import logging
from dataclasses import replace
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from meme_editor.conf import get_config
from meme_editor.editor import compose_request, renderer_for
from meme_editor.errors import MemeRenderError
from meme_editor.imaging import encode_image, image_format, open_image
from meme_editor.models import ContentMode, Size

logger = logging.getLogger(__name__)


def parse_size(value: str) -> Size:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError as exc:
        raise CommandError(f"--canvas must look like WIDTHxHEIGHT, got {value!r}") from exc
    return Size(width, height)


class Command(BaseCommand):
    help = "Render a meme from a photo and two captions."

    def add_arguments(self, parser):
        parser.add_argument("image", help="Photo to caption")
        parser.add_argument("-o", "--output", required=True, help="Where to write the meme")
        parser.add_argument("--top", default="", help="Top caption")
        parser.add_argument("--bottom", default="", help="Bottom caption")
        parser.add_argument("--canvas", help="Canvas size as WIDTHxHEIGHT (default: photo size plus the bars)")
        parser.add_argument("--nav-bar-height", type=int, default=0)
        parser.add_argument("--tool-bar-height", type=int, default=0)
        parser.add_argument("--font", help="Font family")
        parser.add_argument("--font-size", type=int)
        parser.add_argument(
            "--content-mode",
            choices=[mode.value for mode in ContentMode],
            default=ContentMode.SCALE_TO_FILL.value,
        )
        parser.add_argument("--strict-fonts", action="store_true", help="Fail instead of using the fallback font")

    def handle(self, *args, **options):
        config = get_config()
        if options["strict_fonts"]:
            config = replace(config, strict_fonts=True)

        style = config.text_style()
        if options["font"]:
            style = replace(style, font_family=options["font"])
        if options["font_size"]:
            style = replace(style, font_size=options["font_size"])

        output = Path(options["output"])
        try:
            image = open_image(options["image"])
            meme_request = compose_request(
                image,
                options["top"],
                options["bottom"],
                config,
                canvas=parse_size(options["canvas"]) if options["canvas"] else None,
                nav_bar_height=options["nav_bar_height"],
                tool_bar_height=options["tool_bar_height"],
                content_mode=ContentMode(options["content_mode"]),
                style=style,
            )
            result = renderer_for(config).render(meme_request)
        except MemeRenderError as exc:
            raise CommandError(str(exc)) from exc

        output.write_bytes(encode_image(result.image, image_format(output.name, config.export_format)))
        logger.info("meme written to %s", output)
        self.stdout.write(self.style.SUCCESS(f"Wrote {output}"))

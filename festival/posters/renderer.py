"""Render a single result as a downloadable PNG poster."""

import io
import unicodedata
import urllib.parse

from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from festival.models import PosterSpec, Result
from festival.posters import get_template
from festival.posters import templates  # noqa: F401  (registers the templates)
from festival.posters.base import PosterTemplate

POSTER_SIZE = (800, 600)
TITLE = "COMPETITION RESULT"

# Horizontal padding each line must fit inside
MARGIN = 40
MIN_FONT_SIZE = 12

# (vertical centre, starting font size) for each line, top to bottom
LAYOUT = {
    "title": (84, 48),
    "event": (168, 36),
    "position": (296, 72),
    "participant": (404, 42),
    "points": (488, 32),
}


def single_line(text: str) -> str:
    """Collapse line breaks and runs of whitespace into single spaces."""
    return " ".join(text.split())


def poster_lines(spec: PosterSpec) -> dict[str, str]:
    """Return the text of each poster line, keyed like LAYOUT.

    Each line is drawn as one row of text, so names containing line breaks
    are flattened onto a single line.
    """
    return {
        "title": TITLE,
        "event": single_line(spec.event_name),
        "position": f"{spec.position_label} PLACE",
        "participant": single_line(spec.participant),
        "points": f"{spec.points} Points",
    }


def _fit_font(draw: ImageDraw.ImageDraw, text: str, size: int, max_width: int):
    """Largest default font no bigger than ``size`` that fits ``text`` in max_width."""
    font = ImageFont.load_default(size=size)
    while size > MIN_FONT_SIZE and draw.textlength(text, font=font) > max_width:
        size -= 2
        font = ImageFont.load_default(size=size)
    return font


def draw_poster(spec: PosterSpec, template: PosterTemplate) -> Image.Image:
    """Draw the poster described by ``spec`` on the template's background."""
    width, height = POSTER_SIZE
    image = template.background(POSTER_SIZE)
    draw = ImageDraw.Draw(image)

    for key, text in poster_lines(spec).items():
        if not text:
            continue
        centre_y, size = LAYOUT[key]
        font = _fit_font(draw, text, size, width - 2 * MARGIN)
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        x = (width - (right - left)) / 2 - left
        y = centre_y - (bottom - top) / 2 - top
        draw.text((x, y), text, font=font, fill=template.text_color)

    return image


def render_poster(result: Result, template_id: str) -> bytes:
    """Render a result poster as PNG bytes (800x600).

    The output depends only on the result and template, so rendering the
    same pair twice gives identical bytes.

    Args:
        result: The result to celebrate
        template_id: Id of a registered poster template

    Returns:
        PNG-encoded image bytes

    Raises:
        UnknownTemplate: If template_id is not a registered template
        InvalidPosition: If the result's position is below 1
    """
    template = get_template(template_id)
    spec = PosterSpec.from_result(result, template_id)
    logger.debug(
        f"Rendering {template_id} poster for {spec.participant!r} "
        f"({spec.position_label}, {spec.event_name!r})"
    )

    image = draw_poster(spec, template)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def poster_filename(result: Result) -> str:
    """Download filename for a result's poster: ``participant-event-result.png``.

    Path separators become underscores. Control characters such as line
    breaks are folded into spaces.
    """
    parts = [result.participant, result.event_name or ""]
    safe = []
    for part in parts:
        part = "".join(" " if unicodedata.category(c).startswith("C") else c for c in part)
        safe.append(single_line(part.replace("/", "_").replace("\\", "_")))
    return f"{safe[0]}-{safe[1]}-result.png"


def content_disposition(filename: str) -> str:
    """``Content-Disposition`` value for downloading ``filename``.

    Header values must be Latin-1, so the plain ``filename`` parameter is an
    ASCII fallback and the full name goes in ``filename*`` as UTF-8.
    """
    fallback = (
        unicodedata.normalize("NFKD", filename)
        .encode("ascii", "ignore")
        .decode("ascii")
        .replace('"', "'")
    )
    quoted = urllib.parse.quote(filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quoted}"

"""Serverless function rendering a downloadable result poster."""

import sys
from pathlib import Path

# Add the project root to the path so we can import festival modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from festival.backend import BackendError
from festival.config import get_settings
from festival.http import create_binary_response, create_response, preflight_response
from festival.log import setup_logging
from festival.posters import UnknownTemplate, get_all_templates
from festival.posters.renderer import (
    content_disposition,
    poster_filename,
    render_poster,
)
from festival.scoring import InvalidPosition
from festival.sources.factory import open_source

from loguru import logger

setup_logging(get_settings().log_level)


def handler(request):
    """Handle poster download requests.

    Accepts:
    - GET with query parameters ``result_id`` (required) and ``template``
      (optional, defaults to the configured template)

    Returns the PNG poster as a base64-encoded attachment.
    """
    if request.method == "OPTIONS":
        return preflight_response("GET, OPTIONS")

    if request.method != "GET":
        return create_response(
            {"error": "Method not allowed. Use GET."},
            status=405,
        )

    settings = get_settings()
    result_id = request.args.get("result_id")
    template_id = request.args.get("template") or settings.default_template

    if not result_id:
        return create_response(
            {"error": "Missing 'result_id' query parameter"},
            status=400,
        )

    try:
        with open_source(settings) as source:
            result = source.get(result_id)

        if result is None:
            return create_response(
                {"error": f"No result with id {result_id}"},
                status=404,
            )

        content = render_poster(result, template_id)
        filename = poster_filename(result)
        logger.info(f"Rendered poster {filename!r} with template {template_id}")
        return create_binary_response(
            content,
            "image/png",
            headers={"Content-Disposition": content_disposition(filename)},
        )

    except UnknownTemplate as e:
        known = ", ".join(t.template_id for t in get_all_templates())
        return create_response(
            {"error": f"{e}. Available templates: {known}"},
            status=400,
        )
    except InvalidPosition as e:
        return create_response(
            {"error": f"Result {result_id} cannot be rendered: {e}"},
            status=422,
        )
    except BackendError as e:
        logger.error(f"Backend unavailable: {e}")
        return create_response(
            {"error": str(e)},
            status=502,
        )
    except Exception as e:
        logger.exception("Unexpected error rendering poster")
        return create_response(
            {"error": f"Internal error: {e}"},
            status=500,
        )

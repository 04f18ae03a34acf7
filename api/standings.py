"""Serverless function serving competition results and the leaderboard."""

import sys
from pathlib import Path

# Add the project root to the path so we can import festival modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from festival.backend import BackendError
from festival.config import get_settings
from festival.http import create_response, preflight_response
from festival.log import setup_logging
from festival.sources.factory import open_source
from festival.standings import StandingsError, build_standings

from loguru import logger

setup_logging(get_settings().log_level)


def handler(request):
    """Handle requests for the festival standings.

    Accepts:
    - GET: returns results grouped by event and the leaderboard

    Returns JSON with ``events`` (each with its results in position order)
    and ``leaderboard`` (ranked participants, limited to the configured size).
    """
    if request.method == "OPTIONS":
        return preflight_response("GET, OPTIONS")

    if request.method != "GET":
        return create_response(
            {"error": "Method not allowed. Use GET."},
            status=405,
        )

    settings = get_settings()
    try:
        with open_source(settings) as source:
            standings = build_standings(
                source, leaderboard_limit=settings.leaderboard_limit
            )
        return create_response(standings.to_dict())

    except StandingsError as e:
        logger.error(f"Could not build standings: {e}")
        return create_response(
            {"error": str(e)},
            status=502,
        )
    except BackendError as e:
        logger.error(f"Backend unavailable: {e}")
        return create_response(
            {"error": str(e)},
            status=502,
        )
    except Exception as e:
        logger.exception("Unexpected error building standings")
        return create_response(
            {"error": f"Internal error: {e}"},
            status=500,
        )

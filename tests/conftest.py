"""Shared test helpers."""

import io
from pathlib import Path

import pytest
from PIL import Image

from festival.models import LeaderboardEntry, Result

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_result(
    participant: str,
    position: int,
    event: str | None = "Event",
    *,
    result_id: str | None = None,
    event_id: str | None = None,
    points: int | None = None,
) -> Result:
    """Build a Result with sensible defaults.

    The event id defaults to a slug of the event name, so results in the
    same named event also share an event id.
    """
    if event_id is None and event is not None:
        event_id = event.lower().replace(" ", "-")
    return Result(
        id=result_id or f"{participant}-{event}-{position}",
        event_id=event_id,
        participant=participant,
        position=position,
        points=points,
        event_name=event,
    )


def open_png(content: bytes) -> Image.Image:
    """Decode PNG bytes into a fully loaded image."""
    image = Image.open(io.BytesIO(content))
    image.load()
    return image


def leaderboard_rows(entries: list[LeaderboardEntry]) -> list[tuple[str, int, int]]:
    """(participant, total_points, rank) for each entry, in order."""
    return [(e.participant, e.total_points, e.rank) for e in entries]


@pytest.fixture
def results_file():
    """Path to the anonymized sample results (backend row shape)."""
    return FIXTURES_DIR / "results.json"

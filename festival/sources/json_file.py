"""Results read from a JSON export file."""

import json
from pathlib import Path

from loguru import logger

from festival.models import Result
from festival.sources import register_source
from festival.sources.base import ResultSource


@register_source
class JsonFileResultSource(ResultSource):
    """Reads a JSON array of backend-shaped result rows.

    Each row looks like the backend's ``results`` rows with the event
    embedded, e.g.::

        {"id": "r1", "event_id": "e1", "participant": "Team Alpha",
         "position": 1, "schedule": {"event_name": "Tech Quiz",
         "category": "Technical"}}

    This is the format written by scripts/generate_sample_data.py.
    """

    kind = "json"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch(self) -> list[Result]:
        rows = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(rows, list):
            raise ValueError(f"{self.path} must contain a JSON array of result rows")
        logger.debug(f"Loaded {len(rows)} results from {self.path}")
        return [Result.from_row(row) for row in rows]

"""CRUD services over the festival's backend tables."""

import base64
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from festival.backend.client import BackendClient, BackendError
from festival.models import Event, Result
from festival.scoring import points_for_position


class TableService:
    """Create/read/update/delete for one backend table.

    Subclasses set ``table`` and ``order``, the default sort terms used by
    get_all (e.g. ``("created_at.desc",)``).
    """

    table: str = ""
    order: tuple[str, ...] = ()

    def __init__(self, client: BackendClient):
        self.client = client

    def get_all(self) -> list[dict[str, Any]]:
        return self.client.select(self.table, order=self.order)

    def get_by_id(self, row_id: str) -> dict[str, Any] | None:
        return self.client.select_one(self.table, row_id)

    def create(self, row: dict[str, Any]) -> dict[str, Any]:
        created = self.client.insert(self.table, row)
        logger.info(f"Created {self.table} row {created.get('id')}")
        return created

    def update(self, row_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Apply changes to a row, stamping ``updated_at``."""
        stamped = {**changes, "updated_at": datetime.now(timezone.utc).isoformat()}
        return self.client.update(self.table, row_id, stamped)

    def delete(self, row_id: str) -> None:
        self.client.delete(self.table, row_id)
        logger.info(f"Deleted {self.table} row {row_id}")

    def count(self) -> int:
        return self.client.count(self.table)


class ScheduleService(TableService):
    table = "schedule"
    order = ("date.asc", "time.asc")

    def get_events(self) -> list[Event]:
        return [Event.from_row(row) for row in self.get_all()]


class ResultsService(TableService):
    table = "results"
    order = ("created_at.desc",)

    # Each result with its event's display fields embedded
    WITH_EVENT = "*,schedule(event_name,category)"

    def get_with_events(self) -> list[Result]:
        """All results as Result objects, event fields resolved, by position."""
        rows = self.client.select(self.table, columns=self.WITH_EVENT, order=("position.asc",))
        return [Result.from_row(row) for row in rows]

    def get_result(self, result_id: str) -> Result | None:
        row = self.client.select_one(self.table, result_id, columns=self.WITH_EVENT)
        return Result.from_row(row) if row is not None else None

    def record(self, event_id: str, participant: str, position: int) -> dict[str, Any]:
        """Record a placement, storing the points its position earns.

        Raises:
            ValueError: If participant is blank
            InvalidPosition: If position is not a positive integer
        """
        if not participant or not participant.strip():
            raise ValueError("Participant name is required.")
        points = points_for_position(position)
        return self.create({
            "event_id": event_id,
            "participant": participant,
            "position": position,
            "points": points,
        })


class GalleryService(TableService):
    table = "gallery"
    order = ("created_at.desc",)


class AnnouncementsService(TableService):
    table = "announcements"
    order = ("created_at.desc",)

    def get_all(self) -> list[dict[str, Any]]:
        """Active announcements only, newest first."""
        return self.client.select(self.table, filters={"is_active": True}, order=self.order)

    def get_all_for_admin(self) -> list[dict[str, Any]]:
        return super().get_all()

    def toggle_active(self, row_id: str) -> dict[str, Any]:
        current = self.get_by_id(row_id)
        if current is None:
            raise BackendError(f"No announcements row with id {row_id}", status_code=404)
        return self.update(row_id, {"is_active": not current.get("is_active")})


def dashboard_stats(client: BackendClient) -> dict[str, int]:
    """Row counts for the admin dashboard."""
    return {
        "schedule_count": ScheduleService(client).count(),
        "results_count": ResultsService(client).count(),
        "gallery_count": GalleryService(client).count(),
        "announcements_count": AnnouncementsService(client).count(),
    }


def text_to_speech(client: BackendClient, text: str, voice: str = "alloy") -> bytes:
    """Synthesize an announcement with the backend's text-to-speech function.

    Returns:
        MP3 audio bytes
    """
    reply = client.invoke_function("text-to-speech", {"text": text, "voice": voice})
    audio = reply.get("audioContent") if isinstance(reply, dict) else None
    if not audio:
        raise BackendError("text-to-speech returned no audio")
    return base64.b64decode(audio)

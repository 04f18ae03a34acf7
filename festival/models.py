"""Core data models for festival events, results and standings."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Self

from festival.scoring import InvalidPosition, points_for_position, position_label


@dataclass
class Event:
    """A scheduled festival activity, as stored in the ``schedule`` table."""
    id: str
    event_name: str
    category: str | None = None
    date: str | None = None
    time: str | None = None
    venue: str | None = None
    description: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Self:
        return cls(
            id=str(row["id"]),
            event_name=row["event_name"],
            category=row.get("category"),
            date=row.get("date"),
            time=row.get("time"),
            venue=row.get("venue"),
            description=row.get("description"),
        )


def _parse_position(value: Any) -> int:
    """Read a stored position as an int, refusing values that are not whole numbers.

    Range checks happen where points are awarded, so ``0`` still parses.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidPosition(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidPosition(value) from None
    raise InvalidPosition(value)


@dataclass
class Result:
    """One participant's placement in one event.

    Attributes:
        id: Opaque identifier
        event_id: Owning event, or None when the result was recorded without one
        participant: Display name
        position: 1-indexed placement (1 = winner); not unique per event
        points: Points as stored by the backend, if any. Informational only;
            standings always derive points from the position.
        event_name: Denormalized from the owning event at read time
        event_category: Denormalized from the owning event at read time
        attachments: Photo references (URLs or storage paths)

    Example:
        >>> result = Result(
        ...     id="r1",
        ...     event_id="e1",
        ...     participant="Team Alpha",
        ...     position=1,
        ...     event_name="Tech Quiz",
        ... )
    """
    id: str
    event_id: str | None
    participant: str
    position: int
    points: int | None = None
    event_name: str | None = None
    event_category: str | None = None
    attachments: list[str] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Self:
        """Build a Result from a backend ``results`` row.

        The row may embed its event as ``schedule: {event_name, category}``
        (null when the event reference is missing). Photos come from a
        ``photos`` list, or from the legacy single ``image_url`` column.

        Raises:
            ValueError: If the participant name is missing or blank
            InvalidPosition: If the position is missing or not a whole number
        """
        event = row.get("schedule") or {}

        photos = row.get("photos")
        if photos:
            attachments = [str(p) for p in photos]
        elif row.get("image_url"):
            attachments = [row["image_url"]]
        else:
            attachments = []

        participant = row.get("participant")
        if not isinstance(participant, str) or not participant.strip():
            raise ValueError(f"Result {row.get('id')} has no participant name")

        points = row.get("points")
        event_id = row.get("event_id")
        return cls(
            id=str(row["id"]),
            event_id=str(event_id) if event_id is not None else None,
            participant=participant,
            position=_parse_position(row.get("position")),
            points=int(points) if points is not None else None,
            event_name=event.get("event_name"),
            event_category=event.get("category"),
            attachments=attachments,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "event_id": self.event_id,
            "participant": self.participant,
            "position": self.position,
            "points": self.points,
            "event_name": self.event_name,
            "event_category": self.event_category,
            "attachments": list(self.attachments),
        }


@dataclass
class LeaderboardEntry:
    """A participant's aggregate standing across all events.

    Attributes:
        participant: Participant name (unique within a leaderboard)
        total_points: Sum of position-derived points over all results
        event_count: Number of distinct events the participant has a result in
        rank: 1-indexed dense rank (tied totals share a rank)
    """
    participant: str
    total_points: int
    event_count: int
    rank: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "participant": self.participant,
            "total_points": self.total_points,
            "event_count": self.event_count,
            "rank": self.rank,
        }


@dataclass(frozen=True)
class PosterSpec:
    """Everything the poster renderer draws for a single result."""
    template_id: str
    event_name: str
    participant: str
    position_label: str
    points: int

    @classmethod
    def from_result(cls, result: Result, template_id: str) -> Self:
        return cls(
            template_id=template_id,
            event_name=result.event_name or "",
            participant=result.participant,
            position_label=position_label(result.position),
            points=points_for_position(result.position),
        )


@dataclass(frozen=True)
class Session:
    """An admin session, independent of wherever it is stored.

    Attributes:
        email: Identity the session was issued to
        issued_at: When the session was created (timezone-aware)
        expires_at: First instant at which the session is no longer valid
        is_admin: Whether the session grants admin access
    """
    email: str
    issued_at: datetime
    expires_at: datetime
    is_admin: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "issued_at": self.issued_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "is_admin": self.is_admin,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            email=data["email"],
            issued_at=datetime.fromisoformat(data["issued_at"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
            is_admin=bool(data.get("is_admin", False)),
        )

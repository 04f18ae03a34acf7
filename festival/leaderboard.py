"""Cross-event leaderboard: total points per participant with dense ranking."""

from festival.models import LeaderboardEntry, Result
from festival.scoring import points_for_position


def compute_leaderboard(results: list[Result]) -> list[LeaderboardEntry]:
    """Aggregate results into a leaderboard ordered by rank.

    Participants are identified by exact name (case-sensitive, untrimmed).
    Points are always derived from each result's position; any stored
    ``points`` value is ignored. Equal totals share a rank and the next
    total gets the following rank (1, 1, 2), with ties listed by
    participant name.

    Args:
        results: Results in any order

    Returns:
        LeaderboardEntry list ordered by rank, then participant name

    Raises:
        InvalidPosition: If any result has a position below 1
    """
    totals: dict[str, int] = {}
    events: dict[str, set[str]] = {}

    for result in results:
        points = points_for_position(result.position)
        totals[result.participant] = totals.get(result.participant, 0) + points
        participant_events = events.setdefault(result.participant, set())
        if result.event_id is not None:
            participant_events.add(result.event_id)

    ordered = sorted(totals, key=lambda p: (-totals[p], p))

    leaderboard = []
    rank = 0
    previous_total = None
    for participant in ordered:
        total = totals[participant]
        if total != previous_total:
            rank += 1
            previous_total = total
        leaderboard.append(LeaderboardEntry(
            participant=participant,
            total_points=total,
            event_count=len(events[participant]),
            rank=rank,
        ))

    return leaderboard


def top(entries: list[LeaderboardEntry], limit: int | None) -> list[LeaderboardEntry]:
    """Return the first ``limit`` entries, or all of them if limit is None."""
    if limit is None:
        return list(entries)
    return entries[:max(limit, 0)]

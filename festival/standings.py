"""Orchestrator: fetch results, group them by event and build the leaderboard."""

from dataclasses import dataclass
from typing import Any

from loguru import logger

from festival.leaderboard import compute_leaderboard, top
from festival.models import LeaderboardEntry, Result
from festival.results import event_categories, group_by_event
from festival.scoring import InvalidPosition, ordinal, points_for_position
from festival.sources.base import ResultSource


@dataclass
class Standings:
    """Everything the public Results and Leaderboard pages show."""
    results: list[Result]
    groups: dict[str, list[Result]]
    leaderboard: list[LeaderboardEntry]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        categories = event_categories(self.groups)
        return {
            "num_results": len(self.results),
            "events": [
                {
                    "event_name": event_name,
                    "category": categories[event_name],
                    "results": [
                        {**r.to_dict(), "place": f"{ordinal(r.position)} Place"}
                        for r in members
                    ],
                }
                for event_name, members in self.groups.items()
            ],
            "leaderboard": [entry.to_dict() for entry in self.leaderboard],
        }


class StandingsError(Exception):
    """Error while building standings."""
    pass


def build_standings(source: ResultSource, *, leaderboard_limit: int | None = None) -> Standings:
    """Fetch results once and derive the grouped results and leaderboard.

    Args:
        source: Where to read results from
        leaderboard_limit: Keep only this many leaderboard entries (None = all)

    Returns:
        Standings for the fetched results

    Raises:
        StandingsError: If the source fails or a result has an invalid position
    """
    try:
        results = source.fetch()
    except Exception as e:
        raise StandingsError(f"Failed to load results: {e}") from e

    for result in results:
        try:
            points_for_position(result.position)
        except InvalidPosition as e:
            raise StandingsError(f"Result {result.id} for {result.participant!r}: {e}") from e

    leaderboard = compute_leaderboard(results)

    groups = group_by_event(results)
    logger.info(
        f"Built standings: {len(results)} results in {len(groups)} events, "
        f"{len(leaderboard)} participants"
    )
    return Standings(
        results=results,
        groups=groups,
        leaderboard=top(leaderboard, leaderboard_limit),
    )

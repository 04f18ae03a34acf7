"""Grouping of competition results for display."""

from festival.models import Result

UNKNOWN_EVENT = "Unknown Event"


def group_by_event(results: list[Result]) -> dict[str, list[Result]]:
    """Group results by event name, each group sorted by position.

    Groups are returned in the order their event is first seen. Within a
    group the sort is stable, so results sharing a position keep their
    original relative order. Results without an event name all land in the
    UNKNOWN_EVENT group.

    Args:
        results: Results in any order

    Returns:
        Dict mapping event name -> results for that event (never empty)
    """
    groups: dict[str, list[Result]] = {}
    for result in results:
        key = result.event_name or UNKNOWN_EVENT
        groups.setdefault(key, []).append(result)

    return {
        event_name: sorted(members, key=lambda r: r.position)
        for event_name, members in groups.items()
    }


def event_categories(groups: dict[str, list[Result]]) -> dict[str, str | None]:
    """Return the category of each event group, or None if no result has one."""
    categories: dict[str, str | None] = {}
    for event_name, members in groups.items():
        categories[event_name] = next(
            (r.event_category for r in members if r.event_category), None
        )
    return categories

"""Generate sample festival results for demos and local development.

Builds a set of schedule events and a results table for them, with
participant names generated by faker using a fixed seed so that the output
is the same on every run. Rows are written in the backend's ``results``
shape with each event embedded, which is what JsonFileResultSource reads.

Usage:
    python scripts/generate_sample_data.py
    python scripts/generate_sample_data.py -o results.json --participants 30
"""

import argparse
import json
import random
from pathlib import Path

from faker import Faker

DEFAULT_OUTPUT = Path(__file__).parent.parent / "sample_results.json"

SEED = 20240115

EVENTS = [
    ("Opening Ceremony Dance-Off", "Cultural"),
    ("Tech Quiz", "Technical"),
    ("Battle of Bands", "Cultural"),
    ("Code Sprint", "Technical"),
    ("Debate", "Literary"),
    ("Treasure Hunt", "Fun"),
]


def make_participants(fake: Faker, count: int) -> list[str]:
    """Team names like "Team Harper", unique within the festival."""
    names: list[str] = []
    seen: set[str] = set()
    while len(names) < count:
        name = f"Team {fake.last_name()}"
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


def generate_rows(participants: list[str], per_event: int, rng: random.Random) -> list[dict]:
    """One results row per placement, for every event."""
    rows = []
    result_number = 1
    for event_number, (event_name, category) in enumerate(EVENTS, start=1):
        event_id = f"event-{event_number}"
        entrants = rng.sample(participants, min(per_event, len(participants)))
        for position, participant in enumerate(entrants, start=1):
            rows.append({
                "id": f"result-{result_number}",
                "event_id": event_id,
                "participant": participant,
                "position": position,
                "schedule": {"event_name": event_name, "category": category},
            })
            result_number += 1
    return rows


def main():
    parser = argparse.ArgumentParser(description="Generate sample festival results")
    parser.add_argument(
        "-o", "--output", type=Path, default=DEFAULT_OUTPUT,
        help=f"Output JSON path (default: {DEFAULT_OUTPUT.name})",
    )
    parser.add_argument(
        "--participants", type=int, default=20,
        help="Number of distinct participants (default: 20)",
    )
    parser.add_argument(
        "--per-event", type=int, default=8,
        help="Placements recorded per event (default: 8)",
    )
    args = parser.parse_args()

    fake = Faker()
    Faker.seed(SEED)
    rng = random.Random(SEED)

    participants = make_participants(fake, args.participants)
    rows = generate_rows(participants, args.per_event, rng)

    args.output.write_text(json.dumps(rows, indent=2) + "\n", encoding="utf-8")
    print(f"Wrote {len(rows)} results for {len(EVENTS)} events to {args.output}")


if __name__ == "__main__":
    main()

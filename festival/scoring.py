"""Scoring policy: points and labels for a competition placement."""

# Points for positions 1-5; every position after that earns CONSOLATION_POINTS
POSITION_POINTS = {
    1: 10,
    2: 7,
    3: 5,
    4: 3,
    5: 3,
}

CONSOLATION_POINTS = 1

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


class InvalidPosition(ValueError):
    """Raised when a placement is not a positive integer."""

    def __init__(self, position):
        super().__init__(f"Position must be a positive integer, got {position!r}")
        self.position = position


def _validate(position) -> int:
    # bool is an int subclass, but True is not a placement
    if isinstance(position, bool) or not isinstance(position, int) or position < 1:
        raise InvalidPosition(position)
    return position


def points_for_position(position: int) -> int:
    """Return the points awarded for a placement.

    1st = 10, 2nd = 7, 3rd = 5, 4th-5th = 3, 6th and below = 1.

    Raises:
        InvalidPosition: If position is not an integer >= 1
    """
    _validate(position)
    return POSITION_POINTS.get(position, CONSOLATION_POINTS)


def ordinal(position: int) -> str:
    """Display label for a placement: 1st, 2nd, 3rd, then 4th, 5th, ... 21th.

    Only the podium places get their own suffix; everything from 4 on is "th".
    """
    _validate(position)
    return f"{position}{_SUFFIXES.get(position, 'th')}"


def position_label(position: int) -> str:
    """Poster label for a placement: 1ST, 2ND, 3RD, 4TH, ..."""
    return ordinal(position).upper()

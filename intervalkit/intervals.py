"""Argument-array entry points for interval construction and identification."""

from collections.abc import Sequence

from intervalkit.errors import ArityError
from intervalkit.interval_constructor import IntervalConstructor
from intervalkit.interval_identifier import IntervalIdentifier
from intervalkit.interval_models import Direction

DEFAULT_DIRECTION = Direction.ASCENDING
MIN_ARGS = 2
MAX_ARGS = 3

_constructor = IntervalConstructor()
_identifier = IntervalIdentifier()


def _unpack(args: Sequence[str]) -> tuple[str, str, Direction]:
    """Check arity and resolve the optional direction (default "asc")."""
    if not MIN_ARGS <= len(args) <= MAX_ARGS:
        raise ArityError(
            f"Expected {MIN_ARGS} or {MAX_ARGS} arguments, got {len(args)}."
        )
    direction = Direction.from_token(args[2]) if len(args) == MAX_ARGS else DEFAULT_DIRECTION
    return args[0], args[1], direction


def interval_construction(args: Sequence[str]) -> str:
    """
    Build a note from ``[interval, start_note, direction?]``.

    >>> interval_construction(["P5", "B", "asc"])
    'F#'
    """
    interval_name, start_note, direction = _unpack(args)
    return _constructor.construct(interval_name, start_note, direction)


def interval_identification(args: Sequence[str]) -> str:
    """
    Name the interval for ``[start_note, end_note, direction?]``.

    >>> interval_identification(["C", "D"])
    'M2'
    """
    start_note, end_note, direction = _unpack(args)
    return _identifier.identify(start_note, end_note, direction)

"""IntervalTable: fixed interval descriptors and the 12-slot note circle."""

from types import MappingProxyType
from typing import Final, Mapping

from intervalkit.errors import UnidentifiableIntervalError, UnknownIntervalError
from intervalkit.interval_models import Direction, Interval

SEMITONES_PER_OCTAVE = 12

# ── Note circle ────────────────────────────────────────────────────────────────
# One slot per semitone; "" marks a slot with no natural letter.
#   C - D - E F - G - A - B
NOTE_CIRCLE: Final[tuple[str, ...]] = (
    "C", "", "D", "", "E", "F", "", "G", "", "A", "", "B",
)

_LETTER_POSITIONS: Final[Mapping[str, int]] = MappingProxyType(
    {letter: position for position, letter in enumerate(NOTE_CIRCLE) if letter}
)

# ── Interval table ─────────────────────────────────────────────────────────────

INTERVALS: Final[tuple[Interval, ...]] = (
    Interval("m2", semitones=1, degree=2),
    Interval("M2", semitones=2, degree=2),
    Interval("m3", semitones=3, degree=3),
    Interval("M3", semitones=4, degree=3),
    Interval("P4", semitones=5, degree=4),
    Interval("P5", semitones=7, degree=5),
    Interval("m6", semitones=8, degree=6),
    Interval("M6", semitones=9, degree=6),
    Interval("m7", semitones=10, degree=7),
    Interval("M7", semitones=11, degree=7),
    Interval("P8", semitones=12, degree=8),
)

INTERVALS_BY_NAME: Final[Mapping[str, Interval]] = MappingProxyType(
    {interval.name: interval for interval in INTERVALS}
)


def _build_semitone_index(intervals: tuple[Interval, ...]) -> tuple[Interval | None, ...]:
    """Index intervals by semitone count; unmapped counts hold None."""
    index: list[Interval | None] = [None] * (SEMITONES_PER_OCTAVE + 1)
    for interval in intervals:
        index[interval.semitones] = interval
    return tuple(index)


#: INTERVALS_BY_SEMITONES[n] is the interval spanning n semitones, or None.
INTERVALS_BY_SEMITONES: Final[tuple[Interval | None, ...]] = _build_semitone_index(INTERVALS)


# ── Lookups ────────────────────────────────────────────────────────────────────

def lookup_by_name(name: str) -> Interval:
    """
    Return the tabulated interval called *name*.

    Raises:
        UnknownIntervalError: If *name* is not one of the 11 interval names.
    """
    try:
        return INTERVALS_BY_NAME[name]
    except KeyError:
        known = ", ".join(INTERVALS_BY_NAME)
        raise UnknownIntervalError(
            f"Interval '{name}' is invalid. Use one of: {known}."
        ) from None


def lookup_by_semitones(semitones: int) -> Interval:
    """
    Return the interval spanning exactly *semitones* semitones.

    Raises:
        UnidentifiableIntervalError: If no tabulated interval has that size
            (0, 6, negative counts and counts above an octave).
    """
    interval = None
    if 0 <= semitones < len(INTERVALS_BY_SEMITONES):
        interval = INTERVALS_BY_SEMITONES[semitones]
    if interval is None:
        raise UnidentifiableIntervalError(
            f"No interval spans {semitones} semitone(s)."
        )
    return interval


def letter_position(letter: str) -> int:
    """Index of a natural letter on the note circle."""
    return _LETTER_POSITIONS[letter]


def is_lettered(position: int) -> bool:
    """True when the slot at *position* carries a natural letter."""
    return NOTE_CIRCLE[position] != ""


def step(position: int, direction: Direction) -> int:
    """Move one slot along the circle, wrapping around the octave."""
    return (position + direction.step) % SEMITONES_PER_OCTAVE

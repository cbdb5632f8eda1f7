"""Unit tests for IntervalIdentifier."""

import pytest

from intervalkit.errors import InvalidNoteError, UnidentifiableIntervalError
from intervalkit.interval_identifier import IntervalIdentifier
from intervalkit.interval_models import Direction

ASC = Direction.ASCENDING
DSC = Direction.DESCENDING


@pytest.mark.parametrize(
    ("start", "end", "direction", "expected"),
    [
        ("C", "D", ASC, "M2"),
        ("B", "F#", ASC, "P5"),
        ("G#", "D#", DSC, "P4"),
        ("Bb", "A", DSC, "m2"),
        ("Cb", "Abb", DSC, "M3"),
        ("Fb", "Gbb", ASC, "m2"),
        ("G", "F#", ASC, "M7"),
        ("E", "C", ASC, "m6"),
        ("D##", "E##", ASC, "M2"),
    ],
)
def test_identify_known_cases(start: str, end: str, direction: Direction, expected: str) -> None:
    assert IntervalIdentifier().identify(start, end, direction) == expected


def test_identify_defaults_to_ascending() -> None:
    assert IntervalIdentifier().identify("C", "D") == "M2"


def test_identify_same_note_is_unidentifiable() -> None:
    with pytest.raises(UnidentifiableIntervalError):
        IntervalIdentifier().identify("C", "C", ASC)


def test_identify_tritone_is_unidentifiable() -> None:
    with pytest.raises(UnidentifiableIntervalError, match="6 semitone"):
        IntervalIdentifier().identify("C", "F#", ASC)


def test_identify_negative_span_is_unidentifiable() -> None:
    with pytest.raises(UnidentifiableIntervalError):
        IntervalIdentifier().identify("B#", "Cb", ASC)


def test_identify_rejects_triple_accidentals() -> None:
    with pytest.raises(InvalidNoteError):
        IntervalIdentifier().identify("Abbb", "C", ASC)
    with pytest.raises(InvalidNoteError):
        IntervalIdentifier().identify("C", "D###", ASC)

"""Data models shared by the interval table, codec and calculators."""

from dataclasses import dataclass
from enum import Enum

from intervalkit.errors import InvalidDirectionError


class Direction(Enum):
    """Traversal direction over the note circle."""

    ASCENDING = "asc"
    DESCENDING = "dsc"

    @property
    def step(self) -> int:
        """+1 for ascending, -1 for descending."""
        return 1 if self is Direction.ASCENDING else -1

    @classmethod
    def from_token(cls, token: str) -> "Direction":
        try:
            return cls(token)
        except ValueError:
            raise InvalidDirectionError(
                f"Direction '{token}' is invalid. Use 'asc' or 'dsc'."
            ) from None


@dataclass(frozen=True)
class Interval:
    """
    A named interval.

    Attributes:
        name:      Short name, e.g. "m3" or "P5".
        semitones: Number of semitones spanned (1-12).
        degree:    Number of letters spanned, both endpoints included (2-8).
    """

    name: str
    semitones: int
    degree: int


@dataclass(frozen=True)
class NoteToken:
    """
    A parsed note such as "F#" or "Bbb".

    Attributes:
        letter:      Natural letter A-G.
        accidentals: +n for n sharps, -n for n flats, 0 for a natural.
    """

    letter: str
    accidentals: int = 0

    def __str__(self) -> str:
        if self.accidentals > 0:
            return self.letter + "#" * self.accidentals
        return self.letter + "b" * -self.accidentals

"""IntervalConstructor: derives the note lying a given interval away from a start note."""

import logging

from intervalkit import interval_table, note_codec
from intervalkit.interval_models import Direction, Interval, NoteToken

logger = logging.getLogger(__name__)

#: Construction accepts single sharps and flats only.
MAX_START_ACCIDENTALS = 1


class IntervalConstructor:
    """
    Builds the end note of an interval from a start note.

    Algorithm overview
    ------------------
    1. **Letter walk** – Starting on the start note's letter, step along the
       note circle in the requested direction. Each step that lands on a
       lettered slot counts one degree; the walk stops when the degree count
       (the start letter counts as 1) reaches the interval's degree.

    2. **Diatonic span** – Every slot stepped is one semitone, so the number
       of slots walked is the distance between the two bare letters.

    3. **Accidental balance** – The end letter's accidental makes up the
       difference between the interval's semitone size and the letter span,
       taking the start note's own accidental into account:
         ascending:  end = semitones + start - span
         descending: end = span - semitones + start
    """

    def __init__(self, max_accidentals: int = MAX_START_ACCIDENTALS) -> None:
        self.max_accidentals = max_accidentals

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _walk_degrees(self, start_position: int, degree: int, direction: Direction) -> tuple[int, int]:
        """
        Walk until *degree* letters have been spanned.

        Returns:
            (end_position, slots_walked)
        """
        position = start_position
        distance = 0
        current_degree = 1
        while current_degree != degree:
            position = interval_table.step(position, direction)
            distance += 1
            if interval_table.is_lettered(position):
                current_degree += 1
        return position, distance

    def _end_offset(
        self,
        interval: Interval,
        start: NoteToken,
        span: int,
        direction: Direction,
    ) -> int:
        if direction is Direction.ASCENDING:
            return interval.semitones + start.accidentals - span
        return span - interval.semitones + start.accidentals

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def construct(
        self,
        interval_name: str,
        start_note: str,
        direction: Direction = Direction.ASCENDING,
    ) -> str:
        """
        Return the note *interval_name* away from *start_note*.

        Args:
            interval_name: One of the tabulated names, e.g. "M3".
            start_note:    Note token with at most one accidental, e.g. "Bb".
            direction:     Direction.ASCENDING or Direction.DESCENDING.

        Returns:
            The end note token, e.g. "D" or "Abb".

        Raises:
            InvalidNoteError:     If *start_note* is malformed.
            UnknownIntervalError: If *interval_name* is not tabulated.
        """
        start = note_codec.parse(start_note, self.max_accidentals)
        interval = interval_table.lookup_by_name(interval_name)

        end_position, span = self._walk_degrees(
            interval_table.letter_position(start.letter), interval.degree, direction
        )
        end_letter = interval_table.NOTE_CIRCLE[end_position]
        offset = self._end_offset(interval, start, span, direction)

        end_note = note_codec.render(end_letter, offset)
        logger.debug(
            "construct %s %s %s: span=%d offset=%d -> %s",
            interval.name, start_note, direction.value, span, offset, end_note,
        )
        return end_note

"""IntervalIdentifier: names the interval between two notes."""

import logging

from intervalkit import interval_table, note_codec
from intervalkit.interval_models import Direction, NoteToken

logger = logging.getLogger(__name__)

#: Identification accepts up to double sharps and double flats.
MAX_NOTE_ACCIDENTALS = 2


class IntervalIdentifier:
    """
    Identifies the interval spanned by a start and an end note.

    The letter span is found by walking the note circle from the start letter
    to the end letter, one semitone per slot. The accidentals of both notes
    then widen or narrow that span, and the resulting semitone count is looked
    up in the interval table.
    """

    def __init__(self, max_accidentals: int = MAX_NOTE_ACCIDENTALS) -> None:
        self.max_accidentals = max_accidentals

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _letter_span(self, start: NoteToken, end: NoteToken, direction: Direction) -> int:
        """Semitones between the two bare letters; 0 when they coincide."""
        position = interval_table.letter_position(start.letter)
        end_position = interval_table.letter_position(end.letter)
        span = 0
        while position != end_position:
            position = interval_table.step(position, direction)
            span += 1
        return span

    def _semitones(self, start: NoteToken, end: NoteToken, direction: Direction) -> int:
        span = self._letter_span(start, end, direction)
        if direction is Direction.ASCENDING:
            return span + end.accidentals - start.accidentals
        return span + start.accidentals - end.accidentals

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def identify(
        self,
        start_note: str,
        end_note: str,
        direction: Direction = Direction.ASCENDING,
    ) -> str:
        """
        Return the name of the interval from *start_note* to *end_note*.

        Raises:
            InvalidNoteError:            If either note is malformed.
            UnidentifiableIntervalError: If the semitone count matches no
                                         tabulated interval.
        """
        start = note_codec.parse(start_note, self.max_accidentals)
        end = note_codec.parse(end_note, self.max_accidentals)

        semitones = self._semitones(start, end, direction)
        logger.debug(
            "identify %s %s %s: %d semitone(s)",
            start_note, end_note, direction.value, semitones,
        )
        return interval_table.lookup_by_semitones(semitones).name

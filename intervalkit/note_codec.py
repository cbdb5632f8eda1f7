"""NoteCodec: parses note tokens and renders letter/offset pairs back to tokens."""

import re
from functools import lru_cache

from intervalkit.errors import InvalidNoteError
from intervalkit.interval_models import NoteToken

SHARP = "#"
FLAT = "b"


@lru_cache(maxsize=None)
def _note_pattern(max_accidentals: int) -> re.Pattern[str]:
    """Letter A-G followed by up to *max_accidentals* sharps or flats, never mixed."""
    bound = f"{{0,{max_accidentals}}}"
    return re.compile(rf"^[A-G](?:{SHARP}{bound}|{FLAT}{bound})$")


def parse(token: str, max_accidentals: int) -> NoteToken:
    """
    Parse a note token such as "C", "F#" or "Bbb".

    Args:
        token:           Raw note string.
        max_accidentals: Maximum number of repeated "#" or "b" characters.

    Returns:
        NoteToken with the letter and a signed accidental count.

    Raises:
        InvalidNoteError: If the token does not match the note pattern.
    """
    if not isinstance(token, str) or not _note_pattern(max_accidentals).fullmatch(token):
        raise InvalidNoteError(
            f"Note '{token}' is invalid. Expected a letter A-G followed by "
            f"at most {max_accidentals} '{SHARP}' or '{FLAT}'."
        )
    letter, accidentals = token[0], token[1:]
    offset = accidentals.count(SHARP) or -accidentals.count(FLAT)
    return NoteToken(letter=letter, accidentals=offset)


def render(letter: str, offset: int) -> str:
    """Append *offset* sharps (positive) or |offset| flats (negative) to *letter*."""
    return str(NoteToken(letter=letter, accidentals=offset))

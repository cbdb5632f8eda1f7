"""Unit tests for note token parsing and rendering."""

import pytest

from intervalkit.errors import InvalidNoteError
from intervalkit.interval_models import NoteToken
from intervalkit.note_codec import parse, render


def test_parse_natural() -> None:
    assert parse("C", max_accidentals=1) == NoteToken(letter="C", accidentals=0)


def test_parse_sharp_is_positive() -> None:
    assert parse("F#", max_accidentals=1) == NoteToken(letter="F", accidentals=1)


def test_parse_double_flat_is_negative() -> None:
    assert parse("Bbb", max_accidentals=2) == NoteToken(letter="B", accidentals=-2)


def test_parse_rejects_more_accidentals_than_allowed() -> None:
    with pytest.raises(InvalidNoteError):
        parse("C##", max_accidentals=1)
    with pytest.raises(InvalidNoteError):
        parse("Abbb", max_accidentals=2)


@pytest.mark.parametrize("token", ["", "H", "c", "err", "C#b", "Cb#", "#C", "C\n", " C"])
def test_parse_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(InvalidNoteError):
        parse(token, max_accidentals=2)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="'X'"):
        parse("X", max_accidentals=1)


def test_render_natural() -> None:
    assert render("D", 0) == "D"


def test_render_sharps() -> None:
    assert render("F", 1) == "F#"
    assert render("C", 2) == "C##"


def test_render_flats() -> None:
    assert render("A", -2) == "Abb"


def test_note_token_str_matches_render() -> None:
    assert str(NoteToken("G", -1)) == "Gb"

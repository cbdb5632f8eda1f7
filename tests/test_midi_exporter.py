"""Tests for IntervalMidiExporter."""

from pathlib import Path

import pytest

from intervalkit.errors import InvalidNoteError, UnknownIntervalError
from intervalkit.interval_models import Direction, NoteToken
from intervalkit.midi_exporter import IntervalMidiExporter, note_to_midi


def test_note_to_midi_middle_c() -> None:
    assert note_to_midi(NoteToken("C"), octave=4) == 60


def test_note_to_midi_applies_accidentals() -> None:
    assert note_to_midi(NoteToken("C", -1), octave=4) == 59
    assert note_to_midi(NoteToken("B", 1), octave=3) == 60


def test_export_writes_midi_file(tmp_path: Path) -> None:
    out = tmp_path / "fifth.mid"
    pitches = IntervalMidiExporter().export("P5", "B", Direction.ASCENDING, str(out))

    assert pitches == (71, 78)
    assert out.read_bytes().startswith(b"MThd")


def test_export_descending_goes_down(tmp_path: Path) -> None:
    out = tmp_path / "third.mid"
    pitches = IntervalMidiExporter(octave=5).export("M3", "Cb", Direction.DESCENDING, str(out))
    assert pitches == (71, 67)


def test_export_rejects_out_of_range_pitch(tmp_path: Path) -> None:
    exporter = IntervalMidiExporter(octave=10)
    with pytest.raises(ValueError, match="out of range"):
        exporter.export("P8", "G", Direction.ASCENDING, str(tmp_path / "x.mid"))


def test_export_validates_inputs(tmp_path: Path) -> None:
    exporter = IntervalMidiExporter()
    with pytest.raises(UnknownIntervalError):
        exporter.export("A4", "C", Direction.ASCENDING, str(tmp_path / "x.mid"))
    with pytest.raises(InvalidNoteError):
        exporter.export("M2", "Q", Direction.ASCENDING, str(tmp_path / "x.mid"))

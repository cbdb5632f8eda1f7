"""IntervalMidiExporter: writes a constructed interval as a two-note MIDI file."""

import logging

from midiutil import MIDIFile

from intervalkit import interval_table, note_codec
from intervalkit.interval_identifier import MAX_NOTE_ACCIDENTALS
from intervalkit.interval_models import Direction, NoteToken

logger = logging.getLogger(__name__)

# ── MIDI constants ──────────────────────────────────────────────────────────
# In midiutil Format 1 MIDI, track 0 is the conductor/tempo track.
TRACK_CONDUCTOR = 0  # Tempo only, never receives notes
TRACK_INTERVAL = 1   # Start note then end note
CHANNEL = 0
ACOUSTIC_GRAND_PIANO = 0

MIDI_MIN = 0
MIDI_MAX = 127

DEFAULT_TEMPO = 80   # BPM
DEFAULT_OCTAVE = 4   # Middle C octave: C4 = MIDI 60


def note_to_midi(note: NoteToken, octave: int) -> int:
    """
    Convert a note and an octave number to an absolute MIDI note.

    MIDI octave numbering: C-1 = 0, C0 = 12, C1 = 24, ... C4 (Middle C) = 60.
    Accidentals shift the letter's pitch, so "Cb4" is MIDI 59.
    """
    pitch_class = interval_table.letter_position(note.letter)
    return (octave + 1) * interval_table.SEMITONES_PER_OCTAVE + pitch_class + note.accidentals


class IntervalMidiExporter:
    """
    Writes an interval as a melodic dyad: the start note for one beat, then the
    end note for one beat, so the interval can be heard in any MIDI player.

    The end note is placed exactly *interval.semitones* above (ascending) or
    below (descending) the start note, so the audible distance always matches
    the interval regardless of how the end note is spelled.
    """

    DEFAULT_VELOCITY = 80  # MIDI velocity (0-127)
    NOTE_BEATS = 1.0

    def __init__(
        self,
        tempo: int = DEFAULT_TEMPO,
        octave: int = DEFAULT_OCTAVE,
        velocity: int = DEFAULT_VELOCITY,
    ) -> None:
        """
        Args:
            tempo:    Playback tempo in beats per minute.
            octave:   Scientific octave of the start note (4 = Middle C octave).
            velocity: MIDI note-on velocity for both notes.
        """
        self.tempo = tempo
        self.octave = octave
        self.velocity = velocity

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _pitches(self, interval_name: str, start_note: str, direction: Direction) -> tuple[int, int]:
        """Return (start_pitch, end_pitch) as MIDI note numbers."""
        start = note_codec.parse(start_note, MAX_NOTE_ACCIDENTALS)
        interval = interval_table.lookup_by_name(interval_name)
        start_pitch = note_to_midi(start, self.octave)
        end_pitch = start_pitch + direction.step * interval.semitones
        for pitch in (start_pitch, end_pitch):
            if not MIDI_MIN <= pitch <= MIDI_MAX:
                raise ValueError(
                    f"MIDI pitch {pitch} is out of range; choose a different octave."
                )
        return start_pitch, end_pitch

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def export(
        self,
        interval_name: str,
        start_note: str,
        direction: Direction,
        output_path: str,
    ) -> tuple[int, int]:
        """
        Render the interval to a Standard MIDI File (SMF format 1).

        Args:
            interval_name: Tabulated interval name, e.g. "P5".
            start_note:    Start note token, e.g. "B".
            direction:     Direction of the interval.
            output_path:   Destination file path (e.g. "interval.mid").

        Returns:
            The (start_pitch, end_pitch) MIDI note numbers written.

        Raises:
            ValueError: If a pitch falls outside the MIDI range 0-127.
            OSError:    If the output file cannot be opened for writing.
        """
        start_pitch, end_pitch = self._pitches(interval_name, start_note, direction)

        midi = MIDIFile(numTracks=2, removeDuplicates=False, deinterleave=False)
        midi.addTempo(TRACK_CONDUCTOR, 0, self.tempo)
        midi.addTrackName(TRACK_INTERVAL, 0, f"{interval_name} from {start_note}")
        midi.addProgramChange(TRACK_INTERVAL, CHANNEL, 0, ACOUSTIC_GRAND_PIANO)

        for beat, pitch in enumerate((start_pitch, end_pitch)):
            midi.addNote(
                track=TRACK_INTERVAL,
                channel=CHANNEL,
                pitch=pitch,
                time=beat * self.NOTE_BEATS,
                duration=self.NOTE_BEATS,
                volume=self.velocity,
            )

        with open(output_path, "wb") as f:
            midi.writeFile(f)

        logger.debug("wrote %s: pitches %d -> %d", output_path, start_pitch, end_pitch)
        return start_pitch, end_pitch

"""intervalkit CLI entry point."""

import sys
from typing import NoReturn

import click

from intervalkit import __version__
from intervalkit.errors import IntervalError
from intervalkit.interval_models import Direction
from intervalkit.interval_table import INTERVALS
from intervalkit.intervals import interval_construction, interval_identification
from intervalkit.logger_config import configure_logging
from intervalkit.midi_exporter import DEFAULT_OCTAVE, DEFAULT_TEMPO, IntervalMidiExporter

DIRECTION_CHOICES = [direction.value for direction in Direction]

direction_option = click.option(
    "--direction",
    "-d",
    type=click.Choice(DIRECTION_CHOICES),
    default=Direction.ASCENDING.value,
    show_default=True,
    help="Traversal direction: ascending (asc) or descending (dsc).",
)


def _fail(exc: Exception) -> NoReturn:
    click.echo(f"ERROR: {exc}", err=True)
    sys.exit(1)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="intervalkit")
@click.option("--verbose", "-v", is_flag=True, help="Log each calculation step to stderr.")
def main(verbose: bool) -> None:
    """intervalkit: build and name musical intervals."""
    configure_logging(verbose)


# ── construct subcommand ───────────────────────────────────────────────────────

@main.command()
@click.argument("interval")
@click.argument("start_note")
@direction_option
@click.option(
    "--midi",
    "midi_path",
    default=None,
    metavar="PATH",
    help="Also write the start and end notes to a MIDI file.",
)
@click.option(
    "--tempo",
    type=click.IntRange(20, 300),
    default=DEFAULT_TEMPO,
    show_default=True,
    help="MIDI playback tempo in BPM.",
)
@click.option(
    "--octave",
    type=click.IntRange(0, 8),
    default=DEFAULT_OCTAVE,
    show_default=True,
    help="Octave of the start note in the MIDI file (4 = Middle C octave).",
)
def construct(
    interval: str,
    start_note: str,
    direction: str,
    midi_path: str | None,
    tempo: int,
    octave: int,
) -> None:
    """
    Print the note INTERVAL away from START_NOTE.

    \b
    Examples:
      intervalkit construct P5 B            # F#
      intervalkit construct M3 Cb -d dsc    # Abb
      intervalkit construct m3 A --midi a_minor_third.mid
    """
    try:
        end_note = interval_construction([interval, start_note, direction])
    except IntervalError as exc:
        _fail(exc)

    click.echo(end_note)

    if midi_path is not None:
        exporter = IntervalMidiExporter(tempo=tempo, octave=octave)
        try:
            exporter.export(interval, start_note, Direction(direction), midi_path)
        except OSError as exc:
            click.echo(f"ERROR: Could not write MIDI file: {exc}", err=True)
            sys.exit(1)
        except ValueError as exc:
            _fail(exc)
        click.echo(f"Wrote '{midi_path}'.", err=True)


# ── identify subcommand ────────────────────────────────────────────────────────

@main.command()
@click.argument("start_note")
@click.argument("end_note")
@direction_option
def identify(start_note: str, end_note: str, direction: str) -> None:
    """
    Print the name of the interval from START_NOTE to END_NOTE.

    \b
    Examples:
      intervalkit identify C D             # M2
      intervalkit identify G# D# -d dsc    # P4
    """
    try:
        name = interval_identification([start_note, end_note, direction])
    except IntervalError as exc:
        _fail(exc)

    click.echo(name)


# ── table subcommand ───────────────────────────────────────────────────────────

@main.command()
def table() -> None:
    """List the supported intervals with their semitone and degree counts."""
    click.echo(f"{'name':<6}{'semitones':>10}{'degree':>8}")
    for interval in INTERVALS:
        click.echo(f"{interval.name:<6}{interval.semitones:>10}{interval.degree:>8}")

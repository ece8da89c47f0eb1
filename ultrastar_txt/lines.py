"""Line and note parser.

This module turns the body of a song into a list of :class:`Line` objects.
Every physical line is classified by trying the line kinds in a fixed
order; the first kind that matches wins:

1. ``#...`` header line (skipped)
2. ``B ...`` tempo change (not supported)
3. ``E`` end of song
4. ``<symbol> <start> <duration> <pitch> <text>`` note
5. ``- <start>`` line break
6. ``- <start> <rel>`` relative line break
7. ``P<n>`` player change
"""

from __future__ import annotations

import re

from loguru import logger

from ultrastar_txt.errors import (
    InvalidValueError,
    MissingEndIndicatorError,
    NotImplementedFeatureError,
    ParserFailureError,
    UnknownNoteTypeError,
)
from ultrastar_txt.models import SYMBOL_TO_NOTE_TYPE, Line, Note, PlayerChange
from ultrastar_txt.preprocess import preprocess

NOTE_RE = re.compile(r"^(.)\s*(-?[0-9]+)\s+(-?[0-9]+)\s+(-?[0-9]+)\s?(.*)")
LINE_BREAK_RE = re.compile(r"^-\s*(-?[0-9]+)\s*$")
RELATIVE_LINE_BREAK_RE = re.compile(r"^-\s*(-?[0-9]+)\s+(-?[0-9]+)")
PLAYER_CHANGE_RE = re.compile(r"^P\s*(-?[0-9]+)")

# Note and break values are signed 32-bit integers
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

PLAYERS = range(1, 4)


def parse_int(raw: str, line_number: int, field: str) -> int:
    """Parse a signed 32-bit integer."""
    try:
        value = int(raw)
    except ValueError:
        raise InvalidValueError(line_number, field) from None
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidValueError(line_number, field)
    return value


def parse_note(match: re.Match[str], line_number: int) -> Note:
    """Build a note from a match of :data:`NOTE_RE`."""
    symbol, raw_start, raw_duration, raw_pitch, text = match.groups()

    start = parse_int(raw_start, line_number, "note start")
    duration = parse_int(raw_duration, line_number, "note duration")
    if duration < 0:
        raise InvalidValueError(line_number, "note duration")
    pitch = parse_int(raw_pitch, line_number, "note pitch")

    note_type = SYMBOL_TO_NOTE_TYPE.get(symbol)
    if note_type is None:
        raise UnknownNoteTypeError(line_number)
    return note_type(start=start, duration=duration, pitch=pitch, text=text)


def parse_lines(text: str) -> list[Line]:
    """Parse the lyric lines of a song.

    Parameters
    ----------
    text : str
        The complete song text. Header lines are skipped.

    Returns
    -------
    list[Line]
        The lines of the song. The first line collects every note that
        precedes the first line break and always exists.

    Raises
    ------
    NotImplementedFeatureError
        If the song changes tempo (``B`` lines).
    UnknownNoteTypeError
        If a note line has an unknown type symbol.
    InvalidValueError
        If a number is out of range, a duration is negative or a player
        change names a player other than 1, 2 or 3.
    ParserFailureError
        If a line matches no known line kind.
    MissingEndIndicatorError
        If the song body does not end with ``E``.

    Examples
    --------
    >>> lines = parse_lines(": 0 4 59 Test\\n* 4 4 59 test\\nE")
    >>> len(lines), len(lines[0].notes)
    (1, 2)
    """
    lines: list[Line] = []
    start = 0
    rel: int | None = None
    notes: list[Note] = []

    for line_number, line in enumerate(preprocess(text), start=1):
        if line.startswith("#"):
            continue

        if line.startswith("B"):
            raise NotImplementedFeatureError(line_number, "variable bpm")

        if line.startswith("E"):
            lines.append(Line(start=start, rel=rel, notes=tuple(notes)))
            logger.debug(f"Parsed {len(lines)} line(s), end of song in line {line_number}")
            return lines

        match = NOTE_RE.match(line)
        if match:
            notes.append(parse_note(match, line_number))
            continue

        match = LINE_BREAK_RE.match(line)
        if match:
            lines.append(Line(start=start, rel=rel, notes=tuple(notes)))
            start = parse_int(match.group(1), line_number, "line start")
            rel = None
            notes = []
            continue

        match = RELATIVE_LINE_BREAK_RE.match(line)
        if match:
            lines.append(Line(start=start, rel=rel, notes=tuple(notes)))
            start = parse_int(match.group(1), line_number, "line start")
            rel = parse_int(match.group(2), line_number, "line rel")
            notes = []
            continue

        match = PLAYER_CHANGE_RE.match(line)
        if match:
            player = parse_int(match.group(1), line_number, "player change")
            if player not in PLAYERS:
                raise InvalidValueError(line_number, "player change")
            notes.append(PlayerChange(player=player))
            continue

        raise ParserFailureError(line_number)

    raise MissingEndIndicatorError()

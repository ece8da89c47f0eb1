"""Song generator.

Serializes a header and lines back to the UltraStar text format.
"""

from __future__ import annotations

from collections.abc import Sequence

from ultrastar_txt.errors import InvalidPathEncodingError
from ultrastar_txt.models import NOTE_TYPE_TO_SYMBOL, Header, Line, Note, PlayerChange, Source, source_to_text


def format_float(value: float) -> str:
    """Format a float without a fractional part when it is integral.

    Examples
    --------
    >>> format_float(123.0)
    '123'
    >>> format_float(7.25)
    '7.25'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_source(source: Source, tag: str) -> str:
    """Render a source for the given tag."""
    text = source_to_text(source)
    if text is None:
        raise InvalidPathEncodingError(tag)
    return text


def generate_header(header: Header) -> list[str]:
    """Render the header as tag lines, in canonical tag order."""
    result = [
        f"#TITLE:{header.title}",
        f"#ARTIST:{header.artist}",
        f"#MP3:{format_source(header.audio_path, 'MP3')}",
        f"#BPM:{format_float(header.bpm)}",
    ]
    if header.gap is not None:
        result.append(f"#GAP:{format_float(header.gap)}")
    if header.cover_path is not None:
        result.append(f"#COVER:{format_source(header.cover_path, 'COVER')}")
    if header.background_path is not None:
        result.append(f"#BACKGROUND:{format_source(header.background_path, 'BACKGROUND')}")
    if header.video_path is not None:
        result.append(f"#VIDEO:{format_source(header.video_path, 'VIDEO')}")
    if header.video_gap is not None:
        result.append(f"#VIDEOGAP:{format_float(header.video_gap)}")
    if header.genre is not None:
        result.append(f"#GENRE:{header.genre}")
    if header.edition is not None:
        result.append(f"#EDITION:{header.edition}")
    if header.language is not None:
        result.append(f"#LANGUAGE:{header.language}")
    if header.year is not None:
        result.append(f"#YEAR:{header.year}")
    if header.relative is not None:
        result.append(f"#RELATIVE:{'YES' if header.relative else 'NO'}")
    if header.unknown:
        result.extend(f"#{key}:{value}" for key, value in header.unknown.items())
    return result


def generate_note(note: Note) -> str:
    """Render a single note line."""
    if isinstance(note, PlayerChange):
        return f"P{note.player}"
    symbol = NOTE_TYPE_TO_SYMBOL[type(note)]
    return f"{symbol} {note.start} {note.duration} {note.pitch} {note.text}"


def generate_lines(lines: Sequence[Line]) -> list[str]:
    """Render line breaks and notes.

    A line with start 0 gets no break, so the first line of a song is
    written without one.
    """
    result: list[str] = []
    for line in lines:
        if line.start != 0:
            if line.rel is not None:
                result.append(f"- {line.start} {line.rel}")
            else:
                result.append(f"- {line.start}")
        result.extend(generate_note(note) for note in line.notes)
    return result


def generate(header: Header, lines: Sequence[Line]) -> str:
    """Convert a song back to the UltraStar text format.

    Parameters
    ----------
    header : Header
        The song header.
    lines : Sequence[Line]
        The song lines.

    Returns
    -------
    str
        The song text, ending with ``E`` and no trailing newline.

    Raises
    ------
    InvalidPathEncodingError
        If a path cannot be written as text.
    """
    body = generate_header(header) + generate_lines(lines)
    body.append("E")
    return "\n".join(body)

"""Whole-song parsing and generation.

Runs the header and line parsers over the same text and bundles the result
as a :class:`TXTSong`.
"""

from __future__ import annotations

from ultrastar_txt.generator import generate
from ultrastar_txt.header import parse_header
from ultrastar_txt.lines import parse_lines
from ultrastar_txt.models import TXTSong


def parse_song(text: str, *, allow_remote: bool | None = None) -> TXTSong:
    """Parse a complete song.

    Parameters
    ----------
    text : str
        The decoded song text.
    allow_remote : bool | None
        Whether path tags may be parsed as URLs. None uses the configured
        default.

    Returns
    -------
    TXTSong
        The parsed song.

    Examples
    --------
    >>> text = "#TITLE:Song\\n#ARTIST:Band\\n#MP3:song.mp3\\n#BPM:300\\n: 0 4 59 la\\nE"
    >>> song = parse_song(text)
    >>> song.header.title, len(song.lines)
    ('Song', 1)
    """
    header = parse_header(text, allow_remote=allow_remote)
    lines = parse_lines(text)
    return TXTSong(header=header, lines=tuple(lines))


def generate_song(song: TXTSong) -> str:
    """Convert a song back to text."""
    return generate(song.header, song.lines)

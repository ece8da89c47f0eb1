"""Data models for UltraStar songs.

This module defines the value objects produced by the parsers and consumed
by the generator: media sources, the song header, notes, lines and the
song itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit


@dataclass(frozen=True)
class LocalSource:
    """A file referenced by a (usually relative) local path.

    Parameters
    ----------
    path : Path
        The path. It is not canonicalized.
    raw : str | None
        The value as written in the song file, used when writing it back.
        Not part of equality.
    """

    path: Path
    raw: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.raw is not None:
            return self.raw
        return str(self.path)


@dataclass(frozen=True)
class RemoteSource:
    """A file referenced by a network locator.

    Parameters
    ----------
    url : str
        The URL as written in the song file.
    """

    url: str

    def __str__(self) -> str:
        return self.url


Source = LocalSource | RemoteSource


def parse_source(value: str, allow_remote: bool = True) -> Source:
    """Interpret a header value as a URL or, failing that, a local path.

    A value counts as a URL when it has a scheme of at least two characters.
    Single-letter schemes are Windows drive letters and stay local, as do
    values urllib cannot split (e.g. an unclosed ``[``).

    Parameters
    ----------
    value : str
        The raw header value.
    allow_remote : bool
        If False, every value is treated as a local path.

    Returns
    -------
    Source
        The parsed source.

    Examples
    --------
    >>> parse_source("https://example.com/song.mp3")
    RemoteSource(url='https://example.com/song.mp3')
    >>> parse_source("C:/Music/song.mp3", allow_remote=True).path.name
    'song.mp3'
    """
    if allow_remote:
        try:
            scheme = urlsplit(value).scheme
        except ValueError:
            scheme = ""
        if len(scheme) > 1:
            return RemoteSource(url=value)
    return LocalSource(path=Path(value), raw=value)


def source_to_text(source: Source) -> str | None:
    """Render a source as text, or None if it cannot be encoded."""
    text = str(source)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return text


@dataclass(frozen=True)
class Header:
    """The metadata block of a song.

    Parameters
    ----------
    title : str
        Song title (``#TITLE``).
    artist : str
        Performing artist (``#ARTIST``).
    bpm : float
        Beats per minute (``#BPM``).
    audio_path : Source
        The audio file (``#MP3``).
    gap : float | None
        Milliseconds between the start of the audio and the first beat.
    cover_path : Source | None
        Cover image.
    background_path : Source | None
        Background image.
    video_path : Source | None
        Background video.
    video_gap : float | None
        Offset of the video relative to the audio, in seconds.
    genre : str | None
        Genre.
    edition : str | None
        Edition or category the song belongs to.
    language : str | None
        Language of the lyrics.
    year : int | None
        Release year.
    relative : bool | None
        Whether line breaks use relative timing.
    unknown : dict[str, str] | None
        Every tag the parser does not recognize, keyed by its exact name.
    """

    title: str
    artist: str
    bpm: float
    audio_path: Source
    gap: float | None = None
    cover_path: Source | None = None
    background_path: Source | None = None
    video_path: Source | None = None
    video_gap: float | None = None
    genre: str | None = None
    edition: str | None = None
    language: str | None = None
    year: int | None = None
    relative: bool | None = None
    unknown: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        result: dict[str, Any] = {}
        for name, value in vars(self).items():
            if isinstance(value, LocalSource | RemoteSource):
                value = str(value)
            elif isinstance(value, dict):
                value = dict(value)
            result[name] = value
        return result


@dataclass(frozen=True)
class TimedNote:
    """Common fields of every sung note.

    Parameters
    ----------
    start : int
        Start beat of the note.
    duration : int
        Length in beats, never negative.
    pitch : int
        Pitch in semitones, 0 being C2.
    text : str
        Syllable or word, including any trailing space.
    """

    start: int
    duration: int
    pitch: int
    text: str

    def pitch_name(self) -> str:
        """Return the pitch as a note name with octave.

        Examples
        --------
        >>> RegularNote(start=0, duration=4, pitch=7, text="la").pitch_name()
        'G2'
        >>> RegularNote(start=0, duration=4, pitch=-12, text="la").pitch_name()
        'C1'
        """
        from pychord.utils import transpose_note

        octave = 2 + self.pitch // 12
        return f"{transpose_note('C', self.pitch % 12)}{octave}"

    @property
    def player(self) -> None:
        """Timed notes carry no player."""
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "type": NOTE_TYPE_NAMES[type(self)],
            "start": self.start,
            "duration": self.duration,
            "pitch": self.pitch,
            "text": self.text,
        }


@dataclass(frozen=True)
class RegularNote(TimedNote):
    """A regular note (``:``)."""


@dataclass(frozen=True)
class GoldenNote(TimedNote):
    """A golden note worth extra points (``*``)."""


@dataclass(frozen=True)
class FreestyleNote(TimedNote):
    """A freestyle note that awards no points (``F``)."""


@dataclass(frozen=True)
class RapNote(TimedNote):
    """A rap note, scored without pitch (``R``)."""


@dataclass(frozen=True)
class RapGoldenNote(TimedNote):
    """A golden rap note (``G``)."""


@dataclass(frozen=True)
class PlayerChange:
    """Duet marker switching the singing player.

    Parameters
    ----------
    player : int
        1 for the first player, 2 for the second, 3 for both.
    """

    player: int

    # Timing fields of sung notes do not apply to a player change
    @property
    def start(self) -> None:
        return None

    @property
    def duration(self) -> None:
        return None

    @property
    def pitch(self) -> None:
        return None

    @property
    def text(self) -> None:
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {"type": "player_change", "player": self.player}


Note = RegularNote | GoldenNote | FreestyleNote | RapNote | RapGoldenNote | PlayerChange

# Note symbol to note class, and back
SYMBOL_TO_NOTE_TYPE: dict[str, type[TimedNote]] = {
    ":": RegularNote,
    "*": GoldenNote,
    "F": FreestyleNote,
    "R": RapNote,
    "G": RapGoldenNote,
}

NOTE_TYPE_TO_SYMBOL: dict[type[TimedNote], str] = {
    note_type: symbol for symbol, note_type in SYMBOL_TO_NOTE_TYPE.items()
}

NOTE_TYPE_NAMES: dict[type[TimedNote], str] = {
    RegularNote: "regular",
    GoldenNote: "golden",
    FreestyleNote: "freestyle",
    RapNote: "rap",
    RapGoldenNote: "rap_golden",
}


@dataclass(frozen=True)
class Line:
    """A lyric line made of notes.

    Parameters
    ----------
    start : int
        Beat of the line break that opens this line. The first line of a
        song has start 0 and collects the notes before the first break.
    rel : int | None
        Second break value, only present with relative timing.
    notes : tuple[Note, ...]
        The notes of the line, in file order.
    """

    start: int
    rel: int | None = None
    notes: tuple[Note, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "start": self.start,
            "rel": self.rel,
            "notes": [note.to_dict() for note in self.notes],
        }


@dataclass(frozen=True)
class TXTSong:
    """A complete song: its header and its lines.

    Parameters
    ----------
    header : Header
        The song header.
    lines : tuple[Line, ...]
        The lyric lines.
    """

    header: Header
    lines: tuple[Line, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "header": self.header.to_dict(),
            "lines": [line.to_dict() for line in self.lines],
        }

"""Parser and generator for UltraStar karaoke song files.

This library reads the UltraStar text format (a header of ``#TAG:VALUE``
lines followed by timed, pitched notes) into structured data and writes it
back.

Examples
--------
>>> from ultrastar_txt import parse_header, parse_lines, generate

>>> text = '''#TITLE:Testsong
... #ARTIST:Testartist
... #MP3:Testfile.mp3
... #BPM:123
... : 0 4 59 Test
... * 4 4 59 test
... E'''
>>> header = parse_header(text)
>>> header.bpm
123.0
>>> lines = parse_lines(text)
>>> lines[0].notes[1]
GoldenNote(start=4, duration=4, pitch=59, text='test')
>>> generate(header, lines).splitlines()[-1]
'E'

Logging goes through loguru and is disabled for this package by default.
Enable it with ``logger.enable("ultrastar_txt")``.
"""

from loguru import logger

from ultrastar_txt.errors import (
    DuplicateHeaderError,
    ErrorKind,
    InvalidPathEncodingError,
    InvalidValueError,
    MissingEndIndicatorError,
    MissingEssentialError,
    NotImplementedFeatureError,
    ParserFailureError,
    UltrastarError,
    UnknownNoteTypeError,
)
from ultrastar_txt.generator import generate
from ultrastar_txt.header import parse_header
from ultrastar_txt.lines import parse_lines
from ultrastar_txt.models import (
    FreestyleNote,
    GoldenNote,
    Header,
    Line,
    LocalSource,
    Note,
    PlayerChange,
    RapGoldenNote,
    RapNote,
    RegularNote,
    RemoteSource,
    Source,
    TimedNote,
    TXTSong,
    parse_source,
)
from ultrastar_txt.song import generate_song, parse_song

logger.disable("ultrastar_txt")

__all__ = [
    "DuplicateHeaderError",
    "ErrorKind",
    "FreestyleNote",
    "GoldenNote",
    "Header",
    "InvalidPathEncodingError",
    "InvalidValueError",
    "Line",
    "LocalSource",
    "MissingEndIndicatorError",
    "MissingEssentialError",
    "Note",
    "NotImplementedFeatureError",
    "ParserFailureError",
    "PlayerChange",
    "RapGoldenNote",
    "RapNote",
    "RegularNote",
    "RemoteSource",
    "Source",
    "TXTSong",
    "TimedNote",
    "UltrastarError",
    "UnknownNoteTypeError",
    "generate",
    "generate_song",
    "parse_header",
    "parse_lines",
    "parse_song",
    "parse_source",
]

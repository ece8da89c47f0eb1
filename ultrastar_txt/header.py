"""Header parser.

The header is the leading run of ``#TAG:VALUE`` lines of a song file. It
ends at the first line that does not look like a tag; everything from there
on belongs to the song body and is handled by :mod:`ultrastar_txt.lines`.
"""

from __future__ import annotations

import re
from typing import Any

from loguru import logger

from ultrastar_txt.config import get_settings
from ultrastar_txt.errors import DuplicateHeaderError, InvalidValueError, MissingEssentialError
from ultrastar_txt.models import Header, parse_source
from ultrastar_txt.preprocess import preprocess

# Header line pattern: #NAME:VALUE
HEADER_LINE_RE = re.compile(r"^#([A-Za-z0-9]*):(.*)")

# Recognized tag to Header field
TAG_TO_FIELD: dict[str, str] = {
    "TITLE": "title",
    "ARTIST": "artist",
    "MP3": "audio_path",
    "BPM": "bpm",
    "GAP": "gap",
    "COVER": "cover_path",
    "BACKGROUND": "background_path",
    "VIDEO": "video_path",
    "VIDEOGAP": "video_gap",
    "GENRE": "genre",
    "EDITION": "edition",
    "LANGUAGE": "language",
    "YEAR": "year",
    "RELATIVE": "relative",
}

# Tags without which a song is invalid, in reporting order
ESSENTIAL_TAGS = ("TITLE", "ARTIST", "BPM", "MP3")

FLOAT_TAGS = frozenset({"BPM", "GAP", "VIDEOGAP"})
SOURCE_TAGS = frozenset({"MP3", "COVER", "BACKGROUND", "VIDEO"})

# Tag reported when an unrecognized tag repeats
UNKNOWN_TAG = "UNKNOWN"

# Plain ASCII numbers: no underscores, no surrounding whitespace
FLOAT_VALUE_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
YEAR_VALUE_RE = re.compile(r"\+?[0-9]+")


def parse_float(value: str, tag: str, line_number: int) -> float:
    """Parse a float, accepting a comma as decimal separator.

    Examples
    --------
    >>> parse_float("123,5", "BPM", 4)
    123.5
    """
    value = value.replace(",", ".")
    if not FLOAT_VALUE_RE.fullmatch(value):
        raise InvalidValueError(line_number, tag)
    return float(value)


def parse_year(value: str, line_number: int) -> int:
    """Parse a non-negative year."""
    if not YEAR_VALUE_RE.fullmatch(value):
        raise InvalidValueError(line_number, "YEAR")
    try:
        return int(value)
    except ValueError:
        raise InvalidValueError(line_number, "YEAR") from None


def parse_relative(value: str, line_number: int) -> bool:
    """Parse a case-insensitive YES/NO flag."""
    flag = value.upper()
    if flag == "YES":
        return True
    if flag == "NO":
        return False
    raise InvalidValueError(line_number, "RELATIVE")


def convert_value(tag: str, value: str, line_number: int, allow_remote: bool) -> Any:
    """Convert the raw value of a recognized tag to its Header field type."""
    if tag in FLOAT_TAGS:
        return parse_float(value, tag, line_number)
    if tag in SOURCE_TAGS:
        return parse_source(value, allow_remote=allow_remote)
    if tag == "YEAR":
        return parse_year(value, line_number)
    if tag == "RELATIVE":
        return parse_relative(value, line_number)
    return value


def parse_header(text: str, *, allow_remote: bool | None = None) -> Header:
    """Parse the header of a song.

    Parameters
    ----------
    text : str
        The complete song text. Only the leading tag lines are read.
    allow_remote : bool | None
        Whether path tags may be parsed as URLs. None uses the configured
        default (see :mod:`ultrastar_txt.config`).

    Returns
    -------
    Header
        The parsed header.

    Raises
    ------
    DuplicateHeaderError
        If a tag occurs twice.
    InvalidValueError
        If a numeric or flag value cannot be parsed.
    MissingEssentialError
        If TITLE, ARTIST, BPM or MP3 is missing.

    Examples
    --------
    >>> header = parse_header("#TITLE:Song\\n#ARTIST:Band\\n#MP3:song.mp3\\n#BPM:300,5\\nE")
    >>> header.title, header.bpm
    ('Song', 300.5)
    """
    if allow_remote is None:
        allow_remote = get_settings().allow_remote_sources

    fields: dict[str, Any] = {}
    unknown: dict[str, str] = {}

    for line_number, line in enumerate(preprocess(text), start=1):
        match = HEADER_LINE_RE.match(line)
        if match is None:
            break
        tag, value = match.group(1), match.group(2)

        if not value:
            logger.debug(f"Skipping empty {tag} tag in line {line_number}")
            continue

        field = TAG_TO_FIELD.get(tag)
        if field is None:
            if tag in unknown:
                raise DuplicateHeaderError(line_number, UNKNOWN_TAG)
            unknown[tag] = value
            continue

        if field in fields:
            raise DuplicateHeaderError(line_number, tag)
        fields[field] = convert_value(tag, value, line_number, allow_remote)

    missing = [tag for tag in ESSENTIAL_TAGS if TAG_TO_FIELD[tag] not in fields]
    if missing:
        raise MissingEssentialError(missing)

    if unknown:
        logger.debug(f"Header has {len(unknown)} unknown tag(s): {', '.join(unknown)}")
    return Header(**fields, unknown=unknown or None)

"""Errors raised while parsing or generating UltraStar songs.

Every failure aborts the call that raised it. Line numbers are 1-based and
refer to the physical line of the input text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The kinds of failure a parse or generate call can end with."""

    DUPLICATE_HEADER = "duplicate_header"
    MISSING_ESSENTIAL = "missing_essential"
    VALUE_ERROR = "value_error"
    UNKNOWN_NOTE_TYPE = "unknown_note_type"
    PARSER_FAILURE = "parser_failure"
    MISSING_END_INDICATOR = "missing_end_indicator"
    NOT_IMPLEMENTED = "not_implemented"
    INVALID_PATH_ENCODING = "invalid_path_encoding"


class UltrastarError(Exception):
    """Base error for this package."""

    kind: ErrorKind


class DuplicateHeaderError(UltrastarError):
    """A header tag occurs more than once."""

    kind = ErrorKind.DUPLICATE_HEADER

    def __init__(self, line: int, tag: str) -> None:
        self.line = line
        self.tag = tag
        super().__init__(f"additional {tag} tag found in line: {line}")


class MissingEssentialError(UltrastarError):
    """One or more mandatory header tags are missing.

    Parameters
    ----------
    fields : list[str]
        Every missing tag, in the order TITLE, ARTIST, BPM, MP3.
    """

    kind = ErrorKind.MISSING_ESSENTIAL

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"essential header is missing. Missing headers: {', '.join(self.fields)}")


class InvalidValueError(UltrastarError, ValueError):
    """A value could not be parsed or is out of range."""

    kind = ErrorKind.VALUE_ERROR

    def __init__(self, line: int, field: str) -> None:
        self.line = line
        self.field = field
        super().__init__(f"could not parse {field} in line: {line}")


class UnknownNoteTypeError(UltrastarError):
    """A note line starts with an unknown type symbol."""

    kind = ErrorKind.UNKNOWN_NOTE_TYPE

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"unknown note type in line: {line}")


class ParserFailureError(UltrastarError):
    """A line matches none of the known line kinds."""

    kind = ErrorKind.PARSER_FAILURE

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"could not parse line: {line}")


class MissingEndIndicatorError(UltrastarError):
    """The song body is not terminated by an ``E`` line."""

    kind = ErrorKind.MISSING_END_INDICATOR

    def __init__(self) -> None:
        super().__init__("missing end indicator")


class NotImplementedFeatureError(UltrastarError, NotImplementedError):
    """The song uses a feature the parser does not support."""

    kind = ErrorKind.NOT_IMPLEMENTED

    def __init__(self, line: int, feature: str) -> None:
        self.line = line
        self.feature = feature
        super().__init__(f"the feature {feature} in line {line} is not implemented")


class InvalidPathEncodingError(UltrastarError):
    """A path cannot be written as text."""

    kind = ErrorKind.INVALID_PATH_ENCODING

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"invalid path encoding on tag: {tag}")

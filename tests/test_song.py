"""Tests that parse and regenerate the songs in testdata."""

from pathlib import Path

import pytest
from loguru import logger

from ultrastar_txt import (
    FreestyleNote,
    GoldenNote,
    Header,
    Line,
    LocalSource,
    MissingEndIndicatorError,
    PlayerChange,
    RapGoldenNote,
    RapNote,
    RegularNote,
    RemoteSource,
    TXTSong,
    generate,
    generate_song,
    parse_header,
    parse_lines,
    parse_song,
)

TESTDATA_DIR = Path(__file__).parent.parent / "testdata"

SONG_FILES = [
    "simple_song.txt",
    "komma_in_float.txt",
    "relative_line_breaks.txt",
    "duet_song.txt",
    "crlf_song.txt",
    "unknown_tags.txt",
]


def read_song(name: str) -> str:
    return (TESTDATA_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def simple_header() -> Header:
    return Header(
        title="Testsong",
        artist="Testartist",
        bpm=123.0,
        audio_path=LocalSource(path=Path("Testfile.mp3")),
        gap=666.0,
        cover_path=LocalSource(path=Path("Cover.jpg")),
        background_path=LocalSource(path=Path("BG.jpg")),
        video_path=LocalSource(path=Path("DLzxrzFCyOs.mp4")),
        video_gap=777.0,
        genre="Music",
        edition="Testmusic",
        language="en",
        year=1337,
        relative=False,
    )


@pytest.fixture
def simple_lines() -> list[Line]:
    return [
        Line(
            start=0,
            notes=(
                RegularNote(start=0, duration=4, pitch=59, text="Test "),
                RegularNote(start=4, duration=4, pitch=59, text="I"),
                RegularNote(start=8, duration=4, pitch=59, text="'m "),
                GoldenNote(start=12, duration=4, pitch=59, text="test"),
                RegularNote(start=16, duration=4, pitch=59, text="ing."),
            ),
        ),
        Line(
            start=20,
            notes=(
                RegularNote(start=24, duration=4, pitch=59, text="Test "),
                RegularNote(start=28, duration=4, pitch=59, text="I"),
                RegularNote(start=32, duration=4, pitch=59, text="'m "),
                FreestyleNote(start=36, duration=4, pitch=59, text="test"),
                FreestyleNote(start=40, duration=4, pitch=59, text="ing."),
            ),
        ),
    ]


class TestSimpleSong:
    """The song using every header tag."""

    def test_header(self, simple_header: Header) -> None:
        assert parse_header(read_song("simple_song.txt")) == simple_header

    def test_lines(self, simple_lines: list[Line]) -> None:
        assert parse_lines(read_song("simple_song.txt")) == simple_lines

    def test_generate_and_reparse(self, simple_header: Header, simple_lines: list[Line]) -> None:
        text = generate(simple_header, simple_lines)
        assert parse_header(text) == simple_header
        assert parse_lines(text) == simple_lines

    def test_parse_song(self, simple_header: Header, simple_lines: list[Line]) -> None:
        song = parse_song(read_song("simple_song.txt"))
        assert song == TXTSong(header=simple_header, lines=tuple(simple_lines))


class TestTestdataSongs:
    """Songs from testdata."""

    def test_komma_in_float(self) -> None:
        header = parse_header(read_song("komma_in_float.txt"))
        assert header.bpm == 123.5
        assert header.gap == 666.25
        assert header.video_gap == 0.5

    def test_relative_line_breaks(self) -> None:
        lines = parse_lines(read_song("relative_line_breaks.txt"))
        assert [(line.start, line.rel) for line in lines] == [(0, None), (10, 24), (8, 12)]
        assert lines[1].notes[0] == RegularNote(start=0, duration=4, pitch=60, text="Rel")

    def test_duet_song(self) -> None:
        song = parse_song(read_song("duet_song.txt"), allow_remote=True)
        assert song.header.audio_path == RemoteSource(url="https://www.example.com/duet.mp3")
        assert song.lines[0].notes[0] == PlayerChange(player=1)
        assert song.lines[1].notes == (
            PlayerChange(player=2),
            RapNote(start=8, duration=4, pitch=0, text="two"),
            RapGoldenNote(start=12, duration=4, pitch=0, text="three"),
        )
        assert song.lines[2].notes[0] == PlayerChange(player=3)

    def test_duet_song_note_fields(self) -> None:
        """Every note of a duet answers the same field accessors."""
        song = parse_song(read_song("duet_song.txt"))
        rows = [(note.player, note.start, note.text) for line in song.lines for note in line.notes]
        assert rows == [
            (1, None, None),
            (None, 0, "One"),
            (2, None, None),
            (None, 8, "two"),
            (None, 12, "three"),
            (3, None, None),
            (None, 20, "all"),
        ]
        change = song.lines[0].notes[0]
        assert (change.duration, change.pitch) == (None, None)

    def test_crlf_song(self) -> None:
        song = parse_song(read_song("crlf_song.txt"))
        assert song.header.audio_path == LocalSource(path=Path("Testfile.mp3"))
        assert song.lines[0].notes[1].text == "test"

    def test_unknown_tags(self) -> None:
        header = parse_header(read_song("unknown_tags.txt"))
        assert header.unknown == {"UNKNOWN": "tag", "WHAT": "is this"}

    def test_missing_end(self) -> None:
        with pytest.raises(MissingEndIndicatorError):
            parse_song(read_song("missing_end.txt"))


class TestRoundTrip:
    """Parsing generated text gives back the same song."""

    @pytest.mark.parametrize("name", SONG_FILES)
    def test_round_trip(self, name: str) -> None:
        song = parse_song(read_song(name), allow_remote=True)
        assert parse_song(generate_song(song), allow_remote=True) == song

    @pytest.mark.parametrize("name", SONG_FILES)
    def test_generation_is_stable(self, name: str) -> None:
        """Generating twice yields identical text."""
        text = generate_song(parse_song(read_song(name), allow_remote=True))
        assert generate_song(parse_song(text, allow_remote=True)) == text

    def test_scenario_text(self) -> None:
        text = "#TITLE:Testsong\n#ARTIST:Testartist\n#MP3:Testfile.mp3\n#BPM:123\n: 0 4 59 Test\n* 4 4 59 test\nE"
        assert generate_song(parse_song(text)) == text

    def test_written_paths_kept(self) -> None:
        text = (
            "#TITLE:Testsong\n#ARTIST:Testartist\n#MP3:./song.mp3\n#BPM:123\n"
            "#COVER:covers//cover.jpg\n: 0 4 59 Test\nE"
        )
        assert generate_song(parse_song(text)) == text


class TestLogging:
    """Loguru output."""

    def test_empty_tag_logged(self) -> None:
        messages: list[str] = []
        logger.enable("ultrastar_txt")
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            parse_header("#GENRE:\n#TITLE:a\n#ARTIST:b\n#MP3:c.mp3\n#BPM:100\n")
        finally:
            logger.remove(handler_id)
            logger.disable("ultrastar_txt")
        assert any("Skipping empty GENRE tag in line 1" in message for message in messages)

    def test_disabled_by_default(self) -> None:
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            parse_header("#GENRE:\n#TITLE:a\n#ARTIST:b\n#MP3:c.mp3\n#BPM:100\n")
        finally:
            logger.remove(handler_id)
        assert messages == []

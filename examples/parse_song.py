#!/usr/bin/env python3
"""Print an UltraStar song file as JSON, or as regenerated song text.

    python examples/parse_song.py testdata/duet_song.txt --pretty
    python examples/parse_song.py testdata/simple_song.txt --regenerate -o out.txt
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from ultrastar_txt import TXTSong, UltrastarError, generate_song, parse_song


def load_song(path: Path) -> TXTSong:
    # utf-8-sig drops the byte order mark some editors write
    return parse_song(path.read_text(encoding="utf-8-sig"))


def render(song: TXTSong, regenerate: bool, pretty: bool) -> str:
    if regenerate:
        return generate_song(song)
    return json.dumps(song.to_dict(), indent=2 if pretty else None, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("song", type=Path)
    parser.add_argument("-o", "--output", type=Path, help="write here instead of stdout")
    parser.add_argument("--pretty", action="store_true", help="indent the JSON")
    parser.add_argument("--regenerate", action="store_true", help="emit song text, not JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="show parser debug logs")
    args = parser.parse_args(argv)

    if args.verbose:
        logger.enable("ultrastar_txt")

    try:
        output = render(load_song(args.song), args.regenerate, args.pretty)
    except FileNotFoundError:
        logger.error(f"No such file: {args.song}")
        return 1
    except UltrastarError as e:
        logger.error(f"{args.song}: {e}")
        return 1

    if args.output is None:
        sys.stdout.write(output + "\n")
    else:
        args.output.write_text(output, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())

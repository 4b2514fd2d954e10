"""Command line entry point: extract a character range into an OLED font header."""

from __future__ import annotations

import argparse
import sys

from .glyphs import FontError, FontFace, build_font_data, greatest_glyph_size
from .header import write_font_header

DEFAULT_FONT = "../fontfiles/Calibri.ttf"
DEFAULT_OUTPUT = "../fontincludefiles/genericfont.h"
DEFAULT_FIRST = 0x0402
DEFAULT_LAST = 0x0430


def _codepoint(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid character code: {text}") from exc


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oledfontex",
        description="Extract glyph bitmaps from a font as SSD1306 OLED column data.",
    )
    parser.add_argument("font", nargs="?", default=DEFAULT_FONT, help="font file")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="header file to write")
    parser.add_argument("--size", type=float, default=10, help="character height in points")
    parser.add_argument("--hdpi", type=int, default=150, help="horizontal resolution")
    parser.add_argument("--vdpi", type=int, default=150, help="vertical resolution")
    parser.add_argument(
        "--first", type=_codepoint, default=DEFAULT_FIRST, help="first character code"
    )
    parser.add_argument(
        "--last", type=_codepoint, default=DEFAULT_LAST, help="character code after the last"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the extractor; return the process exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.last < args.first:
        parser.error("--last must not be below --first")
    count = args.last - args.first

    try:
        face = FontFace.from_file(args.font)
        info = face.info()
        print(f"Font opened: {info.family} {info.style}")
        face.set_size(args.size, args.hdpi, args.vdpi)
        record_size = greatest_glyph_size(face, args.first, count)
        print(f"Greatest char in the font file is {record_size} bytes")
        data = build_font_data(face, args.first, count, record_size)
        write_font_header(args.output, data, record_size, count)
    except FontError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {count} glyphs to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
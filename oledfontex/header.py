"""Writing extracted OLED font data as C header files."""

from __future__ import annotations

import os
from collections.abc import Iterable

GLYPH_RECORD_SIZE = 47


def _hex_bytes(values: Iterable[int]) -> str:
    return "".join(f"0x{value:02x}, " for value in values)


def format_font_header(data: Iterable[int], record_size: int, glyph_count: int) -> str:
    """Render ``glyph_count`` records of ``record_size`` bytes as a font header.

    Missing data is filled with zero bytes; each record goes on its own line.
    """
    if record_size < 0:
        raise ValueError(f"record size must not be negative: {record_size}")
    if glyph_count < 0:
        raise ValueError(f"glyph count must not be negative: {glyph_count}")
    total = record_size * glyph_count
    payload = bytes(data)[:total].ljust(total, b"\x00")
    parts = [
        "#ifndef GENERIC_FONT_H\n#define GENERIC_FONT_H\n\n",
        f"unsigned char fontOffset = {record_size: d};\n\n",
        "const unsigned char font[] = {\n",
    ]
    if record_size:
        parts.extend(
            _hex_bytes(payload[start:start + record_size]) + "\n"
            for start in range(0, total, record_size)
        )
    parts.append("};\n\n#endif\n")
    return "".join(parts)


def write_font_header(
    path: str | os.PathLike[str],
    data: Iterable[int],
    record_size: int,
    glyph_count: int,
) -> None:
    """Write the font header produced by :func:`format_font_header` to ``path``."""
    text = format_font_header(data, record_size, glyph_count)
    with open(path, "w", encoding="ascii", newline="") as handle:
        handle.write(text)


def format_glyph_header(record: Iterable[int]) -> str:
    """Render the first 47 bytes of a single glyph record as a header."""
    payload = bytes(record)[:GLYPH_RECORD_SIZE].ljust(GLYPH_RECORD_SIZE, b"\x00")
    return (
        "#ifndef THIS_HFILE_H\n#define THIS_HFILE_H\n\n"
        "const unsigned char font[] = {\n"
        f"{_hex_bytes(payload)}\n"
        "};\n"
        "#endif\n\n"
    )


def write_glyph_header(path: str | os.PathLike[str], record: Iterable[int]) -> None:
    """Write the single-glyph header produced by :func:`format_glyph_header`."""
    text = format_glyph_header(record)
    with open(path, "w", encoding="ascii", newline="") as handle:
        handle.write(text)
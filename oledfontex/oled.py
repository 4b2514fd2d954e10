"""Conversion of monochrome glyph bitmaps into SSD1306 OLED column data.

A rendered glyph arrives as horizontal rows of packed pixels, most
significant bit first.  The OLED controller instead expects each byte to be
a vertical strip of eight pixels (a "page" column) with the top pixel in
the least significant bit.
"""

from __future__ import annotations

from dataclasses import dataclass, field

PAGE_HEIGHT = 8


@dataclass(frozen=True)
class MonoBitmap:
    """A 1-bit-per-pixel bitmap stored row by row, ``pitch`` bytes per row."""

    width: int
    height: int
    pitch: int
    buffer: bytes = field(default=b"")

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must not be negative: {self.width}")
        if self.pitch < 0:
            raise ValueError(f"pitch must not be negative: {self.pitch}")
        object.__setattr__(self, "buffer", bytes(self.buffer))

    def row(self, index: int) -> bytes:
        """Return the packed bytes of one pixel row, zero padded to ``pitch``."""
        if not 0 <= index < self.height:
            raise IndexError(f"row {index} out of range for height {self.height}")
        start = index * self.pitch
        return bytes(self._byte(start + offset) for offset in range(self.pitch))

    def _byte(self, offset: int) -> int:
        # Only the pitch * height bytes that belong to the glyph are taken
        # from the buffer; everything past them reads as blank.
        limit = min(len(self.buffer), self.pitch * max(self.height, 0))
        return self.buffer[offset] if 0 <= offset < limit else 0


def page_count(height: int) -> int:
    """Number of 8-pixel pages needed to cover ``height`` rows."""
    if height <= 0:
        return 0
    return -(-height // PAGE_HEIGHT)


def to_oled_columns(bitmap: MonoBitmap) -> bytes:
    """Turn the bitmap into OLED column bytes, page by page, left to right.

    At least one page is always produced, even for an empty bitmap.
    """
    pages = max(1, page_count(bitmap.height))
    columns = bytearray()
    for page in range(pages):
        base = bitmap.pitch * PAGE_HEIGHT * page
        for x in range(bitmap.width):
            byte_offset = base + x // 8
            mask = 0x80 >> (x % 8)
            column = 0
            for bit in range(PAGE_HEIGHT):
                if bitmap._byte(byte_offset + bit * bitmap.pitch) & mask:
                    column |= 1 << bit
            columns.append(column)
    return bytes(columns)


def encode_glyph(bitmap: MonoBitmap, record_size: int) -> bytes:
    """Encode a glyph as a fixed-size record.

    The record holds the width, the page count and then the column bytes,
    truncated or zero padded to exactly ``record_size`` bytes.
    """
    if record_size < 0:
        raise ValueError(f"record size must not be negative: {record_size}")
    header = bytes([bitmap.width & 0xFF, page_count(bitmap.height) & 0xFF])
    payload = header + to_oled_columns(bitmap)
    return payload[:record_size].ljust(record_size, b"\x00")
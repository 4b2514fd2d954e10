import pytest

from oledfontex.header import (
    format_font_header,
    format_glyph_header,
    write_font_header,
    write_glyph_header,
)

FONT_PRELUDE = (
    "#ifndef GENERIC_FONT_H\n#define GENERIC_FONT_H\n\n"
    "unsigned char fontOffset =  72;\n\n"
    "const unsigned char font[] = {\n"
)
FONT_TRAILER = "};\n\n#endif\n"
GLYPH_PRELUDE = (
    "#ifndef THIS_HFILE_H\n#define THIS_HFILE_H\n\n"
    "const unsigned char font[] = {\n"
)
GLYPH_TRAILER = "\n};\n#endif\n\n"

FIRST_LINE = (
    "0x0d, 0x02, 0x00, 0x01, 0x01, 0x01, 0xff, 0xff, 0x41, 0x41, 0x41, 0xc0, "
    "0xc0, 0x80, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3f, 0x3f, 0x00, 0x00, 0x20, "
    "0x30, 0x30, 0x1f, 0x0f, " + "0x00, " * 44
)


def _parse(line):
    return bytes(int(token, 16) for token in line.split(", ") if token.strip())


def test_matches_generated_font_file():
    data = _parse(FIRST_LINE)
    assert len(data) == 72
    text = format_font_header(data, 72, 1)
    assert text == FONT_PRELUDE + FIRST_LINE + "\n" + FONT_TRAILER


def test_one_line_per_record():
    data = bytes(range(30))
    text = format_font_header(data, 10, 3)
    body = text[text.index("{\n") + 2:text.index("};")]
    lines = body.splitlines()
    assert len(lines) == 3
    for index, line in enumerate(lines):
        assert _parse(line) == data[index * 10:(index + 1) * 10]


def test_short_data_is_zero_padded():
    text = format_font_header(b"\x05", 4, 2)
    body = text[text.index("{\n") + 2:text.index("};")]
    assert [_parse(line) for line in body.splitlines()] == [b"\x05\x00\x00\x00", bytes(4)]


def test_excess_data_is_dropped():
    text = format_font_header(bytes(range(1, 20)), 3, 2)
    body = text[text.index("{\n") + 2:text.index("};")]
    assert _parse(body.replace("\n", "")) == bytes(range(1, 7))


def test_zero_records():
    text = format_font_header(b"", 5, 0)
    assert text.endswith("const unsigned char font[] = {\n" + FONT_TRAILER)


@pytest.mark.parametrize("record_size,glyph_count", [(-1, 2), (2, -1)])
def test_negative_sizes_rejected(record_size, glyph_count):
    with pytest.raises(ValueError):
        format_font_header(b"", record_size, glyph_count)


def test_write_font_header_round_trip(tmp_path):
    path = tmp_path / "genericfont.h"
    data = bytes(range(12))
    write_font_header(path, data, 6, 2)
    assert path.read_text(encoding="ascii") == format_font_header(data, 6, 2)


def test_write_font_header_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_font_header(tmp_path / "missing" / "font.h", b"", 1, 1)


def test_glyph_header_structure():
    record = bytes(range(47))
    text = format_glyph_header(record)
    assert text.startswith(GLYPH_PRELUDE)
    assert text.endswith(GLYPH_TRAILER)
    body = text[len(GLYPH_PRELUDE):-len(GLYPH_TRAILER)]
    assert _parse(body) == record


def test_glyph_header_truncates_and_pads():
    long_text = format_glyph_header(bytes([7]) * 60)
    short_text = format_glyph_header(b"\x09")
    long_body = long_text[len(GLYPH_PRELUDE):-len(GLYPH_TRAILER)]
    short_body = short_text[len(GLYPH_PRELUDE):-len(GLYPH_TRAILER)]
    assert _parse(long_body) == bytes([7]) * 47
    assert _parse(short_body) == b"\x09" + bytes(46)


def test_write_glyph_header_round_trip(tmp_path):
    path = tmp_path / "glyph.h"
    record = bytes(range(50, 97))
    write_glyph_header(path, record)
    assert path.read_text(encoding="ascii") == format_glyph_header(record)
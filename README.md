# oledfontex

`oledfontex` renders glyphs from a TrueType or OpenType font in monochrome, using Pillow. It converts each glyph into the column-byte layout that SSD1306-style OLED controllers use. The result is written as a C header that microcontroller firmware can include directly.

An OLED controller draws each byte vertically: eight pixels stacked top to bottom, with the least significant bit at the top. A rendered glyph comes out as horizontal rows of packed pixels, most significant bit first. Those rows are regrouped, bit by bit, into columns eight pixels tall. Each band of eight rows is called a "page".

## Glyph record layout

Every glyph becomes one record of fixed size:

| Offset | Contents                                   |
|--------|--------------------------------------------|
| 0      | glyph width in pixels                      |
| 1      | number of 8-pixel pages                    |
| 2…     | column bytes, page by page, left to right  |

How the record size is chosen:

- It is the largest `height × pitch` found across the rendered range, where `pitch` is the number of bytes in one packed pixel row.
- A record shorter than this size is padded with zeros.
- A record longer than this size is truncated.

The generated header exports the record size as `fontOffset`, so firmware can find glyph `n` at `font[n * fontOffset]`.

## Installation

```
pip install .
```

## Command line

```
oledfontex [font] [-o OUTPUT] [--size POINTS] [--hdpi DPI] [--vdpi DPI] [--first CODE] [--last CODE]
```

| Option | Meaning | Default |
|--------|---------|---------|
| `font` | font file | `../fontfiles/Calibri.ttf` |
| `-o`, `--output` | header file to write | `../fontincludefiles/genericfont.h` |
| `--size` | character height in points | `10` |
| `--hdpi` | horizontal resolution | `150` |
| `--vdpi` | vertical resolution | `150` |
| `--first` | first character code | `0x0402` |
| `--last` | character code after the last one | `0x0430` |

Character codes are read in any form Python's `int(text, 0)` accepts, such as `0x0402` or `1026`.

When run, the command:

1. Opens the font and prints its family and style.
2. Renders every character from `--first` up to but not including `--last`.
3. Finds the record size.
4. Encodes each glyph.
5. Writes a header containing `fontOffset` and `const unsigned char font[]`.

If the font cannot be opened, sized or rendered, or the output cannot be written, it prints an error and exits with status 1. Giving a `--last` below `--first` is rejected as a usage error.

## Library use

```python
from oledfontex.glyphs import FontFace, greatest_glyph_size, build_font_data
from oledfontex.header import write_font_header

face = FontFace.from_file("Calibri.ttf")
face.set_size(10, 150, 150)

first, count = 0x0402, 0x0430 - 0x0402
record_size = greatest_glyph_size(face, first, count)
data = build_font_data(face, first, count, record_size)
write_font_header("genericfont.h", data, record_size, count)
```

### `oledfontex.glyphs`

- `FontFace.from_file(path)` opens a font file. It raises `FontError` if the file cannot be read or its format is not supported.
- `FontFace.set_size(points, horizontal_dpi, vertical_dpi)` sets the size. The pixel height is `points × vertical_dpi / 72`. When the two resolutions differ, glyphs are stretched horizontally by `horizontal_dpi / vertical_dpi`.
- `FontFace.render_glyph(codepoint)` returns a tightly cropped `MonoBitmap`. Blank characters give an empty bitmap. Calling it before `set_size` raises `FontError`.
- `FontFace.info()` returns a `FontInfo` with the `family` and `style` names.
- `greatest_glyph_size(face, first_codepoint, count)` gives the record size for a range.
- `build_font_data(face, first_codepoint, count, record_size)` encodes a range into consecutive records.

### `oledfontex.oled`

- `MonoBitmap(width, height, pitch, buffer)` is a packed 1-bit bitmap. `row(index)` returns one row.
- `page_count(height)` returns the number of 8-pixel pages needed for a height.
- `to_oled_columns(bitmap)` returns the column bytes. It always produces at least one page.
- `encode_glyph(bitmap, record_size)` returns the full record, padded or truncated to `record_size`.

### `oledfontex.header`

- `format_font_header(data, record_size, glyph_count)` returns the font header as text. Each record is on its own line.
- `write_font_header(path, data, record_size, glyph_count)` writes that header to a file.
- `format_glyph_header(record)` and `write_glyph_header(path, record)` produce a header for a single glyph. It holds the first 47 bytes of the record, zero padded.

## Limitations

- Glyphs are rendered only in monochrome; no grey levels are produced.
- `FontFace.info` reports only the family and style names.
- The command line always writes the multi-glyph font header. The single-glyph header is available only through the library.
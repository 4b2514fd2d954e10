"""Loading fonts and rendering glyphs as monochrome bitmaps."""

from __future__ import annotations

import io
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .oled import MonoBitmap, encode_glyph

POINTS_PER_INCH = 72
_PROBE_SIZE = 12

FontLoader = Callable[[int], "ImageFont.FreeTypeFont"]


class FontError(Exception):
    """Raised when a font cannot be opened, sized or rendered."""


@dataclass(frozen=True)
class FontInfo:
    """Descriptive information about a font face."""

    family: str | None
    style: str | None


class FontFace:
    """A scalable font face that renders glyphs in monochrome.

    ``loader`` builds a font object for a given pixel size.
    """

    def __init__(self, loader: FontLoader, name: str = "<font>") -> None:
        self._loader = loader
        self.name = name
        self._font: ImageFont.FreeTypeFont | None = None
        self._x_scale = 1.0

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> FontFace:
        """Open a TrueType or OpenType font file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise FontError(f"cannot open file: {path}") from exc

        def loader(size: int) -> ImageFont.FreeTypeFont:
            return ImageFont.truetype(io.BytesIO(data), size=size)

        try:
            loader(_PROBE_SIZE)
        except OSError as exc:
            raise FontError(
                f"font file {path} was read but its format is unknown or unsupported"
            ) from exc
        return cls(loader, name=str(path))

    def _load(self, size: int) -> ImageFont.FreeTypeFont:
        try:
            return self._loader(size)
        except (OSError, ValueError) as exc:
            raise FontError(f"unable to load {self.name} at {size} pixels") from exc

    def info(self) -> FontInfo:
        """Return the family and style names of the face."""
        font = self._font if self._font is not None else self._load(_PROBE_SIZE)
        getname = getattr(font, "getname", None)
        if getname is None:
            return FontInfo(None, None)
        family, style = getname()
        return FontInfo(family, style)

    def set_size(self, points: float, horizontal_dpi: int, vertical_dpi: int) -> None:
        """Set the character height in points at the given device resolution."""
        if points <= 0:
            raise FontError(f"unable to set the font size: {points} points")
        if horizontal_dpi <= 0 or vertical_dpi <= 0:
            raise FontError(
                f"unable to set the font size: resolution {horizontal_dpi}x{vertical_dpi}"
            )
        pixels = max(1, round(points * vertical_dpi / POINTS_PER_INCH))
        self._font = self._load(pixels)
        self._x_scale = horizontal_dpi / vertical_dpi

    def render_glyph(self, codepoint: int) -> MonoBitmap:
        """Render one character as a tightly cropped monochrome bitmap."""
        if self._font is None:
            raise FontError("font size has not been set")
        try:
            char = chr(codepoint)
        except (ValueError, OverflowError) as exc:
            raise FontError(f"invalid character code: {codepoint}") from exc
        left, top, right, bottom = self._font.getbbox(char)
        width, height = int(right - left), int(bottom - top)
        if width <= 0 or height <= 0:
            return MonoBitmap(0, 0, 0)
        image = Image.new("1", (width, height), 0)
        draw = ImageDraw.Draw(image)
        draw.fontmode = "1"
        draw.text((-left, -top), char, font=self._font, fill=255)
        if self._x_scale != 1.0:
            scaled = max(1, round(width * self._x_scale))
            image = image.resize((scaled, height), Image.Resampling.NEAREST)
        box = image.getbbox()
        if box is None:
            return MonoBitmap(0, 0, 0)
        image = image.crop(box)
        glyph_width, glyph_height = image.size
        pitch = (glyph_width + 7) // 8
        return MonoBitmap(glyph_width, glyph_height, pitch, image.tobytes())


def greatest_glyph_size(face: FontFace, first_codepoint: int, count: int) -> int:
    """Largest ``height * pitch`` among ``count`` glyphs from ``first_codepoint``."""
    greatest = 0
    for codepoint in range(first_codepoint, first_codepoint + count):
        bitmap = face.render_glyph(codepoint)
        greatest = max(greatest, bitmap.height * bitmap.pitch)
    return greatest


def build_font_data(
    face: FontFace, first_codepoint: int, count: int, record_size: int
) -> bytes:
    """Encode ``count`` consecutive glyphs as fixed-size OLED records."""
    return b"".join(
        encode_glyph(face.render_glyph(codepoint), record_size)
        for codepoint in range(first_codepoint, first_codepoint + count)
    )
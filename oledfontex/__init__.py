"""Render font glyphs in monochrome and encode them as SSD1306 OLED column data in C headers."""

__version__ = "0.1.0"
__all__ = ["__version__"]
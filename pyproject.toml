[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledfontex"
version = "0.1.0"
description = "Extract glyph bitmaps from font files and format them as column-byte arrays for SSD1306 OLED displays"
requires-python = ">=3.10"
keywords = ["oled", "ssd1306", "font", "bitmap", "glyph", "embedded", "header"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Text Processing :: Fonts",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oledfontex = "oledfontex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oledfontex"]

[tool.pytest.ini_options]
addopts = "-ra"

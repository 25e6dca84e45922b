"""
Parser for the ``.robofont`` glyph definition format.

A definition looks like::

    #define height=5 spaces=4

    @"A"
        ___
       /   |
      / /| |
     / ___ |
    /_/  |_|

The ``#define`` line is optional. Every ``@"<key>"`` line opens a glyph and the
non-blank lines that follow are its rows. Blank lines are ignored everywhere.
"""

import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from .base import DEFAULT_HEIGHT, DEFAULT_SPACE_WIDTH, FontDefinition, Glyph
from .exceptions import FontNotFoundError, FontParseError
from .litlogger import get_logger

logger = get_logger("robofont.loader")

DIRECTIVE = "#define"
GLYPH_START = re.compile(r'^@"(.*)"$')

FontSource = Union[str, Path, Callable[[], str]]


def _parse_directive(line: str) -> Tuple[int, int]:
    """Read ``height=`` and ``spaces=`` out of a ``#define`` line."""
    height, spaces = DEFAULT_HEIGHT, DEFAULT_SPACE_WIDTH
    for token in line.split()[1:]:
        key, sep, value = token.partition("=")
        if not sep or key not in ("height", "spaces"):
            continue
        try:
            number = int(value)
        except ValueError:
            raise FontParseError(f"{key} must be an integer, got {value!r}", line_number=1, token=token) from None
        if key == "height":
            if number < 1:
                raise FontParseError(f"height must be at least 1, got {number}", line_number=1, token=token)
            height = number
        else:
            if number < 0:
                raise FontParseError(f"spaces must not be negative, got {number}", line_number=1, token=token)
            spaces = number
    return height, spaces


def parse_font(text: str, name: str = "custom") -> FontDefinition:
    """
    Parse font definition text into a FontDefinition

    :param text: Contents of a ``.robofont`` source
    :param name: Name given to the resulting font
    :return: The parsed font
    :raises FontParseError: If the ``#define`` line is malformed
    """
    lines = text.splitlines()
    height, spaces = DEFAULT_HEIGHT, DEFAULT_SPACE_WIDTH

    if lines and lines[0].startswith(DIRECTIVE):
        height, spaces = _parse_directive(lines[0])
        del lines[0]
        if lines and not lines[0].strip():
            del lines[0]
        logger.debug(f"{name}: height={height} spaces={spaces}")

    raw: Dict[str, List[str]] = {}
    current_key = ""
    current_rows: List[str] = []

    def flush() -> None:
        if current_key and current_rows:
            raw[current_key] = current_rows

    for line in lines:
        match = GLYPH_START.match(line)
        if match:
            flush()
            current_key = match.group(1)
            current_rows = []
        elif line.strip():
            current_rows.append(line)
    flush()

    glyphs: Dict[str, Glyph] = {}
    for key, rows in raw.items():
        glyph = Glyph.from_lines(rows)
        if glyph.height != height:
            logger.warning(f"{name}: glyph {key!r} has {glyph.height} rows, fitting to height {height}")
            glyph = glyph.fit_height(height)
        glyphs[key] = glyph

    logger.debug(f"{name}: parsed {len(glyphs)} glyphs")
    return FontDefinition(glyphs, height=height, space_width=spaces, name=name)


def read_font_source(source: FontSource) -> str:
    """Read definition text from a path or a zero-argument reader callable."""
    if callable(source):
        return source()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FontNotFoundError(str(path)) from None


def load_font(source: FontSource, name: Optional[str] = None) -> FontDefinition:
    """
    Load a font from a file path or from a reader returning its definition text

    :param source: Path to a ``.robofont`` file, or a callable returning the text
    :param name: Font name (default: the file stem, or ``"custom"``)
    :return: The parsed font
    """
    if name is None:
        name = "custom" if callable(source) else Path(source).stem
    text = read_font_source(source)
    return parse_font(text, name=name)

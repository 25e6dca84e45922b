"""
Glyph compositor: lays glyphs of a FontDefinition side by side into a banner.
"""
from typing import List, Optional

from .base import BLANK, FontDefinition, Glyph
from .litlogger import LogLevel, get_logger

logger = get_logger("robofont.compositor")


class Canvas:
    """Row-major character grid that grows to the right as glyphs are drawn."""

    def __init__(self, height: int) -> None:
        self.height = height
        self.rows: List[List[str]] = [[] for _ in range(height)]

    def put(self, row: int, col: int, cell: str) -> None:
        """Write ``cell`` unless ink is already there. The first ink wins."""
        line = self.rows[row]
        if col >= len(line):
            line.extend(BLANK * (col + 1 - len(line)))
        if line[col] == BLANK:
            line[col] = cell

    def draw(self, glyph: Glyph, cursor: int) -> None:
        for row in range(self.height):
            for col, cell in enumerate(glyph.row(row)):
                self.put(row, cursor + col, cell)

    @property
    def width(self) -> int:
        return max((len(line) for line in self.rows), default=0)

    def to_string(self) -> str:
        width = self.width
        return "\n".join(
            "".join(line) + BLANK * (width - len(line)) for line in self.rows
        )


def advance_width(font: FontDefinition, current: Glyph, following: Optional[Glyph]) -> int:
    """
    Columns to move after drawing ``current``.

    Defaults to the width of the bottom row. When the ink at the right of a row
    is the same character that starts the same row of ``following``, the
    advance grows so the two strokes meet in one shared column.
    """
    advance = current.bottom_width
    if following is None:
        return advance
    for row in range(font.height):
        cells = current.row(row)
        next_row = following.row(row)
        if not next_row or next_row[0] == BLANK:
            continue
        lead = next_row[0]
        for col in range(len(cells) - 1, -1, -1):
            if cells[col] == lead:
                advance = max(advance, col + 1)
                break
    return advance


class Compositor:
    """Renders text with one font. Holds no state between calls."""

    def __init__(self, font: FontDefinition, uppercase: bool = True) -> None:
        self.font = font
        self.uppercase = uppercase

    def _layout_chars(self, text: str) -> str:
        """Drop characters the font cannot draw; they take no space at all."""
        if self.uppercase:
            text = text.upper()
        kept = []
        for char in text:
            if char == " " or char in self.font:
                kept.append(char)
            elif logger.is_enabled_for(LogLevel.TRACE):
                logger.trace(f"{self.font.name}: no glyph for {char!r}, skipping")
        return "".join(kept)

    def render(self, text: str) -> str:
        """
        Render text as a banner

        :param text: Text to render
        :return: ``font.height`` lines joined by newlines, or "" for empty text
        """
        if not text:
            return ""
        font = self.font
        chars = self._layout_chars(text)
        canvas = Canvas(font.height)
        cursor = 0

        for i, char in enumerate(chars):
            if char == " ":
                cursor += font.space_width
                continue
            glyph = font.get(char)
            next_char = chars[i + 1] if i + 1 < len(chars) else " "
            following = font.get(next_char) if next_char != " " else None

            advance = advance_width(font, glyph, following)
            canvas.draw(glyph, cursor)

            if following is not None:
                cursor += max(advance - 1, 0)
            else:
                cursor += advance + 1

        return canvas.to_string()

    __call__ = render

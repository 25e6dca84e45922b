"""
Robofont Base: core data types for bitmap fonts
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, KeysView, List, Mapping, Optional, Sequence, Tuple

BLANK = " "
DEFAULT_HEIGHT = 5
DEFAULT_SPACE_WIDTH = 4

Row = Tuple[str, ...]


@dataclass(frozen=True)
class Glyph:
    """A fixed-height grid of single-character cells. Rows may be jagged."""
    rows: Tuple[Row, ...]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Glyph":
        """
        Build a glyph from its text rows

        :param lines: One string per row
        :return: Glyph with each row split into cells
        """
        return cls(tuple(tuple(line) for line in lines))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def bottom_width(self) -> int:
        """Length of the last row, the default horizontal advance."""
        return len(self.rows[-1]) if self.rows else 0

    def row(self, index: int) -> Row:
        """Row ``index``, or an empty row when the glyph has no such row."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return ()

    def lines(self) -> List[str]:
        return ["".join(row) for row in self.rows]

    def fit_height(self, height: int) -> "Glyph":
        """Pad with empty rows or drop trailing rows so the glyph is ``height`` rows tall."""
        if len(self.rows) == height:
            return self
        rows = self.rows[:height] + ((),) * max(0, height - len(self.rows))
        return Glyph(rows)


class FontDefinition:
    """A parsed font: glyphs by key plus the height and space width parameters"""

    def __init__(
        self,
        glyphs: Mapping[str, Glyph],
        height: int = DEFAULT_HEIGHT,
        space_width: int = DEFAULT_SPACE_WIDTH,
        name: str = "custom",
    ) -> None:
        self.name: str = name
        self.height: int = height
        self.space_width: int = space_width
        self._glyphs: Dict[str, Glyph] = dict(glyphs)
        for key, glyph in self._glyphs.items():
            if glyph.height != height:
                raise ValueError(
                    f"Glyph {key!r} has {glyph.height} rows, font height is {height}"
                )

    @property
    def glyphs(self) -> Mapping[str, Glyph]:
        return MappingProxyType(self._glyphs)

    def get(self, key: str) -> Optional[Glyph]:
        return self._glyphs.get(key)

    def keys(self) -> KeysView[str]:
        return self._glyphs.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __repr__(self) -> str:
        return (
            f"FontDefinition(name={self.name!r}, height={self.height}, "
            f"space_width={self.space_width}, glyphs={len(self._glyphs)})"
        )

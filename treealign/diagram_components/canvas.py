from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import LayoutOverflowError


@dataclass
class Cell:
    char: str = " "
    # 0 marks the cell covered by the wide glyph to its left
    width: int = 1
    prefix: List[str] = field(default_factory=list)
    suffix: List[str] = field(default_factory=list)

    def markup(self) -> str:
        return "".join(self.prefix) + self.char + "".join(self.suffix)


class Canvas:
    """Character grid; wide glyphs occupy their cell plus zero-width spill cells."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise LayoutOverflowError("Canvas must be at least one cell in each direction.")
        self.width = width
        self.height = height
        self.rows = [[Cell() for _ in range(width)] for _ in range(height)]
        self._drawn_columns: Optional[range] = None
        self._drawn_rows: Optional[range] = None

    def _cell(self, x: int, y: int) -> Cell:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise LayoutOverflowError(f"Diagram content exceeds canvas bounds at ({x}, {y}).")
        return self.rows[y][x]

    def _mark(self, columns: range, y: int) -> None:
        if self._drawn_columns is None:
            self._drawn_columns, self._drawn_rows = columns, range(y, y + 1)
            return
        self._drawn_columns = range(min(self._drawn_columns.start, columns.start), max(self._drawn_columns.stop, columns.stop))
        self._drawn_rows = range(min(self._drawn_rows.start, y), max(self._drawn_rows.stop, y + 1))

    def set(self, x: int, y: int, char: str, width: int = 1) -> None:
        width = max(width, 1)
        for i in range(width):
            self._cell(x + i, y)
        self.rows[y][x] = Cell(char, width)
        for i in range(1, width):
            self.rows[y][x + i] = Cell(" ", 0)
        self._mark(range(x, x + width), y)

    def get(self, x: int, y: int) -> str:
        if 0 <= y < self.height and 0 <= x < self.width and self.rows[y][x].width:
            return self.rows[y][x].char
        return " "

    def insert_markup(self, x: int, y: int, markup: str, *, position: str = "prefix") -> None:
        if not markup:
            return
        if position not in {"prefix", "suffix"}:
            raise ValueError(f"Unknown markup position: {position}")
        getattr(self._cell(x, y), position).append(markup)

    def render(self, crop: bool = True, include_markup: bool = False) -> str:
        if crop and self._drawn_columns is None:
            return ""
        columns = self._drawn_columns if crop else range(self.width)
        rows = self._drawn_rows if crop else range(self.height)
        lines = []
        for y in rows:
            cells = (self.rows[y][x] for x in columns if self.rows[y][x].width)
            lines.append("".join(cell.markup() if include_markup else cell.char for cell in cells).rstrip())
        return "\n".join(lines)

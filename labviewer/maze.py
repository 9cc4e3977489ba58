"""A character map of the maze walls, read from a lab description file."""

from __future__ import annotations

import xml.sax
from os import PathLike
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

CELL_ROWS = 7
CELL_COLS = 14
MAP_ROWS = CELL_ROWS * 2 - 1
MAP_COLS = CELL_COLS * 2 - 1


def _to_int(text: str) -> int:
    text = text.strip()
    if "_" in text:
        return 0
    try:
        return int(text)
    except ValueError:
        return 0


class LabMap:
    """Wall map of the maze.

    The centre of cell (i, j) sits at map position (2i, 2j); a wall on top of
    cell (i, j) is marked at (2i + 1, 2j) and one on its right at (2i, 2j + 1).
    """

    def __init__(self) -> None:
        self._cells = [[" "] * MAP_COLS for _ in range(MAP_ROWS)]

    @classmethod
    def parse(cls, data: bytes | str) -> LabMap:
        """Build a map from the ``Row`` elements of a lab description."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        lab_map = cls()
        try:
            xml.sax.parseString(data, _RowHandler(lab_map))
        except xml.sax.SAXException as exc:
            raise ValueError(f"invalid map file: {exc}") from exc
        return lab_map

    @classmethod
    def load(cls, path: str | PathLike[str]) -> LabMap:
        """Read and parse the lab description at ``path``."""
        with open(path, "rb") as stream:
            return cls.parse(stream.read())

    @property
    def rows(self) -> tuple[str, ...]:
        """The map rows from row 0 (bottom) upwards."""
        return tuple("".join(row) for row in self._cells)

    def _mark(self, row: int, col: int, char: str) -> None:
        if 0 <= row < MAP_ROWS and 0 <= col < MAP_COLS:
            self._cells[row][col] = char

    def add_row(self, row: int, pattern: str) -> None:
        """Mark the walls described by one row pattern of the lab file."""
        for col, char in enumerate(pattern):
            if row % 2 == 0:
                # Even rows hold only vertical walls.
                if char == "|":
                    self._mark(row, (col + 1) // 3 * 2 - 1, "|")
            elif col % 3 == 0 and char == "-":
                # Odd rows hold only horizontal walls, one per cell width.
                self._mark(row, col // 3 * 2, "-")

    def has_wall_above(self, row: int, col: int) -> bool:
        """Whether there is a wall on top of cell (row, col)."""
        if not 0 <= row < CELL_ROWS - 1 or not 0 <= col < CELL_COLS:
            raise IndexError(f"cell ({row}, {col}) has no upper wall position")
        return self._cells[row * 2 + 1][col * 2] != " "

    def render(self) -> str:
        """Return the map as text, top row first, one line per row."""
        return "".join("".join(row) + "\n" for row in reversed(self._cells))


class _RowHandler(ContentHandler):
    def __init__(self, lab_map: LabMap) -> None:
        super().__init__()
        self._map = lab_map

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        if name != "Row":
            return
        row = _to_int(attrs["Pos"]) if "Pos" in attrs else 0
        self._map.add_row(row, attrs.get("Pattern", ""))
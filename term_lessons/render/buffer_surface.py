import logging
import numpy as np

from pathlib import Path

from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import BLANK, Cell, Position

log = logging.getLogger(Path(__file__).stem)


class BufferSurface(ISurface):
    """ In-memory surface. Keeps the visible characters in a numpy grid and logs every call. """
    def __init__(self, columns: int = 80, rows: int = 24):
        super().__init__()
        self._size = (columns, rows)
        self._pending: dict[Position, Cell] = {}
        self.cells: dict[Position, Cell] = {}
        self.chars = np.full((rows, columns), BLANK.char, dtype='<U1')
        self.writes: list[tuple[Position, Cell]] = []
        self.flush_count = 0
        self.cursor_visible = True

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def write(self, position: Position, cell: Cell):
        self.check_bounds(position)
        position = Position(*position)
        self.writes.append((position, cell))
        self._pending[position] = cell

    def flush(self):
        for position, cell in self._pending.items():
            self.cells[position] = cell
            self.chars[position.y, position.x] = cell.char
        self._pending.clear()
        self.flush_count += 1

    def clear(self):
        self._pending.clear()
        self.cells.clear()
        self.chars[:] = BLANK.char

    def set_cursor_visible(self, visible: bool):
        self.cursor_visible = visible

    def cell_at(self, position: Position) -> Cell:
        return self.cells.get(Position(*position), BLANK)

    def row_text(self, row: int) -> str:
        return "".join(self.chars[row])

    def render_text(self) -> str:
        return "\n".join(self.row_text(r).rstrip() for r in range(self._size[1])).rstrip("\n")

from abc import ABC, abstractmethod

from term_lessons.exceptions import OutOfRange
from term_lessons.types import Cell, Position, Color, SGR


class ISurface(ABC):
    """ Interface for surfaces, an addressable grid of character cells.

    Origin (0, 0) is the top-left cell. Writes are buffered until flush().
    """

    def __init__(self):
        super().__init__()

    @property
    @abstractmethod
    def size(self) -> tuple[int, int]:
        """ (columns, rows) """
        pass

    @abstractmethod
    def write(self, position: Position, cell: Cell):
        pass

    @abstractmethod
    def flush(self):
        pass

    @abstractmethod
    def clear(self):
        pass

    def set_cursor_visible(self, visible: bool):
        pass

    def close(self):
        pass

    def in_bounds(self, position: Position) -> bool:
        columns, rows = self.size
        return 0 <= position[0] < columns and 0 <= position[1] < rows

    def check_bounds(self, position: Position):
        if not self.in_bounds(position):
            raise OutOfRange(position, self.size)

    def put_string(
            self,
            position: Position,
            text: str,
            fg: Color | None = None,
            bg: Color | None = None,
            sgr: tuple[SGR, ...] = ()
        ) -> Position:
        """ Writes text left to right starting at position, returns the cell after the last one written. """
        position = Position(*position)
        for ch in text:
            self.write(position, Cell(ch, fg=fg, bg=bg, sgr=frozenset(sgr)))
            position = position.with_relative_column(1)
        return position

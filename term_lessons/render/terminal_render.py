import sys
import shutil
import logging

from pathlib import Path
from typing import TextIO

from term_lessons.exceptions import IOFailure
from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.render.utils import CSI, RESET, move_cursor, sgr_sequence
from term_lessons.types import Cell, Position

from colorama import just_fix_windows_console

just_fix_windows_console()

log = logging.getLogger(Path(__file__).stem)


class TerminalSurface(ISurface):
    """ Draws cells on an ANSI terminal with cursor addressing escape sequences.

    Output is collected in a pending buffer and written to the stream in one
    go on flush(), so a redraw shows up atomically.
    """
    def __init__(self, stream: TextIO | None = None, size: tuple[int, int] | None = None):
        super().__init__()
        self._stream = stream if stream is not None else sys.stdout
        if size is None:
            terminal_size = shutil.get_terminal_size()
            size = (terminal_size.columns, terminal_size.lines)
        self._size = (int(size[0]), int(size[1]))
        self._pending: list[str] = []
        log.debug("Terminal surface of size %sx%s", *self._size)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def write(self, position: Position, cell: Cell):
        self.check_bounds(position)
        sgr = sgr_sequence(cell)
        self._pending.append(move_cursor(position[0], position[1]))
        if sgr:
            self._pending.append(f"{sgr}{cell.char}{RESET}")
        else:
            self._pending.append(cell.char)

    def clear(self):
        self._pending.append(f"{RESET}{CSI}2J{CSI}H")

    def set_cursor_visible(self, visible: bool):
        self._pending.append(f"{CSI}?25h" if visible else f"{CSI}?25l")

    def flush(self):
        if not self._pending:
            return
        data = "".join(self._pending)
        self._pending.clear()
        try:
            self._stream.write(data)
            self._stream.flush()
        except OSError as e:
            raise IOFailure(f"Failed to write to terminal: {e}") from e

    def close(self):
        # Leave the prompt below everything that was drawn
        self._pending.append(f"{RESET}{CSI}?25h{move_cursor(0, self._size[1] - 1)}\n")
        self.flush()

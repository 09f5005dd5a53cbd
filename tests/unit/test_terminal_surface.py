# tests/unit/test_terminal_surface.py

import io
import pytest

from term_lessons.exceptions import IOFailure, OutOfRange
from term_lessons.render.terminal_render import TerminalSurface
from term_lessons.types import AnsiColor, Cell, Position, SGR


def make_terminal(columns: int = 20, rows: int = 10):
    stream = io.StringIO()
    return TerminalSurface(stream=stream, size=(columns, rows)), stream


def test_writes_are_buffered_until_flush():
    surface, stream = make_terminal()
    surface.write(Position(0, 0), Cell("X"))
    assert stream.getvalue() == ""
    surface.flush()
    assert stream.getvalue() == "\x1b[1;1HX"


def test_cursor_addressing_is_one_based_row_then_column():
    surface, stream = make_terminal()
    surface.write(Position(4, 2), Cell("O"))
    surface.flush()
    assert stream.getvalue() == "\x1b[3;5HO"


@pytest.mark.parametrize(
    "cell, expected",
    [
        (Cell("a", fg=AnsiColor.YELLOW, bg=AnsiColor.BLUE), "\x1b[33;44ma\x1b[0m"),
        (Cell("b", sgr={SGR.BOLD}), "\x1b[1mb\x1b[0m"),
        (Cell("c", sgr={SGR.BLINK}), "\x1b[5mc\x1b[0m"),
        (Cell("d", fg=(255, 0, 10)), "\x1b[38;2;255;0;10md\x1b[0m"),
        (Cell("e", bg=(1, 2, 3), sgr={SGR.UNDERLINE, SGR.BOLD}), "\x1b[1;4;48;2;1;2;3me\x1b[0m"),
    ],
)
def test_attributes_are_set_and_reset_per_cell(cell: Cell, expected: str):
    surface, stream = make_terminal()
    surface.write(Position(0, 0), cell)
    surface.flush()
    assert stream.getvalue() == "\x1b[1;1H" + expected


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (20, 0), (0, 10)])
def test_out_of_range_writes_are_rejected(position):
    surface, stream = make_terminal()
    with pytest.raises(OutOfRange):
        surface.write(Position(*position), Cell("X"))
    surface.flush()
    assert stream.getvalue() == ""


def test_put_string_writes_consecutive_cells():
    surface, stream = make_terminal()
    end = surface.put_string(Position(1, 1), "hi")
    surface.flush()
    assert end == (3, 1)
    assert stream.getvalue() == "\x1b[2;2Hh\x1b[2;3Hi"


def test_cursor_visibility_and_clear():
    surface, stream = make_terminal()
    surface.set_cursor_visible(False)
    surface.clear()
    surface.flush()
    assert stream.getvalue() == "\x1b[?25l\x1b[0m\x1b[2J\x1b[H"


def test_close_restores_cursor_and_moves_below():
    surface, stream = make_terminal(rows=10)
    surface.close()
    assert stream.getvalue() == "\x1b[0m\x1b[?25h\x1b[10;1H\n"


class BrokenStream(io.StringIO):
    def write(self, s):
        raise BrokenPipeError("gone")


def test_stream_errors_become_io_failures():
    surface = TerminalSurface(stream=BrokenStream(), size=(5, 5))
    surface.write(Position(0, 0), Cell("X"))
    with pytest.raises(IOFailure):
        surface.flush()

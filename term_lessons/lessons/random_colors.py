import logging
import numpy as np

from pathlib import Path

from term_lessons.render.input_provider import BaseInputProvider, wait_for_key
from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import Cell, DotDict, KeyType, Position

log = logging.getLogger(Path(__file__).stem)

BLOCK = '█'
MESSAGE = ("Press 'ENTER' to start.", "Press 'ENTER' for a new board.")


class ColorBoard:
    """ A columns x rows grid of RGB colors, indexed board[column, row]. """
    def __init__(self, columns: int, rows: int, rng: np.random.Generator = None):
        self.columns = columns
        self.rows = rows
        self._rng = rng if rng is not None else np.random.default_rng()
        self.colors = np.zeros((columns, rows, 3), dtype=np.uint8)

    def regenerate(self):
        # a color channel goes from 0-255
        self.colors = self._rng.integers(0, 256, size=(self.columns, self.rows, 3), dtype=np.uint8)

    def color_at(self, column: int, row: int):
        r, g, b = self.colors[column, row]
        return (int(r), int(g), int(b))

    def draw(self, surface: ISurface, origin: Position = Position(0, 0)):
        for col in range(self.columns):
            for row in range(self.rows):
                surface.write(origin + (col, row), Cell(BLOCK, fg=self.color_at(col, row)))
        surface.flush()


def random_colors(surface: ISurface, input_source: BaseInputProvider, config: DotDict, board: ColorBoard = None):
    """ LESSON 5: paint a new random board on every key press until ESC or end of input. """
    if board is None:
        board = ColorBoard(config.columns, config.rows, np.random.default_rng(config.seed))
    for row, line in enumerate(MESSAGE):
        surface.put_string(Position(0, row), line)
    surface.flush()

    boards_drawn = 0
    while True:
        key = wait_for_key(input_source, config.poll_interval)
        if key.key_type in (KeyType.ESCAPE, KeyType.EOF):
            break
        board.regenerate()
        board.draw(surface)
        boards_drawn += 1
    log.info("Drew %d boards", boards_drawn)

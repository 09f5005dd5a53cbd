import logging
import pygame

from pathlib import Path

from term_lessons.exceptions import IOFailure
from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import AnsiColor, Cell, Color, Position, RGB, SGR

log = logging.getLogger(Path(__file__).stem)

ANSI_RGB = {
    AnsiColor.BLACK: (0, 0, 0),
    AnsiColor.RED: (205, 0, 0),
    AnsiColor.GREEN: (0, 205, 0),
    AnsiColor.YELLOW: (205, 205, 0),
    AnsiColor.BLUE: (0, 0, 238),
    AnsiColor.MAGENTA: (205, 0, 205),
    AnsiColor.CYAN: (0, 205, 205),
    AnsiColor.WHITE: (229, 229, 229),
}
DEFAULT_FG: RGB = (229, 229, 229)
DEFAULT_BG: RGB = (0, 0, 0)


def to_rgb(color: Color | None, default: RGB) -> RGB:
    if color is None or color == AnsiColor.DEFAULT:
        return default
    if isinstance(color, AnsiColor):
        return ANSI_RGB[color]
    return tuple(int(c) for c in color)


class PygameSurface(ISurface):
    """ A window that shows a fixed grid of character cells.

    Everything runs on the caller's thread; the window only updates on flush().
    """
    def __init__(
            self,
            columns: int = 80,
            rows: int = 24,
            cell_width: int = 12,
            cell_height: int = 20,
            font_size: int = 18
        ):
        super().__init__()
        self._size = (columns, rows)
        self._cell_w = cell_width
        self._cell_h = cell_height
        try:
            if not pygame.get_init():
                pygame.init()
            self._screen = pygame.display.set_mode((columns * cell_width, rows * cell_height))
            pygame.display.set_caption("term_lessons")
            self._font = pygame.font.SysFont("monospace", font_size)
        except pygame.error as e:
            raise IOFailure(f"Failed to open window: {e}") from e
        self._screen.fill(DEFAULT_BG)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def _cell_rect(self, position: Position) -> pygame.Rect:
        return pygame.Rect(position[0] * self._cell_w, position[1] * self._cell_h, self._cell_w, self._cell_h)

    def write(self, position: Position, cell: Cell):
        self.check_bounds(position)
        fg = to_rgb(cell.fg, DEFAULT_FG)
        bg = to_rgb(cell.bg, DEFAULT_BG)
        if SGR.REVERSE in cell.sgr:
            fg, bg = bg, fg
        rect = self._cell_rect(position)
        try:
            self._screen.fill(bg, rect)
            if cell.char != " ":
                self._font.set_bold(SGR.BOLD in cell.sgr)
                self._font.set_underline(SGR.UNDERLINE in cell.sgr)
                glyph = self._font.render(cell.char, True, fg)
                self._screen.blit(glyph, glyph.get_rect(center=rect.center))
        except pygame.error as e:
            raise IOFailure(f"Failed to draw {cell!r} at {position}: {e}") from e

    def clear(self):
        self._screen.fill(DEFAULT_BG)

    def flush(self):
        try:
            pygame.display.flip()
        except pygame.error as e:
            raise IOFailure(f"Failed to update window: {e}") from e

    def close(self):
        log.debug("Quitting pygame")
        pygame.quit()

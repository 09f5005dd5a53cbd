from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import AnsiColor, Position, SGR


def colors(surface: ISurface, input_source=None, config=None):
    """ LESSON 4: colored text, bold text, then blinking text with colors reset. """
    surface.clear()
    start = Position(0, 0)

    position_a = start.with_relative_column(3).with_relative_row(2)
    surface.put_string(position_a, "Yellow and blue", fg=AnsiColor.YELLOW, bg=AnsiColor.BLUE)
    surface.flush()

    # Bold keeps the colors that are already active
    position_b = position_a.with_relative_row(1)
    surface.put_string(position_b, "Bold message", fg=AnsiColor.YELLOW, bg=AnsiColor.BLUE, sgr=(SGR.BOLD,))

    position_done = position_b.with_column(0).with_relative_row(1)
    surface.put_string(position_done, "Done", sgr=(SGR.BLINK,))
    surface.flush()

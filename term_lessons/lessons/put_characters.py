from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import Cell, Position


def put_characters(surface: ISurface, input_source=None, config=None):
    """ LESSON 1: a row of 'X' along the top and a column of 'O' below it. """
    for column in range(5):
        surface.write(Position(column, 0), Cell('X'))
    for row in range(2, 6):
        surface.write(Position(2, row), Cell('O'))
    surface.flush()

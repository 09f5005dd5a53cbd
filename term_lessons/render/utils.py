
from term_lessons.types import AnsiColor, Cell, Color

CSI = "\x1b["  # Control Sequence Introducer
RESET = f"{CSI}0m"


def _color_params(color: Color | None, background: bool) -> list[str]:
    if color is None:
        return []
    if isinstance(color, AnsiColor):
        return [str((40 if background else 30) + color.value)]
    r, g, b = (int(c) for c in color)
    return [f"{48 if background else 38};2;{r};{g};{b}"]


def sgr_sequence(cell: Cell) -> str:
    """ SGR escape selecting the attributes of the cell, empty if the cell is plain. """
    params = [str(attr.value) for attr in sorted(cell.sgr, key=lambda a: a.value)]
    params += _color_params(cell.fg, background=False)
    params += _color_params(cell.bg, background=True)
    if not params:
        return ""
    return f"{CSI}{';'.join(params)}m"


def move_cursor(column: int, row: int) -> str:
    # ANSI cursor addressing is 1-based
    return f"{CSI}{row + 1};{column + 1}H"

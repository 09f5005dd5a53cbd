import logging

from pathlib import Path

from term_lessons.render.input_provider import BaseInputProvider
from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.render.render_loop import RenderLoop
from term_lessons.types import Cell, DotDict, Position, TerminationReason

log = logging.getLogger(Path(__file__).stem)


def moving(surface: ISurface, input_source: BaseInputProvider, config: DotDict) -> TerminationReason:
    """ LESSON 3: steer a block with the arrow keys around a few fixed markers. """
    surface.set_cursor_visible(False)
    for marker in config.markers:
        surface.write(Position(marker["x"], marker["y"]), Cell(marker["char"]))

    start = Position(config.start_x, config.start_y)
    surface.write(start, Cell(config.glyph))
    surface.flush()

    render_loop = RenderLoop(
        poll_interval=config.poll_interval,
        key_bindings=config.key_bindings,
        quit_chars=config.quit_chars,
    )
    reason = render_loop.run(start, config.glyph, input_source, surface)
    log.info("Block ended at %s", render_loop.position)
    return reason

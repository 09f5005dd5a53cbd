import logging

from pathlib import Path

from term_lessons.render.input_provider import BaseInputProvider
from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import DotDict
from term_lessons.utils import is_headless

log = logging.getLogger(Path(__file__).stem)


def renderer_factory(renderer_type: str, window_config: DotDict | None = None, escape_timeout: float = 0.1) -> tuple[ISurface, BaseInputProvider]:
    """ Creates a matching surface and input provider pair. """
    if renderer_type == "window" and is_headless():
        log.warning("No display available; falling back to the terminal renderer")
        renderer_type = "terminal"
    if renderer_type == "window":
        from term_lessons.render.pygame_render import PygameSurface
        from term_lessons.render.input_provider import PygameInputProvider
        surface = PygameSurface(**(window_config or {}))
        return surface, PygameInputProvider()
    elif renderer_type == "terminal":
        from term_lessons.render.terminal_render import TerminalSurface
        from term_lessons.render.input_provider import TerminalInputProvider
        return TerminalSurface(), TerminalInputProvider(escape_timeout=escape_timeout)
    else:
        raise ValueError(f"Unknown renderer type: {renderer_type}")

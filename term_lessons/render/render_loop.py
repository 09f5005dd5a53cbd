import logging

from pathlib import Path
from collections.abc import Iterable

from term_lessons.render.input_provider import BaseInputProvider, wait_for_key
from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import BLANK, Cell, KeyStroke, KeyType, LoopState, Position, TerminationReason

log = logging.getLogger(Path(__file__).stem)

ARROW_DELTAS: dict[KeyType, tuple[int, int]] = {
    KeyType.ARROW_UP: (0, -1),
    KeyType.ARROW_DOWN: (0, 1),
    KeyType.ARROW_LEFT: (-1, 0),
    KeyType.ARROW_RIGHT: (1, 0),
}


class RenderLoop:
    """Moves one glyph around a surface in response to key input.

    Key bindings:
        Arrow keys       : move one cell
        key_bindings     : extra character -> (dx, dy) mappings, e.g. WASD
        ESC / quit_chars : stop, returns TerminationReason.QUIT
        EOF              : stop, returns TerminationReason.END_OF_INPUT

    Only the cell that was left and the cell that was entered are redrawn.
    Positions are not bounds checked; the surface rejects what it cannot show.
    """

    def __init__(
        self,
        poll_interval: float = 0.005,
        key_bindings: dict[str, tuple[int, int]] | None = None,
        quit_chars: Iterable[str] = ("q",),
    ):
        self._poll_interval = poll_interval
        self._char_deltas = {k: tuple(v) for k, v in (key_bindings or {}).items()}
        self._quit_chars = set(quit_chars)
        self._state: LoopState | None = None

    @property
    def position(self) -> Position | None:
        return self._state.position if self._state else None

    def _delta_for(self, key: KeyStroke) -> tuple[int, int] | None:
        if key.key_type in ARROW_DELTAS:
            return ARROW_DELTAS[key.key_type]
        if key.key_type == KeyType.CHARACTER:
            return self._char_deltas.get(key.character)
        return None

    def _termination_for(self, key: KeyStroke) -> TerminationReason | None:
        if key.key_type == KeyType.EOF:
            return TerminationReason.END_OF_INPUT
        if key.key_type == KeyType.ESCAPE:
            return TerminationReason.QUIT
        if key.key_type == KeyType.CHARACTER and key.character in self._quit_chars:
            return TerminationReason.QUIT
        return None

    def _move(self, delta: tuple[int, int], surface: ISurface):
        old_position = self._state.position
        new_position = old_position + delta
        if new_position == old_position:
            return
        surface.write(old_position, BLANK)
        surface.write(new_position, Cell(self._state.glyph))
        surface.flush()
        self._state.position = new_position

    def run(
        self,
        initial_position: Position,
        glyph: str,
        input_source: BaseInputProvider,
        surface: ISurface,
    ) -> TerminationReason:
        """Run until an exit key or end of input. Errors from the input source or surface propagate."""
        self._state = LoopState(position=Position(*initial_position), glyph=glyph)
        log.debug("Render loop started at %s", self._state.position)
        while True:
            key = wait_for_key(input_source, self._poll_interval)
            reason = self._termination_for(key)
            if reason is not None:
                log.info("Render loop stopped (%s) at %s", reason.value, self._state.position)
                return reason
            delta = self._delta_for(key)
            if delta is None:
                log.debug("Ignoring %s", key)
                continue
            self._move(delta, surface)

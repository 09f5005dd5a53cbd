import logging

from pathlib import Path

from term_lessons.render.input_provider import BaseInputProvider, wait_for_key
from term_lessons.render.interfaces.surface_interface import ISurface
from term_lessons.types import DotDict, KeyStroke, KeyType, Position

log = logging.getLogger(Path(__file__).stem)

MESSAGE = "Press a key and see how it is read. Press ESCAPE or 'q' to exit"
REPORT_ROW = 2


def is_exit_key(key: KeyStroke, quit_chars=("q",)) -> bool:
    if key.key_type in (KeyType.ESCAPE, KeyType.EOF):
        return True
    return key.key_type == KeyType.CHARACTER and key.character in quit_chars


def read_keys(surface: ISurface, input_source: BaseInputProvider, config: DotDict):
    """ LESSON 2: describe every key stroke until ESC, a quit character or end of input. """
    columns, _ = surface.size
    surface.put_string(Position(0, 0), MESSAGE[:columns])
    surface.flush()

    last_len = 0
    while True:
        key = wait_for_key(input_source, config.poll_interval)
        log.info("%s", key)
        report = str(key)[:columns]
        # Pad with blanks so a shorter report erases the previous one
        surface.put_string(Position(0, REPORT_ROW), report.ljust(last_len))
        surface.flush()
        last_len = len(report)
        if is_exit_key(key, config.quit_chars):
            break

import sys
import time
import codecs
import logging
from collections import deque
from pathlib import Path
from collections.abc import Iterable

from term_lessons.exceptions import IOFailure
from term_lessons.types import KeyStroke, KeyType

log = logging.getLogger(Path(__file__).stem)

ARROW_FINALS = {
    'A': KeyType.ARROW_UP,
    'B': KeyType.ARROW_DOWN,
    'C': KeyType.ARROW_RIGHT,
    'D': KeyType.ARROW_LEFT,
}

CHAR_KEYS = {
    "\r": KeyType.ENTER,
    "\n": KeyType.ENTER,
    "\x7f": KeyType.BACKSPACE,
    "\x08": KeyType.BACKSPACE,
    "\x04": KeyType.EOF,  # Ctrl+D, cbreak mode passes it through as a byte
}


def parse_keys(data: str) -> list[KeyStroke]:
    """Split raw terminal input into key strokes.

    Arrow escape sequences come in CSI or SS3 form and may carry
    modifier parameters, which are dropped:
        ESC [ A          -> ARROW_UP
        ESC O D          -> ARROW_LEFT
        ESC [ 1 ; 5 C    -> ARROW_RIGHT (with Ctrl)

    A lone ESC, or an ESC followed by anything else, is the ESC key.
    Other escape sequences (function keys, Home, ...) become UNKNOWN.
    """
    keys: list[KeyStroke] = []
    i = 0
    length = len(data)
    while i < length:
        ch = data[i]
        if ch == "\x1b":
            j = i + 1
            if j < length and data[j] in '[O':
                k = j + 1
                while k < length and not (data[k].isalpha() or data[k] == '~'):
                    k += 1
                if k < length:
                    keys.append(KeyStroke(ARROW_FINALS.get(data[k], KeyType.UNKNOWN)))
                    i = k + 1
                    continue
            keys.append(KeyStroke(KeyType.ESCAPE))
            i += 1
        elif ch in CHAR_KEYS:
            keys.append(KeyStroke(CHAR_KEYS[ch]))
            if ch == "\r" and i + 1 < length and data[i + 1] == "\n":
                i += 1
            i += 1
        elif ch.isprintable():
            keys.append(KeyStroke.from_char(ch))
            i += 1
        else:
            keys.append(KeyStroke(KeyType.UNKNOWN, ch))
            i += 1
    return keys


def split_incomplete_escape(data: str) -> tuple[str, str]:
    """Splits off a trailing escape sequence that may still be arriving.

    Returns (complete, tail). The tail is a lone ESC or an ESC [ / ESC O
    sequence without its final byte; it is empty when nothing is unfinished.
    """
    start = data.rfind("\x1b")
    if start == -1:
        return data, ""
    tail = data[start:]
    if len(tail) == 1:
        return data[:start], tail
    if tail[1] in "[O" and not any(c.isalpha() or c == "~" for c in tail[2:]):
        return data[:start], tail
    return data, ""


class BaseInputProvider:
    """Abstracts keyboard input for the render loop.

    Methods:
        poll() -> KeyStroke | None: Next pending key, None when nothing is pending. Never blocks.
        stop(): Restore whatever the provider changed (terminal mode, window).
    """

    def poll(self) -> KeyStroke | None:
        return None

    def stop(self):
        pass


class ScriptedInputProvider(BaseInputProvider):
    """Replays a fixed sequence of keys, then reports EOF on every poll.

    None entries in the script are returned as-is, standing in for polls
    where nothing was typed yet.
    """
    def __init__(self, keys: Iterable[KeyStroke | None]):
        self._keys: deque[KeyStroke | None] = deque(keys)
        self.poll_count = 0

    def poll(self) -> KeyStroke | None:
        self.poll_count += 1
        if self._keys:
            return self._keys.popleft()
        return KeyStroke(KeyType.EOF)


class TerminalInputProvider(BaseInputProvider):
    """Terminal input provider.

    POSIX: cbreak stdin, polled with select and drained with os.read.
    Windows: msvcrt polling.

    An escape sequence can arrive split over several reads (slow ttys, ssh).
    An unfinished tail is held back until the rest arrives; a lone ESC is only
    reported once escape_timeout seconds pass without more input.

    When stdin is not a tty (piped input) the mode change is skipped and
    the pipe is read as is; its end is reported as EOF.
    """
    def __init__(self, escape_timeout: float = 0.1):
        self._keys: deque[KeyStroke] = deque()
        self._eof = False
        self._old_settings = None
        self._escape_timeout = escape_timeout
        self._pending_text = ""
        self._pending_since = 0.0
        self._use_msvcrt = sys.platform.startswith("win")
        if self._use_msvcrt:
            import msvcrt
            self._msvcrt = msvcrt
            return
        import os, select, termios, tty
        self._os = os
        self._select = select
        self._termios = termios
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._fd = sys.stdin.fileno()
        try:
            self._old_settings = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except termios.error as e:
            log.warning("stdin is not a terminal, reading it without cbreak mode: %s", e)
            self._old_settings = None

    def _read_available(self) -> tuple[str, bool]:
        """ Decoded text that is ready right now, and whether stdin hit its end. """
        try:
            if not self._select.select([self._fd], [], [], 0)[0]:
                return "", False
            data = self._os.read(self._fd, 1024)
        except OSError as e:
            raise IOFailure(f"Failed to read from stdin: {e}") from e
        if not data:
            return self._decoder.decode(b"", final=True), True
        return self._decoder.decode(data), False

    def _read_posix(self) -> list[KeyStroke]:
        text, at_eof = self._read_available()
        now = time.monotonic()
        if text:
            self._pending_text += text
            self._pending_since = now
        complete, tail = split_incomplete_escape(self._pending_text)
        if tail and (at_eof or (not text and now - self._pending_since >= self._escape_timeout)):
            complete, tail = self._pending_text, ""
        self._pending_text = tail
        keys = parse_keys(complete)
        if at_eof:
            keys.append(KeyStroke(KeyType.EOF))
        return keys

    def _read_msvcrt(self) -> list[KeyStroke]:
        keys: list[KeyStroke] = []
        code_map = {"H": KeyType.ARROW_UP, "P": KeyType.ARROW_DOWN, "K": KeyType.ARROW_LEFT, "M": KeyType.ARROW_RIGHT}
        while self._msvcrt.kbhit():
            ch = self._msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                # Special key prefix; get next
                keys.append(KeyStroke(code_map.get(self._msvcrt.getwch(), KeyType.UNKNOWN)))
            elif ch == "\x03":
                # getwch swallows Ctrl+C; cbreak on POSIX turns it into SIGINT
                raise KeyboardInterrupt
            elif ch == "\x1a":  # Ctrl+Z
                keys.append(KeyStroke(KeyType.EOF))
            else:
                keys.extend(parse_keys(ch))
        return keys

    def poll(self) -> KeyStroke | None:
        if self._eof:
            return KeyStroke(KeyType.EOF)
        if not self._keys:
            self._keys.extend(self._read_msvcrt() if self._use_msvcrt else self._read_posix())
        if not self._keys:
            return None
        key = self._keys.popleft()
        if key.key_type == KeyType.EOF:
            self._eof = True
        return key

    def stop(self):
        if self._old_settings is not None:
            self._termios.tcsetattr(self._fd, self._termios.TCSADRAIN, self._old_settings)
            self._old_settings = None


class PygameInputProvider(BaseInputProvider):
    """Input provider backed by Pygame's event queue.

    Relies on the display being opened elsewhere (PygameSurface). Closing
    the window is reported as EOF.
    """
    def __init__(self):
        import pygame
        self._pygame = pygame
        if not pygame.get_init():
            pygame.init()
        self._key_map = {
            pygame.K_UP: KeyType.ARROW_UP,
            pygame.K_DOWN: KeyType.ARROW_DOWN,
            pygame.K_LEFT: KeyType.ARROW_LEFT,
            pygame.K_RIGHT: KeyType.ARROW_RIGHT,
            pygame.K_ESCAPE: KeyType.ESCAPE,
            pygame.K_RETURN: KeyType.ENTER,
            pygame.K_BACKSPACE: KeyType.BACKSPACE,
        }

    def poll(self) -> KeyStroke | None:
        pygame = self._pygame
        try:
            event = pygame.event.poll()
            while event.type != pygame.NOEVENT:
                if event.type == pygame.QUIT:
                    return KeyStroke(KeyType.EOF)
                if event.type == pygame.KEYDOWN:
                    if event.key in self._key_map:
                        return KeyStroke(self._key_map[event.key])
                    if event.unicode and event.unicode.isprintable():
                        return KeyStroke.from_char(event.unicode)
                    return KeyStroke(KeyType.UNKNOWN)
                event = pygame.event.poll()
        except pygame.error as e:
            raise IOFailure(f"Failed to read window events: {e}") from e
        return None


def wait_for_key(input_source: BaseInputProvider, poll_interval: float = 0.005) -> KeyStroke:
    """Polls until a key arrives, sleeping between empty polls so the CPU is not pegged."""
    key = input_source.poll()
    while key is None:
        time.sleep(poll_interval)
        key = input_source.poll()
    return key


__all__ = [
    "wait_for_key",
    "BaseInputProvider",
    "ScriptedInputProvider",
    "PygameInputProvider",
    "TerminalInputProvider",
    "parse_keys",
    "split_incomplete_escape",
]

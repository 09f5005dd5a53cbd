# tests/unit/test_pygame_input.py

import pytest

pygame = pytest.importorskip("pygame")

from term_lessons.render.input_provider import PygameInputProvider
from term_lessons.types import KeyStroke, KeyType


@pytest.fixture
def window_input(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    pygame.display.set_mode((10, 10))
    provider = PygameInputProvider()
    pygame.event.clear()
    yield provider
    pygame.quit()


def key_down(key, unicode=""):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=0, scancode=0))


def test_empty_queue_polls_none(window_input):
    assert window_input.poll() is None


def test_closing_the_window_is_end_of_input(window_input):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window_input.poll() == KeyStroke(KeyType.EOF)


@pytest.mark.parametrize(
    "key_name, expected",
    [
        ("K_UP", KeyType.ARROW_UP),
        ("K_DOWN", KeyType.ARROW_DOWN),
        ("K_LEFT", KeyType.ARROW_LEFT),
        ("K_RIGHT", KeyType.ARROW_RIGHT),
        ("K_ESCAPE", KeyType.ESCAPE),
        ("K_RETURN", KeyType.ENTER),
        ("K_BACKSPACE", KeyType.BACKSPACE),
    ],
)
def test_special_keys(window_input, key_name, expected):
    key_down(getattr(pygame, key_name))
    assert window_input.poll() == KeyStroke(expected)


def test_printable_key_is_a_character(window_input):
    key_down(pygame.K_a, "a")
    assert window_input.poll() == KeyStroke.from_char("a")


def test_unprintable_key_is_unknown(window_input):
    key_down(pygame.K_F1)
    assert window_input.poll() == KeyStroke(KeyType.UNKNOWN)


def test_keys_come_out_in_order(window_input):
    key_down(pygame.K_RIGHT)
    key_down(pygame.K_q, "q")
    assert window_input.poll() == KeyStroke(KeyType.ARROW_RIGHT)
    assert window_input.poll() == KeyStroke.from_char("q")
    assert window_input.poll() is None

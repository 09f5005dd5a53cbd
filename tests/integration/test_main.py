# tests/integration/test_main.py

import logging
import pytest

from term_lessons import main as main_module
from term_lessons.exceptions import IOFailure
from term_lessons.render.buffer_surface import BufferSurface
from term_lessons.render.input_provider import ScriptedInputProvider
from tests.test_utils import DOWN, ESC, LEFT, RIGHT


class RecordingInput(ScriptedInputProvider):
    def __init__(self, keys):
        super().__init__(keys)
        self.stopped = False

    def stop(self):
        self.stopped = True


class ClosingSurface(BufferSurface):
    def __init__(self, columns=80, rows=24):
        super().__init__(columns, rows)
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def fake_renderer(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "setup_logging", lambda *args: None)
    created = {}

    def install(keys, columns=80, rows=24):
        def factory(renderer_type, window_config=None, escape_timeout=0.1):
            created["renderer_type"] = renderer_type
            created["surface"] = ClosingSurface(columns, rows)
            created["input"] = RecordingInput(keys)
            return created["surface"], created["input"]
        monkeypatch.setattr(main_module, "renderer_factory", factory)
        return created
    return install


def test_move_lesson_runs_and_cleans_up(fake_renderer, capsys):
    created = fake_renderer([RIGHT, DOWN, ESC])
    assert main_module.main(["move", "--poll-interval", "0"]) == 0
    assert created["renderer_type"] == "terminal"
    assert created["surface"].cell_at((6, 6)).char == "█"
    assert created["surface"].closed
    assert created["input"].stopped
    assert "DONE!" in capsys.readouterr().out


def test_errors_exit_with_status_one(fake_renderer, capsys, caplog):
    created = fake_renderer([LEFT] * 6, columns=30, rows=20)
    with caplog.at_level(logging.ERROR):
        assert main_module.main(["move", "--poll-interval", "0"]) == 1
    assert "outside surface" in caplog.text
    assert created["surface"].closed
    assert created["input"].stopped
    assert "DONE!" in capsys.readouterr().out


def test_keyboard_interrupt_is_a_clean_exit(fake_renderer, monkeypatch, capsys):
    fake_renderer([])

    def interrupted(surface, input_source, config):
        raise KeyboardInterrupt

    monkeypatch.setitem(main_module.LESSONS, "colors", interrupted)
    assert main_module.main(["colors"]) == 0
    assert "DONE!" in capsys.readouterr().out


def test_failing_renderer_creation(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "setup_logging", lambda *args: None)

    def broken(renderer_type, window_config=None, escape_timeout=0.1):
        raise IOFailure("no terminal")

    monkeypatch.setattr(main_module, "renderer_factory", broken)
    assert main_module.main(["put-chars"]) == 1
    assert "DONE!" in capsys.readouterr().out

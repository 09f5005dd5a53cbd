import os
import json
import platform
from importlib import resources

from term_lessons.types import DotDict


def load_default_config() -> DotDict:
    config_file = resources.files('term_lessons.config').joinpath('default_config.json')
    with config_file.open('r', encoding='utf-8') as f:
        return DotDict(json.load(f))


def is_headless():
    if platform.system() == "Windows":
        try:
            import ctypes
            user32 = ctypes.windll.user32
            # Check if there are zero monitors
            return user32.GetSystemMetrics(80) == 0  # SM_CMONITORS
        except Exception:
            return True  # Assume headless if detection fails
    else:
        # For Unix-like systems, check DISPLAY variable
        return os.environ.get("DISPLAY") is None and os.environ.get("WAYLAND_DISPLAY") is None

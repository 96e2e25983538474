"""
Pytest configuration file.

Ensures src/ is on sys.path so that 'import spice_config' works without install.
"""
import sys
from pathlib import Path

import pytest

src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from spice_config.services.probes import PathProbe  # noqa: E402


class FakeProbe(PathProbe):
    """Probe returning fixed answers instead of inspecting the host."""

    def __init__(self, app="", prefs="", hint=None):
        super().__init__(env={})
        self.app = app
        self.prefs = prefs
        self.missing_app_hint = hint

    def find_app_path(self):
        return self.app

    def find_prefs_path(self):
        return self.prefs


@pytest.fixture
def empty_probe():
    return FakeProbe()


@pytest.fixture
def log_lines():
    return []


@pytest.fixture
def make_probe():
    return FakeProbe

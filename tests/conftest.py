"""Pytest configuration - shared color and identicon fixtures."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from huehash.core.color import Color  # noqa: E402


@pytest.fixture
def red():
    return Color(1.0, 0.0, 0.0)


@pytest.fixture
def steel():
    """HSL (210deg, 50%, 40%)."""
    return Color(0.2, 0.4, 0.6)


@pytest.fixture
def color_pair():
    return Color(0.8, 0.2, 0.1, 0.9), Color(0.1, 0.3, 0.9, 0.5)


@pytest.fixture
def hello_json_bytes():
    """JSON encoding of the string hello, quotes included."""
    return b'"hello"'


@pytest.fixture
def cli_argv(monkeypatch):
    """Set sys.argv for a CLI invocation."""
    monkeypatch.setenv("COLORTERM", "truecolor")
    def _set(*args):
        monkeypatch.setattr(sys, "argv", ["huehash", *args])
    return _set

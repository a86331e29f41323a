"""Pytest fixtures for convcom tests."""

import io

import pytest
from rich.console import Console

from convcom.ui.keys import KeyEvent


class ScriptedReader:
    """Key reader that replays a fixed list of events."""

    def __init__(self, events: list[KeyEvent]):
        self.events = list(events)
        self.reads = 0

    def read_key(self) -> KeyEvent:
        if not self.events:
            raise AssertionError("menu asked for more keys than were scripted")
        self.reads += 1
        return self.events.pop(0)


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear module-level caches before each test."""
    from convcom.config import clear_config_cache

    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def make_reader():
    """Factory for scripted key readers."""

    def factory(*events: KeyEvent) -> ScriptedReader:
        return ScriptedReader(list(events))

    return factory


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Terminal console writing plain text plus control codes to a buffer."""
    monkeypatch.setenv("TERM", "xterm-256color")
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system=None,
        width=80,
        highlight=False,
    )

"""Protocol for swappable key input sources."""

from typing import Protocol

from .keys import KeyEvent


class KeyReader(Protocol):
    """Anything that can produce key events for a menu."""

    def read_key(self) -> KeyEvent:
        """Block until the next key press and return it."""
        ...

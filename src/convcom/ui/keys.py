"""Raw keystroke input.

A single read in raw mode returns whatever bytes the key press produced:
arrow keys arrive as three-byte escape sequences while a lone Escape arrives
as one byte. ``readchar.readkey()`` blocks for a second byte after Escape, so
the read is done here and only readchar's key codes are reused for decoding.
"""

import logging
import os
import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum

import readchar

logger = logging.getLogger("convcom.keys")

MAX_KEY_BYTES = 3

_ESC = ord(readchar.key.ESC)
_CTRL_X = ord(readchar.key.CTRL_X)
_ENTER = (ord(readchar.key.CR), ord(readchar.key.LF))
_ARROW_UP = ord(readchar.key.UP[-1])
_ARROW_DOWN = ord(readchar.key.DOWN[-1])


class TerminalError(Exception):
    """Terminal mode could not be changed or input could not be read."""


class KeyKind(Enum):
    """Logical key kinds understood by menus."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    FORCE_QUIT = "force_quit"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press. ``byte`` is only set for OTHER."""

    kind: KeyKind
    byte: int | None = None

    @classmethod
    def other(cls, byte: int) -> "KeyEvent":
        return cls(KeyKind.OTHER, byte)


UP = KeyEvent(KeyKind.UP)
DOWN = KeyEvent(KeyKind.DOWN)
ENTER = KeyEvent(KeyKind.ENTER)
ESCAPE = KeyEvent(KeyKind.ESCAPE)
FORCE_QUIT = KeyEvent(KeyKind.FORCE_QUIT)


def decode_key(data: bytes) -> KeyEvent:
    """Decode the bytes of one raw read into a KeyEvent.

    Args:
        data: Between 1 and MAX_KEY_BYTES bytes from a single read

    Raises:
        TerminalError: If data is empty (input stream closed).
    """
    if not data:
        raise TerminalError("input stream closed")

    if len(data) == MAX_KEY_BYTES:
        if data[-1] == _ARROW_UP:
            return UP
        if data[-1] == _ARROW_DOWN:
            return DOWN
        return KeyEvent.other(data[0])

    first = data[0]
    if first == _ESC:
        return ESCAPE
    if first == _CTRL_X:
        return FORCE_QUIT
    if first in _ENTER:
        return ENTER
    return KeyEvent.other(first)


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Put ``fd`` into raw mode, restoring the previous mode on exit.

    Raises:
        TerminalError: If the terminal mode cannot be queried, set or restored.
    """
    try:
        old_state = termios.tcgetattr(fd)
    except termios.error as e:
        raise TerminalError(f"cannot read terminal mode: {e}") from e

    try:
        try:
            tty.setraw(fd)
        except termios.error as e:
            raise TerminalError(f"cannot enter raw mode: {e}") from e
        yield
    except BaseException:
        _restore_mode(fd, old_state, raise_errors=False)
        raise
    _restore_mode(fd, old_state)


def _restore_mode(fd: int, state: list, raise_errors: bool = True) -> None:
    try:
        termios.tcsetattr(fd, termios.TCSADRAIN, state)
    except termios.error as e:
        if raise_errors:
            raise TerminalError(f"cannot restore terminal mode: {e}") from e
        # The in-flight exception is re-raised by the caller
        logger.error("cannot restore terminal mode: %s", e)


class RawInputReader:
    """Reads one key event per call from a terminal file descriptor."""

    def __init__(self, fd: int | None = None):
        self._fd = fd

    @property
    def fd(self) -> int:
        if self._fd is None:
            try:
                return sys.stdin.fileno()
            except (AttributeError, ValueError, OSError) as e:
                raise TerminalError(f"cannot access terminal input: {e}") from e
        return self._fd

    def read_key(self) -> KeyEvent:
        fd = self.fd
        with raw_mode(fd):
            try:
                data = os.read(fd, MAX_KEY_BYTES)
            except OSError as e:
                raise TerminalError(f"cannot read input: {e}") from e
        return decode_key(data)

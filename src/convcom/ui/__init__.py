"""UI module."""

from .base import KeyReader
from .formatting import format_preview
from .keys import KeyEvent, KeyKind, RawInputReader, TerminalError, decode_key
from .select_menu import SelectMenu

__all__ = [
    "KeyEvent",
    "KeyKind",
    "KeyReader",
    "RawInputReader",
    "SelectMenu",
    "TerminalError",
    "decode_key",
    "format_preview",
]

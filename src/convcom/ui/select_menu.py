"""Single-choice menu rendered in place on the terminal."""

import sys

from rich.console import Console
from rich.control import Control
from rich.markup import escape

from convcom.models import MenuItem

from .base import KeyReader
from .keys import KeyKind, RawInputReader

PROMPT_STYLE = "bold magenta"
CURSOR_STYLE = "bold yellow"


class SelectMenu:
    """Ordered list of items with a wrapping cursor.

    Example:
        menu = SelectMenu("Breaking change?")
        menu.add_item("no", "").add_item("yes", "!")
        marker = menu.display()  # "" or "!", None if cancelled
    """

    def __init__(
        self,
        prompt: str,
        console: Console | None = None,
        reader: KeyReader | None = None,
    ):
        self.prompt = prompt
        self.items: list[MenuItem] = []
        self.cursor = 0
        self._console = console or Console(highlight=False)
        self._reader = reader or RawInputReader()

    def add_item(self, label: str, value: str) -> "SelectMenu":
        """Append an option. Returns self for chaining."""
        self.items.append(MenuItem(label=label, value=value))
        return self

    # Selection state

    def move_up(self) -> None:
        self.cursor = (self.cursor - 1) % len(self.items)

    def move_down(self) -> None:
        self.cursor = (self.cursor + 1) % len(self.items)

    @property
    def selected(self) -> MenuItem:
        return self.items[self.cursor]

    # Rendering

    def _render_items(self, redraw: bool = False) -> None:
        """Print the option list.

        With redraw, the cursor first moves back to the top of the list so the
        options are reprinted over themselves. The last option has no trailing
        newline, which keeps the cursor on the list's bottom row.
        """
        last = len(self.items) - 1
        if redraw and last:
            self._console.control(Control.move_to_column(0, y=-last))

        for index, item in enumerate(self.items):
            label = escape(item.label)
            if index == self.cursor:
                line = f"[{CURSOR_STYLE}]>[/{CURSOR_STYLE}]  [{CURSOR_STYLE}]{label}[/{CURSOR_STYLE}]"
            else:
                line = f"   {label}"
            self._console.control(Control.move_to_column(0))
            self._console.print(
                line,
                end="" if index == last else "\n",
                no_wrap=True,
                overflow="ellipsis",
                crop=True,
            )

    def display(self) -> str | None:
        """Show the menu and block until the user picks an option.

        Returns:
            The selected item's value, or None if cancelled with Escape.
            Ctrl+X exits the process.
        """
        if not self.items:
            raise ValueError(f"menu '{self.prompt}' has no items")

        self.cursor = max(0, min(self.cursor, len(self.items) - 1))
        self._console.print(f"[{PROMPT_STYLE}]{escape(self.prompt)}[/{PROMPT_STYLE}]")
        self._render_items()
        self._console.show_cursor(False)

        try:
            while True:
                event = self._reader.read_key()

                if event.kind is KeyKind.ESCAPE:
                    self._console.print()
                    return None
                elif event.kind is KeyKind.FORCE_QUIT:
                    self._console.print("\nProcess exited.")
                    sys.exit(0)
                elif event.kind is KeyKind.ENTER:
                    self._console.print()
                    return self.selected.value
                elif event.kind is KeyKind.UP:
                    self.move_up()
                    self._render_items(redraw=True)
                elif event.kind is KeyKind.DOWN:
                    self.move_down()
                    self._render_items(redraw=True)
        finally:
            self._console.show_cursor(True)

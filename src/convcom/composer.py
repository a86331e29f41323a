"""Interactive commit composition."""

from typing import TextIO

from rich.console import Console

from convcom.config import Config
from convcom.git import GitCommitter
from convcom.models import CommitChoices
from convcom.ui.base import KeyReader
from convcom.ui.formatting import TITLE, format_preview
from convcom.ui.keys import RawInputReader
from convcom.ui.select_menu import SelectMenu

NO_SCOPE_LABEL = "none"
MESSAGE_PROMPT = "Enter commit message: "


class CommitComposer:
    """Walks the user through type, scope, breaking change and message.

    Escape in any menu (or EOF at the message prompt) cancels the whole
    composition; nothing is committed.
    """

    def __init__(
        self,
        config: Config,
        console: Console | None = None,
        reader: KeyReader | None = None,
        stream: TextIO | None = None,
    ):
        """Initialize composer.

        Args:
            config: Allowed types and scopes.
            console: Output console. Default writes to stdout.
            reader: Key source for the menus. Default reads the terminal.
            stream: Source for the message line. Default is stdin.
        """
        self.config = config
        self.choices = CommitChoices()
        self._console = console or Console(highlight=False)
        self._reader = reader or RawInputReader()
        self._stream = stream

    def _menu(self, prompt: str) -> SelectMenu:
        return SelectMenu(prompt, console=self._console, reader=self._reader)

    def render_preview(self) -> None:
        """Clear the screen and show the commit built so far."""
        self._console.clear()
        self._console.print(TITLE)
        self._console.print()
        self._console.print(format_preview(self.choices))
        self._console.print()

    def _select_type(self) -> str | None:
        menu = self._menu("Choose a type")
        for commit_type in self.config.types:
            menu.add_item(commit_type, commit_type)
        return menu.display()

    def _select_scope(self) -> str | None:
        menu = self._menu("Choose a scope")
        menu.add_item(NO_SCOPE_LABEL, "")
        for scope in self.config.scopes:
            menu.add_item(scope, scope)
        return menu.display()

    def _select_breaking(self) -> str | None:
        return self._menu("Breaking change?").add_item("no", "").add_item("yes", "!").display()

    def _read_message(self) -> str | None:
        try:
            line = self._console.input(MESSAGE_PROMPT, stream=self._stream)
        except (KeyboardInterrupt, EOFError):
            return None
        return line.strip()

    def compose(self) -> CommitChoices | None:
        """Run the question sequence.

        Returns:
            The completed choices, or None if the user cancelled.
        """
        self.choices = CommitChoices()
        self.render_preview()

        steps = [
            ("type", self._select_type),
            ("scope", self._select_scope),
            ("breaking", self._select_breaking),
            ("message", self._read_message),
        ]
        for field, ask in steps:
            value = ask()
            if value is None:
                return None
            setattr(self.choices, field, value)
            self.render_preview()

        return self.choices

    def confirm(self) -> bool:
        """Ask whether to go ahead. Escape counts as no."""
        menu = self._menu("Push?").add_item("no", "no").add_item("yes", "yes")
        return menu.display() == "yes"

    def run(
        self,
        committer: GitCommitter,
        dry_run: bool = False,
        push: bool = False,
    ) -> CommitChoices | None:
        """Compose, confirm, and hand the message to ``committer``.

        Returns:
            The committed choices, or None if cancelled or not confirmed.

        Raises:
            CommitError: If git fails.
        """
        choices = self.compose()
        if choices is None:
            self._console.print("[dim]Commit cancelled.[/dim]")
            return None
        if not self.confirm():
            return None

        self.render_preview()
        committer.commit(choices.header, dry_run=dry_run)
        if push and not dry_run:
            committer.push()
        return choices

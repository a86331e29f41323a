"""Commit execution via the git binary."""

import logging
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger("convcom.git")


class CommitError(Exception):
    """A git command failed."""


class GitCommitter:
    """Runs ``git commit`` (and optionally ``git push``) in a working tree."""

    def __init__(self, cwd: Path | None = None, console: Console | None = None):
        self.cwd = cwd
        self._console = console or Console(highlight=False)

    def commit(self, message: str, dry_run: bool = False) -> None:
        """Commit all modified tracked files with ``message``.

        With dry_run, the message is printed and git is not invoked.

        Raises:
            CommitError: If git fails or is not installed.
        """
        if dry_run:
            self._console.print(f"Commit ... {escape(message)}", soft_wrap=True)
            return

        self._run(["git", "commit", "-am", message], "failed to commit changes")

    def push(self) -> None:
        """Push the current branch to its upstream.

        Raises:
            CommitError: If git fails or is not installed.
        """
        self._run(["git", "push"], "failed to push changes")

    def _run(self, args: list[str], context: str) -> str:
        logger.debug("Running %s", args)
        try:
            result = subprocess.run(
                args,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or e.stdout or "").strip() or f"exit status {e.returncode}"
            raise CommitError(f"{context}: {detail}") from e
        except FileNotFoundError as e:
            raise CommitError(f"{context}: git executable not found") from e
        return result.stdout

"""CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from convcom import __version__

app = typer.Typer(
    name="convcom",
    help="Compose Conventional Commits from an interactive terminal menu.",
    add_completion=False,
)
console = Console(highlight=False)

USAGE = (
    "No valid flag provided. Use -init to create a configuration file "
    "or -commit (-dryrun) to create a conventional commit."
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"convcom {__version__}")
        raise typer.Exit()


def _init_config(path: Path | None) -> None:
    from convcom.config import ConfigError, create_config_file

    try:
        created = create_config_file(path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"Config file {created.name} created successfully.")


def _commit(path: Path | None, dry_run: bool, push: bool) -> None:
    from convcom.composer import CommitComposer
    from convcom.config import Config, ConfigError
    from convcom.git import CommitError, GitCommitter
    from convcom.ui.keys import TerminalError

    try:
        cfg = Config.load(path)
    except ConfigError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        raise typer.Exit(1)

    composer = CommitComposer(cfg, console=console)
    try:
        composer.run(GitCommitter(console=console), dry_run=dry_run, push=push)
    except (TerminalError, CommitError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def main(
    init: Annotated[
        bool, typer.Option("--init", "-init", help="Create a standard configuration file")
    ] = False,
    commit: Annotated[
        bool, typer.Option("--commit", "-commit", help="Create a git commit")
    ] = False,
    dryrun: Annotated[
        bool, typer.Option("--dryrun", "-dryrun", help="Print the commit instead of running git")
    ] = False,
    push: Annotated[
        bool, typer.Option("--push", help="Run git push after committing")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file (default: ./convcom.json)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show debug logging")] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
):
    """Compose a Conventional Commit interactively."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if init:
        _init_config(config)
    elif commit:
        _commit(config, dryrun, push)
    else:
        console.print(USAGE)


if __name__ == "__main__":
    app()

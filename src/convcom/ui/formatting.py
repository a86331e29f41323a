"""Rich markup for the commit preview."""

from rich.markup import escape

from convcom.models import CommitChoices

TITLE = "[underline bold white]Conventional Commit[/underline bold white]"

TYPE_STYLE = "on cyan"
SCOPE_STYLE = "on green"
BREAKING_STYLE = "on red"


def format_preview(choices: CommitChoices) -> str:
    """Format the in-progress commit header as a Rich markup bullet.

    Shows a bare bullet until a type has been chosen. Empty scope and
    breaking marker are left out.
    """
    if not choices.type:
        return "* "

    parts = [f"[{TYPE_STYLE}]{escape(choices.type)}[/{TYPE_STYLE}]"]
    if choices.scope:
        parts.append(f"[{SCOPE_STYLE}]({escape(choices.scope)})[/{SCOPE_STYLE}]")
    if choices.breaking:
        parts.append(f"[{BREAKING_STYLE}]{escape(choices.breaking)}[/{BREAKING_STYLE}]")
    return f"* {''.join(parts)}: {escape(choices.message)}"

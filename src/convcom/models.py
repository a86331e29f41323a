"""Data models for convcom."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    """Immutable menu entry."""

    label: str
    value: str


@dataclass
class CommitChoices:
    """Answers collected while composing a commit."""

    type: str = ""
    scope: str = ""
    breaking: str = ""
    message: str = ""

    @property
    def header(self) -> str:
        """Return the conventional commit header, e.g. ``feat(api)!: msg``."""
        scope = f"({self.scope})" if self.scope else ""
        return f"{self.type}{scope}{self.breaking}: {self.message}"

"""Data models for perchance-helper."""

import re
from enum import StrEnum

from pydantic import BaseModel, Field

_PLACEHOLDER_RE = re.compile(r"\[(\w+)\]", re.ASCII)


class LogLevel(StrEnum):
    """Logging verbosity accepted in the user config."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ParsedTemplate(BaseModel):
    """Option lists and renderable body extracted from template source.

    Only the first line of the source is ever treated as the body; every
    other line either feeds a list or is ignored.
    """

    lists: dict[str, list[str]] = Field(
        default_factory=dict, description="List name to its option strings"
    )
    body: str = Field(default="", description="Template line eligible for substitution")

    def placeholder_names(self) -> list[str]:
        """Return the placeholder names in the body, in order of first appearance."""
        seen: list[str] = []
        for name in _PLACEHOLDER_RE.findall(self.body):
            if name not in seen:
                seen.append(name)
        return seen

    def unresolved_placeholders(self) -> list[str]:
        """Return placeholder names that have no matching list."""
        return [name for name in self.placeholder_names() if name not in self.lists]


class ValidationReport(BaseModel):
    """Verdict of the heuristic template check."""

    valid: bool
    message: str
    has_lists: bool = False
    has_brackets: bool = False

    def __bool__(self) -> bool:
        return self.valid

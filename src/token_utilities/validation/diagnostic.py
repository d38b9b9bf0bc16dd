"""Diagnostic model: structured findings about a build configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the configuration or rule tables.

    Attributes:
        rule: Identifier of the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        subject: The option, file or rule involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    subject: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        location = f" [{self.subject}]" if self.subject else ""
        return f"{self.severity.value}{location}: {self.message}"

"""Diagnostic model: findings reported by a filter run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single decision the filter wants the caller to know about.

    Attributes:
        code: Identifier for the kind of finding (``unparsable-selector``...).
        severity: How notable the finding is.
        message: Human-readable description.
        selector: The selector or at-rule header involved, if applicable.
    """

    code: str
    severity: Severity
    message: str
    selector: str | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [{self.selector}]" if self.selector else ""
        return f"{self.severity.value}{location}: {self.message}"

"""Diagnostics collector handed back to the driver by every lifecycle call.

``Diagnostic`` is a Pydantic model that each resource package extends with
its own location field.  ``Diagnostics`` accumulates them in order;
``log_and_add_error`` / ``log_and_add_warning`` also emit a log record so
failures show up in provider logs as well as in the driver's output.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel


class Severity(str, Enum):
    """Diagnostic severity.  Errors fail the operation, warnings do not."""

    ERROR = "error"
    WARNING = "warning"


class Diagnostic(BaseModel):
    """Base structured diagnostic with severity, code, summary, and detail.

    The ``code`` field is typed as ``str`` so it accepts any package-specific
    ``ErrorCode`` enum member.
    """

    severity: Severity
    summary: str
    detail: str = ""
    code: str | None = None


class Diagnostics(BaseModel):
    """Ordered collection of diagnostics for a single lifecycle call."""

    items: list[Diagnostic] = []

    def append(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def extend(self, other: Diagnostics | list[Diagnostic]) -> None:
        if isinstance(other, Diagnostics):
            other = other.items
        self.items.extend(other)

    def add_error(self, summary: str, detail: str = "", code: str | None = None) -> None:
        self.items.append(
            Diagnostic(severity=Severity.ERROR, summary=summary, detail=detail, code=code)
        )

    def add_warning(self, summary: str, detail: str = "", code: str | None = None) -> None:
        self.items.append(
            Diagnostic(severity=Severity.WARNING, summary=summary, detail=detail, code=code)
        )

    def has_error(self) -> bool:
        """Return True if any collected diagnostic is an error."""
        return any(d.severity == Severity.ERROR for d in self.items)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.ERROR]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.WARNING]

    def __len__(self) -> int:
        return len(self.items)


def format_fields(fields: dict[str, Any]) -> str:
    """Render context fields as `` | key=value`` pairs, skipping empty values."""
    return "".join(f" | {key}={value}" for key, value in fields.items() if value)


def log_and_add_error(
    logger: logging.Logger,
    diags: Diagnostics,
    summary: str,
    detail: str,
    code: str | None = None,
    fields: dict[str, Any] | None = None,
) -> None:
    """Log an error with its context fields and append it to *diags*."""
    logger.error(
        "%s%s | code=%s | summary=%s | detail=%s",
        logger.name,
        format_fields(fields or {}),
        code,
        summary,
        detail,
    )
    diags.add_error(summary, detail, code)


def log_and_add_warning(
    logger: logging.Logger,
    diags: Diagnostics,
    summary: str,
    detail: str,
    code: str | None = None,
    fields: dict[str, Any] | None = None,
) -> None:
    """Log a warning with its context fields and append it to *diags*."""
    logger.warning(
        "%s%s | code=%s | summary=%s | detail=%s",
        logger.name,
        format_fields(fields or {}),
        code,
        summary,
        detail,
    )
    diags.add_warning(summary, detail, code)

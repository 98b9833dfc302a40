# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while installing lint rules."""

from __future__ import annotations

from pathlib import Path


class LintInstallError(RuntimeError):
    """Base error for failures that abort a lint-install run."""

    def __init__(self, message: str, *, path: Path | None = None, operation: str | None = None) -> None:
        """Initialise the error with optional path and operation context.

        Args:
            message: Human-readable description of the failure.
            path: Filesystem path involved in the failure, when known.
            operation: Short verb describing what was being attempted.
        """

        self.path = path
        self.operation = operation
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.operation and self.path is not None:
            return f"{self.operation} {self.path}: {message}"
        if self.path is not None:
            return f"{self.path}: {message}"
        return message


class UsageError(LintInstallError):
    """Raised when command-line input cannot be turned into run options."""


class TraversalError(LintInstallError):
    """Raised when a project tree cannot be walked."""


class TemplateRenderError(LintInstallError):
    """Raised when the build-automation template fails to render."""


class WriteError(LintInstallError):
    """Raised when an artifact cannot be read, written or removed."""


__all__ = [
    "LintInstallError",
    "TemplateRenderError",
    "TraversalError",
    "UsageError",
    "WriteError",
]

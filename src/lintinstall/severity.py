# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class SeverityLevel(str, Enum):
    """How strictly a generated lint rule propagates linter failures."""

    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


DEFAULT_SEVERITY: Final[str] = SeverityLevel.ERROR.value


def resolve_severity(level: str) -> SeverityLevel:
    """Map a raw CLI severity onto the command shape it selects.

    Only the exact strings ``warn`` and ``ignore`` are special; every other
    value, including typos, behaves like ``error``.
    """

    if level == SeverityLevel.WARN.value:
        return SeverityLevel.WARN
    if level == SeverityLevel.IGNORE.value:
        return SeverityLevel.IGNORE
    return SeverityLevel.ERROR


__all__ = [
    "DEFAULT_SEVERITY",
    "SeverityLevel",
    "resolve_severity",
]

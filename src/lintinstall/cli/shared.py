# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from ..logging import debug as core_debug
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def debug(self, message: str) -> None:
        core_debug(message, enabled=self.debug_enabled)


def build_cli_logger(*, emoji: bool, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences."""

    return CLILogger(use_emoji=emoji, debug_enabled=debug)


__all__ = ["CLILogger", "build_cli_logger"]

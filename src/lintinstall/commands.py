# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell command strings emitted into the generated lint and fix targets."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from .constants import GOLANGCI_BIN, HADOLINT_BIN, SHELLCHECK_BIN, WARN_SUFFIX, YAMLLINT_BIN
from .languages import DetectionResult, Language
from .severity import SeverityLevel, resolve_severity

# git apply rather than patch(1): not every platform's patch reads from stdin.
SHELLCHECK_FIX_SUFFIX: Final[str] = " -f diff | git apply -p2 -"
GOLANGCI_FIX_SUFFIX: Final[str] = " --fix"
HADOLINT_NO_FAIL: Final[str] = " --no-fail"


def go_lint_command(detection: DetectionResult, level: str, *, fix: bool = False) -> str | None:
    """Return the golangci-lint invocation for a project.

    A single module rooted at the project runs in place; anything else is
    linted module by module via ``find -execdir``.
    """

    shape = resolve_severity(level)
    if shape is SeverityLevel.IGNORE:
        return None
    suffix = ""
    if fix:
        suffix = GOLANGCI_FIX_SUFFIX
    elif shape is SeverityLevel.WARN:
        suffix = WARN_SUFFIX

    if detection.single_go_module:
        return f"{GOLANGCI_BIN} run{suffix}"
    return f'find . -name go.mod -execdir "$(LINT_ROOT)/{GOLANGCI_BIN}" run -c "$(GOLINT_CONFIG)"{suffix} \\;'


def shell_lint_command(detection: DetectionResult, level: str, *, fix: bool = False) -> str | None:
    """Return the shellcheck invocation covering every ``*.sh`` file."""

    shape = resolve_severity(level)
    if shape is SeverityLevel.IGNORE:
        return None
    suffix = ""
    if fix:
        suffix = SHELLCHECK_FIX_SUFFIX
    elif shape is SeverityLevel.WARN:
        suffix = WARN_SUFFIX
    return f'{SHELLCHECK_BIN} $(shell find . -name "*.sh"){suffix}'


def dockerfile_lint_command(detection: DetectionResult, level: str, *, fix: bool = False) -> str | None:
    """Return the hadolint invocation covering every Dockerfile.

    hadolint has no fixer, so *fix* always yields ``None``.
    """

    shape = resolve_severity(level)
    if fix or shape is SeverityLevel.IGNORE:
        return None
    flag = HADOLINT_NO_FAIL if shape is SeverityLevel.WARN else ""
    return f'{HADOLINT_BIN}{flag} $(shell find . -name "*Dockerfile")'


def yaml_lint_command(detection: DetectionResult, level: str, *, fix: bool = False) -> str | None:
    """Return the yamllint invocation over the whole project."""

    shape = resolve_severity(level)
    if fix or shape is SeverityLevel.IGNORE:
        return None
    suffix = WARN_SUFFIX if shape is SeverityLevel.WARN else ""
    return f"{YAMLLINT_BIN} .{suffix}"


CommandBuilder = Callable[..., str | None]

COMMAND_BUILDERS: Final[dict[Language, CommandBuilder]] = {
    Language.GO: go_lint_command,
    Language.DOCKERFILE: dockerfile_lint_command,
    Language.SHELL: shell_lint_command,
    Language.YAML: yaml_lint_command,
}


def build_command(language: Language, detection: DetectionResult, level: str, *, fix: bool = False) -> str | None:
    """Dispatch to the builder registered for *language*."""

    return COMMAND_BUILDERS[language](detection, level, fix=fix)


__all__ = [
    "COMMAND_BUILDERS",
    "build_command",
    "dockerfile_lint_command",
    "go_lint_command",
    "shell_lint_command",
    "yaml_lint_command",
]

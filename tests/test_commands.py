# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for generated lint and fix command strings."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintinstall.commands import (
    build_command,
    dockerfile_lint_command,
    go_lint_command,
    shell_lint_command,
    yaml_lint_command,
)
from lintinstall.languages import DetectionResult, Language

ROOT = Path("/work/project")
GOLANGCI = "out/linters/golangci-lint-$(GOLINT_VERSION)-$(LINT_ARCH)"


def _detection(*modules: Path) -> DetectionResult:
    return DetectionResult(root=ROOT, languages=frozenset(Language), go_modules=modules)


def test_go_single_module_error() -> None:
    assert go_lint_command(_detection(ROOT), "error") == f"{GOLANGCI} run"


def test_go_single_module_warn_swallows_failure() -> None:
    assert go_lint_command(_detection(ROOT), "warn") == f"{GOLANGCI} run || true"


def test_go_fix_takes_precedence_over_warn() -> None:
    assert go_lint_command(_detection(ROOT), "warn", fix=True) == f"{GOLANGCI} run --fix"


def test_go_multi_module_iterates_with_find() -> None:
    command = go_lint_command(_detection(ROOT, ROOT / "tools"), "error")

    assert command == (
        f'find . -name go.mod -execdir "$(LINT_ROOT)/{GOLANGCI}" run -c "$(GOLINT_CONFIG)" \\;'
    )


def test_go_multi_module_fix_also_iterates() -> None:
    command = go_lint_command(_detection(ROOT / "a", ROOT / "b"), "error", fix=True)

    assert command is not None
    assert command.startswith("find . -name go.mod -execdir")
    assert command.endswith('run -c "$(GOLINT_CONFIG)" --fix \\;')


def test_shell_commands() -> None:
    detection = _detection()
    base = 'out/linters/shellcheck-$(SHELLCHECK_VERSION)-$(LINT_ARCH)/shellcheck $(shell find . -name "*.sh")'

    assert shell_lint_command(detection, "error") == base
    assert shell_lint_command(detection, "warn") == f"{base} || true"
    assert shell_lint_command(detection, "error", fix=True) == f"{base} -f diff | git apply -p2 -"


def test_dockerfile_warn_uses_no_fail_flag() -> None:
    detection = _detection()

    assert dockerfile_lint_command(detection, "error") == (
        'out/linters/hadolint-$(HADOLINT_VERSION)-$(LINT_ARCH) $(shell find . -name "*Dockerfile")'
    )
    warned = dockerfile_lint_command(detection, "warn")
    assert warned is not None
    assert " --no-fail " in warned
    assert "|| true" not in warned
    assert dockerfile_lint_command(detection, "warn", fix=True) is None


def test_yaml_commands() -> None:
    detection = _detection()
    base = "PYTHONPATH=$(YAMLLINT_ROOT)/dist $(YAMLLINT_ROOT)/dist/bin/yamllint ."

    assert yaml_lint_command(detection, "error") == base
    assert yaml_lint_command(detection, "warn") == f"{base} || true"
    assert yaml_lint_command(detection, "error", fix=True) is None


@pytest.mark.parametrize("language", list(Language))
def test_ignore_emits_nothing(language: Language) -> None:
    assert build_command(language, _detection(ROOT), "ignore") is None
    assert build_command(language, _detection(ROOT), "ignore", fix=True) is None


@pytest.mark.parametrize("level", ["Warn", "fatal", ""])
def test_unknown_levels_behave_like_error(level: str) -> None:
    detection = _detection(ROOT)

    assert build_command(Language.GO, detection, level) == build_command(Language.GO, detection, "error")
    assert build_command(Language.YAML, detection, level) == build_command(Language.YAML, detection, "error")

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across lintinstall modules."""

from __future__ import annotations

from typing import Final

PROG_NAME: Final[str] = "lint-install"

BEGIN_MARKER: Final[str] = "# BEGIN: lint-install"
END_MARKER: Final[str] = "# END: lint-install"

DEFAULT_MAKEFILE: Final[str] = "Makefile"
GITIGNORE_NAME: Final[str] = ".gitignore"
OUTPUT_DIR_ENTRIES: Final[frozenset[str]] = frozenset({"out/", "out"})
GITIGNORE_BLOCK: Final[str] = "# added by lint-install\nout/\n"

GO_MANIFEST: Final[str] = "go.mod"
GOLANGCI_CONFIG: Final[str] = ".golangci.yml"
GOLANGCI_LEGACY_CONFIGS: Final[tuple[str, ...]] = (
    ".golangci.json",
    ".golangci.toml",
    ".golangci.yaml",
)
YAMLLINT_CONFIG: Final[str] = ".yamllint"

# Linter binaries as laid out by the generated download rules.
GOLANGCI_BIN: Final[str] = "out/linters/golangci-lint-$(GOLINT_VERSION)-$(LINT_ARCH)"
SHELLCHECK_BIN: Final[str] = "out/linters/shellcheck-$(SHELLCHECK_VERSION)-$(LINT_ARCH)/shellcheck"
HADOLINT_BIN: Final[str] = "out/linters/hadolint-$(HADOLINT_VERSION)-$(LINT_ARCH)"
YAMLLINT_BIN: Final[str] = "PYTHONPATH=$(YAMLLINT_ROOT)/dist $(YAMLLINT_ROOT)/dist/bin/yamllint"

WARN_SUFFIX: Final[str] = " || true"
MAX_WALK_DEPTH: Final[int] = 64

# Never descended into while detecting languages.
EXCLUDED_DIRS: Final[frozenset[str]] = frozenset({".git"})
# Downloaded linters live here, relative to each project root.
LINTERS_DIR: Final[str] = "out/linters"

__all__ = [
    "BEGIN_MARKER",
    "DEFAULT_MAKEFILE",
    "END_MARKER",
    "EXCLUDED_DIRS",
    "GITIGNORE_BLOCK",
    "GITIGNORE_NAME",
    "GOLANGCI_BIN",
    "GOLANGCI_CONFIG",
    "GOLANGCI_LEGACY_CONFIGS",
    "GO_MANIFEST",
    "HADOLINT_BIN",
    "LINTERS_DIR",
    "MAX_WALK_DEPTH",
    "OUTPUT_DIR_ENTRIES",
    "PROG_NAME",
    "SHELLCHECK_BIN",
    "WARN_SUFFIX",
    "YAMLLINT_BIN",
    "YAMLLINT_CONFIG",
]

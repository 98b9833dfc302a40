# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language detection for selecting which linters to install."""

from __future__ import annotations

import os
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    EXCLUDED_DIRS,
    GO_MANIFEST,
    GOLANGCI_CONFIG,
    GOLANGCI_LEGACY_CONFIGS,
    LINTERS_DIR,
    MAX_WALK_DEPTH,
)
from .errors import TraversalError


class Language(str, Enum):
    """Languages with a supported linter, declared in generation order."""

    GO = "go"
    DOCKERFILE = "dockerfile"
    SHELL = "shell"
    YAML = "yaml"


LANGUAGE_ORDER: tuple[Language, ...] = tuple(Language)

# Root-level linter configs owned by lint-install; never counted as sources.
OWNED_FILES: frozenset[str] = frozenset({GOLANGCI_CONFIG, *GOLANGCI_LEGACY_CONFIGS})


class DetectionResult(BaseModel):
    """Outcome of a single walk over a project tree."""

    model_config = ConfigDict(frozen=True)

    root: Path
    languages: frozenset[Language] = Field(default_factory=frozenset)
    go_modules: tuple[Path, ...] = Field(default_factory=tuple)

    def ordered(self) -> list[Language]:
        """Return detected languages in the fixed generation order."""

        return [language for language in LANGUAGE_ORDER if language in self.languages]

    @property
    def single_go_module(self) -> bool:
        """Return ``True`` when Go lints with one invocation from *root*."""

        if not self.go_modules:
            return True
        return len(self.go_modules) == 1 and self.go_modules[0] == self.root


def classify(name: str) -> Language | None:
    """Return the language implied by a file *name*; first match wins."""

    if name.endswith(".go"):
        return Language.GO
    if name.endswith("Dockerfile"):
        return Language.DOCKERFILE
    if name.endswith(".sh"):
        return Language.SHELL
    if name.endswith((".yml", ".yaml")):
        return Language.YAML
    return None


def detect_languages(root: Path, *, follow_symlinks: bool = False) -> DetectionResult:
    """Walk *root* once, collecting languages and Go module directories.

    Args:
        root: Project directory to inspect.
        follow_symlinks: Descend into symlinked directories. Cycles and
            trees deeper than ``MAX_WALK_DEPTH`` raise ``TraversalError``.

    Returns:
        DetectionResult: Languages present plus every directory holding ``go.mod``.

    Raises:
        TraversalError: If *root* or any directory beneath it cannot be read.
    """

    found: set[Language] = set()
    modules: list[Path] = []
    for directory, filenames in _walk(root, follow_symlinks=follow_symlinks):
        for name in filenames:
            if directory == root and name in OWNED_FILES:
                continue
            if (language := classify(name)) is not None:
                found.add(language)
            if name == GO_MANIFEST:
                modules.append(directory)
    modules.sort()
    return DetectionResult(root=root, languages=frozenset(found), go_modules=tuple(modules))


def _walk(root: Path, *, follow_symlinks: bool) -> Iterable[tuple[Path, list[str]]]:
    if not root.is_dir():
        raise TraversalError("not a directory", path=root, operation="walk")
    seen: set[tuple[int, int]] = set()
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal, followlinks=follow_symlinks):
        directory = Path(dirpath)
        if follow_symlinks:
            _guard_cycle(directory, root, seen)
        yield directory, filenames
        dirnames[:] = sorted(name for name in dirnames if not _excluded(directory / name, root))


def _excluded(path: Path, root: Path) -> bool:
    return path.name in EXCLUDED_DIRS or path == root / LINTERS_DIR


def _guard_cycle(directory: Path, root: Path, seen: set[tuple[int, int]]) -> None:
    depth = len(directory.relative_to(root).parts)
    if depth > MAX_WALK_DEPTH:
        raise TraversalError(f"exceeded maximum depth of {MAX_WALK_DEPTH}", path=directory, operation="walk")
    try:
        stat = directory.stat()
    except OSError as exc:
        raise TraversalError(exc.strerror or str(exc), path=directory, operation="walk") from exc
    key = (stat.st_dev, stat.st_ino)
    if key in seen:
        raise TraversalError("symlink cycle detected", path=directory, operation="walk")
    seen.add(key)


def _raise_traversal(exc: OSError) -> None:
    path = Path(exc.filename) if exc.filename else None
    raise TraversalError(exc.strerror or str(exc), path=path, operation="walk") from exc


__all__ = [
    "DetectionResult",
    "LANGUAGE_ORDER",
    "Language",
    "classify",
    "detect_languages",
]

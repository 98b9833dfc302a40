# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Apply or preview changes to project files."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict

from .diffing import unified_diff
from .errors import WriteError
from .merge import merge_block, merge_gitignore

# Undecodable bytes round-trip through lone surrogates.
TEXT_ERRORS: Final[str] = "surrogateescape"


class ChangeAction(str, Enum):
    """What happened, or would happen in a dry run, to a file."""

    WRITE = "write"
    DELETE = "delete"
    UNCHANGED = "unchanged"


class FileChange(BaseModel):
    """Record of a single file update."""

    model_config = ConfigDict(frozen=True)

    path: Path
    action: ChangeAction
    diff: str = ""
    applied: bool = False

    @property
    def changed(self) -> bool:
        return self.action is not ChangeAction.UNCHANGED


def read_existing(path: Path) -> str | None:
    """Return the text of *path*, or ``None`` when it does not exist.

    Bytes that are not valid UTF-8 decode to lone surrogates and are written
    back unchanged by :func:`write_text`.
    """

    try:
        with path.open(encoding="utf-8", errors=TEXT_ERRORS, newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise WriteError(exc.strerror or str(exc), path=path, operation="read") from exc
    except UnicodeDecodeError as exc:
        raise WriteError(str(exc), path=path, operation="read") from exc


def update_file(path: Path, content: str | None, *, dry_run: bool = False) -> FileChange:
    """Replace *path* with *content*, or delete it when *content* is ``None``.

    Args:
        path: File to write or remove.
        content: Full replacement text; ``None`` requests deletion.
        dry_run: Compute the change without touching the filesystem.

    Returns:
        FileChange: The action taken together with a unified diff.

    Raises:
        WriteError: If the file cannot be read, written or removed.
    """

    existing = read_existing(path)
    if content is None:
        if existing is None:
            return FileChange(path=path, action=ChangeAction.UNCHANGED)
        diff = unified_diff(existing, "", name=path.name)
        if not dry_run:
            try:
                path.unlink()
            except OSError as exc:
                raise WriteError(exc.strerror or str(exc), path=path, operation="remove") from exc
        return FileChange(path=path, action=ChangeAction.DELETE, diff=diff, applied=not dry_run)

    if existing == content:
        return FileChange(path=path, action=ChangeAction.UNCHANGED)
    diff = unified_diff(existing or "", content, name=path.name)
    if not dry_run:
        write_text(path, content)
    return FileChange(path=path, action=ChangeAction.WRITE, diff=diff, applied=not dry_run)


def update_makefile(path: Path, block: str, *, dry_run: bool = False) -> FileChange:
    """Merge the generated *block* into the build-automation file at *path*."""

    existing = read_existing(path) or ""
    return update_file(path, merge_block(existing, block), dry_run=dry_run)


def update_gitignore(path: Path, *, dry_run: bool = False) -> FileChange:
    """Make sure the ignore-file at *path* excludes downloaded linters."""

    existing = read_existing(path) or ""
    return update_file(path, merge_gitignore(existing), dry_run=dry_run)


def write_text(path: Path, content: str) -> None:
    """Write *content* to *path*, wrapping OS failures in ``WriteError``."""

    try:
        path.write_text(content, encoding="utf-8", errors=TEXT_ERRORS, newline="")
    except (OSError, UnicodeEncodeError) as exc:
        raise WriteError(getattr(exc, "strerror", None) or str(exc), path=path, operation="write") from exc


__all__ = [
    "ChangeAction",
    "FileChange",
    "read_existing",
    "update_file",
    "update_gitignore",
    "update_makefile",
    "write_text",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Unified diff previews of pending file changes."""

from __future__ import annotations

import difflib


def unified_diff(old: str, new: str, *, name: str) -> str:
    """Return a unified diff from *old* to *new* labelled with *name*.

    Both sides carry the same label so the output reads as an in-place edit.
    Identical inputs produce an empty string.
    """

    if old == new:
        return ""
    lines = difflib.unified_diff(
        _split(old),
        _split(new),
        fromfile=name,
        tofile=name,
    )
    return printable("".join(lines))


def printable(text: str) -> str:
    """Replace undecodable bytes carried as lone surrogates with U+FFFD."""

    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _split(text: str) -> list[str]:
    lines = text.splitlines(keepends=True)
    if lines and not lines[-1].endswith("\n"):
        lines[-1] += "\n\\ No newline at end of file\n"
    return lines


__all__ = ["printable", "unified_diff"]

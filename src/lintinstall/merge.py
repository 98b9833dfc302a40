# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line-oriented merging of generated content into human-edited files.

The build-automation file holds exactly one generated block, delimited by
``BEGIN_MARKER`` and ``END_MARKER`` lines. Everything outside the block is
owned by whoever edits the file and is carried over untouched; everything
inside is replaced wholesale on every run.
"""

from __future__ import annotations

from .constants import BEGIN_MARKER, END_MARKER, GITIGNORE_BLOCK, OUTPUT_DIR_ENTRIES


def wrap_block(body: str, provenance: str = "") -> str:
    """Surround *body* with begin/end marker lines.

    Args:
        body: Generated content placed between the markers.
        provenance: Text appended to both marker lines, typically the
            arguments the tool was invoked with.

    Returns:
        str: The delimited block without a trailing line break.
    """

    tail = f" {provenance}" if provenance else ""
    inner = body.strip("\n")
    lines = [f"{BEGIN_MARKER}{tail}"]
    if inner:
        lines.append(inner)
    lines.append(f"{END_MARKER}{tail}")
    return "\n".join(lines)


def merge_block(existing: str, block: str) -> str:
    """Return *existing* with its generated block replaced by *block*.

    The first line starting with ``BEGIN_MARKER`` marks where *block* is
    spliced in. Original lines are skipped up to and including the next line
    starting with ``END_MARKER``, then copying resumes. A begin marker with
    no end marker consumes the remainder of the file. When no begin marker
    exists *block* is appended after the existing content.

    Args:
        existing: Current file content; empty when the file does not exist.
        block: Rendered block, including its own marker lines.

    Returns:
        str: Merged content ending in exactly one line break.
    """

    block_lines = block.rstrip("\n").split("\n")
    proposed: list[str] = []
    inserted = False
    replacing = False
    for line in existing.split("\n"):
        if replacing:
            if line.startswith(END_MARKER):
                replacing = False
            continue
        if not inserted and line.startswith(BEGIN_MARKER):
            proposed.extend(block_lines)
            inserted = True
            replacing = True
            continue
        proposed.append(line)

    if not inserted:
        proposed.extend(block_lines)

    merged = "\n".join(proposed)
    if not existing:
        merged = merged.lstrip("\n")
    return merged.rstrip("\n") + "\n"


def merge_gitignore(existing: str) -> str:
    """Ensure the linter output directory is ignored.

    Existing lines are never removed or reordered. ``out/`` or ``out`` on a
    line of its own counts as already ignored, with or without a CRLF ending.
    """

    lines = existing.split("\n")
    proposed = existing.rstrip("\n")
    if proposed:
        proposed += "\n"
    if not any(line.rstrip("\r") in OUTPUT_DIR_ENTRIES for line in lines):
        proposed += GITIGNORE_BLOCK
    return proposed.rstrip("\n") + "\n"


__all__ = ["merge_block", "merge_gitignore", "wrap_block"]

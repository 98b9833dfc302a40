# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for generated block and ignore-file merging."""

from __future__ import annotations

import pytest

from lintinstall.merge import merge_block, merge_gitignore, wrap_block

BLOCK = wrap_block("NEW")


def test_wrap_block_adds_markers_and_provenance() -> None:
    assert wrap_block("body\n", "--go=warn .") == (
        "# BEGIN: lint-install --go=warn .\nbody\n# END: lint-install --go=warn ."
    )


def test_merge_replaces_only_marked_region() -> None:
    existing = "A\n# BEGIN: lint-install\nOLD\n# END: lint-install\nB\n"

    assert merge_block(existing, BLOCK) == "A\n# BEGIN: lint-install\nNEW\n# END: lint-install\nB\n"


def test_merge_matches_markers_with_old_provenance() -> None:
    existing = "# BEGIN: lint-install --go=warn .\nOLD\n# END: lint-install --go=warn .\ntail\n"

    assert merge_block(existing, BLOCK) == "# BEGIN: lint-install\nNEW\n# END: lint-install\ntail\n"


def test_merge_appends_when_markers_absent() -> None:
    existing = "all:\n\tgo build ./...\n"

    merged = merge_block(existing, BLOCK)

    assert merged == "all:\n\tgo build ./...\n\n# BEGIN: lint-install\nNEW\n# END: lint-install\n"
    assert merged.startswith(existing)


def test_merge_appends_with_line_break_when_no_trailing_newline() -> None:
    assert merge_block("all:", BLOCK) == "all:\n# BEGIN: lint-install\nNEW\n# END: lint-install\n"


def test_merge_into_empty_file() -> None:
    assert merge_block("", BLOCK) == "# BEGIN: lint-install\nNEW\n# END: lint-install\n"


def test_merge_collapses_trailing_newlines() -> None:
    existing = "A\n# BEGIN: lint-install\nOLD\n# END: lint-install\n\n\n\n"

    assert merge_block(existing, BLOCK) == "A\n# BEGIN: lint-install\nNEW\n# END: lint-install\n"


def test_end_marker_without_begin_is_ordinary_content() -> None:
    existing = "# END: lint-install\nA\n"

    merged = merge_block(existing, BLOCK)

    assert merged == "# END: lint-install\nA\n\n# BEGIN: lint-install\nNEW\n# END: lint-install\n"


def test_only_first_block_is_replaced() -> None:
    existing = (
        "# BEGIN: lint-install\nOLD1\n# END: lint-install\n"
        "mid\n"
        "# BEGIN: lint-install\nOLD2\n# END: lint-install\n"
    )

    merged = merge_block(existing, BLOCK)

    assert merged == (
        "# BEGIN: lint-install\nNEW\n# END: lint-install\n"
        "mid\n"
        "# BEGIN: lint-install\nOLD2\n# END: lint-install\n"
    )


def test_unterminated_begin_drops_remaining_content() -> None:
    # Known sharp edge: without an end marker everything after the begin
    # marker is treated as generated and discarded.
    existing = "A\n# BEGIN: lint-install\nOLD\nuser rule\n"

    assert merge_block(existing, BLOCK) == "A\n# BEGIN: lint-install\nNEW\n# END: lint-install\n"


def test_merge_preserves_crlf_outside_block() -> None:
    existing = "A\r\n# BEGIN: lint-install\r\nOLD\r\n# END: lint-install\r\nB\r\n"

    merged = merge_block(existing, BLOCK)

    assert merged.startswith("A\r\n# BEGIN: lint-install\nNEW\n")
    assert merged.endswith("# END: lint-install\nB\r\n")


@pytest.mark.parametrize(
    "existing",
    [
        "",
        "\n\n",
        "A\n",
        "A",
        "A\n# BEGIN: lint-install\nOLD\n# END: lint-install\nB\n",
        "A\n# BEGIN: lint-install\nOLD\n",
        "# END: lint-install\n",
    ],
)
def test_merge_is_idempotent(existing: str) -> None:
    once = merge_block(existing, BLOCK)

    assert merge_block(once, BLOCK) == once


def test_gitignore_appends_entry() -> None:
    assert merge_gitignore("*.o\n") == "*.o\n# added by lint-install\nout/\n"


def test_gitignore_into_empty_file() -> None:
    assert merge_gitignore("") == "# added by lint-install\nout/\n"


@pytest.mark.parametrize("entry", ["out", "out/"])
def test_gitignore_existing_entry_is_kept(entry: str) -> None:
    existing = f"*.o\n{entry}\nbin/\n"

    assert merge_gitignore(existing) == existing


def test_gitignore_is_idempotent() -> None:
    once = merge_gitignore("vendor/\n")
    twice = merge_gitignore(once)

    assert twice == once
    assert twice.count("out/") == 1


def test_gitignore_recognises_crlf_entry() -> None:
    existing = "*.o\r\nout/\r\n"

    assert merge_gitignore(existing) == existing

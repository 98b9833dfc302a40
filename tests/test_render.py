# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for Makefile block rendering and embedded configs."""

from __future__ import annotations

import pytest

from lintinstall.config import GenerationConfig
from lintinstall.errors import TemplateRenderError
from lintinstall.languages import Language
from lintinstall.render import load_static_config, render_makefile_block


def _config() -> GenerationConfig:
    config = GenerationConfig(makefile="Makefile", args="--shell=warn .")
    config.set_level(Language.GO, "error")
    config.add_commands(Language.GO, "GO-LINT", "GO-FIX")
    config.set_level(Language.SHELL, "warn")
    config.add_commands(Language.SHELL, "SH-LINT", "SH-FIX")
    return config


def test_block_is_delimited_by_markers() -> None:
    block = render_makefile_block(_config())

    lines = block.split("\n")
    assert lines[0] == "# BEGIN: lint-install --shell=warn ."
    assert lines[-1] == "# END: lint-install --shell=warn ."


def test_block_names_target_makefile() -> None:
    config = GenerationConfig(makefile="lint.mk")

    block = render_makefile_block(config)

    assert block.split("\n")[1] == "# Generated by lint-install into lint.mk; edits inside this block are overwritten."


def test_block_lists_commands_in_order() -> None:
    block = render_makefile_block(_config())

    assert "lint: $(LINTERS)\n\tGO-LINT\n\tSH-LINT\n" in block
    assert "fix: $(FIXERS)\n\tGO-FIX\n\tSH-FIX\n" in block


def test_block_includes_only_used_linters() -> None:
    block = render_makefile_block(_config())

    assert "golangci-lint for Go (level: error)" in block
    assert "shellcheck for shell scripts (level: warn)" in block
    assert "hadolint for Dockerfiles" not in block
    assert "out/linters/hadolint-$(HADOLINT_VERSION)-$(LINT_ARCH):" not in block
    assert "yamllint for YAML" not in block


def test_ignored_language_has_no_rules() -> None:
    config = GenerationConfig(makefile="Makefile")
    config.set_level(Language.YAML, "ignore")
    config.add_commands(Language.YAML, None, None)

    block = render_makefile_block(config)

    assert "yamllint for YAML" not in block
    assert "lint: $(LINTERS)\n\n" in block


def test_rendering_is_deterministic() -> None:
    assert render_makefile_block(_config()) == render_makefile_block(_config())


def test_missing_field_raises_template_error() -> None:
    with pytest.raises(TemplateRenderError):
        render_makefile_block(_config(), source="{{ config.nope }}")


def test_malformed_template_raises_template_error() -> None:
    with pytest.raises(TemplateRenderError):
        render_makefile_block(_config(), source="{% if go %}")


def test_static_configs_are_embedded() -> None:
    assert "linters:" in load_static_config(".golangci.yml")
    assert "extends: default" in load_static_config(".yamllint")


def test_unknown_static_config() -> None:
    with pytest.raises(TemplateRenderError):
        load_static_config(".eslintrc")

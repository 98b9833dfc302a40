# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering of the generated Makefile block and embedded linter configs."""

from __future__ import annotations

from functools import cache
from importlib import resources
from pathlib import Path
from typing import Final

from jinja2 import Environment, StrictUndefined, TemplateError

from .config import GenerationConfig
from .constants import GOLANGCI_CONFIG, YAMLLINT_CONFIG
from .errors import TemplateRenderError
from .languages import Language
from .merge import wrap_block

TEMPLATE_PACKAGE: Final[str] = "lintinstall.templates"
MAKEFILE_TEMPLATE: Final[str] = "Makefile.j2"

# Embedded resource backing each static config file written into a project.
STATIC_CONFIGS: Final[dict[str, str]] = {
    GOLANGCI_CONFIG: "golangci.yml",
    YAMLLINT_CONFIG: "yamllint",
}


def _read_resource(name: str) -> str:
    return resources.files(TEMPLATE_PACKAGE).joinpath(name).read_text(encoding="utf-8")


@cache
def _environment() -> Environment:
    return Environment(
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def load_static_config(basename: str) -> str:
    """Return the embedded body for the static config file *basename*.

    Raises:
        TemplateRenderError: If no embedded config exists for *basename*.
    """

    resource = STATIC_CONFIGS.get(basename)
    if resource is None:
        raise TemplateRenderError("no embedded config", path=Path(basename), operation="load")
    return _read_resource(resource)


def render_makefile_block(config: GenerationConfig, *, source: str | None = None) -> str:
    """Render the marker-delimited block for *config*.

    Args:
        config: Generation values for a single project root.
        source: Template text overriding the embedded ``Makefile.j2``.

    Returns:
        str: Block text beginning and ending with the lint-install markers.

    Raises:
        TemplateRenderError: If the template is malformed or references a
            missing field.
    """

    text = source if source is not None else _read_resource(MAKEFILE_TEMPLATE)
    try:
        template = _environment().from_string(text)
        body = template.render(
            config=config,
            go=config.uses(Language.GO),
            dockerfile=config.uses(Language.DOCKERFILE),
            shell=config.uses(Language.SHELL),
            yaml=config.uses(Language.YAML),
        )
    except TemplateError as exc:
        raise TemplateRenderError(str(exc), path=Path(MAKEFILE_TEMPLATE), operation="render") from exc
    return wrap_block(body, config.args)


__all__ = ["STATIC_CONFIGS", "load_static_config", "render_makefile_block"]

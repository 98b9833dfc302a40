# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations and normalisation for the lint-install command."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Final

import typer
from pydantic import ValidationError

from ..config import RunOptions
from ..constants import DEFAULT_MAKEFILE
from ..errors import UsageError
from ..languages import Language
from ..severity import DEFAULT_SEVERITY

SEVERITY_HELP: Final[str] = "Level to lint {name} with: [ignore, warn, error]"

ROOTS_ARGUMENT = Annotated[
    list[Path],
    typer.Argument(help="Project directories to install lint rules into.", show_default=False),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Display changes to make without writing files."),
]
GO_OPTION = Annotated[str, typer.Option("--go", help=SEVERITY_HELP.format(name="Go"))]
SHELL_OPTION = Annotated[str, typer.Option("--shell", help=SEVERITY_HELP.format(name="Shell"))]
DOCKERFILE_OPTION = Annotated[
    str,
    typer.Option("--dockerfile", help=SEVERITY_HELP.format(name="Dockerfile")),
]
YAML_OPTION = Annotated[str, typer.Option("--yaml", help=SEVERITY_HELP.format(name="YAML"))]
MAKEFILE_OPTION = Annotated[str, typer.Option("--makefile", help="Name of Makefile to update.")]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show detection and command details."),
]


def format_invocation(roots: Sequence[Path], severities: dict[Language, str], makefile: str) -> str:
    """Return a stable rendering of the arguments that shape generated output.

    Only options that differ from their defaults are listed, followed by the
    roots as given. ``--dry-run`` and presentation flags never appear, so a
    preview and a real run produce the same block.
    """

    parts = [
        f"--{language.value}={level}"
        for language, level in severities.items()
        if level != DEFAULT_SEVERITY
    ]
    if makefile != DEFAULT_MAKEFILE:
        parts.append(f"--makefile={makefile}")
    parts.extend(str(root) for root in roots)
    return " ".join(parts)


def build_run_options(
    roots: Sequence[Path],
    *,
    dry_run: bool,
    go: str,
    shell: str,
    dockerfile: str,
    yaml: str,
    makefile: str,
    emoji: bool,
    verbose: bool,
) -> RunOptions:
    """Construct :class:`RunOptions` from parsed CLI values.

    Raises:
        UsageError: If any value fails validation.
    """

    severities = {
        Language.GO: go,
        Language.DOCKERFILE: dockerfile,
        Language.SHELL: shell,
        Language.YAML: yaml,
    }
    try:
        return RunOptions(
            dry_run=dry_run,
            makefile=makefile,
            severities=severities,
            args=format_invocation(roots, severities, makefile),
            use_emoji=emoji,
            verbose=verbose,
        )
    except ValidationError as exc:
        messages = "; ".join(error["msg"] for error in exc.errors())
        raise UsageError(messages, operation="parse options") from exc


__all__ = [
    "DOCKERFILE_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "GO_OPTION",
    "MAKEFILE_OPTION",
    "ROOTS_ARGUMENT",
    "SHELL_OPTION",
    "VERBOSE_OPTION",
    "YAML_OPTION",
    "build_run_options",
    "format_invocation",
]

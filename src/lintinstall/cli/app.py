# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from ..config import RunOptions
from ..constants import DEFAULT_MAKEFILE, PROG_NAME
from ..errors import LintInstallError, UsageError
from ..orchestrator import Installer, RootReport
from ..severity import DEFAULT_SEVERITY
from .models import (
    DOCKERFILE_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    GO_OPTION,
    MAKEFILE_OPTION,
    ROOTS_ARGUMENT,
    SHELL_OPTION,
    VERBOSE_OPTION,
    YAML_OPTION,
    build_run_options,
)
from .shared import CLILogger, build_cli_logger

USAGE_EXIT_CODE = 2

app = typer.Typer(
    name=PROG_NAME,
    help="Install lint and fix rules for the languages found in each project root.",
    add_completion=False,
)


@app.command()
def main(
    roots: ROOTS_ARGUMENT,
    dry_run: DRY_RUN_OPTION = False,
    go: GO_OPTION = DEFAULT_SEVERITY,
    shell: SHELL_OPTION = DEFAULT_SEVERITY,
    dockerfile: DOCKERFILE_OPTION = DEFAULT_SEVERITY,
    yaml: YAML_OPTION = DEFAULT_SEVERITY,
    makefile: MAKEFILE_OPTION = DEFAULT_MAKEFILE,
    emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Detect languages under each ROOT and update its Makefile, linter configs and .gitignore."""

    logger = build_cli_logger(emoji=emoji, debug=verbose)
    try:
        options = build_run_options(
            roots,
            dry_run=dry_run,
            go=go,
            shell=shell,
            dockerfile=dockerfile,
            yaml=yaml,
            makefile=makefile,
            emoji=emoji,
            verbose=verbose,
        )
    except UsageError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=USAGE_EXIT_CODE) from exc

    logger.debug(f"args={options.args!r} dry_run={options.dry_run}")
    try:
        reports = Installer(options).install(roots)
    except LintInstallError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    emit_summary(reports, options, logger=logger)


def emit_summary(reports: list[RootReport], options: RunOptions, *, logger: CLILogger) -> None:
    """Report how many files changed, or would change, across *reports*."""

    processed = [report for report in reports if not report.skipped]
    changed = sum(len(report.changed) for report in processed)
    if not processed:
        logger.warn("No supported languages found; nothing to do.")
        return
    if options.dry_run:
        logger.ok(f"Dry run complete: {changed} file(s) would change in {len(processed)} root(s)")
        return
    logger.ok(f"Updated {changed} file(s) in {len(processed)} root(s)")


def run() -> None:
    """Console script entry point."""

    app(prog_name=PROG_NAME)


__all__ = ["app", "emit_summary", "main", "run"]

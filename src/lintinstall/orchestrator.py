# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install lint rules and linter configs into project roots."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .commands import build_command
from .config import GenerationConfig, RunOptions
from .constants import GITIGNORE_NAME, GOLANGCI_CONFIG, GOLANGCI_LEGACY_CONFIGS, YAMLLINT_CONFIG
from .files import FileChange, update_file, update_gitignore, update_makefile
from .languages import DetectionResult, Language, detect_languages
from .logging import debug, info, ok
from .render import load_static_config, render_makefile_block


class RootReport(BaseModel):
    """Changes made, or planned, for one project root."""

    model_config = ConfigDict(validate_assignment=True)

    root: Path
    languages: list[Language] = Field(default_factory=list)
    changes: list[FileChange] = Field(default_factory=list)
    skipped: bool = False

    @property
    def changed(self) -> list[FileChange]:
        return [change for change in self.changes if change.changed]


def build_generation_config(detection: DetectionResult, options: RunOptions) -> GenerationConfig:
    """Collect severities and commands for every detected language."""

    config = GenerationConfig(makefile=options.makefile, args=options.args)
    for language in detection.ordered():
        level = options.severity(language)
        config.set_level(language, level)
        config.add_commands(
            language,
            build_command(language, detection, level),
            build_command(language, detection, level, fix=True),
        )
    return config


class Installer:
    """Run the detect, configure, render and write pipeline for project roots."""

    def __init__(self, options: RunOptions) -> None:
        self._options = options

    def install(self, roots: Iterable[Path]) -> list[RootReport]:
        """Process *roots* in order, stopping at the first failure."""

        return [self.install_root(root) for root in roots]

    def install_root(self, root: Path) -> RootReport:
        """Install lint rules into a single project *root*.

        Raises:
            LintInstallError: On any traversal, render or write failure.
        """

        options = self._options
        info(f"Searching for linters to use for {root} ...", use_emoji=options.use_emoji)
        detection = detect_languages(root)
        if not detection.languages:
            info(f"No supported languages found in {root}; skipping", use_emoji=options.use_emoji)
            return RootReport(root=root, skipped=True)

        languages = detection.ordered()
        names = ",".join(language.value for language in languages)
        debug(f"root={root} languages={names}", enabled=options.verbose)
        if Language.GO in detection.languages:
            modules = ", ".join(str(module) for module in detection.go_modules)
            info(
                f"found {len(detection.go_modules)} modules within {root}: [{modules}]",
                use_emoji=options.use_emoji,
            )

        report = RootReport(root=root, languages=languages)
        if Language.GO in detection.languages:
            self._write_static(report, "go lint config", root / GOLANGCI_CONFIG)
            for name in GOLANGCI_LEGACY_CONFIGS:
                change = update_file(root / name, None, dry_run=options.dry_run)
                if change.changed:
                    info(f"standardizing on {GOLANGCI_CONFIG}, deleting {name}", use_emoji=options.use_emoji)
                report.changes = [*report.changes, change]
        if Language.YAML in detection.languages:
            self._write_static(report, "yamllint config", root / YAMLLINT_CONFIG)

        config = build_generation_config(detection, options)
        for command in config.lint_commands + config.fix_commands:
            debug(f"command={command!r}", enabled=options.verbose)
        block = render_makefile_block(config)
        makefile = update_makefile(root / options.makefile, block, dry_run=options.dry_run)
        self._record(report, options.makefile, makefile)
        gitignore = update_gitignore(root / GITIGNORE_NAME, dry_run=options.dry_run)
        self._record(report, GITIGNORE_NAME, gitignore)
        return report

    def _write_static(self, report: RootReport, label: str, path: Path) -> None:
        change = update_file(path, load_static_config(path.name), dry_run=self._options.dry_run)
        self._record(report, label, change)

    def _record(self, report: RootReport, label: str, change: FileChange) -> None:
        use_emoji = self._options.use_emoji
        if change.diff:
            info(f"{label} changes:\n{change.diff}", use_emoji=use_emoji)
        else:
            ok(f"{label} has no changes", use_emoji=use_emoji)
        report.changes = [*report.changes, change]


def install(roots: Iterable[Path], options: RunOptions) -> list[RootReport]:
    """Convenience wrapper around :class:`Installer`."""

    return Installer(options).install(roots)


__all__ = ["Installer", "RootReport", "build_generation_config", "install"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run options and per-root generation records."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_MAKEFILE
from .languages import Language
from .severity import DEFAULT_SEVERITY


def default_severities() -> dict[Language, str]:
    """Return ``error`` for every supported language."""

    return {language: DEFAULT_SEVERITY for language in Language}


class RunOptions(BaseModel):
    """Options resolved once at startup and shared by every root."""

    model_config = ConfigDict(frozen=True)

    dry_run: bool = False
    makefile: str = DEFAULT_MAKEFILE
    severities: Mapping[Language, str] = Field(default_factory=default_severities)
    args: str = ""
    use_emoji: bool = True
    verbose: bool = False

    @field_validator("makefile")
    @classmethod
    def _validate_makefile(cls, value: str) -> str:
        if not value or value in {".", ".."} or "/" in value or "\\" in value:
            raise ValueError(f"makefile must be a plain file name, got {value!r}")
        return value

    @field_validator("severities", mode="before")
    @classmethod
    def _fill_severities(cls, value: object) -> dict[Language, str]:
        merged = default_severities()
        if isinstance(value, Mapping):
            for key, level in value.items():
                merged[Language(key)] = str(level)
        return merged

    def severity(self, language: Language) -> str:
        """Return the raw severity string configured for *language*."""

        return self.severities.get(language, DEFAULT_SEVERITY)


class GenerationConfig(BaseModel):
    """Values rendered into the generated build-automation block for one root."""

    model_config = ConfigDict(validate_assignment=True)

    makefile: str
    args: str = ""
    go: str = ""
    dockerfile: str = ""
    shell: str = ""
    yaml: str = ""
    linters: list[Language] = Field(default_factory=list)
    lint_commands: list[str] = Field(default_factory=list)
    fix_commands: list[str] = Field(default_factory=list)

    def set_level(self, language: Language, level: str) -> None:
        """Record the raw severity used for *language*."""

        setattr(self, language.value, level)

    def add_commands(self, language: Language, lint: str | None, fix: str | None) -> None:
        """Append the commands produced for *language* in generation order."""

        if lint is None and fix is None:
            return
        self.linters = [*self.linters, language]
        if lint is not None:
            self.lint_commands = [*self.lint_commands, lint]
        if fix is not None:
            self.fix_commands = [*self.fix_commands, fix]

    def uses(self, language: Language) -> bool:
        """Return ``True`` when *language* contributes generated rules."""

        return language in self.linters


__all__ = ["GenerationConfig", "RunOptions", "default_severities"]

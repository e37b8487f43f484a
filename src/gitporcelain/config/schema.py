"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")


@dataclass
class ParseConfig:
    null_terminated: bool = False  # decode `git status -z` output


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    show_ignored: bool = True


@dataclass
class GitPorcelainConfig:
    version: str = "1.0"
    parse: ParseConfig = field(default_factory=ParseConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

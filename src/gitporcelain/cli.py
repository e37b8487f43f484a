"""gitporcelain CLI — Typer application with parse, status, and init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gitporcelain import __version__
from gitporcelain.config.schema import OUTPUT_FORMATS, GitPorcelainConfig
from gitporcelain.git.models import StatusReport

app = typer.Typer(
    name="gitporcelain",
    help="Decode `git status --porcelain=v2` output into structured data.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitporcelain.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load(
    root: Path,
    config: Optional[str],
    format: Optional[str],
    null_terminated: Optional[bool],
) -> GitPorcelainConfig:
    """Load config and apply CLI overrides, exit 2 on failure."""
    from gitporcelain.config.loader import ConfigError, load_config

    try:
        cfg = load_config(root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if null_terminated is not None:
        cfg.parse.null_terminated = null_terminated
    return cfg


def _emit(report: StatusReport, cfg: GitPorcelainConfig) -> None:
    from gitporcelain.output import json_report, terminal

    if cfg.output.format == "json":
        print(json_report.render(report, include_ignored=cfg.output.show_ignored))
    else:
        terminal.render(
            report,
            show_summary=cfg.output.show_summary,
            show_ignored=cfg.output.show_ignored,
            console=console,
        )


def _report_parse_error(exc: Exception) -> None:
    from gitporcelain.git.status_parser import ParseError

    if isinstance(exc, ParseError):
        where = f" (record {exc.line_no})" if exc.line_no else ""
        console.print(f"[bold red]Parse error{where}:[/bold red] {escape(str(exc))}", highlight=False)
    else:
        console.print(f"[bold red]Read error:[/bold red] {escape(str(exc))}")


# ── parse ─────────────────────────────────────────────────────────────────────


@app.command()
def parse(
    file: str = typer.Argument("-", help="Captured status output (default: stdin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitporcelain.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    null_terminated: Optional[bool] = typer.Option(
        None, "-z/--no-z", help="Input is NUL-terminated (`git status -z`)",
    ),
) -> None:
    """Decode captured `git status --ignored --porcelain=v2` output."""
    from gitporcelain.git.status_parser import StatusParseError, parse_status_stream

    cfg = _load(Path.cwd(), config, format, null_terminated)

    try:
        if file == "-":
            report = parse_status_stream(
                sys.stdin.buffer,
                null_terminated=cfg.parse.null_terminated,
            )
        else:
            try:
                f = open(file, "rb")
            except OSError as exc:
                console.print(f"[bold red]Error:[/bold red] cannot open {escape(file)}: {escape(str(exc))}")
                raise typer.Exit(code=2) from exc
            with f:
                report = parse_status_stream(f, null_terminated=cfg.parse.null_terminated)
    except StatusParseError as exc:
        _report_parse_error(exc)
        raise typer.Exit(code=2) from exc

    _emit(report, cfg)


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitporcelain.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    null_terminated: Optional[bool] = typer.Option(
        None, "-z/--no-z", help="Ask git for NUL-terminated output",
    ),
    fail_on_dirty: bool = typer.Option(False, "--fail-on-dirty", help="Exit 1 if the working tree is not clean"),
) -> None:
    """Run git status in the current repository and decode it."""
    from gitporcelain.git.adapter import GitError, get_status_output
    from gitporcelain.git.status_parser import StatusParseError, parse_status

    repo_root = _resolve_repo_root()
    cfg = _load(repo_root, config, format, null_terminated)

    try:
        output = get_status_output(repo_root, null_terminated=cfg.parse.null_terminated)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    try:
        report = parse_status(output, null_terminated=cfg.parse.null_terminated)
    except StatusParseError as exc:
        _report_parse_error(exc)
        raise typer.Exit(code=2) from exc

    _emit(report, cfg)

    if fail_on_dirty and not report.is_clean:
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitporcelain.toml in the repo root."""
    from gitporcelain.config.defaults import DEFAULT_TOML
    from gitporcelain.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitporcelain {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """gitporcelain — decode `git status --porcelain=v2` output."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

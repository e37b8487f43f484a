"""Rich terminal reporter — one table row per status entry."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitporcelain.git.models import ChangeKind, StatusCode, StatusReport

_CODE_STYLE = {
    StatusCode.MODIFIED: "yellow",
    StatusCode.ADDED: "green",
    StatusCode.DELETED: "red",
    StatusCode.RENAMED: "cyan",
    StatusCode.COPIED: "cyan",
    StatusCode.UNMERGED: "bold red",
    StatusCode.UNTRACKED: "magenta",
    StatusCode.IGNORED: "dim",
}


def _xy(x: StatusCode, y: StatusCode) -> Text:
    text = Text()
    text.append(x.value, style=_CODE_STYLE.get(x, "dim"))
    text.append(y.value, style=_CODE_STYLE.get(y, "dim"))
    return text


def _mode(value: int) -> str:
    return f"{value:06o}"


def render(
    report: StatusReport,
    *,
    show_summary: bool = True,
    show_ignored: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print a StatusReport to the terminal using Rich."""
    console = console or Console(stderr=True)

    if report.is_clean and not (show_ignored and report.ignored):
        console.print()
        console.print("[bold green]✅ Working tree clean.[/bold green]")
        if show_summary:
            _print_summary(console, report)
        return

    console.print()
    table = Table(
        title="Git Status",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Kind", style="bold")
    table.add_column("XY", justify="center")
    table.add_column("Sub", style="dim")
    table.add_column("Mode", style="dim")
    table.add_column("Path", style="magenta")

    for e in report.ordinary:
        table.add_row("changed", _xy(e.x, e.y), e.submodule, _mode(e.mode_worktree), Text(e.path))
    for r in report.renamed_or_copied:
        label = "renamed" if r.kind is ChangeKind.RENAMED else "copied"
        table.add_row(
            f"{label} {r.score}%",
            _xy(r.x, r.y),
            r.submodule,
            _mode(r.mode_worktree),
            Text(f"{r.orig_path} → {r.path}"),
        )
    for u in report.unmerged:
        table.add_row(
            Text("unmerged", style="bold red"),
            _xy(u.x, u.y),
            u.submodule,
            _mode(u.mode_worktree),
            Text(u.path),
        )
    for t in report.untracked:
        table.add_row("untracked", _xy(StatusCode.UNTRACKED, StatusCode.UNTRACKED), "", "", Text(t.path))
    if show_ignored:
        for i in report.ignored:
            table.add_row(
                Text("ignored", style="dim"),
                _xy(StatusCode.IGNORED, StatusCode.IGNORED),
                "",
                "",
                Text(i.path),
            )

    console.print(table)

    if show_summary:
        _print_summary(console, report)


def _print_summary(console: Console, report: StatusReport) -> None:
    console.print()
    console.print(f"[dim]Changed:[/dim]       {len(report.ordinary)}")
    console.print(f"[dim]Renamed/copied:[/dim] {len(report.renamed_or_copied)}")
    console.print(f"[dim]Unmerged:[/dim]      {len(report.unmerged)}")
    console.print(f"[dim]Untracked:[/dim]     {len(report.untracked)}")
    console.print(f"[dim]Ignored:[/dim]       {len(report.ignored)}")

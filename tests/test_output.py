"""Tests for output reporters."""

import json

from rich.console import Console

from gitporcelain.git.status_parser import parse_status
from gitporcelain.output import json_report, terminal


class TestJsonReport:
    def test_valid_json(self, sample_status_mixed):
        report = parse_status(sample_status_mixed)
        data = json.loads(json_report.render(report))
        assert data["version"] == "2"
        assert data["summary"] == {"total": 5, "clean": False, "conflicts": True}

    def test_ordinary_fields(self, sample_status_mixed):
        data = json_report.to_dict(parse_status(sample_status_mixed))
        assert data["ordinary"] == [{
            "x": ".",
            "y": "M",
            "submodule": "N...",
            "mode_head": 33188,
            "mode_index": 33188,
            "mode_worktree": 33188,
            "hash_head": "abc123",
            "hash_index": "def456",
            "path": "file.txt",
        }]

    def test_enums_rendered_as_plain_strings(self, sample_status_mixed):
        data = json_report.to_dict(parse_status(sample_status_mixed))
        rename = data["renamed_or_copied"][0]
        assert rename["kind"] == "R"
        assert type(rename["kind"]) is str
        assert rename["score"] == 100
        assert rename["orig_path"] == "old.txt"

    def test_unmerged_and_single_path_kinds(self, sample_status_mixed):
        data = json_report.to_dict(parse_status(sample_status_mixed))
        assert data["unmerged"][0]["hash_stage3"] == "ccc333"
        assert data["untracked"] == [{"path": "untracked.txt"}]
        assert data["ignored"] == [{"path": "build/"}]

    def test_exclude_ignored(self, sample_status_mixed):
        data = json_report.to_dict(parse_status(sample_status_mixed), include_ignored=False)
        assert data["ignored"] == []
        assert data["summary"]["total"] == 5

    def test_empty_report(self):
        data = json_report.to_dict(parse_status(b""))
        assert data["summary"] == {"total": 0, "clean": True, "conflicts": False}
        assert all(data[k] == [] for k in ("ordinary", "renamed_or_copied", "unmerged", "untracked", "ignored"))


class TestTerminal:
    def _render(self, report, **kwargs) -> str:
        console = Console(record=True, width=200, force_terminal=False)
        terminal.render(report, console=console, **kwargs)
        return console.export_text()

    def test_clean_tree(self):
        out = self._render(parse_status(b""))
        assert "Working tree clean" in out

    def test_table_rows(self, sample_status_mixed):
        out = self._render(parse_status(sample_status_mixed))
        assert "file.txt" in out
        assert "old.txt → new.txt" in out
        assert "renamed 100%" in out
        assert "conflict.txt" in out
        assert "build/" in out
        assert "100644" in out

    def test_hide_ignored(self):
        out = self._render(parse_status(b"! build/\n"), show_ignored=False)
        assert "build/" not in out
        assert "Working tree clean" in out

    def test_markup_in_path_not_interpreted(self):
        out = self._render(parse_status(b"? [bold]weird[/bold].txt\n"))
        assert "[bold]weird[/bold].txt" in out

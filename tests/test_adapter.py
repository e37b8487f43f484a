"""Tests for the git subprocess wrapper."""

from pathlib import Path

import pytest

from gitporcelain.git.adapter import GitError, get_repo_root, get_status_output
from gitporcelain.git.status_parser import parse_status


class TestAdapter:
    def test_repo_root(self, tmp_git_repo: Path):
        sub = tmp_git_repo / "pkg"
        sub.mkdir()
        assert get_repo_root(sub).resolve() == tmp_git_repo.resolve()

    def test_not_a_repo(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
        with pytest.raises(GitError):
            get_repo_root(tmp_path)

    def test_status_output_is_bytes(self, tmp_git_repo: Path):
        (tmp_git_repo / "new.txt").write_text("x\n")
        out = get_status_output(tmp_git_repo)
        assert isinstance(out, bytes)
        assert b"? new.txt\n" in out

    def test_status_output_round_trips_through_decoder(self, tmp_git_repo: Path):
        (tmp_git_repo / "README.md").write_text("changed\n")
        (tmp_git_repo / "with\nnewline.txt").write_text("x\n")
        report = parse_status(
            get_status_output(tmp_git_repo, null_terminated=True),
            null_terminated=True,
        )
        assert report.ordinary[0].path == "README.md"
        assert report.ordinary[0].mode_worktree == 0o100644
        assert [u.path for u in report.untracked] == ["with\nnewline.txt"]

"""Shared test fixtures — sample status outputs, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_status_mixed() -> bytes:
    """Output with branch headers and one record of every kind."""
    return textwrap.dedent("""\
        # branch.oid 1f2e3d4c5b6a79880716253443526170819a2b3c
        # branch.head main
        1 .M N... 100644 100644 100644 abc123 def456 file.txt
        2 R. N... 100644 100644 100644 abc def R100 new.txt\told.txt
        u UU N... 100644 100644 100644 100644 aaa111 bbb222 ccc333 conflict.txt
        ? untracked.txt
        ! build/
    """).encode()


@pytest.fixture
def sample_status_z() -> bytes:
    """The same kind of output as produced by ``git status -z``."""
    return (
        b"# branch.head main\0"
        b"1 A. N... 000000 100644 100644 0000000 e69de29 line\nbreak.txt\0"
        b"2 .C N... 100755 100755 100755 abc abc C075 copy with\ttab.sh\0orig.sh\0"
        b"? new file.txt\0"
    )


@pytest.fixture
def sample_status_submodule() -> bytes:
    return b"1 .M SCMU 160000 160000 160000 abc123 abc123 vendor/lib\n"


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path

"""Git interface layer — adapter, status decoding, models."""

from gitporcelain.git.adapter import GitError, get_repo_root, get_status_output
from gitporcelain.git.models import (
    ChangeKind,
    IgnoredEntry,
    OrdinaryEntry,
    RenamedOrCopiedEntry,
    StatusCode,
    StatusReport,
    UnmergedEntry,
    UntrackedEntry,
)
from gitporcelain.git.status_parser import (
    ParseError,
    ReadError,
    StatusParseError,
    parse_status,
    parse_status_stream,
)

__all__ = [
    "ChangeKind",
    "GitError",
    "IgnoredEntry",
    "OrdinaryEntry",
    "ParseError",
    "ReadError",
    "RenamedOrCopiedEntry",
    "StatusCode",
    "StatusParseError",
    "StatusReport",
    "UnmergedEntry",
    "UntrackedEntry",
    "get_repo_root",
    "get_status_output",
    "parse_status",
    "parse_status_stream",
]

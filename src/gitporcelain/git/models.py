"""Data models for ``git status --porcelain=v2`` records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class StatusCode(str, Enum):
    UNMODIFIED = "."
    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNTRACKED = "?"
    IGNORED = "!"


class ChangeKind(str, Enum):
    RENAMED = "R"
    COPIED = "C"


NOT_A_SUBMODULE = "N..."


class _SubmoduleMixin:
    """Decode the 4-character ``<sub>`` field (``N...`` or ``S<c><m><u>``)."""

    __slots__ = ()
    submodule: str

    @property
    def is_submodule(self) -> bool:
        return self.submodule.startswith("S")

    @property
    def submodule_commit_changed(self) -> bool:
        return self.is_submodule and self.submodule[1:2] == "C"

    @property
    def submodule_modified(self) -> bool:
        return self.is_submodule and self.submodule[2:3] == "M"

    @property
    def submodule_untracked(self) -> bool:
        return self.is_submodule and self.submodule[3:4] == "U"


@dataclass(frozen=True, slots=True)
class OrdinaryEntry(_SubmoduleMixin):
    """A changed tracked file (``1`` record)."""

    x: StatusCode
    y: StatusCode
    submodule: str
    mode_head: int
    mode_index: int
    mode_worktree: int
    hash_head: str
    hash_index: str
    path: str


@dataclass(frozen=True, slots=True)
class RenamedOrCopiedEntry(_SubmoduleMixin):
    """A renamed or copied tracked file (``2`` record)."""

    x: StatusCode
    y: StatusCode
    submodule: str
    mode_head: int
    mode_index: int
    mode_worktree: int
    hash_head: str
    hash_index: str
    kind: ChangeKind
    score: int  # similarity percentage
    path: str
    orig_path: str


@dataclass(frozen=True, slots=True)
class UnmergedEntry(_SubmoduleMixin):
    """A file with merge conflicts (``u`` record)."""

    x: StatusCode
    y: StatusCode
    submodule: str
    mode_stage1: int
    mode_stage2: int
    mode_stage3: int
    mode_worktree: int
    hash_stage1: str
    hash_stage2: str
    hash_stage3: str
    path: str


@dataclass(frozen=True, slots=True)
class UntrackedEntry:
    path: str


@dataclass(frozen=True, slots=True)
class IgnoredEntry:
    path: str


@dataclass(frozen=True)
class StatusReport:
    """Complete decoded status, one tuple per record kind in input order."""

    ordinary: Tuple[OrdinaryEntry, ...] = ()
    renamed_or_copied: Tuple[RenamedOrCopiedEntry, ...] = ()
    unmerged: Tuple[UnmergedEntry, ...] = ()
    untracked: Tuple[UntrackedEntry, ...] = ()
    ignored: Tuple[IgnoredEntry, ...] = ()

    @property
    def total(self) -> int:
        return (
            len(self.ordinary)
            + len(self.renamed_or_copied)
            + len(self.unmerged)
            + len(self.untracked)
            + len(self.ignored)
        )

    @property
    def is_clean(self) -> bool:
        """True when nothing but ignored files was reported."""
        return not (self.ordinary or self.renamed_or_copied or self.unmerged or self.untracked)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.unmerged)

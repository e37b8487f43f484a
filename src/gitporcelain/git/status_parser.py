"""Decoder for ``git status --ignored --porcelain=v2`` output.

Each record is classified by its leading character and matched against a
fixed grammar. The first record that does not match aborts the whole decode
with a ParseError; no partial report is ever returned. Comment (``#``)
records such as branch headers are skipped.

Records are newline-terminated by default. With ``null_terminated=True``
the output of ``-z`` is accepted instead: records end in NUL, paths may hold
newlines, and the original path of a rename or copy is the next record.
"""

from __future__ import annotations

import logging
import re
from typing import BinaryIO, Iterator, List, Optional

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

logger = logging.getLogger(__name__)

# --- Grammar fragments ---

_XY = r"([!.?ACDMRU])([!.?ACDMRU]) "
_SUB = r"(N\.\.\.|S[.C][.M][.U]) "
_OCT = r"([0-7]+) "
_HEX = r"([0-9a-f]+) "

# --- Regex patterns, one per record kind ---

_ORDINARY_RE = re.compile(
    r"1 " + _XY + _SUB + _OCT * 3 + _HEX * 2 + r"(.*)",
    re.DOTALL,
)
_RENAMED_RE = re.compile(
    r"2 " + _XY + _SUB + _OCT * 3 + _HEX * 2 + r"([CR])([0-9]+) (.*?)\t(.*)",
    re.DOTALL,
)
_RENAMED_Z_RE = re.compile(
    r"2 " + _XY + _SUB + _OCT * 3 + _HEX * 2 + r"([CR])([0-9]+) (.*)",
    re.DOTALL,
)
_UNMERGED_RE = re.compile(
    r"u " + _XY + _SUB + _OCT * 4 + _HEX * 3 + r"(.*)",
    re.DOTALL,
)
_UNTRACKED_RE = re.compile(r"\? (.*)", re.DOTALL)
_IGNORED_RE = re.compile(r"! (.*)", re.DOTALL)


class StatusParseError(Exception):
    """Base class for decode failures."""


class ParseError(StatusParseError):
    """Raised when a record does not match its grammar.

    ``line`` holds the offending record verbatim; ``line_no`` is its
    1-based position in the input.
    """

    def __init__(self, line: str, line_no: Optional[int] = None) -> None:
        self.line = line
        self.line_no = line_no
        super().__init__(f"cannot parse {line!r}")


class ReadError(StatusParseError):
    """Raised when the underlying byte source fails while being read."""


def _decode(raw: bytes) -> str:
    """Decode record bytes; undecodable path bytes survive as surrogates."""
    return raw.decode("utf-8", errors="surrogateescape")


def _split_records(output: bytes, null_terminated: bool) -> Iterator[str]:
    """Yield records the way ``git`` terminates them.

    Newline mode drops one ``\\r`` before each ``\\n``. A missing final
    terminator is tolerated; a trailing terminator does not produce an
    empty record.
    """
    if not output:
        return
    sep = b"\0" if null_terminated else b"\n"
    chunks = output.split(sep)
    if chunks[-1] == b"":
        chunks.pop()
    for chunk in chunks:
        if not null_terminated and chunk.endswith(b"\r"):
            chunk = chunk[:-1]
        yield _decode(chunk)


class _Builder:
    """Accumulates records for a single decode pass."""

    def __init__(self) -> None:
        self.ordinary: List[OrdinaryEntry] = []
        self.renamed_or_copied: List[RenamedOrCopiedEntry] = []
        self.unmerged: List[UnmergedEntry] = []
        self.untracked: List[UntrackedEntry] = []
        self.ignored: List[IgnoredEntry] = []

    def build(self) -> StatusReport:
        return StatusReport(
            ordinary=tuple(self.ordinary),
            renamed_or_copied=tuple(self.renamed_or_copied),
            unmerged=tuple(self.unmerged),
            untracked=tuple(self.untracked),
            ignored=tuple(self.ignored),
        )


def _ordinary(m: re.Match[str]) -> OrdinaryEntry:
    return OrdinaryEntry(
        x=StatusCode(m.group(1)),
        y=StatusCode(m.group(2)),
        submodule=m.group(3),
        mode_head=int(m.group(4), 8),
        mode_index=int(m.group(5), 8),
        mode_worktree=int(m.group(6), 8),
        hash_head=m.group(7),
        hash_index=m.group(8),
        path=m.group(9),
    )


def _renamed(m: re.Match[str], path: str, orig_path: str) -> RenamedOrCopiedEntry:
    return RenamedOrCopiedEntry(
        x=StatusCode(m.group(1)),
        y=StatusCode(m.group(2)),
        submodule=m.group(3),
        mode_head=int(m.group(4), 8),
        mode_index=int(m.group(5), 8),
        mode_worktree=int(m.group(6), 8),
        hash_head=m.group(7),
        hash_index=m.group(8),
        kind=ChangeKind(m.group(9)),
        score=int(m.group(10), 10),
        path=path,
        orig_path=orig_path,
    )


def _unmerged(m: re.Match[str]) -> UnmergedEntry:
    return UnmergedEntry(
        x=StatusCode(m.group(1)),
        y=StatusCode(m.group(2)),
        submodule=m.group(3),
        mode_stage1=int(m.group(4), 8),
        mode_stage2=int(m.group(5), 8),
        mode_stage3=int(m.group(6), 8),
        mode_worktree=int(m.group(7), 8),
        hash_stage1=m.group(8),
        hash_stage2=m.group(9),
        hash_stage3=m.group(10),
        path=m.group(11),
    )


def parse_status(output: bytes, *, null_terminated: bool = False) -> StatusReport:
    """Decode the captured stdout of ``git status --ignored --porcelain=v2``.

    Raises ParseError on the first record that does not match its grammar.
    """
    builder = _Builder()
    records = _split_records(output, null_terminated)
    line_no = 0

    for text in records:
        line_no += 1
        lead = text[:1]

        if lead == "#":
            continue

        if lead == "1":
            m = _ORDINARY_RE.fullmatch(text)
            if m is None:
                raise _fail(text, line_no)
            builder.ordinary.append(_ordinary(m))

        elif lead == "2":
            if null_terminated:
                m = _RENAMED_Z_RE.fullmatch(text)
                if m is None:
                    raise _fail(text, line_no)
                # -z emits the original path as its own record
                orig_path = next(records, None)
                if orig_path is None:
                    raise _fail(text, line_no)
                line_no += 1
                builder.renamed_or_copied.append(_renamed(m, m.group(11), orig_path))
            else:
                m = _RENAMED_RE.fullmatch(text)
                if m is None:
                    raise _fail(text, line_no)
                builder.renamed_or_copied.append(_renamed(m, m.group(11), m.group(12)))

        elif lead == "u":
            m = _UNMERGED_RE.fullmatch(text)
            if m is None:
                raise _fail(text, line_no)
            builder.unmerged.append(_unmerged(m))

        elif lead == "?":
            m = _UNTRACKED_RE.fullmatch(text)
            if m is None:
                raise _fail(text, line_no)
            builder.untracked.append(UntrackedEntry(path=m.group(1)))

        elif lead == "!":
            m = _IGNORED_RE.fullmatch(text)
            if m is None:
                raise _fail(text, line_no)
            builder.ignored.append(IgnoredEntry(path=m.group(1)))

        else:
            raise _fail(text, line_no)

    report = builder.build()
    logger.debug("decoded %d status records into %d entries", line_no, report.total)
    return report


def parse_status_stream(stream: BinaryIO, *, null_terminated: bool = False) -> StatusReport:
    """Read *stream* to the end and decode it.

    An OSError raised by the stream is re-raised as ReadError.
    """
    try:
        output = stream.read()
    except OSError as exc:
        raise ReadError(f"failed to read status output: {exc}") from exc
    return parse_status(output, null_terminated=null_terminated)


def _fail(text: str, line_no: int) -> ParseError:
    logger.debug("status record %d does not match porcelain v2 grammar", line_no)
    return ParseError(text, line_no)

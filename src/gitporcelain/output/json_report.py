"""JSON reporter — stable structured form of a StatusReport."""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Dict

from gitporcelain.git.models import StatusReport


def _entry_dict(entry: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in dataclasses.fields(entry):
        value = getattr(entry, f.name)
        out[f.name] = value.value if isinstance(value, Enum) else value
    return out


def to_dict(report: StatusReport, *, include_ignored: bool = True) -> Dict[str, Any]:
    """Convert a StatusReport to a JSON-serialisable dict."""
    ignored = report.ignored if include_ignored else ()
    return {
        "version": "2",
        "ordinary": [_entry_dict(e) for e in report.ordinary],
        "renamed_or_copied": [_entry_dict(e) for e in report.renamed_or_copied],
        "unmerged": [_entry_dict(e) for e in report.unmerged],
        "untracked": [_entry_dict(e) for e in report.untracked],
        "ignored": [_entry_dict(e) for e in ignored],
        "summary": {
            "total": report.total,
            "clean": report.is_clean,
            "conflicts": report.has_conflicts,
        },
    }


def render(report: StatusReport, *, include_ignored: bool = True) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(report, include_ignored=include_ignored), indent=2)

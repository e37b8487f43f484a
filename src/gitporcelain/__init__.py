"""gitporcelain — typed decoding of ``git status --porcelain=v2`` output."""

__version__ = "0.1.0"

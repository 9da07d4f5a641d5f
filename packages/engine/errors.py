"""
Configuration errors raised while building constraints.

These are fatal for a run: they are raised before any word is scanned and
carry a stable `code` so callers (CLI, tests) can tell them apart without
matching on message text. Per-word rejections are never errors.
"""

from __future__ import annotations


class ConstraintError(ValueError):
    """A contradictory or malformed constraint configuration."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message

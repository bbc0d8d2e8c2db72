"""
errors.py

Exception types raised by the engine and the solvers built on it.
Each one subclasses the built-in a caller would already expect.
"""

from __future__ import annotations

from typing import Optional


class WordDecodeError(ValueError):
    """A token is not exactly five lowercase letters a-z."""

    def __init__(self, token: object, line: Optional[int] = None, reason: str = "") -> None:
        self.token = token
        self.line = line
        where = f" (line {line})" if line is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"malformed word {token!r}{where}{detail}")


class SecretIndexError(IndexError):
    """Secret index lies outside the answer-only prefix."""


class SearchDivergenceError(AssertionError):
    """Greedy search failed to converge to the true secret."""


class TrialCancelled(RuntimeError):
    """A trial was cancelled between rounds."""

"""Custom exception hierarchy for sqlstanza.

Statement building and rendering never raise: fragments and arguments are
passed through exactly as supplied.  Errors only surface at configuration
seams, such as asking for a placeholder style nobody registered.

All public errors inherit from SqlStanzaError so callers can catch the base
class for any sqlstanza-specific failure.
"""
from __future__ import annotations


class SqlStanzaError(Exception):
    """Base exception for all sqlstanza errors."""


class CompilationError(SqlStanzaError):
    """Raised when a statement cannot be compiled for the requested target.

    Args:
        message: Human-readable description.
        target: The placeholder target that was requested.
    """

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target

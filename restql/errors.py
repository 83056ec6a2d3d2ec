"""Custom exception hierarchy for restQL.

All public errors inherit from RestQLError so callers can catch the base
class for any restQL-specific failure.
"""
from __future__ import annotations


class RestQLError(Exception):
    """Base exception for all restQL errors."""


class ParseError(RestQLError):
    """Raised when input cannot be parsed as a valid Statement.

    Args:
        message: Human-readable description.
        raw: The raw input that failed to parse.
    """

    def __init__(self, message: str, raw: object | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class ConfigError(RestQLError):
    """Raised when render configuration is invalid.

    Args:
        message: Human-readable description.
        field: The configuration field at fault, if known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CompilationError(RestQLError):
    """Raised when a Statement cannot be compiled to an HTTP request.

    Args:
        message: Human-readable description.
        clause: The part of the statement being compiled when the error
            occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class UnsupportedStatementKindError(CompilationError):
    """Raised when a statement is not a ``select``.

    Upstream parsers only ever hand over select statements, so this is a
    contract violation rather than bad user input.
    """

    def __init__(self, statement_type: str) -> None:
        super().__init__(
            f"Unsupported statement type '{statement_type}'",
            clause="statement",
        )
        self.statement_type = statement_type


class UnrecognizedFilterKindError(CompilationError):
    """Raised when a filter node is neither a column nor a logical filter."""

    def __init__(self, filter_type: str) -> None:
        super().__init__(
            f"Unrecognized filter kind '{filter_type}'",
            clause="filter",
        )
        self.filter_type = filter_type

"""
Error taxonomy for trade-log ingestion.
Row-level problems never escape the normalizer; only SourceError
reaches the caller of the I/O shell.
"""

from __future__ import annotations


class TradeLogError(Exception):
    """Base class for all trade-log errors."""


class ParseError(TradeLogError, ValueError):
    """A non-empty numeric field could not be parsed."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"cannot parse {field}={value!r} as a number")
        self.field = field
        self.value = value


class SourceError(TradeLogError):
    """A trade source could not be enumerated at all."""


__all__ = ["TradeLogError", "ParseError", "SourceError"]

"""Codec error types."""

from __future__ import annotations

from typing import Any


class ParseError(Exception):
    """Raised when JSON text is not well formed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConstructionError(Exception):
    """Raised when decoded values cannot be passed to the target constructor."""

    def __init__(
        self,
        message: str,
        shape: type | None = None,
        arguments: tuple[Any, ...] = (),
        keywords: dict[str, Any] | None = None,
    ):
        self.shape = shape
        self.arguments = arguments
        self.keywords = keywords or {}
        super().__init__(message)


class SerializationError(Exception):
    """Raised when a record has no JSON representation."""

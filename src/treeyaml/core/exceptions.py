from __future__ import annotations

from typing import Optional


class TreeFormatError(ValueError):
    """Base class for errors in tree text."""

    def __init__(self, message: str, lineno: int = 0, line: Optional[str] = None):
        self.message = message
        self.lineno = lineno
        self.line = line
        if lineno:
            message = f"Line {lineno}: {message}"
        if line is not None:
            message = f"{message} -> {line!r}"
        super().__init__(message)


class YamlSyntaxError(TreeFormatError):
    """Raised when a line contains a tab or has no ':' delimiter."""


class YamlIndentationError(TreeFormatError):
    """Raised when a dedent does not return to a currently open level."""

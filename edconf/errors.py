#!/usr/bin/env python3

"""Exceptions raised while resolving EditorConfig properties."""

from typing import List, Optional

__all__ = [
    "EditorConfigError",
    "ParseError",
    "PatternError",
    "VersionError",
]


class EditorConfigError(Exception):
    """Base class for all edconf errors."""


class ParseError(EditorConfigError):
    """One or more lines of a config file could not be parsed.

    Attributes:
        lines: Every malformed line, in file order
        path: The config file the lines came from, if known
    """

    def __init__(self, lines: List[str], path: Optional[str] = None) -> None:
        self.lines: List[str] = list(lines)
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        where = f" in {self.path}" if self.path else ""
        body = "\n".join(self.lines)
        return f"Malformed lines{where}:\n{body}"

    def with_path(self, path: str) -> "ParseError":
        return ParseError(self.lines, path)


class VersionError(EditorConfigError):
    """The caller asked for a newer version than this core implements."""


class PatternError(EditorConfigError, ValueError):
    """A section header could not be compiled into a matcher."""

"""Core exception types shared across layers.

Each error renders a display-ready message through ``str()`` and keeps the
offending path and lookup context as attributes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ContentError(Exception):
    """Base class for failures while resolving on-disk scripture content."""


class ContentRootNotFound(ContentError):
    """Raised when the resolved content root is missing or not a directory."""

    def __init__(self, path: Path | None, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        if reason is not None:
            message = f"Failed to resolve resource directory: {reason}"
        else:
            message = f"Public directory not found at: {path}"
        super().__init__(message)


class FileReadError(ContentError):
    """Raised when a required JSON document cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file '{path}': {reason}")


class ParseError(ContentError):
    """Raised when a JSON document does not deserialize into the expected shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse JSON from '{path}': {reason}")


class BookFileNotFound(ContentError):
    """Raised when no naming convention yields an existing book file."""

    def __init__(self, book_abbr: str, directory: Path, attempted: Sequence[str]) -> None:
        self.book_abbr = book_abbr
        self.directory = directory
        self.attempted = tuple(attempted)
        tried = ", ".join(f"'{name}'" for name in self.attempted)
        super().__init__(f"Book file not found for '{book_abbr}' in {directory} (tried {tried})")


class ChapterNotFound(ContentError):
    """Raised when no chapter in a book file matches the requested number."""

    def __init__(self, chapter_number: int, book_abbr: str) -> None:
        self.chapter_number = chapter_number
        self.book_abbr = book_abbr
        super().__init__(f"Chapter {chapter_number} not found in book file for {book_abbr}")


__all__ = [
    "BookFileNotFound",
    "ChapterNotFound",
    "ContentError",
    "ContentRootNotFound",
    "FileReadError",
    "ParseError",
]

"""Command surface invoked by the presentation layer.

Each command delegates to the registered :class:`ContentResolver` and returns
a :class:`CommandResult`: the requested records on success, or the error's
display message on failure. Content errors never escape a command.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from scripture_reader.core.exceptions import ContentError
from scripture_reader.core.logging import get_logger
from scripture_reader.core.models import BookInfo, LanguageInfo, Verse
from scripture_reader.services import runtime

logger = get_logger(__name__)

T = TypeVar("T")


class CommandResult(BaseModel, Generic[T]):
    """Success-with-data or failure-with-message."""

    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: T) -> "CommandResult[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "CommandResult[T]":
        return cls(ok=False, error=message)


def _failed(command: str, exc: ContentError) -> str:
    logger.warning(
        "command failed",
        extra={"command": command, "error_type": type(exc).__name__, "error": str(exc)},
    )
    return str(exc)


def get_translations_manifest() -> CommandResult[List[LanguageInfo]]:
    """List every language and its translations."""
    try:
        languages = runtime.get_services().content.list_languages()
    except ContentError as exc:
        return CommandResult.failure(_failed("get_translations_manifest", exc))
    return CommandResult.success(languages)


def get_book_manifest(
    language_code: str, translation_folder: str
) -> CommandResult[List[BookInfo]]:
    """List the books of one translation."""
    try:
        books = runtime.get_services().content.list_books(language_code, translation_folder)
    except ContentError as exc:
        return CommandResult.failure(_failed("get_book_manifest", exc))
    return CommandResult.success(books)


def get_chapter_content(
    language_code: str,
    translation_folder: str,
    book_abbr: str,
    chapter_number: int,
) -> CommandResult[List[Verse]]:
    """Return the verses of one chapter."""
    is_int = isinstance(chapter_number, int) and not isinstance(chapter_number, bool)
    if not is_int or chapter_number < 1:
        return CommandResult.failure(
            f"Chapter number must be a positive integer, got {chapter_number!r}"
        )
    try:
        verses = runtime.get_services().content.get_chapter_verses(
            language_code, translation_folder, book_abbr, chapter_number
        )
    except ContentError as exc:
        return CommandResult.failure(_failed("get_chapter_content", exc))
    return CommandResult.success(verses)


__all__ = [
    "CommandResult",
    "get_book_manifest",
    "get_chapter_content",
    "get_translations_manifest",
]

"""Read-only queries over the language → translation → book content tree.

Every call re-resolves the content root and re-reads the files it needs;
nothing is cached between calls.

Layout::

    <root>/translations_manifest.json
    <root>/<language_code>/<translation_folder>/manifest.json
    <root>/<language_code>/<translation_folder>/json/<book_abbr>.json
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from pydantic import TypeAdapter

from scripture_reader.core.exceptions import BookFileNotFound, ChapterNotFound
from scripture_reader.core.logging import get_logger
from scripture_reader.core.models import BookFile, BookInfo, LanguageInfo, Verse
from scripture_reader.services.content_root import ContentRootLocator
from scripture_reader.services.json_loader import read_json_file

logger = get_logger(__name__)

TRANSLATIONS_MANIFEST = "translations_manifest.json"
BOOK_MANIFEST = "manifest.json"
BOOK_DIR = "json"

_LANGUAGES = TypeAdapter(List[LanguageInfo])
_BOOKS = TypeAdapter(List[BookInfo])
_BOOK_FILE = TypeAdapter(BookFile)


def book_file_candidates(book_abbr: str) -> list[str]:
    """Filenames to probe for ``book_abbr``, lowercase convention first."""
    names = [f"{book_abbr.lower()}.json", f"{book_abbr}.json"]
    return list(dict.fromkeys(names))


def find_chapter(book: BookFile, chapter_number: int, book_abbr: str) -> List[Verse]:
    """Return the verses of the first chapter in file order matching ``chapter_number``."""
    for chapter in book.chapters:
        if chapter.matches(chapter_number):
            return list(chapter.verses)
    raise ChapterNotFound(chapter_number, book_abbr)


class ContentResolver:
    """Resolve manifests, book files and chapters beneath a content root."""

    def __init__(self, locator: ContentRootLocator) -> None:
        self._locator = locator

    def content_root(self) -> Path:
        """Return the validated content root."""
        return self._locator.resolve()

    def translation_dir(self, language_code: str, translation_folder: str) -> Path:
        """Return ``<root>/<language_code>/<translation_folder>``."""
        return self.content_root() / language_code / translation_folder

    def list_languages(self) -> List[LanguageInfo]:
        """Return every language in the translations manifest, in file order."""
        manifest_path = self.content_root() / TRANSLATIONS_MANIFEST
        logger.debug("reading translations manifest", extra={"path": str(manifest_path)})
        return read_json_file(manifest_path, _LANGUAGES)

    def list_books(self, language_code: str, translation_folder: str) -> List[BookInfo]:
        """Return the books of one translation, in manifest order."""
        manifest_path = self.translation_dir(language_code, translation_folder) / BOOK_MANIFEST
        logger.debug("reading book manifest", extra={"path": str(manifest_path)})
        return read_json_file(manifest_path, _BOOKS)

    def load_book_file(
        self, language_code: str, translation_folder: str, book_abbr: str
    ) -> Tuple[Path, BookFile]:
        """Locate and parse the backing file for ``book_abbr``.

        Tries ``<abbr lowercased>.json`` and then ``<abbr>.json`` under the
        translation's ``json`` directory. Only existence decides which
        candidate is used; a malformed file surfaces as ``ParseError``.
        """
        book_dir = self.translation_dir(language_code, translation_folder) / BOOK_DIR
        attempted = book_file_candidates(book_abbr)
        for name in attempted:
            path = book_dir / name
            logger.debug("probing book file", extra={"path": str(path)})
            if path.exists():
                book = read_json_file(path, _BOOK_FILE)
                logger.debug("loaded book file", extra={"path": str(path), "book": book.book})
                return path, book
        raise BookFileNotFound(book_abbr, book_dir, attempted)

    def get_chapter_verses(
        self,
        language_code: str,
        translation_folder: str,
        book_abbr: str,
        chapter_number: int,
    ) -> List[Verse]:
        """Return the verses of ``chapter_number`` in the given book."""
        _, book = self.load_book_file(language_code, translation_folder, book_abbr)
        return find_chapter(book, chapter_number, book_abbr)


__all__ = [
    "BOOK_DIR",
    "BOOK_MANIFEST",
    "TRANSLATIONS_MANIFEST",
    "ContentResolver",
    "book_file_candidates",
    "find_chapter",
]

"""Core records deserialized from the on-disk content tree."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

# A chapter's identity is stored as a number in some datasets and as a numeral
# string in others; anything else is kept as ``None`` and never matches.
ChapterId = Union[StrictInt, StrictStr, None]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class TranslationInfo(_Record):
    """A translation listed under a language in the translations manifest."""

    id: str
    name: str
    year: Optional[StrictInt] = Field(default=None, ge=0, le=65535)
    folder: str


class LanguageInfo(_Record):
    """A language entry with its available translations."""

    code: str
    name: str
    translations: List[TranslationInfo]


class BookInfo(_Record):
    """A book entry from a translation's ``manifest.json``.

    ``chapters`` is advisory and is not checked against the book file.
    """

    name: str
    abbr: str
    chapters: StrictInt = Field(ge=0)


class Verse(_Record):
    """A verse label (``"1"`` or a range such as ``"1-2"``) and its text."""

    verse: str
    text: str


class Chapter(_Record):
    """A chapter and its verses in file order."""

    chapter: ChapterId = None
    verses: List[Verse]

    @field_validator("chapter", mode="before")
    @classmethod
    def _tolerate_identity(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return None
        return value

    def matches(self, chapter_number: int) -> bool:
        """True when this chapter's identity equals ``chapter_number``.

        Numeric identities compare as integers, textual identities compare
        against the decimal string of the requested number.
        """
        if isinstance(self.chapter, int):
            return self.chapter == chapter_number
        if isinstance(self.chapter, str):
            return self.chapter == str(chapter_number)
        return False


class BookFile(_Record):
    """The full contents of a single book's JSON file."""

    book: str
    book_amharic: Optional[str] = None
    chapters: List[Chapter]


__all__ = [
    "BookFile",
    "BookInfo",
    "Chapter",
    "ChapterId",
    "LanguageInfo",
    "TranslationInfo",
    "Verse",
]

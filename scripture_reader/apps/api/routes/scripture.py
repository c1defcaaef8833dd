"""Read-only scripture content routes."""

from __future__ import annotations

from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from scripture_reader.apps.api.dependencies import get_content_resolver
from scripture_reader.core.exceptions import (
    BookFileNotFound,
    ChapterNotFound,
    ContentError,
    ContentRootNotFound,
    FileReadError,
    ParseError,
)
from scripture_reader.core.logging import get_logger
from scripture_reader.services import ContentResolver

logger = get_logger(__name__)

router = APIRouter()

ResolverDependency = Annotated[ContentResolver, Depends(get_content_resolver)]

_STATUS_BY_ERROR: dict[type[ContentError], int] = {
    ContentRootNotFound: status.HTTP_500_INTERNAL_SERVER_ERROR,
    FileReadError: status.HTTP_404_NOT_FOUND,
    BookFileNotFound: status.HTTP_404_NOT_FOUND,
    ChapterNotFound: status.HTTP_404_NOT_FOUND,
    ParseError: HTTPStatus.UNPROCESSABLE_ENTITY.value,
}


def _http_error(exc: ContentError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning(
        "content lookup failed",
        extra={"error_type": type(exc).__name__, "error": str(exc), "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def _ok(payload: Any) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(payload))


@router.get("/languages")
def list_languages(resolver: ResolverDependency) -> JSONResponse:
    """Return every language and its translations, in manifest order."""
    try:
        languages = resolver.list_languages()
    except ContentError as exc:
        return _http_error(exc)
    return _ok(languages)


@router.get("/languages/{language_code}/translations/{translation_folder}/books")
def list_books(
    language_code: str,
    translation_folder: str,
    resolver: ResolverDependency,
) -> JSONResponse:
    """Return the books of a translation, in manifest order."""
    try:
        books = resolver.list_books(language_code, translation_folder)
    except ContentError as exc:
        return _http_error(exc)
    return _ok(books)


@router.get(
    "/languages/{language_code}/translations/{translation_folder}"
    "/books/{book_abbr}/chapters/{chapter_number}"
)
def get_chapter(
    language_code: str,
    translation_folder: str,
    book_abbr: str,
    chapter_number: Annotated[int, Path(ge=1)],
    resolver: ResolverDependency,
) -> JSONResponse:
    """Return the verses of one chapter."""
    try:
        verses = resolver.get_chapter_verses(
            language_code, translation_folder, book_abbr, chapter_number
        )
    except ContentError as exc:
        return _http_error(exc)
    return _ok(verses)


__all__ = ["router"]

"""Read a JSON document from disk and validate it into typed records."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from scripture_reader.core.exceptions import FileReadError, ParseError
from scripture_reader.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts) or str(exc)


def read_json_file(path: Path, shape: TypeAdapter[T]) -> T:
    """Return the contents of ``path`` validated against ``shape``.

    Raises ``FileReadError`` when the file cannot be read and ``ParseError``
    when it is not well-formed JSON or does not match ``shape``.
    """
    logger.debug("reading json document", extra={"path": str(path)})
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, str(exc)) from exc
    try:
        return shape.validate_json(contents)
    except ValidationError as exc:
        raise ParseError(path, _describe(exc)) from exc


__all__ = ["read_json_file"]

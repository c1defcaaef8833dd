"""Tests for the scripture content routes."""

from __future__ import annotations

import logging
from http import HTTPStatus
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from scripture_reader.apps.api.app import create_app
from scripture_reader.bootstrap import build_default_service_container
from scripture_reader.core.logging import get_correlation_id
from scripture_reader.services import runtime

# pylint: disable=missing-function-docstring,redefined-outer-name

BOOKS_URL = "/languages/eng/translations/KJV/books"


@pytest.fixture
def client(content_root: Path) -> TestClient:
    app = create_app(build_default_service_container(content_root=content_root))
    yield TestClient(app)
    runtime.clear_services()


def test_list_languages(client: TestClient) -> None:
    resp = client.get("/languages")
    assert resp.status_code == HTTPStatus.OK
    payload = resp.json()
    assert [lang["code"] for lang in payload] == ["eng", "amh"]
    assert payload[0]["translations"][0] == {
        "id": "KJV",
        "name": "King James Version",
        "year": 1611,
        "folder": "KJV",
    }


def test_list_books(client: TestClient, kjv_books) -> None:
    resp = client.get(BOOKS_URL)
    assert resp.status_code == HTTPStatus.OK
    assert resp.json() == kjv_books


def test_translation_folder_with_spaces(client: TestClient, content_root: Path, write_json) -> None:
    write_json(
        content_root / "amh" / "Amharic Bible 1962" / "manifest.json",
        [{"name": "ዘፍጥረት", "abbr": "gen", "chapters": 50}],
    )
    resp = client.get("/languages/amh/translations/Amharic%20Bible%201962/books")
    assert resp.status_code == HTTPStatus.OK
    assert resp.json()[0]["name"] == "ዘፍጥረት"


def test_get_chapter(client: TestClient) -> None:
    resp = client.get(f"{BOOKS_URL}/1Ch/chapters/5")
    assert resp.status_code == HTTPStatus.OK
    assert resp.json() == [{"verse": "1", "text": "Now the sons of Reuben."}]


def test_missing_chapter_is_not_found(client: TestClient) -> None:
    resp = client.get(f"{BOOKS_URL}/Gen/chapters/6")
    assert resp.status_code == HTTPStatus.NOT_FOUND
    assert resp.json() == {"error": "Chapter 6 not found in book file for Gen"}


def test_missing_book_is_not_found(client: TestClient) -> None:
    resp = client.get(f"{BOOKS_URL}/Rev/chapters/1")
    assert resp.status_code == HTTPStatus.NOT_FOUND
    assert "Rev.json" in resp.json()["error"]


def test_malformed_book_is_unprocessable(client: TestClient, content_root: Path) -> None:
    (content_root / "eng" / "KJV" / "json" / "exo.json").write_text("{", encoding="utf-8")
    resp = client.get(f"{BOOKS_URL}/Exo/chapters/1")
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    assert "exo.json" in resp.json()["error"]


def test_chapter_zero_is_rejected(client: TestClient) -> None:
    resp = client.get(f"{BOOKS_URL}/Gen/chapters/0")
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_missing_content_root_is_server_error(tmp_path: Path) -> None:
    app = create_app(build_default_service_container(content_root=tmp_path / "missing"))
    try:
        resp = TestClient(app).get("/languages")
    finally:
        runtime.clear_services()
    assert resp.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert resp.json()["error"].startswith("Public directory not found at:")


def test_correlation_id_is_echoed(client: TestClient) -> None:
    resp = client.get("/languages", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"
    assert resp.headers["X-Correlation-ID"] == "req-123"

    generated = client.get("/alive").headers["X-Request-ID"]
    assert len(generated) == 32


class _CorrelationRecorder(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.seen: list[tuple[str, str | None]] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.seen.append((record.getMessage(), get_correlation_id()))


def test_resolver_logs_carry_request_correlation_id(client: TestClient, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="scripture_reader.services.content")
    recorder = _CorrelationRecorder()
    resolver_logger = logging.getLogger("scripture_reader.services.content")
    resolver_logger.addHandler(recorder)
    try:
        resp = client.get(f"{BOOKS_URL}/Gen/chapters/1", headers={"X-Correlation-ID": "cid-42"})
    finally:
        resolver_logger.removeHandler(recorder)

    assert resp.status_code == HTTPStatus.OK
    messages = {message for message, _ in recorder.seen}
    assert {"probing book file", "loaded book file"} <= messages
    assert {cid for _, cid in recorder.seen} == {"cid-42"}

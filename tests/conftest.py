"""Pytest configuration: import path, environment and content-tree fixtures.

This runs before any tests, so modules can import without local path hacks.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# pylint: disable=wrong-import-position
from scripture_reader.bootstrap import build_default_service_container  # noqa: E402
from scripture_reader.services import ServiceContainer, runtime  # noqa: E402

LANGUAGES = [
    {
        "code": "eng",
        "name": "English",
        "translations": [
            {"id": "KJV", "name": "King James Version", "year": 1611, "folder": "KJV"},
        ],
    },
    {
        "code": "amh",
        "name": "አማርኛ",
        "translations": [
            {"id": "AMH1962", "name": "Amharic Bible 1962", "folder": "Amharic Bible 1962"},
        ],
    },
]

KJV_BOOKS = [
    {"name": "Genesis", "abbr": "Gen", "chapters": 50},
    {"name": "1 Chronicles", "abbr": "1Ch", "chapters": 29},
    {"name": "Exodus", "abbr": "Exo", "chapters": 40},
]

GENESIS = {
    "book": "Genesis",
    "chapters": [
        {
            "chapter": 1,
            "verses": [
                {"verse": "1", "text": "In the beginning God created the heaven and the earth."},
                {"verse": "2", "text": "And the earth was without form, and void."},
            ],
        },
        {
            "chapter": 5,
            "verses": [
                {"verse": "1", "text": "This is the book of the generations of Adam."},
            ],
        },
    ],
}

FIRST_CHRONICLES = {
    "book": "1 Chronicles",
    "book_amharic": "1ኛ ዜና መዋዕል",
    "chapters": [
        {"chapter": "1", "verses": [{"verse": "1-4", "text": "Adam, Sheth, Enosh, Kenan."}]},
        {"chapter": "5", "verses": [{"verse": "1", "text": "Now the sons of Reuben."}]},
    ],
}


def write_json(path: Path, payload: Any) -> Path:
    """Write ``payload`` as UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def language_entries() -> list[dict[str, Any]]:
    """Raw translations manifest written by ``content_root``."""
    return LANGUAGES


@pytest.fixture
def kjv_books() -> list[dict[str, Any]]:
    """Raw KJV book manifest written by ``content_root``."""
    return KJV_BOOKS


@pytest.fixture(name="write_json")
def _write_json_fixture():  # type: ignore[no-untyped-def]
    """Expose ``write_json`` to tests that extend the content tree."""
    return write_json


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """A small content tree with lowercase and exact-case book files."""
    root = tmp_path / "public"
    write_json(root / "translations_manifest.json", LANGUAGES)
    kjv = root / "eng" / "KJV"
    write_json(kjv / "manifest.json", KJV_BOOKS)
    write_json(kjv / "json" / "gen.json", GENESIS)
    write_json(kjv / "json" / "1Ch.json", FIRST_CHRONICLES)
    return root


@pytest.fixture
def services(content_root: Path) -> Iterator[ServiceContainer]:
    """Register a container pinned to ``content_root`` for the command surface."""
    container = build_default_service_container(content_root=content_root)
    runtime.set_services(container)
    yield container
    runtime.clear_services()

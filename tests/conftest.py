"""Shared fixtures for unistyler tests."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

BASELINE = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 .,!?"

BOLD = {"H": "𝐇", "e": "𝐞", "l": "𝐥", "o": "𝐨", " ": " "}
ITALIC = {"H": "𝐻", "e": "𝑒", "l": "𝑙", "o": "𝑜", " ": " "}


def complete_mapping(overrides: dict[str, str] | None = None) -> dict[str, str]:
    """Identity mapping over the baseline set, with optional overrides."""
    mapping = {char: char for char in BASELINE}
    mapping.update(overrides or {})
    return mapping


def make_pack(pack_id: str = "test", **fields: Any) -> dict[str, Any]:
    """Build a valid pack dict; keyword arguments replace top-level fields."""
    pack: dict[str, Any] = {
        "id": pack_id,
        "name": "Test Pack",
        "category": "core",
        "version": "1.0.0",
        "description": "Test pack",
        "price": 0,
        "styles": [
            {"id": "bold", "name": "Bold", "preview": "𝐁𝐨𝐥𝐝", "mapping": complete_mapping(BOLD)},
            {"id": "italic", "name": "Italic", "preview": "𝐼𝑡𝑎𝑙𝑖𝑐", "mapping": complete_mapping(ITALIC)},
        ],
        "decorators": [
            {"id": "stars", "name": "Stars", "pattern": "✨{text}✨"},
            {"id": "hearts", "name": "Hearts", "pattern": "💖{text}💖", "color": "#ff69b4"},
        ],
    }
    pack.update(fields)
    return pack


@pytest.fixture
def valid_pack() -> dict[str, Any]:
    """A valid pack with id 'test'."""
    return make_pack()


@pytest.fixture
def pack_factory():
    """Return make_pack so tests can build variants."""
    return lambda pack_id="test", **fields: copy.deepcopy(make_pack(pack_id, **fields))


@pytest.fixture
def packs_dir(tmp_path: Path) -> Path:
    """Directory holding one valid pack file, test.json."""
    directory = tmp_path / "packs"
    directory.mkdir()
    (directory / "test.json").write_text(
        json.dumps(make_pack(), ensure_ascii=False), encoding="utf-8"
    )
    return directory


@pytest.fixture
def mapping_factory():
    """Return complete_mapping so tests can build baseline-complete mappings."""
    return complete_mapping

from __future__ import annotations

import json
import logging

from lesage_booking.auth.token_store import (
    LEGACY_TOKEN_KEY,
    TOKEN_KEY,
    FileTokenStore,
    MemoryTokenStore,
)


def test_memory_store_roundtrip(caplog) -> None:
    store = MemoryTokenStore()
    assert store.get() is None
    with caplog.at_level(logging.INFO, logger="lesage_booking.auth.token_store"):
        store.set("abc")
        store.remove()
    assert store.get() is None
    assert [r.getMessage() for r in caplog.records] == ["Token saved", "Token removed"]


def test_file_store_persists_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "tokens.json"
    FileTokenStore(path).set("jwt-1")

    assert json.loads(path.read_text()) == {TOKEN_KEY: "jwt-1"}
    assert FileTokenStore(path).get() == "jwt-1"


def test_file_store_missing_or_corrupt_file_reads_empty(tmp_path) -> None:
    assert FileTokenStore(tmp_path / "absent.json").get() is None
    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json")
    assert FileTokenStore(corrupt).get() is None


def test_legacy_key_is_read_and_removed(tmp_path) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({LEGACY_TOKEN_KEY: "legacy", "theme": "dark"}))
    store = FileTokenStore(path)

    assert store.get() == "legacy"
    store.remove()

    assert store.get() is None
    assert json.loads(path.read_text()) == {"theme": "dark"}


def test_primary_key_wins_over_legacy(tmp_path) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({LEGACY_TOKEN_KEY: "legacy", TOKEN_KEY: "current"}))
    assert FileTokenStore(path).get() == "current"

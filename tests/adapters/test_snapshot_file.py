from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003

import pytest

from clanwatch.adapters.snapshot_file import (
    SNAPSHOT_FORMAT_VERSION,
    JsonSnapshotStore,
    decode_snapshot,
)
from clanwatch.domain.errors import PersistenceError


def test_load_missing_file_returns_empty(tmp_path: Path) -> None:
    store = JsonSnapshotStore(tmp_path / "absent.json")

    assert store.load() == {}


def test_save_then_load_uses_versioned_document(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "clan_state.json"
    store = JsonSnapshotStore(path)

    store.save({"#B": frozenset({"#2", "#1"}), "#A": frozenset()})

    document = json.loads(path.read_text(encoding="utf-8"))
    assert document == {
        "version": SNAPSHOT_FORMAT_VERSION,
        "clans": {"#A": [], "#B": ["#1", "#2"]},
    }
    assert store.load() == {"#A": frozenset(), "#B": frozenset({"#1", "#2"})}
    assert [p.name for p in path.parent.iterdir()] == ["clan_state.json"]


def test_save_overwrites_previous_snapshot(tmp_path: Path) -> None:
    store = JsonSnapshotStore(tmp_path / "clan_state.json")
    store.save({"#A": frozenset({"#1"})})

    store.save({"#B": frozenset({"#2"})})

    assert store.load() == {"#B": frozenset({"#2"})}


def test_load_accepts_legacy_flat_mapping(tmp_path: Path) -> None:
    path = tmp_path / "clan_state.json"
    path.write_text(json.dumps({"#AAA": ["#111", "#222"]}), encoding="utf-8")

    assert JsonSnapshotStore(path).load() == {"#AAA": frozenset({"#111", "#222"})}


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"version": 99, "clans": {}}),
        json.dumps({"#AAA": "#111"}),
        json.dumps({"version": 1, "clans": {"#AAA": [1, 2]}}),
    ],
)
def test_load_unreadable_raises_persistence_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "clan_state.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonSnapshotStore(path).load()


def test_load_from_unreachable_path_raises_persistence_error(tmp_path: Path) -> None:
    store = JsonSnapshotStore(tmp_path / ("x" * 300) / "clan_state.json")

    with pytest.raises(PersistenceError):
        store.load()


def test_save_failure_raises_persistence_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = JsonSnapshotStore(blocker / "clan_state.json")

    with pytest.raises(PersistenceError):
        store.save({"#A": frozenset({"#1"})})


def test_decode_snapshot_requires_object() -> None:
    with pytest.raises(ValueError, match="JSON object"):
        decode_snapshot(["#A"])

"""JSON file persistence for the member snapshot."""

from __future__ import annotations

import json
import os
import tempfile
from logging import getLogger
from typing import TYPE_CHECKING, Final

from clanwatch.domain.errors import PersistenceError

if TYPE_CHECKING:
    from pathlib import Path

    from clanwatch.domain.model import Snapshot
    from clanwatch.domain.ports import SnapshotStore

log = getLogger(__name__)

SNAPSHOT_FORMAT_VERSION: Final[int] = 1


def encode_snapshot(snapshot: Snapshot) -> dict[str, object]:
    return {
        "version": SNAPSHOT_FORMAT_VERSION,
        "clans": {clan_tag: sorted(tags) for clan_tag, tags in sorted(snapshot.items())},
    }


def decode_snapshot(payload: object) -> Snapshot:
    """Parse a stored document, accepting the legacy unversioned mapping.

    Raises ``ValueError`` when the document does not describe a snapshot.
    """

    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

    if "version" in payload:
        version = payload["version"]
        if version != SNAPSHOT_FORMAT_VERSION:
            raise ValueError(f"unsupported snapshot version {version!r}")
        clans = payload.get("clans", {})
        if not isinstance(clans, dict):
            raise ValueError("'clans' must be a JSON object")
    else:
        clans = payload

    snapshot: Snapshot = {}
    for clan_tag, tags in clans.items():
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValueError(f"member tags for {clan_tag} must be a list of strings")
        snapshot[str(clan_tag)] = frozenset(tags)
    return snapshot


class JsonSnapshotStore:
    """Stores the whole snapshot in one JSON file, replaced atomically on save."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Snapshot:
        try:
            with self.path.open(encoding="utf-8") as handle:
                payload = json.load(handle)
            snapshot = decode_snapshot(payload)
        except FileNotFoundError:
            log.info("No snapshot at %s, starting fresh", self.path)
            return {}
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read snapshot {self.path}: {exc}") from exc
        log.debug("Loaded snapshot with %s clans from %s", len(snapshot), self.path)
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        document = encode_snapshot(snapshot)
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                json.dump(document, handle, ensure_ascii=False, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write snapshot {self.path}: {exc}") from exc
        log.debug("Saved snapshot with %s clans to %s", len(snapshot), self.path)


if TYPE_CHECKING:
    _store_check: SnapshotStore = JsonSnapshotStore(Path("clan_state.json"))

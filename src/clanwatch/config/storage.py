"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "clanwatch"
DEFAULT_SNAPSHOT_FILENAME: Final[str] = "clan_state.json"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    snapshot_filename: str = DEFAULT_SNAPSHOT_FILENAME
    snapshot_override: Path | None = None

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def snapshot_path(self, *, ensure: bool = True) -> Path:
        if self.snapshot_override is not None:
            return self.snapshot_override.expanduser().resolve()
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.snapshot_filename


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config(*, snapshot_path: Path | None = None) -> StorageConfig:
    env_dir = os.getenv("CLANWATCH_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _default_data_dir()
    if snapshot_path is None:
        env_snapshot = os.getenv("CLANWATCH_SNAPSHOT_PATH")
        snapshot_path = Path(env_snapshot) if env_snapshot else None
    return StorageConfig(data_dir=data_dir, snapshot_override=snapshot_path)

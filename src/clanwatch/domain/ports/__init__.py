"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import ClanSource
from .persistence import SnapshotStore

__all__ = ["ClanSource", "SnapshotStore"]

"""Ports for persisting the member snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clanwatch.domain.model import Snapshot


@runtime_checkable
class SnapshotStore(Protocol):
    """Whole-snapshot load/save contract.

    ``load`` returns an empty mapping when nothing was stored yet and raises
    ``PersistenceError`` when the stored data cannot be read. ``save`` replaces
    the stored snapshot entirely and raises ``PersistenceError`` on failure.
    """

    def load(self) -> Snapshot: ...

    def save(self, snapshot: Snapshot) -> None: ...


__all__ = ["SnapshotStore"]

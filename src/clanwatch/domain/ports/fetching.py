"""Ports for fetching clan data from an external provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clanwatch.domain.model import ClanDetail, ClanSummary, LocationId


@runtime_checkable
class ClanSource(Protocol):
    """Read access to locations, clan listings and clan rosters.

    Every method raises a ``FetchError`` subclass on failure:
    ``ResolutionError`` for lookups, ``ListError`` for listings and
    ``DetailError`` for clan details.
    """

    def resolve_location(self, name: str) -> LocationId: ...

    def list_clans(
        self,
        location_id: LocationId,
        *,
        limit: int,
        min_clan_level: int,
        min_clan_points: int,
    ) -> list[ClanSummary]: ...

    def get_clan_detail(self, tag: str) -> ClanDetail: ...


__all__ = ["ClanSource"]

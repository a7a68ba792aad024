"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from clanwatch.adapters.clash import ClashClient
from clanwatch.adapters.snapshot_file import JsonSnapshotStore
from clanwatch.config import get_clash_config, get_storage_config, get_tracker_settings
from clanwatch.domain.tracking import TrackingResult, track_new_members

if TYPE_CHECKING:
    from pathlib import Path

    from clanwatch.domain.ports import ClanSource, SnapshotStore
    from clanwatch.domain.tracking import TrackerSettings


log = getLogger(__name__)


def track_clans(
    *,
    settings: TrackerSettings | None = None,
    source: ClanSource | None = None,
    store: SnapshotStore | None = None,
    snapshot_path: Path | None = None,
) -> TrackingResult:
    """Run one tracking pass using the configured adapters."""

    effective_settings = settings or get_tracker_settings()
    effective_source = source or ClashClient(config=get_clash_config())
    if store is None:
        storage = get_storage_config(snapshot_path=snapshot_path)
        store = JsonSnapshotStore(storage.snapshot_path(ensure=False))

    thresholds = effective_settings.thresholds
    log.info(
        "Starting clan tracking: locations=%s, min_trophies=%s, min_clan_points=%s, "
        "min_clan_members=%s, min_clan_level=%s, limit=%s",
        ", ".join(effective_settings.locations),
        thresholds.min_trophies,
        thresholds.min_clan_points,
        thresholds.min_clan_members,
        thresholds.min_clan_level,
        thresholds.clan_limit,
    )

    result = track_new_members(source=effective_source, store=store, settings=effective_settings)

    log.info(
        f"Finished clan tracking: clans={result.clans_processed}, "
        f"new_members={result.total_new_members}, failures={len(result.failures)}, "
        f"snapshot_saved={result.snapshot_saved}"
    )
    return result

"""Run one tracking pass over the configured locations.

Each location and each clan is processed into an outcome: either a
``ClanProcessed`` carrying the clan's replacement snapshot entry (and a report
entry when new members turned up) or a ``FailedStep`` describing why that
location or clan was skipped. The aggregator commits processed outcomes into a
working copy of the snapshot as they arrive, so a failure never discards work
already done for other clans. The snapshot is persisted once at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import FetchError, PersistenceError
from .model import NewMember, ReportEntry
from .qualification import Thresholds, select_eligible_clans, select_qualified_members
from .reconciliation import reconcile

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .model import ClanSummary, Snapshot
    from .ports import ClanSource, SnapshotStore

log = getLogger(__name__)

DEFAULT_LOCATIONS: tuple[str, ...] = ("India",)


@dataclass(frozen=True, slots=True)
class TrackerSettings:
    locations: tuple[str, ...] = DEFAULT_LOCATIONS
    thresholds: Thresholds = field(default_factory=Thresholds)


class FailureScope(StrEnum):
    LOCATION = "location"
    CLAN = "clan"


@dataclass(frozen=True, slots=True)
class FailedStep:
    scope: FailureScope
    location: str
    label: str
    reason: str


@dataclass(frozen=True, slots=True)
class ClanProcessed:
    clan_tag: str
    updated_entry: frozenset[str]
    entry: ReportEntry | None = None


type StepOutcome = ClanProcessed | FailedStep


@dataclass(slots=True)
class TrackingResult:
    """Outcome of a tracking run, entries in processing order."""

    entries: list[ReportEntry] = field(default_factory=list)
    failures: list[FailedStep] = field(default_factory=list)
    clans_processed: int = 0
    snapshot_saved: bool = False

    @property
    def total_new_members(self) -> int:
        return sum(len(entry.new_members) for entry in self.entries)


def track_new_members(
    *,
    source: ClanSource,
    store: SnapshotStore,
    settings: TrackerSettings,
) -> TrackingResult:
    """Report members who newly qualify in any tracked clan and persist the snapshot.

    API and storage failures are logged and isolated; this function returns a
    (possibly empty) result instead of raising for them.
    """

    working: Snapshot = dict(_load_snapshot(store))
    result = TrackingResult()

    for location in settings.locations:
        for outcome in _process_location(
            location,
            source=source,
            snapshot=working,
            thresholds=settings.thresholds,
        ):
            if isinstance(outcome, FailedStep):
                result.failures.append(outcome)
                continue
            working[outcome.clan_tag] = outcome.updated_entry
            result.clans_processed += 1
            if outcome.entry is not None:
                result.entries.append(outcome.entry)

    result.snapshot_saved = _save_snapshot(store, working)
    log.info(
        "Found %s new members with %s+ trophies (regular members only)",
        result.total_new_members,
        settings.thresholds.min_trophies,
    )
    return result


def _process_location(
    location: str,
    *,
    source: ClanSource,
    snapshot: Snapshot,
    thresholds: Thresholds,
) -> Iterator[StepOutcome]:
    # Lazy so each clan reconciles against entries committed for earlier clans.
    try:
        location_id = source.resolve_location(location)
        log.info("Using location ID for %s: %s", location, location_id)
        clans = source.list_clans(
            location_id,
            limit=thresholds.clan_limit,
            min_clan_level=thresholds.min_clan_level,
            min_clan_points=thresholds.min_clan_points,
        )
    except FetchError as exc:
        log.warning("Skipping location %s: %s", location, exc)
        yield FailedStep(FailureScope.LOCATION, location, location, str(exc))
        return
    except Exception as exc:  # noqa: BLE001
        log.exception("Unexpected error while listing clans for %s", location)
        yield FailedStep(FailureScope.LOCATION, location, location, repr(exc))
        return

    log.info("Found %s clans in %s", len(clans), location)
    active = select_eligible_clans(clans, thresholds=thresholds)
    log.info(
        "Processing %s active clans (min %s members, %s+ points)",
        len(active),
        thresholds.min_clan_members,
        thresholds.min_clan_points,
    )

    for clan in active:
        yield _process_clan(
            clan,
            location=location,
            source=source,
            snapshot=snapshot,
            thresholds=thresholds,
        )


def _process_clan(
    clan: ClanSummary,
    *,
    location: str,
    source: ClanSource,
    snapshot: Snapshot,
    thresholds: Thresholds,
) -> StepOutcome:
    label = f"{clan.name} ({clan.tag})"
    log.info("Fetching details for %s - %s members", label, clan.member_count)
    try:
        detail = source.get_clan_detail(clan.tag)
        qualified = select_qualified_members(detail.roster, min_trophies=thresholds.min_trophies)
        reconciliation = reconcile(snapshot, detail.tag, qualified)
    except FetchError as exc:
        log.warning("Error processing %s: %s", label, exc)
        return FailedStep(FailureScope.CLAN, location, label, str(exc))
    except Exception as exc:  # noqa: BLE001
        log.exception("Unexpected error processing %s", label)
        return FailedStep(FailureScope.CLAN, location, label, repr(exc))

    entry: ReportEntry | None = None
    if reconciliation.new_members:
        entry = ReportEntry(
            location=location,
            clan_tag=detail.tag,
            clan_name=detail.name,
            level=detail.level,
            points=detail.points,
            new_members=tuple(NewMember.from_member(m) for m in reconciliation.new_members),
        )
    return ClanProcessed(
        clan_tag=detail.tag,
        updated_entry=reconciliation.updated_entry,
        entry=entry,
    )


def _load_snapshot(store: SnapshotStore) -> Snapshot:
    try:
        return store.load()
    except PersistenceError as exc:
        log.warning("Snapshot unreadable, starting from an empty snapshot: %s", exc)
        return {}


def _save_snapshot(store: SnapshotStore, snapshot: Snapshot) -> bool:
    try:
        store.save(snapshot)
    except PersistenceError:
        log.exception("Snapshot save failed; the report is not durably recorded")
        return False
    return True

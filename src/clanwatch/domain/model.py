"""Value types shared by the tracking domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

type LocationId = int
type Snapshot = dict[str, frozenset[str]]

# Clash of Clans' "International" location; listings for it drop the locationId filter.
INTERNATIONAL_LOCATION_ID: Final[LocationId] = 32000006
INTERNATIONAL_SCOPES: Final[frozenset[str]] = frozenset({"international", "global"})


def is_international_scope(name: str) -> bool:
    return name.strip().casefold() in INTERNATIONAL_SCOPES


class ClanRole(StrEnum):
    LEADER = "leader"
    CO_LEADER = "coLeader"
    ADMIN = "admin"
    MEMBER = "member"
    NOT_MEMBER = "notMember"


@dataclass(frozen=True, slots=True)
class Member:
    tag: str
    name: str
    trophies: int
    role: ClanRole | None


@dataclass(frozen=True, slots=True)
class ClanSummary:
    """A clan as returned by the search listing."""

    tag: str
    name: str
    member_count: int
    clan_points: int
    clan_level: int = 0


@dataclass(frozen=True, slots=True)
class ClanDetail:
    """A clan with its full roster."""

    tag: str
    name: str
    level: int
    points: int
    roster: tuple[Member, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class NewMember:
    tag: str
    name: str
    trophies: int

    @classmethod
    def from_member(cls, member: Member) -> NewMember:
        return cls(tag=member.tag, name=member.name, trophies=member.trophies)


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """Newly qualified members found in one clan during a run."""

    location: str
    clan_tag: str
    clan_name: str
    level: int
    points: int
    new_members: tuple[NewMember, ...]

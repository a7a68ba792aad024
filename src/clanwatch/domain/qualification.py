"""Predicates selecting the clans and members that are tracked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .model import ClanRole

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import ClanSummary, Member

DEFAULT_MIN_TROPHIES = 4000
DEFAULT_MIN_CLAN_POINTS = 40000
DEFAULT_MIN_CLAN_MEMBERS = 40
DEFAULT_MIN_CLAN_LEVEL = 10
DEFAULT_CLAN_LIMIT = 50


@dataclass(frozen=True, slots=True)
class Thresholds:
    min_trophies: int = DEFAULT_MIN_TROPHIES
    min_clan_points: int = DEFAULT_MIN_CLAN_POINTS
    min_clan_members: int = DEFAULT_MIN_CLAN_MEMBERS
    min_clan_level: int = DEFAULT_MIN_CLAN_LEVEL
    clan_limit: int = DEFAULT_CLAN_LIMIT


def is_clan_eligible(clan: ClanSummary, min_members: int, min_points: int) -> bool:
    return clan.member_count >= min_members and clan.clan_points >= min_points


def is_member_eligible(member: Member, min_trophies: int) -> bool:
    """Only rank-and-file members count; officers are excluded whatever their trophies."""

    return member.trophies >= min_trophies and member.role is ClanRole.MEMBER


def select_eligible_clans(
    clans: Iterable[ClanSummary],
    *,
    thresholds: Thresholds,
) -> list[ClanSummary]:
    return [
        clan
        for clan in clans
        if is_clan_eligible(clan, thresholds.min_clan_members, thresholds.min_clan_points)
    ]


def select_qualified_members(roster: Iterable[Member], *, min_trophies: int) -> list[Member]:
    return [member for member in roster if is_member_eligible(member, min_trophies)]

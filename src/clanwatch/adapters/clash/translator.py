"""Translate Clash of Clans payloads into domain values."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from clanwatch.domain.model import ClanDetail, ClanRole, ClanSummary, Member

if TYPE_CHECKING:
    from .schema import ClanDetailPayload, ClanSummaryPayload, MemberPayload

log = getLogger(__name__)


def translate_clan_summary(payload: ClanSummaryPayload) -> ClanSummary:
    return ClanSummary(
        tag=payload.tag,
        name=payload.name,
        member_count=payload.members,
        clan_points=payload.clan_points,
        clan_level=payload.clan_level,
    )


def translate_role(raw: str) -> ClanRole | None:
    try:
        return ClanRole(raw)
    except ValueError:
        log.debug("Unknown clan role %r", raw)
        return None


def translate_member(payload: MemberPayload) -> Member:
    return Member(
        tag=payload.tag,
        name=payload.name,
        trophies=payload.trophies,
        role=translate_role(payload.role),
    )


def translate_clan_detail(payload: ClanDetailPayload) -> ClanDetail:
    return ClanDetail(
        tag=payload.tag,
        name=payload.name,
        level=payload.clan_level,
        points=payload.clan_points,
        roster=tuple(translate_member(member) for member in payload.member_list),
    )

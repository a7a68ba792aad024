"""Public interface for the Clash of Clans adapter."""

from __future__ import annotations

from .client import ClashClient, encode_clan_tag, normalize_clan_tag
from .schema import (
    ClanDetailPayload,
    ClanListResponse,
    ClanSummaryPayload,
    LocationListResponse,
    MemberPayload,
)
from .translator import translate_clan_detail, translate_clan_summary, translate_member

__all__ = [
    "ClanDetailPayload",
    "ClanListResponse",
    "ClanSummaryPayload",
    "ClashClient",
    "LocationListResponse",
    "MemberPayload",
    "encode_clan_tag",
    "normalize_clan_tag",
    "translate_clan_detail",
    "translate_clan_summary",
    "translate_member",
]

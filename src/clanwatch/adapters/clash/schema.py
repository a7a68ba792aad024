"""Pydantic models describing the Clash of Clans API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ClashBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LocationPayload(ClashBaseModel):
    id: int
    name: str
    is_country: bool = Field(default=False, alias="isCountry")
    country_code: str | None = Field(default=None, alias="countryCode")


class LocationListResponse(ClashBaseModel):
    items: list[LocationPayload] = Field(default_factory=list)


class ClanSummaryPayload(ClashBaseModel):
    tag: str
    name: str
    clan_level: int = Field(default=0, alias="clanLevel")
    clan_points: int = Field(default=0, alias="clanPoints")
    members: int = 0


class ClanListResponse(ClashBaseModel):
    items: list[ClanSummaryPayload] = Field(default_factory=list)


class MemberPayload(ClashBaseModel):
    tag: str
    name: str
    role: str
    trophies: int
    exp_level: int | None = Field(default=None, alias="expLevel")


class ClanDetailPayload(ClashBaseModel):
    tag: str
    name: str
    clan_level: int = Field(alias="clanLevel")
    clan_points: int = Field(alias="clanPoints")
    members: int = 0
    member_list: list[MemberPayload] = Field(alias="memberList")


class ErrorResponse(ClashBaseModel):
    reason: str | None = None
    message: str | None = None

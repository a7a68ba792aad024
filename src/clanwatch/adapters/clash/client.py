"""HTTP client for the Clash of Clans API."""

from __future__ import annotations

import asyncio
import urllib.parse
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from clanwatch.adapters.http_resilience import ResilientClient
from clanwatch.domain.errors import (
    DetailError,
    FetchError,
    ListError,
    LocationNotFoundError,
    ResolutionError,
)
from clanwatch.domain.model import INTERNATIONAL_LOCATION_ID, is_international_scope

from .schema import ClanDetailPayload, ClanListResponse, ErrorResponse, LocationListResponse
from .translator import translate_clan_detail, translate_clan_summary

if TYPE_CHECKING:
    from collections.abc import Callable

    from clanwatch.config.clash import ClashConfig
    from clanwatch.config.http_resilience import ResilienceConfig
    from clanwatch.domain.model import ClanDetail, ClanSummary, LocationId

log = getLogger(__name__)


def normalize_clan_tag(tag: str) -> str:
    """Upper-case the tag and make sure it starts with ``#``."""

    cleaned = tag.strip().upper()
    return cleaned if cleaned.startswith("#") else f"#{cleaned}"


def encode_clan_tag(tag: str) -> str:
    return urllib.parse.quote(normalize_clan_tag(tag), safe="")


def _error_message(response: httpx.Response) -> str:
    try:
        error = ErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return response.text or response.reason_phrase
    return error.message or error.reason or response.reason_phrase


class ClashClient:
    """Synchronous facade over the Clash of Clans REST endpoints used for tracking."""

    def __init__(
        self,
        *,
        config: ClashConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def resolve_location(self, name: str) -> LocationId:
        if is_international_scope(name):
            return INTERNATIONAL_LOCATION_ID
        return asyncio.run(self._resolve_location_async(name))

    def list_clans(
        self,
        location_id: LocationId,
        *,
        limit: int,
        min_clan_level: int,
        min_clan_points: int,
    ) -> list[ClanSummary]:
        params: dict[str, str | int] = {
            "limit": limit,
            "minClanLevel": min_clan_level,
            "minClanPoints": min_clan_points,
        }
        if location_id != INTERNATIONAL_LOCATION_ID:
            params["locationId"] = location_id
        return asyncio.run(self._list_clans_async(params))

    def get_clan_detail(self, tag: str) -> ClanDetail:
        return asyncio.run(self._get_clan_detail_async(tag))

    async def _resolve_location_async(self, name: str) -> LocationId:
        async with self._client_factory(self._resilience) as client:
            payload = await self._get_json(client, "locations", error_type=ResolutionError)
        try:
            locations = LocationListResponse.model_validate(payload)
        except ValidationError as exc:
            raise ResolutionError(f"Malformed locations payload: {exc}") from exc

        wanted = name.strip().casefold()
        for location in locations.items:
            if location.is_country and location.name.casefold() == wanted:
                return location.id
        raise LocationNotFoundError(f"Country '{name}' not found in locations")

    async def _list_clans_async(self, params: dict[str, str | int]) -> list[ClanSummary]:
        async with self._client_factory(self._resilience) as client:
            payload = await self._get_json(
                client,
                "clans",
                params=httpx.QueryParams(params),
                error_type=ListError,
            )
        try:
            listing = ClanListResponse.model_validate(payload)
        except ValidationError as exc:
            raise ListError(f"Malformed clan listing payload: {exc}") from exc
        return [translate_clan_summary(item) for item in listing.items]

    async def _get_clan_detail_async(self, tag: str) -> ClanDetail:
        path = f"clans/{encode_clan_tag(tag)}"
        async with self._client_factory(self._resilience) as client:
            payload = await self._get_json(client, path, error_type=DetailError)
        try:
            detail = ClanDetailPayload.model_validate(payload)
        except ValidationError as exc:
            raise DetailError(f"Malformed clan payload for {tag}: {exc}") from exc
        return translate_clan_detail(detail)

    async def _get_json(
        self,
        client: ResilientClient,
        path: str,
        *,
        error_type: type[FetchError],
        params: httpx.QueryParams | None = None,
    ) -> object:
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise error_type(f"Request to {path} failed: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            log.debug("Clash API error %s on %s: %s", response.status_code, path, message)
            raise error_type(message, status=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise error_type(
                f"Response from {path} is not valid JSON",
                status=response.status_code,
            ) from exc


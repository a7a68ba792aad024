"""Clash of Clans API configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import env_float, require_env_vars
from .http_resilience import ResilienceConfig, RetryPolicy

CLASH_API_BASE_URL = "https://api.clashofclans.com/v1"
CLASH_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class ClashConfig:
    """Holds Clash of Clans API configuration values."""

    api_key: str
    resilience: ResilienceConfig


def build_clash_resilience(
    api_key: str,
    *,
    base_url: str = CLASH_API_BASE_URL,
    timeout_seconds: float = CLASH_TIMEOUT_SECONDS,
) -> ResilienceConfig:
    return ResilienceConfig(
        base_url=base_url.rstrip("/") + "/",
        timeout_seconds=timeout_seconds,
        retry=RetryPolicy(total=3),
        default_headers={
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        },
    )


def get_clash_config(*, resilience: ResilienceConfig | None = None) -> ClashConfig:
    api_key = require_env_vars(("CLASH_API_KEY",))["CLASH_API_KEY"]
    base_url = os.getenv("CLASH_API_BASE_URL") or CLASH_API_BASE_URL
    timeout = env_float("CLASH_API_TIMEOUT", CLASH_TIMEOUT_SECONDS)
    return ClashConfig(
        api_key=api_key,
        resilience=resilience
        or build_clash_resilience(api_key, base_url=base_url, timeout_seconds=timeout),
    )

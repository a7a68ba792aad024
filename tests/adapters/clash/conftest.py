"""Shared fixtures for Clash of Clans adapter tests."""

from __future__ import annotations

import pytest

from clanwatch.config.clash import ClashConfig, build_clash_resilience


@pytest.fixture
def clash_config() -> ClashConfig:
    return ClashConfig(
        api_key="test-key",
        resilience=build_clash_resilience("test-key", base_url="https://clash.test/v1"),
    )


@pytest.fixture
def clan_detail_payload() -> dict[str, object]:
    return {
        "tag": "#2PP",
        "name": "Alpha",
        "type": "inviteOnly",
        "clanLevel": 15,
        "clanPoints": 52000,
        "members": 3,
        "memberList": [
            {
                "tag": "#111",
                "name": "First",
                "role": "member",
                "expLevel": 200,
                "trophies": 5000,
                "clanRank": 1,
            },
            {"tag": "#999", "name": "Officer", "role": "coLeader", "trophies": 9000},
            {"tag": "#222", "name": "Elder", "role": "admin", "trophies": 4100},
        ],
    }

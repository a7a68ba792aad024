from __future__ import annotations

import pytest

from clanwatch.domain.qualification import Thresholds
from clanwatch.domain.tracking import TrackerSettings

_CONFIG_VARS = (
    "CLASH_API_KEY",
    "CLASH_API_BASE_URL",
    "CLASH_API_TIMEOUT",
    "CLANWATCH_LOCATIONS",
    "CLANWATCH_DATA_DIR",
    "CLANWATCH_SNAPSHOT_PATH",
    "MIN_TROPHIES",
    "MIN_CLAN_POINTS",
    "MIN_CLAN_MEMBERS",
    "MIN_CLAN_LEVEL",
    "CLAN_LIMIT",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def thresholds() -> Thresholds:
    return Thresholds(
        min_trophies=4000,
        min_clan_points=40000,
        min_clan_members=40,
        min_clan_level=10,
        clan_limit=50,
    )


@pytest.fixture
def settings(thresholds: Thresholds) -> TrackerSettings:
    return TrackerSettings(locations=("India",), thresholds=thresholds)

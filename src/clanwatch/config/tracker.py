"""Tracking thresholds and location scopes."""

from __future__ import annotations

from clanwatch.domain.qualification import (
    DEFAULT_CLAN_LIMIT,
    DEFAULT_MIN_CLAN_LEVEL,
    DEFAULT_MIN_CLAN_MEMBERS,
    DEFAULT_MIN_CLAN_POINTS,
    DEFAULT_MIN_TROPHIES,
    Thresholds,
)
from clanwatch.domain.tracking import DEFAULT_LOCATIONS, TrackerSettings

from .env import env_int, env_list
from .errors import ConfigurationError


def get_thresholds() -> Thresholds:
    return Thresholds(
        min_trophies=env_int("MIN_TROPHIES", DEFAULT_MIN_TROPHIES),
        min_clan_points=env_int("MIN_CLAN_POINTS", DEFAULT_MIN_CLAN_POINTS),
        min_clan_members=env_int("MIN_CLAN_MEMBERS", DEFAULT_MIN_CLAN_MEMBERS),
        min_clan_level=env_int("MIN_CLAN_LEVEL", DEFAULT_MIN_CLAN_LEVEL),
        clan_limit=env_int("CLAN_LIMIT", DEFAULT_CLAN_LIMIT, minimum=1),
    )


def get_tracker_settings() -> TrackerSettings:
    locations = env_list("CLANWATCH_LOCATIONS", DEFAULT_LOCATIONS)
    if not locations:
        raise ConfigurationError("CLANWATCH_LOCATIONS must name at least one location")
    return TrackerSettings(locations=locations, thresholds=get_thresholds())

"""Errors raised across the clan tracking boundaries."""

from __future__ import annotations


class ClanWatchError(RuntimeError):
    """Base class for tracking failures."""


class FetchError(ClanWatchError):
    """Raised when a call to the clan source fails.

    ``status`` is the HTTP status code when the API answered, ``None`` for
    transport failures and malformed payloads.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(f"{status} - {message}" if status is not None else message)
        self.status = status
        self.message = message


class ResolutionError(FetchError):
    """Location lookup failed."""


class LocationNotFoundError(ResolutionError):
    """No location matches the configured name."""


class ListError(FetchError):
    """Clan listing failed."""


class DetailError(FetchError):
    """Clan detail fetch failed or returned a malformed payload."""


class PersistenceError(ClanWatchError):
    """Snapshot read or write failed."""

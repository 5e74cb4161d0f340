"""Error taxonomy for live-match rank lookups."""
from __future__ import annotations

from typing import Optional


class LiveRanksError(Exception):
    """Base error for every failure raised by this package."""


class TransportError(LiveRanksError):
    """Raised when the request never produced an HTTP response (timeout, DNS, reset)."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class UpstreamError(LiveRanksError):
    """Raised for a non-2xx response once retries are exhausted."""

    def __init__(self, status: int, message: str = "", *, url: Optional[str] = None) -> None:
        super().__init__(f"HTTP {status}: {message}" if message else f"HTTP {status}")
        self.status = status
        self.message = message
        self.url = url

    @property
    def rate_limited(self) -> bool:
        return self.status == 429


class NotFoundError(LiveRanksError):
    """Raised when the summoner name does not resolve."""

    def __init__(self, summoner_name: str) -> None:
        super().__init__(f"summoner '{summoner_name}' not found")
        self.summoner_name = summoner_name


class NotInGameError(LiveRanksError):
    """Raised when the summoner exists but is not in a live match."""

    def __init__(self, summoner_name: str) -> None:
        super().__init__(f"summoner '{summoner_name}' is not in a live match")
        self.summoner_name = summoner_name


class InternalFailureError(LiveRanksError):
    """Raised when a request aborts for a reason the user cannot act on."""


class RequestTimeoutError(InternalFailureError):
    """Raised when a request exceeds its overall time budget."""

    def __init__(self, budget: float) -> None:
        super().__init__(f"request exceeded its {budget:g}s budget")
        self.budget = budget


class UnknownChampionError(InternalFailureError):
    """Raised when live data names a champion the loaded catalog does not know."""

    def __init__(self, champion_id: str, version: str) -> None:
        super().__init__(
            f"champion {champion_id} missing from catalog version {version}; "
            "static data is out of date"
        )
        self.champion_id = champion_id
        self.version = version


class CatalogUnavailableError(LiveRanksError):
    """Raised when the champion catalog cannot be loaded at startup."""

"""Summoner entity representing a player account."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Summoner:
    """Represents a League of Legends summoner/player."""

    # Identity
    summoner_id: str
    account_id: str
    puuid: str
    summoner_name: str

    # Profile
    summoner_level: int = 0
    profile_icon_id: int = 0
    revision_date: int = 0  # Unix timestamp milliseconds

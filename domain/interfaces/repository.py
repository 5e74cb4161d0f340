"""Gateway interface for the per-player Riot endpoints."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import LiveMatch, RankEntry, Summoner


class ILiveMatchGateway(ABC):
    """The three lookups a live-match rank request needs.

    Every method raises ``UpstreamError`` for a non-2xx response and
    ``TransportError`` when no response was received.
    """

    @abstractmethod
    async def get_summoner_by_name(self, summoner_name: str) -> Summoner:
        """Get summoner by display name."""

    @abstractmethod
    async def get_live_match_by_summoner_id(self, summoner_id: str) -> LiveMatch:
        """Get the game the summoner is currently playing."""

    @abstractmethod
    async def get_rank_entries_by_summoner_id(self, summoner_id: str) -> List[RankEntry]:
        """Get the summoner's league entries; empty when unranked."""

"""Summoner name -> live match."""
from __future__ import annotations

from core.logging.logger import get_logger
from domain.entities import LiveMatch
from domain.errors import NotFoundError, NotInGameError, UpstreamError
from domain.interfaces import ILiveMatchGateway

logger = get_logger(__name__, service="resolver")


class MatchResolver:
    """Two sequential, dependent lookups: the name, then the active game.

    Only upstream status failures are translated; a ``TransportError`` says
    nothing about whether the summoner exists, so it propagates unchanged.
    """

    def __init__(self, gateway: ILiveMatchGateway) -> None:
        self.gateway = gateway

    async def resolve_live_match(self, summoner_name: str) -> LiveMatch:
        try:
            summoner = await self.gateway.get_summoner_by_name(summoner_name)
        except UpstreamError as exc:
            logger.warning(
                lambda: f"summoner lookup failed: {exc}",
                extra={"status": exc.status},
            )
            raise NotFoundError(summoner_name) from exc

        try:
            match = await self.gateway.get_live_match_by_summoner_id(summoner.summoner_id)
        except UpstreamError as exc:
            logger.warning(
                lambda: f"active game lookup failed: {exc}",
                extra={"summoner_id": summoner.summoner_id, "status": exc.status},
            )
            raise NotInGameError(summoner_name) from exc

        logger.info(lambda: f"resolved game {match.game_id} ({match.game_mode}, {len(match)} participants)")
        return match

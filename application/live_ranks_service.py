"""Collaborator-facing entry point."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from application.context import AppContext
from application.use_cases.get_live_match_ranks import GetLiveMatchRanksUseCase
from config import settings
from core.logging.logger import get_logger
from domain.entities import AggregatedResult, Credential
from domain.interfaces import ILiveMatchGateway
from infrastructure.api import HttpTransport, RiotAPIClient
from infrastructure.repositories import LiveMatchRepository
from infrastructure.static_data import load_champion_catalog

logger = get_logger(__name__, service="live-ranks")


class LiveRanksService:
    """``get_live_match_ranks(name)`` bound to one process context."""

    def __init__(self, context: AppContext, gateway: ILiveMatchGateway) -> None:
        self.context = context
        self._use_case = GetLiveMatchRanksUseCase(gateway, context)

    @property
    def catalog(self):
        return self.context.catalog

    async def get_live_match_ranks(self, summoner_name: str) -> AggregatedResult:
        """Raises ``NotFoundError``, ``NotInGameError`` or ``InternalFailureError``."""
        return await self._use_case.execute(summoner_name)


@asynccontextmanager
async def open_live_ranks_service(
    credential: Credential,
    *,
    ddragon_version: Optional[str] = None,
    request_budget: Optional[float] = None,
    http_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[LiveRanksService]:
    """Startup wiring: open the HTTP pool, load the catalog, build the service.

    Raises ``CatalogUnavailableError`` when static data cannot be loaded;
    the process is expected to exit in that case.
    """
    async with HttpTransport(transport=http_transport) as transport:
        catalog = await load_champion_catalog(transport, ddragon_version)
        context = AppContext(
            credential=credential,
            catalog=catalog,
            request_budget=settings.REQUEST_BUDGET if request_budget is None else request_budget,
        )
        gateway = LiveMatchRepository(RiotAPIClient(credential, transport))
        logger.info(lambda: f"service ready for {credential.region.value}")
        yield LiveRanksService(context, gateway)

"""Use case: ranks of everyone in a summoner's live match."""
from __future__ import annotations

import asyncio
import time

from application.context import AppContext
from application.services.match_resolver import MatchResolver
from application.services.rank_aggregator import RankAggregator
from core.logging.context import bind, request_context
from core.logging.logger import get_logger
from domain.entities import AggregatedResult
from domain.errors import (
    InternalFailureError,
    LiveRanksError,
    NotFoundError,
    NotInGameError,
    RequestTimeoutError,
)
from domain.interfaces import ILiveMatchGateway

logger = get_logger(__name__, service="live-ranks")


class GetLiveMatchRanksUseCase:
    """
    Resolve the live match, then aggregate ranks.

    Error contract:
    ─────────────────────────────────────────────────────────────────
    NotFoundError        → the name does not resolve
    NotInGameError       → the summoner is not in a live match
    InternalFailureError → anything else (transport failure while
                           resolving, catalog mismatch, budget expiry)
    Per-participant rank failures are never raised; they show up as
    placeholder rows and in ``AggregatedResult.failures``.
    ─────────────────────────────────────────────────────────────────
    """

    def __init__(self, gateway: ILiveMatchGateway, context: AppContext):
        self.context    = context
        self.resolver   = MatchResolver(gateway)
        self.aggregator = RankAggregator(gateway, context.catalog)

    async def execute(self, summoner_name: str) -> AggregatedResult:
        name = summoner_name.strip()
        if not name:
            raise NotFoundError(summoner_name)

        budget = self.context.request_budget
        started = time.perf_counter()
        with request_context(summoner=name, region=self.context.credential.region.value):
            try:
                result = await asyncio.wait_for(self._run(name), timeout=budget)
            except (NotFoundError, NotInGameError, InternalFailureError):
                raise
            except asyncio.TimeoutError as exc:
                logger.error(lambda: f"request budget of {budget:g}s exhausted")
                raise RequestTimeoutError(budget) from exc
            except LiveRanksError as exc:
                logger.error(lambda: f"request failed: {exc}")
                raise InternalFailureError(str(exc)) from exc

            elapsed_ms = round((time.perf_counter() - started) * 1000.0, 1)
            logger.info(
                lambda: f"live match ranks ready ({len(result)} rows)",
                extra={"elapsed_ms": elapsed_ms},
            )
            return result

    async def _run(self, name: str) -> AggregatedResult:
        match = await self.resolver.resolve_live_match(name)
        bind(game_id=match.game_id)
        return await self.aggregator.aggregate(match)

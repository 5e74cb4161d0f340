"""Concurrent per-participant rank lookup for a live match."""
from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional

from core.logging.logger import get_logger
from domain.entities import (
    AggregatedResult,
    ChampionCatalog,
    LiveMatch,
    Participant,
    PartialAggregationFailure,
    RankEntry,
    SanitizedRank,
)
from domain.entities.sanitized_rank import NOT_AVAILABLE
from domain.enums import QueueType, Team
from domain.errors import TransportError, UpstreamError
from domain.interfaces import ILiveMatchGateway

logger = get_logger(__name__, service="aggregator")


def sanitize(participant: Participant, entries: Iterable[RankEntry], catalog: ChampionCatalog) -> SanitizedRank:
    """Collapse a participant and their league entries into one display row.

    Raises ``UnknownChampionError`` if the champion is missing from the catalog.
    """
    solo = flex = NOT_AVAILABLE
    for entry in entries:
        if entry.queue is QueueType.RANKED_SOLO_5x5:
            solo = entry.rank_text
        elif entry.queue is QueueType.RANKED_FLEX_SR:
            flex = entry.rank_text
    return SanitizedRank(
        summoner_name=participant.summoner_name,
        team=participant.team.label,
        champion_name=catalog.lookup(participant.champion_id),
        solo=solo,
        flex=flex,
    )


def team_order(rows: Iterable[SanitizedRank]) -> List[SanitizedRank]:
    """Stable sort: BLUE rows first, each team keeping its original order."""
    return sorted(rows, key=lambda row: Team[row.team].sort_key)


class RankAggregator:
    """Fans out one rank query per participant and joins on all of them.

    Every task writes only its own pre-allocated slot, so completion order
    never affects the result and no locking is needed.
    """

    def __init__(self, gateway: ILiveMatchGateway, catalog: ChampionCatalog) -> None:
        self.gateway = gateway
        self.catalog = catalog

    async def aggregate(self, match: LiveMatch) -> AggregatedResult:
        participants = match.participants
        slots: List[Optional[SanitizedRank]] = [None] * len(participants)
        failures: List[Optional[PartialAggregationFailure]] = [None] * len(participants)

        tasks = [
            asyncio.create_task(self._fill_slot(i, p, slots, failures), name=f"rank-{i}")
            for i, p in enumerate(participants)
        ]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            # Catalog mismatch or caller cancellation: stop every lookup still in flight.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        recorded = tuple(f for f in failures if f is not None)
        if recorded:
            logger.warning(
                lambda: f"{len(recorded)}/{len(participants)} rank lookups failed",
            )
        else:
            logger.success(lambda: f"ranked {len(participants)} participants")

        rows = [slot for slot in slots if slot is not None]
        return AggregatedResult(entries=tuple(team_order(rows)), failures=recorded, game_id=match.game_id)

    async def _fill_slot(
        self,
        index: int,
        participant: Participant,
        slots: List[Optional[SanitizedRank]],
        failures: List[Optional[PartialAggregationFailure]],
    ) -> None:
        champion_name = self.catalog.lookup(participant.champion_id)
        try:
            entries = await self.gateway.get_rank_entries_by_summoner_id(participant.summoner_id)
        except (UpstreamError, TransportError) as exc:
            logger.error(
                lambda: f"rank lookup failed for {participant.summoner_name}: {exc}",
                extra={"summoner_id": participant.summoner_id, "error": str(exc)},
            )
            slots[index] = SanitizedRank.placeholder(
                participant.summoner_name, participant.team.label, champion_name,
            )
            failures[index] = PartialAggregationFailure(
                index=index,
                summoner_id=participant.summoner_id,
                summoner_name=participant.summoner_name,
                error=str(exc),
            )
            return
        slots[index] = sanitize(participant, entries, self.catalog)

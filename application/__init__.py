"""Application layer - Services, use cases and the service facade."""
from .context import AppContext
from .services import MatchResolver, RankAggregator
from .use_cases import GetLiveMatchRanksUseCase
from .live_ranks_service import LiveRanksService, open_live_ranks_service

__all__ = [
    'AppContext',
    'MatchResolver',
    'RankAggregator',
    'GetLiveMatchRanksUseCase',
    'LiveRanksService',
    'open_live_ranks_service',
]

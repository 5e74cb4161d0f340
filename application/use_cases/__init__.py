"""Application use cases."""
from .get_live_match_ranks import GetLiveMatchRanksUseCase

__all__ = ['GetLiveMatchRanksUseCase']

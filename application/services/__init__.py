"""Application services."""
from .match_resolver import MatchResolver
from .rank_aggregator import RankAggregator, sanitize, team_order

__all__ = [
    'MatchResolver',
    'RankAggregator',
    'sanitize',
    'team_order',
]

"""Domain entities."""
from .credential import Credential
from .summoner import Summoner
from .participant import Participant, Perks
from .live_match import LiveMatch, BannedChampion
from .rank_entry import RankEntry, MiniSeries
from .champion import Champion, ChampionCatalog
from .sanitized_rank import (
    NOT_AVAILABLE,
    SanitizedRank,
    PartialAggregationFailure,
    AggregatedResult,
)

__all__ = [
    'Credential',
    'Summoner',
    'Participant',
    'Perks',
    'LiveMatch',
    'BannedChampion',
    'RankEntry',
    'MiniSeries',
    'Champion',
    'ChampionCatalog',
    'NOT_AVAILABLE',
    'SanitizedRank',
    'PartialAggregationFailure',
    'AggregatedResult',
]

"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import (
    Credential, Summoner, Participant, LiveMatch, RankEntry,
    ChampionCatalog, SanitizedRank, AggregatedResult,
)
from .enums import Region, QueueType, Team
from .interfaces import ILiveMatchGateway

__all__ = [
    # Entities
    'Credential',
    'Summoner',
    'Participant',
    'LiveMatch',
    'RankEntry',
    'ChampionCatalog',
    'SanitizedRank',
    'AggregatedResult',
    # Enums
    'Region',
    'QueueType',
    'Team',
    # Interfaces
    'ILiveMatchGateway',
]

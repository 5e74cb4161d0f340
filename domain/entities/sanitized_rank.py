"""Aggregation output: one display row per participant."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from ..enums import Team

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class SanitizedRank:
    """A participant's team, champion and solo/flex rank, ready for display."""

    summoner_name: str
    team: str
    champion_name: str
    solo: str = NOT_AVAILABLE
    flex: str = NOT_AVAILABLE
    lookup_failed: bool = False

    @classmethod
    def placeholder(cls, summoner_name: str, team: str, champion_name: str) -> 'SanitizedRank':
        """Row for a participant whose rank lookup failed: no rank text at all."""
        return cls(summoner_name, team, champion_name, solo="", flex="", lookup_failed=True)

    def to_dict(self) -> dict:
        return {
            'summoner_name': self.summoner_name,
            'team': self.team,
            'champion': self.champion_name,
            'solo': self.solo,
            'flex': self.flex,
            'lookup_failed': self.lookup_failed,
        }


@dataclass(frozen=True)
class PartialAggregationFailure:
    """Record of a participant whose rank lookup failed. Reported, never raised."""

    index: int
    summoner_id: str
    summoner_name: str
    error: str


@dataclass(frozen=True)
class AggregatedResult:
    """Ordered rows, all BLUE entries before all RED entries."""

    entries: tuple[SanitizedRank, ...]
    failures: tuple[PartialAggregationFailure, ...] = field(default_factory=tuple)
    game_id: int | None = None

    def __iter__(self) -> Iterator[SanitizedRank]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> SanitizedRank:
        return self.entries[index]

    @property
    def complete(self) -> bool:
        return not self.failures

    @property
    def blue(self) -> list[SanitizedRank]:
        return [e for e in self.entries if e.team == Team.BLUE.label]

    @property
    def red(self) -> list[SanitizedRank]:
        return [e for e in self.entries if e.team == Team.RED.label]

    def to_dict(self) -> dict:
        return {
            'game_id': self.game_id,
            'participants': [e.to_dict() for e in self.entries],
            'failures': [
                {'index': f.index, 'summoner_id': f.summoner_id,
                 'summoner_name': f.summoner_name, 'error': f.error}
                for f in self.failures
            ],
        }

"""League entry: a summoner's standing in one ranked queue."""
from dataclasses import dataclass
from typing import Optional

from ..enums import QueueType


@dataclass(frozen=True)
class MiniSeries:
    """Promotion series in progress."""

    target: int
    wins: int
    losses: int
    progress: str


@dataclass(frozen=True)
class RankEntry:
    """One per ranked queue the summoner has played this season."""

    queue_type: str
    tier: str
    division: str
    league_points: int = 0
    wins: int = 0
    losses: int = 0

    # Flags
    veteran: bool = False
    inactive: bool = False
    fresh_blood: bool = False
    hot_streak: bool = False

    mini_series: Optional[MiniSeries] = None

    @property
    def queue(self) -> Optional[QueueType]:
        return QueueType.parse(self.queue_type)

    @property
    def rank_text(self) -> str:
        """Tier and division, e.g. "GOLD IV"."""
        return f"{self.tier} {self.division}"

    @property
    def winrate(self) -> float:
        total = self.wins + self.losses
        if total == 0:
            return 0.0
        return (self.wins / total) * 100

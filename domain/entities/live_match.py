"""Live (spectator) match entity."""
from dataclasses import dataclass, field

from .participant import Participant


@dataclass(frozen=True)
class BannedChampion:
    champion_id: int
    team_id: int
    pick_turn: int


@dataclass(frozen=True)
class LiveMatch:
    """A game in progress. Only exists for the duration of one lookup."""

    game_id: int
    game_mode: str
    game_type: str
    map_id: int
    queue_config_id: int
    platform_id: str

    # Timing
    game_start_time: int  # Unix timestamp milliseconds
    game_length: int      # Seconds

    participants: tuple[Participant, ...] = ()
    banned_champions: tuple[BannedChampion, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.participants)

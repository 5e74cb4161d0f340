"""Participant entity representing a player in a live match."""
from dataclasses import dataclass, field

from ..enums import Team


@dataclass(frozen=True)
class Perks:
    """Rune page selected for the game."""

    perk_ids: tuple[int, ...] = ()
    perk_style: int = 0
    perk_sub_style: int = 0


@dataclass(frozen=True)
class Participant:
    """Represents a player participant in a live match."""

    # Identity
    summoner_id: str
    summoner_name: str

    # Match context
    team_id: int
    champion_id: int

    # Summoner Spells
    spell1_id: int = 0
    spell2_id: int = 0

    profile_icon_id: int = 0
    bot: bool = False
    perks: Perks = field(default_factory=Perks)

    @property
    def team(self) -> Team:
        return Team.from_team_id(self.team_id)

    @property
    def summoner_spells(self) -> tuple[int, int]:
        """Get summoner spell IDs as tuple."""
        return (self.spell1_id, self.spell2_id)

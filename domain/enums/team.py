"""Team side enumeration."""
from enum import Enum


class Team(Enum):
    """Map side. Declaration order is display order: BLUE before RED."""

    BLUE = 100
    RED = 200

    @property
    def label(self) -> str:
        return self.name

    @property
    def sort_key(self) -> int:
        return 0 if self is Team.BLUE else 1

    @classmethod
    def from_team_id(cls, team_id: int) -> 'Team':
        """100 is the blue side; any other id is treated as red."""
        return cls.BLUE if team_id == cls.BLUE.value else cls.RED

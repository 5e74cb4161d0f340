"""Static API credential."""
from dataclasses import dataclass, field

from ..enums import Region


@dataclass(frozen=True, slots=True)
class Credential:
    """Riot API token and the platform it is used against. Fixed for the process lifetime."""

    token: str = field(repr=False)
    region: Region

    @property
    def headers(self) -> dict[str, str]:
        return {"X-Riot-Token": self.token}

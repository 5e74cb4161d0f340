"""Region enumeration for League of Legends servers."""
from enum import Enum


class Region(Enum):
    """League of Legends platform hosts.

    Provides:
    - platform_route: platform host (e.g., euw1)
    - friendly: short human-friendly label for CLI (e.g., eune)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    # Other
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def base_url(self) -> str:
        return f"https://{self.platform_route}.api.riotgames.com"

    @property
    def friendly(self) -> str:
        """Get a human-friendly short label for console output."""
        mapping = {
            "eun1": "eune",
            "euw1": "euw",
            "na1": "na",
            "br1": "br",
            "la1": "lan",
            "la2": "las",
            "jp1": "jp",
            "oc1": "oce",
        }
        if self.value in mapping:
            return mapping[self.value]
        code = self.value
        if code and code[-1].isdigit():
            return code[:-1]
        return code

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Accept the platform id in any case ("EUN1", "eun1") or its friendly label ("eune")."""
        needle = value.strip().lower()
        for region in cls:
            if needle in (region.value, region.friendly):
                return region
        raise ValueError(f"unknown region '{value}'")

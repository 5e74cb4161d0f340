from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

import pytest

from application.context import AppContext
from domain.entities import (
    Champion,
    ChampionCatalog,
    Credential,
    LiveMatch,
    Participant,
    RankEntry,
    Summoner,
)
from domain.enums import Region
from domain.errors import UpstreamError
from domain.interfaces import ILiveMatchGateway

CHAMPIONS = {
    "266": "Aatrox",
    "103": "Ahri",
    "84": "Akali",
    "12": "Alistar",
    "32": "Amumu",
    "34": "Anivia",
    "1": "Annie",
    "22": "Ashe",
    "136": "Aurelion Sol",
    "268": "Azir",
}


def make_catalog() -> ChampionCatalog:
    return ChampionCatalog(
        [Champion(key=k, id=v.replace(" ", ""), name=v) for k, v in CHAMPIONS.items()],
        version="10.7.1",
    )


def make_participants() -> List[Participant]:
    # Interleaved teams so ordering has something to do.
    layout = [
        ("Red One", 200, 266),
        ("Blue One", 100, 103),
        ("Blue Two", 100, 84),
        ("Red Two", 200, 12),
        ("Blue Three", 100, 32),
        ("Red Three", 200, 34),
        ("Blue Four", 100, 1),
        ("Red Four", 200, 22),
        ("Red Five", 200, 136),
        ("Blue Five", 100, 268),
    ]
    return [
        Participant(summoner_id=f"sid-{name.lower().replace(' ', '-')}", summoner_name=name,
                    team_id=team, champion_id=champ)
        for name, team, champ in layout
    ]


def solo(tier: str, division: str) -> RankEntry:
    return RankEntry(queue_type="RANKED_SOLO_5x5", tier=tier, division=division)


def flex(tier: str, division: str) -> RankEntry:
    return RankEntry(queue_type="RANKED_FLEX_SR", tier=tier, division=division)


class FakeGateway(ILiveMatchGateway):
    """In-memory gateway recording every call."""

    def __init__(
        self,
        *,
        summoners: Optional[Dict[str, Summoner]] = None,
        matches: Optional[Dict[str, LiveMatch]] = None,
        ranks: Optional[Dict[str, List[RankEntry]]] = None,
        rank_failures: Optional[Dict[str, Exception]] = None,
        delays: Optional[Dict[str, float]] = None,
    ) -> None:
        self.summoners = summoners or {}
        self.matches = matches or {}
        self.ranks = ranks or {}
        self.rank_failures = rank_failures or {}
        self.delays = delays or {}
        self.calls: List[tuple] = []

    def count(self, method: str) -> int:
        return sum(1 for c in self.calls if c[0] == method)

    async def get_summoner_by_name(self, summoner_name: str) -> Summoner:
        self.calls.append(("summoner", summoner_name))
        if summoner_name not in self.summoners:
            raise UpstreamError(404, "Data not found - summoner not found")
        return self.summoners[summoner_name]

    async def get_live_match_by_summoner_id(self, summoner_id: str) -> LiveMatch:
        self.calls.append(("live_match", summoner_id))
        if summoner_id not in self.matches:
            raise UpstreamError(404, "Data not found")
        return self.matches[summoner_id]

    async def get_rank_entries_by_summoner_id(self, summoner_id: str) -> List[RankEntry]:
        self.calls.append(("ranks", summoner_id))
        delay = self.delays.get(summoner_id)
        if delay:
            await asyncio.sleep(delay)
        if summoner_id in self.rank_failures:
            raise self.rank_failures[summoner_id]
        return list(self.ranks.get(summoner_id, []))


@pytest.fixture
def catalog() -> ChampionCatalog:
    return make_catalog()


@pytest.fixture
def credential() -> Credential:
    return Credential(token="RGAPI-test-token", region=Region.EUN1)


@pytest.fixture
def participants() -> List[Participant]:
    return make_participants()


@pytest.fixture
def live_match(participants) -> LiveMatch:
    return LiveMatch(
        game_id=4242,
        game_mode="CLASSIC",
        game_type="MATCHED_GAME",
        map_id=11,
        queue_config_id=420,
        platform_id="EUN1",
        game_start_time=1_586_000_000_000,
        game_length=300,
        participants=tuple(participants),
    )


@pytest.fixture
def faker() -> Summoner:
    return Summoner(summoner_id="sid-faker", account_id="acc-faker", puuid="puuid-faker",
                    summoner_name="Faker", summoner_level=500)


@pytest.fixture
def gateway(faker, live_match) -> FakeGateway:
    ranks = {
        "sid-blue-one": [solo("GOLD", "IV"), flex("SILVER", "I")],
        "sid-blue-two": [flex("PLATINUM", "II")],
        "sid-red-one": [solo("DIAMOND", "III")],
        "sid-red-two": [],
    }
    return FakeGateway(
        summoners={"Faker": faker},
        matches={faker.summoner_id: live_match},
        ranks=ranks,
    )


@pytest.fixture
def app_context(credential, catalog) -> AppContext:
    return AppContext(credential=credential, catalog=catalog, request_budget=5.0)

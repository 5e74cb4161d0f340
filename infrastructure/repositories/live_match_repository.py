"""Live-match repository implementation."""
from typing import Any, Dict, List, Optional

from domain.entities import (
    BannedChampion, LiveMatch, MiniSeries, Participant, Perks, RankEntry, Summoner,
)
from domain.errors import UpstreamError
from domain.interfaces import ILiveMatchGateway
from infrastructure.api import RiotAPIClient


class LiveMatchRepository(ILiveMatchGateway):
    """Gateway over the Riot API that returns domain entities."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize live-match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_summoner_by_name(self, summoner_name: str) -> Summoner:
        data = await self.api_client.get_summoner_by_name(summoner_name)
        return self._parse(self._parse_summoner, data, "summoner")

    async def get_live_match_by_summoner_id(self, summoner_id: str) -> LiveMatch:
        data = await self.api_client.get_active_game_by_summoner(summoner_id)
        return self._parse(self._parse_live_match, data, "active game")

    async def get_rank_entries_by_summoner_id(self, summoner_id: str) -> List[RankEntry]:
        """
        Get summoner ranked entries.

        Args:
            summoner_id: Summoner ID (encrypted)

        Returns:
            One RankEntry per ranked queue; empty when unranked
        """
        entries = await self.api_client.get_league_entries_by_summoner(summoner_id)
        return [self._parse(self._parse_rank_entry, e, "league entry") for e in entries]

    @staticmethod
    def _parse(parser, data: Any, what: str):
        # A 200 with an unexpected shape is an upstream fault, not a crash.
        try:
            return parser(data)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise UpstreamError(200, f"malformed {what} payload: {exc!r}") from exc

    @staticmethod
    def _parse_summoner(data: Dict[str, Any]) -> Summoner:
        return Summoner(
            summoner_id=data['id'],
            account_id=data.get('accountId', ''),
            puuid=data.get('puuid', ''),
            summoner_name=data.get('name', ''),
            summoner_level=int(data.get('summonerLevel', 0)),
            profile_icon_id=int(data.get('profileIconId', 0)),
            revision_date=int(data.get('revisionDate', 0)),
        )

    @staticmethod
    def _parse_participant(data: Dict[str, Any]) -> Participant:
        perks = data.get('perks') or {}
        return Participant(
            summoner_id=data.get('summonerId', ''),
            summoner_name=data.get('summonerName', ''),
            team_id=int(data['teamId']),
            champion_id=int(data['championId']),
            spell1_id=int(data.get('spell1Id', 0)),
            spell2_id=int(data.get('spell2Id', 0)),
            profile_icon_id=int(data.get('profileIconId', 0)),
            bot=bool(data.get('bot', False)),
            perks=Perks(
                perk_ids=tuple(perks.get('perkIds', ())),
                perk_style=int(perks.get('perkStyle', 0)),
                perk_sub_style=int(perks.get('perkSubStyle', 0)),
            ),
        )

    @classmethod
    def _parse_live_match(cls, data: Dict[str, Any]) -> LiveMatch:
        return LiveMatch(
            game_id=int(data['gameId']),
            game_mode=data.get('gameMode', ''),
            game_type=data.get('gameType', ''),
            map_id=int(data.get('mapId', 0)),
            queue_config_id=int(data.get('gameQueueConfigId', 0)),
            platform_id=data.get('platformId', ''),
            game_start_time=int(data.get('gameStartTime', 0)),
            game_length=int(data.get('gameLength', 0)),
            participants=tuple(cls._parse_participant(p) for p in data.get('participants', [])),
            banned_champions=tuple(
                BannedChampion(
                    champion_id=int(b.get('championId', -1)),
                    team_id=int(b.get('teamId', 0)),
                    pick_turn=int(b.get('pickTurn', 0)),
                )
                for b in data.get('bannedChampions', [])
            ),
        )

    @staticmethod
    def _parse_rank_entry(data: Dict[str, Any]) -> RankEntry:
        series: Optional[MiniSeries] = None
        raw_series = data.get('miniSeries')
        if raw_series:
            series = MiniSeries(
                target=int(raw_series.get('target', 0)),
                wins=int(raw_series.get('wins', 0)),
                losses=int(raw_series.get('losses', 0)),
                progress=raw_series.get('progress', ''),
            )
        return RankEntry(
            queue_type=data['queueType'],
            tier=data.get('tier', ''),
            division=data.get('rank', ''),
            league_points=int(data.get('leaguePoints', 0)),
            wins=int(data.get('wins', 0)),
            losses=int(data.get('losses', 0)),
            veteran=bool(data.get('veteran', False)),
            inactive=bool(data.get('inactive', False)),
            fresh_blood=bool(data.get('freshBlood', False)),
            hot_streak=bool(data.get('hotStreak', False)),
            mini_series=series,
        )

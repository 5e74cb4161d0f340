"""Riot Games API client."""
from typing import Any, Dict, List
from urllib.parse import quote

from core.logging.logger import get_logger
from domain.entities import Credential
from domain.errors import UpstreamError
from .transport import HttpTransport

logger = get_logger(__name__, service="riot-api")


class RiotAPIClient:
    """Thin async wrapper over the platform endpoints used by live-match lookups.

    Returns decoded JSON; mapping into entities happens in the repository.
    Errors from the transport (``UpstreamError``, ``TransportError``) propagate.
    """

    def __init__(self, credential: Credential, transport: HttpTransport):
        self.credential = credential
        self.transport  = transport

    def _url(self, path: str, segment: str) -> str:
        return f"{self.credential.region.base_url}/lol/{path}/{quote(segment, safe='')}"

    async def _get(self, url: str) -> Any:
        response = await self.transport.call("GET", url, headers=self.credential.headers)
        logger.trace(lambda: f"GET {url} -> {response.status}")
        return response.body

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_name(self, name: str) -> Dict[str, Any]:
        return await self._get(self._url("summoner/v4/summoners/by-name", name))

    # ── Spectator API ──────────────────────────────────────────────────

    async def get_active_game_by_summoner(self, summoner_id: str) -> Dict[str, Any]:
        return await self._get(self._url("spectator/v4/active-games/by-summoner", summoner_id))

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_summoner(self, summoner_id: str) -> List[Dict[str, Any]]:
        url = self._url("league/v4/entries/by-summoner", summoner_id)
        result = await self._get(url)
        if not isinstance(result, list):
            raise UpstreamError(200, "malformed league entries payload: expected a list", url=url)
        return result

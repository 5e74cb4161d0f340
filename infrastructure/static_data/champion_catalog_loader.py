"""Load the champion catalog from Data Dragon."""
from typing import Any, Dict, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import Champion, ChampionCatalog
from domain.errors import CatalogUnavailableError, LiveRanksError
from infrastructure.api.transport import HttpTransport

logger = get_logger(__name__, service="static-data")


def parse_champion_catalog(document: Dict[str, Any], *, version: Optional[str] = None) -> ChampionCatalog:
    """Build a catalog from a ``champion.json`` document.

    ``data`` is keyed by internal name; each value carries the numeric
    ``key`` that live-match data refers to.
    """
    if not isinstance(document, dict) or not isinstance(document.get("data"), dict):
        raise CatalogUnavailableError("champion document has no 'data' object")
    try:
        champions = [
            Champion(
                key=str(entry["key"]),
                id=entry.get("id", name),
                name=entry["name"],
                title=entry.get("title", ""),
            )
            for name, entry in document["data"].items()
        ]
    except (KeyError, TypeError) as exc:
        raise CatalogUnavailableError(f"malformed champion entry: {exc}") from exc
    return ChampionCatalog(champions, version=version or document.get("version", "unknown"))


async def load_champion_catalog(transport: HttpTransport, version: Optional[str] = None) -> ChampionCatalog:
    """Fetch and parse the catalog for ``version`` (defaults to ``settings.DDRAGON_VERSION``).

    Raises:
        CatalogUnavailableError: the document could not be fetched or parsed.
    """
    version = version or settings.DDRAGON_VERSION
    url = settings.champion_catalog_url(version)
    try:
        response = await transport.call("GET", url)
    except LiveRanksError as exc:
        logger.error(lambda: f"champion catalog unavailable: {exc}", extra={"url": url})
        raise CatalogUnavailableError(f"cannot load champion catalog {version}: {exc}") from exc

    catalog = parse_champion_catalog(response.body, version=version)
    logger.info(lambda: f"loaded {len(catalog)} champions (data version {version})")
    return catalog

"""Champion reference data (Data Dragon ``champion.json``)."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from ..errors import UnknownChampionError


@dataclass(frozen=True)
class Champion:
    key: str   # numeric id as a string, e.g. "266"
    id: str    # internal name, e.g. "Aatrox"
    name: str  # display name, e.g. "Aatrox"
    title: str = ""


class ChampionCatalog:
    """Read-only champion lookup keyed by the numeric champion id.

    Built once at startup and never mutated afterwards, so concurrent
    lookups need no locking.
    """

    def __init__(self, champions: Iterable[Champion], *, version: str) -> None:
        self._by_key: Mapping[str, Champion] = MappingProxyType({c.key: c for c in champions})
        self.version = version

    def lookup(self, champion_id: int | str) -> str:
        """Return the display name for ``champion_id``.

        Raises:
            UnknownChampionError: the id is not in this data version.
        """
        return self.get(champion_id).name

    def get(self, champion_id: int | str) -> Champion:
        key = str(champion_id)
        try:
            return self._by_key[key]
        except KeyError:
            raise UnknownChampionError(key, self.version) from None

    def __contains__(self, champion_id: object) -> bool:
        return str(champion_id) in self._by_key

    def __len__(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return f"ChampionCatalog(version={self.version!r}, champions={len(self)})"

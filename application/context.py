"""Immutable per-process context handed to every request."""
from dataclasses import dataclass
from typing import Optional

from domain.entities import ChampionCatalog, Credential


@dataclass(frozen=True, slots=True)
class AppContext:
    """Everything a lookup needs that is fixed at startup."""

    credential: Credential
    catalog: ChampionCatalog
    request_budget: Optional[float] = None  # seconds; None disables the deadline

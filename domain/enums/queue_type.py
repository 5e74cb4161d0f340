"""Ranked queue types reported by the league endpoints."""
from enum import Enum
from typing import Optional


class QueueType(Enum):
    """Queue names as returned in a league entry's ``queueType`` field."""

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"  # Solo/Duo Queue
    RANKED_FLEX_SR = "RANKED_FLEX_SR"    # Flex 5v5 Queue

    @classmethod
    def parse(cls, value: str) -> Optional['QueueType']:
        """Return the matching queue, or None for queues we do not report (TFT, etc.)."""
        try:
            return cls(value)
        except ValueError:
            return None

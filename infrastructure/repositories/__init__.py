"""Repository implementations."""
from .live_match_repository import LiveMatchRepository

__all__ = ['LiveMatchRepository']

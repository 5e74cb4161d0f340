"""Infrastructure layer - HTTP transport, API client, repositories, static data."""
from .api import RiotAPIClient, HttpTransport, RetryPolicy
from .repositories import LiveMatchRepository
from .static_data import load_champion_catalog

__all__ = [
    'RiotAPIClient',
    'HttpTransport',
    'RetryPolicy',
    'LiveMatchRepository',
    'load_champion_catalog',
]

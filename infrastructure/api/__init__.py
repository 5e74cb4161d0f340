"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .retry_policy import RetryPolicy, RetryBudget
from .transport import HttpTransport, TransportResponse

__all__ = [
    'RiotAPIClient',
    'RetryPolicy',
    'RetryBudget',
    'HttpTransport',
    'TransportResponse',
]

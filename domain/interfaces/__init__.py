"""Domain interfaces."""
from .repository import ILiveMatchGateway

__all__ = ['ILiveMatchGateway']

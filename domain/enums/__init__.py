"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType
from .team import Team

__all__ = [
    'Region',
    'QueueType',
    'Team',
]

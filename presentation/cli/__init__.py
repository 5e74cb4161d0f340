"""Presentation CLI exports."""
from .live_match_command import LiveMatchCommand, build_parser

__all__ = [
    "LiveMatchCommand",
    "build_parser",
]

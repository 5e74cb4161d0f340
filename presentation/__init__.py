"""Presentation layer - console front end and result formatting."""
from .cli import LiveMatchCommand
from .formatters import render_json, render_table

__all__ = [
    'LiveMatchCommand',
    'render_json',
    'render_table',
]

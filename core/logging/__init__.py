"""Structured logging: bootstrap, per-request context, formatters."""
from .config import bootstrap_logging, shutdown_logging
from .context import get_context, request_context
from .logger import LogLevel, StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "get_context",
    "request_context",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]

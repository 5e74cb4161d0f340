from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import ContextFilter
from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "lolranks",
    level: str | int | None = None,
    console: bool | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "lolranks.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger once per process.

    Console output goes to stderr so that stdout stays clean for the
    rendered table or JSON. The file handler writes JSON lines through a
    queue so that logging never blocks the event loop on disk I/O.
    """
    global _listener
    shutdown_logging()
    skipped: str | None = None
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        handler = logging.StreamHandler(sys.stderr)
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler.setLevel(to_level(console_level) if console_level else lvl)
        handler.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
        root.addHandler(handler)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            skipped = f"log directory {log_dir} unavailable ({exc}); file logging disabled"
            log_dir = None
    if log_dir:
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(ContextFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
    logging.getLogger(service).debug("logging configured")
    if skipped:
        logging.getLogger(service).warning(skipped)


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None

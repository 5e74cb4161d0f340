from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Keys a caller may attach through ``extra=`` that belong in the output.
_EXTRA_KEYS = ("summoner_id", "status", "attempt", "policy", "url", "error", "elapsed_ms")


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    ctx = getattr(record, "context", None)
    return ctx if isinstance(ctx, dict) else get_context()


def _record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }
    for key in _EXTRA_KEYS:
        value = getattr(record, key, None)
        if value is not None:
            fields[key] = value
    return fields


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        try:
            fields = _record_fields(record)
            parts = [
                fields["timestamp"],
                fields["level"],
                fields["service"] or "-",
                f"{record.module}:{fields['function']}:{fields['line_number']}",
                record.getMessage(),
            ]
            extras = {k: fields[k] for k in _EXTRA_KEYS if k in fields}
            if extras:
                parts.append(" ".join(f"{k}={v}" for k, v in extras.items()))
            ctx = _record_context(record)
            if ctx:
                parts.append(" ".join(f"{k}={v}" for k, v in ctx.items()))
            if record.exc_info:
                parts.append(self.formatException(record.exc_info))
            line = " | ".join(parts)
            if not self.color:
                return line
            return f"{_LEVEL_COLORS.get(record.levelname, '')}{line}{_RESET}"
        except Exception:
            return record.getMessage()


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            payload: Dict[str, Any] = _record_fields(record)
            payload["message"] = record.getMessage()
            ctx = _record_context(record)
            if ctx:
                payload["context"] = ctx
            if record.exc_info:
                payload["exception"] = self.formatException(record.exc_info)
            return json.dumps(payload, default=str, separators=(",", ":"))
        except Exception:
            return json.dumps({"message": "log format error"}, separators=(",", ":"))

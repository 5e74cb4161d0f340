from __future__ import annotations

import contextvars
import logging
from typing import Any, Dict

# asyncio tasks copy the current context when they are created, so values
# bound before the rank fan-out are visible in every participant task.
_request: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("request_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_request.get())


def bind(**values: Any) -> None:
    current = dict(_request.get())
    current.update({k: v for k, v in values.items() if v is not None})
    _request.set(current)


class ContextFilter(logging.Filter):
    """Copy the request context onto the record at emit time.

    Records handed to a QueueListener are formatted on another thread,
    where this task's context is not visible.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context()
        return True


class request_context(object):
    """Scope log fields (summoner, game_id, ...) to one request."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_request.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _request.set(current)
        return current

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _request.reset(self._token)
            self._token = None
        return False

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Callable, Optional, Protocol


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def register_levels() -> None:
    if logging.getLevelName(LogLevel.TRACE) == "Level 5":
        logging.addLevelName(LogLevel.TRACE, "TRACE")
    if logging.getLevelName(LogLevel.SUCCESS) == "Level 25":
        logging.addLevelName(LogLevel.SUCCESS, "SUCCESS")


def to_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    return logging.INFO


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


Message = SupportsStr | Callable[[], SupportsStr]


class StructuredLogger:
    """Thin wrapper over ``logging.Logger`` with lazy messages and a service tag."""

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        self._logger = logger
        self._service = service

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: Message, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        try:
            message = msg() if callable(msg) else msg
        except Exception:
            message = "<lazy message failed>"
        extra = dict(kwargs.pop("extra", None) or {})
        if self._service and "service" not in extra:
            extra["service"] = self._service
        self._logger.log(level, str(message), *args, extra=extra, **kwargs)

    def trace(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.TRACE), msg, *args, **kwargs)

    def debug(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def success(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.SUCCESS), msg, *args, **kwargs)

    def warning(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    register_levels()
    return StructuredLogger(logging.getLogger(name), service=service)

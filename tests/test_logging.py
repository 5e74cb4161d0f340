from __future__ import annotations

import asyncio
import json
import logging
from logging.handlers import QueueHandler

from core.logging import bootstrap_logging, get_context, get_logger, request_context, shutdown_logging
from core.logging.formatter import ConsoleFormatter


def test_request_context_is_scoped():
    assert get_context() == {}
    with request_context(summoner="Faker", game_id=None):
        assert get_context() == {"summoner": "Faker"}
        with request_context(game_id=42):
            assert get_context() == {"summoner": "Faker", "game_id": 42}
        assert get_context() == {"summoner": "Faker"}
    assert get_context() == {}


async def test_context_reaches_child_tasks():
    async def child():
        return get_context()

    with request_context(summoner="Faker"):
        seen = await asyncio.gather(*(asyncio.create_task(child()) for _ in range(3)))
    assert seen == [{"summoner": "Faker"}] * 3


def test_json_log_file_carries_context_and_extras(tmp_path):
    bootstrap_logging(service="test", level="DEBUG", console=False, log_dir=tmp_path, log_file_name="t.jsonl")
    try:
        log = get_logger("tests.logging", service="aggregator")
        with request_context(summoner="Faker"):
            log.warning("rank lookup failed", extra={"summoner_id": "sid-1", "status": 503})
        log.success(lambda: "lazy message")
    finally:
        shutdown_logging()
        logging.getLogger().handlers.clear()

    records = [json.loads(line) for line in (tmp_path / "t.jsonl").read_text().splitlines()]
    failed = next(r for r in records if r["message"] == "rank lookup failed")
    assert failed["level"] == "WARNING"
    assert failed["service"] == "aggregator"
    assert failed["context"] == {"summoner": "Faker"}
    assert (failed["summoner_id"], failed["status"]) == ("sid-1", 503)
    assert any(r["message"] == "lazy message" and r["level"] == "SUCCESS" for r in records)


def test_console_formatter_without_color():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    record.status = 429
    line = ConsoleFormatter(color=False).format(record)
    assert "hello" in line and "status=429" in line
    assert "\033[" not in line


def test_unwritable_log_dir_disables_file_logging(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    try:
        bootstrap_logging(service="test", level="INFO", console=False, log_dir=blocker / "logs")
        handlers = logging.getLogger().handlers
        assert not any(isinstance(h, QueueHandler) for h in handlers)
    finally:
        shutdown_logging()
        logging.getLogger().handlers.clear()

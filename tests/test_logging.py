from __future__ import annotations

import json
import logging

import structlog

from venture_booking.config.settings import settings
from venture_booking.core.logging import LoggingConfig, get_logger, request_id


def test_logger_adapter_passes_extra(caplog):
    logger = get_logger("venture_booking.tests")

    with caplog.at_level(logging.INFO, logger="venture_booking.tests"):
        logger.info("Room blocked", extra={"room_id": "r-1"})

    assert caplog.records[0].room_id == "r-1"
    assert logger.name == "venture_booking.tests"


def test_structured_formatter_renders_request_context(monkeypatch):
    monkeypatch.setattr(settings, "LOG_FORMAT", "json")
    formatter = LoggingConfig.configure_structured_logging()
    record = logging.LogRecord(
        "venture_booking.tests", logging.INFO, __file__, 1, "Booking %s created", ("BK-1",), None
    )
    record.booking_id = "b-1"

    token = request_id.set("req-9")
    try:
        output = json.loads(formatter.format(record))
    finally:
        request_id.reset(token)
        structlog.reset_defaults()

    assert output["event"] == "Booking BK-1 created"
    assert output["request_id"] == "req-9"
    assert output["booking_id"] == "b-1"
    assert output["level"] == "info"
    assert output["logger"] == "venture_booking.tests"

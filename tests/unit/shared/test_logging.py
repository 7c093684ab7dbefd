"""Tests for the structured logging helpers."""

import json
import logging

from helpdesk.shared.infrastructure.logging import (
    CustomJsonFormatter,
    get_context_logger,
    log_latency,
)


def _format(record: logging.LogRecord) -> dict:
    formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s", environment="staging")
    return json.loads(formatter.format(record))


def test_formatter_adds_timestamp_and_environment():
    record = logging.LogRecord("helpdesk.test", logging.INFO, __file__, 1, "hello", None, None)
    payload = _format(record)

    assert payload["message"] == "hello"
    assert payload["environment"] == "staging"
    assert payload["timestamp"]


def test_formatter_includes_correlation_id_and_extra():
    record = logging.LogRecord("helpdesk.test", logging.INFO, __file__, 1, "hello", None, None)
    record.correlation_id = "abc-123"
    record.ticket_id = "T-1"
    payload = _format(record)

    assert payload["correlation_id"] == "abc-123"
    assert payload["ticket_id"] == "T-1"


def test_context_logger_without_correlation_id_is_plain_logger():
    assert isinstance(get_context_logger("helpdesk.test"), logging.Logger)
    assert isinstance(get_context_logger("helpdesk.test", "abc"), logging.LoggerAdapter)


def test_log_latency_logs_operation(caplog):
    logger = logging.getLogger("helpdesk.test.latency")
    with caplog.at_level(logging.INFO, logger="helpdesk.test.latency"):
        with log_latency(logger, "sla_evaluation", tickets=3):
            pass

    record = caplog.records[-1]
    assert record.getMessage() == "sla_evaluation completed"
    assert record.operation == "sla_evaluation"
    assert record.tickets == 3
    assert record.latency_ms >= 0

"""Structured Logging — verifies JSON output and extra-field surfacing."""

import json
import logging

from showcase.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "showcase.services.payments", logging.INFO, __file__, 1,
        "Webhook resolved: %s", ("completed",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_has_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "showcase.services.payments"
    assert log["message"] == "Webhook resolved: completed"
    assert "timestamp" in log


def test_known_extras_surface_unknown_do_not():
    log = json.loads(JSONFormatter().format(_record(
        payment_id="lyg_1", upstream_status=503, buyer="jean@example.com",
    )))
    assert log["payment_id"] == "lyg_1"
    assert log["upstream_status"] == 503
    assert "buyer" not in log

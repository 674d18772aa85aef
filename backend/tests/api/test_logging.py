"""Tests for app.core.logging — JSON formatting and calculation timing."""

from __future__ import annotations

import json
import logging

from app.core.logging import JSONFormatter, calculation_timer, request_id_var


class TestJSONFormatter:
    def test_domain_fields_promoted(self):
        record = logging.LogRecord("engine.x", logging.INFO, __file__, 1, "done %s", ("ok",), None)
        record.site = "Ankara"
        record.panel_count = 32
        entry = json.loads(JSONFormatter().format(record))
        assert entry["message"] == "done ok"
        assert entry["site"] == "Ankara"
        assert entry["panel_count"] == 32
        assert "scenario" not in entry

    def test_request_id_included(self):
        token = request_id_var.set("abc123")
        try:
            record = logging.LogRecord("x", logging.INFO, __file__, 1, "hi", None, None)
            entry = json.loads(JSONFormatter().format(record))
        finally:
            request_id_var.reset(token)
        assert entry["request_id"] == "abc123"


class TestCalculationTimer:
    def test_logs_fields_set_inside_block(self, caplog):
        logger = logging.getLogger("tests.timer")
        with caplog.at_level(logging.INFO, logger="tests.timer"):
            with calculation_timer(logger, "design", site="Van") as fields:
                fields["panel_count"] = 12
        record = caplog.records[-1]
        assert record.calculation == "design"
        assert record.site == "Van"
        assert record.panel_count == 12
        assert record.duration_ms >= 0

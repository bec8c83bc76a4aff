"""Logging setup — tests for the JSON formatter and handler installation.

Tests cover:
    - JSON lines carry level, logger, message and known extras
    - setup_logging is idempotent (one handler across reruns)
"""

import json
import logging

import pytest

from core.observability import JSONFormatter, setup_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "services.board_api", logging.WARNING, __file__, 1, "bad body from %s", ("x",), None
    )
    record.operation = "list_threads"
    record.status = 502

    line = json.loads(JSONFormatter().format(record))

    assert line["level"] == "WARNING"
    assert line["logger"] == "services.board_api"
    assert line["message"] == "bad body from x"
    assert line["operation"] == "list_threads"
    assert line["status"] == 502
    assert "view" not in line


def test_setup_logging_is_idempotent(restore_root):
    first = setup_logging("DEBUG", "text")
    second = setup_logging("warning", "json")

    assert first is second
    assert [h for h in restore_root.handlers if h.get_name() == "board_app"] == [first]
    assert isinstance(first.formatter, JSONFormatter)
    assert restore_root.level == logging.WARNING

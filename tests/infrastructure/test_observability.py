"""Observability tests — JSON formatter fields and idempotent setup."""

import json
import logging

import pytest

from function_parser.infrastructure.observability import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "function_parser.test", logging.INFO, __file__, 1, "Added %s", ("billing/x",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras():
    payload = json.loads(JSONFormatter().format(
        _record(group="billing", endpoint="invoices", unrelated="nope"),
    ))
    assert payload["message"] == "Added billing/x"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "function_parser.test"
    assert payload["group"] == "billing"
    assert payload["endpoint"] == "invoices"
    assert "unrelated" not in payload


def test_setup_logging_installs_one_handler(restore_root_logging):
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    assert first is second
    assert logging.root.handlers.count(first) == 1
    assert logging.root.level == logging.WARNING
    assert not isinstance(first.formatter, JSONFormatter)

"""
Name: JSON Logger Tests

Responsibilities:
  - JSONFormatter output shape and request context injection
  - Redaction of sensitive / oversized extras
"""

import json
import logging
import sys

import pytest

from typeten.context import clear_context, set_request_context, set_user_context
from typeten.crosscutting.logger import JSONFormatter

pytestmark = pytest.mark.unit


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("typeten", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _clean_context():
    clear_context()
    yield
    clear_context()


def test_formats_json_with_context():
    set_request_context(request_id="req-1", method="GET", path="/v1/texts")
    set_user_context("user-1")

    payload = json.loads(JSONFormatter().format(_record(text_id="t1")))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "req-1"
    assert payload["user_id"] == "user-1"
    assert payload["path"] == "/v1/texts"
    assert payload["text_id"] == "t1"


def test_context_keys_omitted_when_empty():
    payload = json.loads(JSONFormatter().format(_record()))

    assert "request_id" not in payload
    assert "user_id" not in payload


def test_redacts_sensitive_and_truncates_long_values():
    payload = json.loads(
        JSONFormatter().format(_record(token="abc", content="x" * 5000))
    )

    assert payload["token"] == "***REDACTED***"
    assert payload["content"].endswith("…(truncated)")
    assert len(payload["content"]) < 5000


def test_includes_exception_info():
    try:
        raise ValueError("bad line")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JSONFormatter().format(record))

    assert payload["exception"]["type"] == "ValueError"
    assert payload["exception"]["message"] == "bad line"

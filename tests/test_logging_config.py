import json
import sys
import logging

from langbridge.core.logging_config import JSONFormatter


def make_record(**extra):
    record = logging.LogRecord(
        "langbridge.test", logging.INFO, __file__, 10, "sent %s", ("request",), None
    )
    record.__dict__.update(extra)
    return record


def test_formatter_emits_json_with_extra_fields():
    line = JSONFormatter().format(make_record(sender="abc"))
    payload = json.loads(line)

    assert payload["message"] == "sent request"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "langbridge.test"
    assert payload["sender"] == "abc"
    assert "args" not in payload


def test_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = make_record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JSONFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]

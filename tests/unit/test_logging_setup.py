import json
import logging
import sys

import pytest

from app.logging_setup import JsonFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="contact",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="contact submission stored",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
def test_json_formatter_emits_known_extra_keys() -> None:
    line = JsonFormatter().format(
        _record(component="api.submit_contact", submission_id="msg_1", unrelated="x")
    )
    payload = json.loads(line)

    assert payload["message"] == "contact submission stored"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "contact"
    assert payload["component"] == "api.submit_contact"
    assert payload["submission_id"] == "msg_1"
    assert "unrelated" not in payload
    assert "exc_info" not in payload


@pytest.mark.unit
def test_json_formatter_includes_traceback() -> None:
    try:
        raise RuntimeError("DynamoDB error")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: DynamoDB error" in payload["exc_info"]


@pytest.mark.unit
def test_json_formatter_emits_error_classification() -> None:
    payload = json.loads(
        JsonFormatter().format(_record(error_code="storage_failed", error_category="storage", retry="recoverable"))
    )

    assert payload["error_category"] == "storage"
    assert payload["retry"] == "recoverable"

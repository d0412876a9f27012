from __future__ import annotations

import io
import logging

from utils.logging_setup import SafeExtraFormatter, init_logging, op_extra, resolve_level


def test_init_logging_is_idempotent():
    root = logging.getLogger()
    first = init_logging("warning", stream=io.StringIO())
    second = init_logging("debug")
    assert first is second
    assert root.handlers.count(first) == 1
    # later calls still adjust the level
    assert first.level == logging.DEBUG
    assert root.level == logging.DEBUG


def test_invalid_level_falls_back_to_info():
    assert resolve_level("loud") == logging.INFO
    assert resolve_level("") == logging.INFO
    assert resolve_level(" error ") == logging.ERROR
    handler = init_logging("loud", stream=io.StringIO())
    assert handler.level == logging.INFO


def test_init_logging_uses_settings_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    handler = init_logging(stream=io.StringIO())
    assert handler.level == logging.ERROR


def test_op_fields_are_written_and_defaulted():
    stream = io.StringIO()
    init_logging("info", stream=stream)
    log = logging.getLogger("employee_records.test")
    log.info("saved", extra=op_extra("save", "ok", "/tmp/e.txt", 3))
    log.info("plain")
    lines = stream.getvalue().splitlines()
    assert lines[0].endswith("saved op=save status=ok path=/tmp/e.txt count=3")
    assert lines[1].endswith("plain op=- status=- path=- count=-")


def test_op_extra_omits_unset_fields():
    assert op_extra("load", "missing") == {"op": "load", "status": "missing"}


def test_formatter_does_not_overwrite_given_fields():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "m", None, None)
    record.op = "add"
    out = SafeExtraFormatter(fmt="%(op)s %(status)s").format(record)
    assert out == "add -"

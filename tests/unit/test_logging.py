"""Tests for the JSON log formatter."""

import json
import logging
import sys

from gallery_engine.common.logging import JSONFormatter, get_logger, setup_logging


def _record(msg="hello %s", args=("world",), **extra):
    record = logging.makeLogRecord(
        {"name": "gallery_engine.test", "levelname": "INFO", "levelno": logging.INFO,
         "msg": msg, "args": args}
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["message"] == "hello world"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "gallery_engine.test"
        assert "timestamp" in entry

    def test_extra_fields_included(self):
        entry = json.loads(JSONFormatter().format(_record(artist_id="-vqsk", link_id="gallery-vip-01")))
        assert entry["artist_id"] == "-vqsk"
        assert entry["link_id"] == "gallery-vip-01"

    def test_non_ascii_kept(self):
        line = JSONFormatter().format(_record("작가님 %s", ("환영",)))
        assert "작가님 환영" in line

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestSetup:
    def test_setup_is_idempotent(self):
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        root = logging.getLogger("gallery_engine")
        json_handlers = [h for h in root.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1
        assert root.level == logging.DEBUG

    def test_get_logger_namespace(self):
        assert get_logger("cli").name == "gallery_engine.cli"

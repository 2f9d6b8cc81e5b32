"""Tests for structured logging."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from esbuilders.core.search.facets import TermStatsFacet
from esbuilders.core.search.query import BoolQuery, TermQuery
from esbuilders.utils.logging import JsonFormatter, setup_logging


@pytest.fixture
def package_logger():
    """Restore the esbuilders logger after setup_logging changes it."""
    logger = logging.getLogger("esbuilders")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def _record(**extra):
    record = logging.LogRecord(
        name="esbuilders.test",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Ignored %s",
        args=("value",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_basic_fields(self):
        data = json.loads(JsonFormatter().format(_record()))

        assert data == {"level": "DEBUG", "message": "Ignored value", "logger": "esbuilders.test"}

    def test_structured_fields(self):
        record = _record(builder="Sort", accessor="order", allowed=("asc", "desc"))

        data = json.loads(JsonFormatter().format(record))

        assert data["builder"] == "Sort"
        assert data["accessor"] == "order"
        assert data["allowed"] == ["asc", "desc"]

    def test_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(record))

        assert "RuntimeError: boom" in data["exception"]


class TestSetupLogging:
    def test_json_handler(self, package_logger):
        setup_logging("debug", json_output=True)

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)

    def test_falls_back_to_settings(self, package_logger, monkeypatch):
        from esbuilders.core.config import reset_settings

        monkeypatch.setenv("ESBUILDERS_LOG_LEVEL", "ERROR")
        reset_settings()

        setup_logging()

        assert package_logger.level == logging.ERROR
        assert not isinstance(package_logger.handlers[0].formatter, JsonFormatter)

    def test_repeated_setup_replaces_handler(self, package_logger):
        setup_logging("info")
        setup_logging("info")

        assert len(package_logger.handlers) == 1


class TestBuilderLogging:
    """Tests for records emitted by builders."""

    def test_soft_rejection_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="esbuilders.core.search.mixins")

        TermStatsFacet("x").order("bogus")

        [record] = [r for r in caplog.records if getattr(r, "accessor", None) == "order"]
        assert record.levelno == logging.DEBUG
        assert record.builder == "TermStatsFacet"
        assert record.value == "bogus"

    def test_slot_replacement_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="esbuilders.core.search.mixins")

        BoolQuery().must([TermQuery("a", 1), TermQuery("b", 2)])

        assert any(getattr(r, "slot_size", None) == 2 for r in caplog.records)

    def test_quiet_by_default(self, caplog):
        caplog.set_level(logging.INFO, logger="esbuilders")

        TermStatsFacet("x").order("bogus")

        assert caplog.records == []

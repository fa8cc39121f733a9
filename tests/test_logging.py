"""Logging tests."""

import logging

import structlog

from pyxml2json import convert


class TestLogging:
    def test_not_rendered_below_debug(self, caplog, monkeypatch):
        rendered = []
        original = structlog.processors.KeyValueRenderer.__call__

        def spy(self, logger, name, event_dict):
            rendered.append(event_dict["event"])
            return original(self, logger, name, event_dict)

        monkeypatch.setattr(structlog.processors.KeyValueRenderer, "__call__", spy)
        caplog.set_level(logging.WARNING, logger="pyxml2json")
        for _ in range(3):
            convert("<a/>")
        assert rendered == []
        assert caplog.records == []

    def test_debug_event_is_plain_key_value(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pyxml2json")
        convert("<a/>")
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert message.startswith("event='converted xml tree' ")
        assert "root='a'" in message
        assert "length=9" in message
        assert "[debug" not in message
        assert caplog.records[0].levelno == logging.DEBUG
        assert caplog.records[0].name == "pyxml2json"

"""Tests for RateLogRegistry."""

import logging

from rate_log.models import CountLimit
from rate_log.ratelog import RateLog
from rate_log.registry import RateLogRegistry
from rate_log.sink import MemorySink


def test_get_or_create_reuses_instance():
    registry = RateLogRegistry()
    first = registry.get_or_create("db", 3, sink=MemorySink())
    second = registry.get_or_create("db", 10)
    assert first is second
    assert first.tracker.threshold == CountLimit(limit=3)


def test_named_logs_are_independent():
    registry = RateLogRegistry()
    db_sink = MemorySink()
    net_sink = MemorySink()
    db = registry.get_or_create("db", 1, sink=db_sink)
    net = registry.get_or_create("net", 1, sink=net_sink)

    db.log("timeout", now=0.0)
    net.log("timeout", now=0.0)
    db.log("timeout", now=0.0)

    assert db_sink.lines == ["timeout", 'Message: "timeout" repeat for 1 times in the past 0ms']
    assert net_sink.lines == ["timeout"]


def test_register_list_has_unregister():
    registry = RateLogRegistry()
    registry.register("a", RateLog(1, sink=MemorySink()))
    registry.register("b", RateLog(2, sink=MemorySink()))
    assert registry.list() == ["a", "b"]
    assert registry.has("a")

    registry.unregister("a")
    registry.unregister("missing")
    assert not registry.has("a")
    assert registry.get("a") is None
    assert registry.list() == ["b"]


def test_register_overwrite_warns(caplog):
    registry = RateLogRegistry()
    registry.register("a", RateLog(1, sink=MemorySink()))
    replacement = RateLog(2, sink=MemorySink())
    with caplog.at_level(logging.WARNING, logger="rate_log.registry"):
        registry.register("a", replacement)
    assert registry.get("a") is replacement
    assert "Overwriting existing rate log: a" in caplog.text

"""rate-log: Rate-limited logging that summarizes repeated messages."""

from rate_log.filter import RepeatFilter
from rate_log.formatting import format_duration, format_notice, render
from rate_log.models import (
    CountLimit,
    Decision,
    DurationLimit,
    Emit,
    Notice,
    Silent,
    Threshold,
    TrackingState,
    parse_threshold,
)
from rate_log.ratelog import RateLog
from rate_log.registry import RateLogRegistry
from rate_log.sink import LoggerSink, MemorySink, Sink, StdoutSink
from rate_log.tracker import RepeatTracker

__all__ = [
    # Core
    "RateLog",
    "RepeatTracker",
    "RateLogRegistry",
    "RepeatFilter",
    # Thresholds
    "CountLimit",
    "DurationLimit",
    "Threshold",
    "parse_threshold",
    # Decisions
    "Decision",
    "Emit",
    "Notice",
    "Silent",
    "TrackingState",
    # Sinks
    "Sink",
    "StdoutSink",
    "LoggerSink",
    "MemorySink",
    # Formatting utilities
    "format_duration",
    "format_notice",
    "render",
]

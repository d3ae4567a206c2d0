"""Output sinks for rendered decisions.

A sink accepts one line of text at a time. :class:`~rate_log.ratelog.RateLog`
writes every emitted message and every repeat notice to its sink exactly
once; silent repeats never reach it.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO


class Sink(Protocol):
    """Anything that accepts a line of text."""

    def write(self, line: str) -> None:
        """Write a single line. The line carries no trailing newline."""
        ...


class StdoutSink:
    """Print lines to a text stream (stdout unless given another)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)


class LoggerSink:
    """Forward lines to a :class:`logging.Logger` at a fixed level.

    Args:
        logger: Target logger, or a logger name.
        level: Log level for every line (default INFO).
    """

    def __init__(self, logger: logging.Logger | str, *, level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._level = level

    def write(self, line: str) -> None:
        # Pass the line as an argument so "%" in messages is not interpolated.
        self._logger.log(self._level, "%s", line)


class MemorySink:
    """Collect lines in memory, mainly for tests."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    @property
    def output(self) -> str:
        """All collected lines joined with newlines."""
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()

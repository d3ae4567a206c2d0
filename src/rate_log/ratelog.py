"""Rate-limited logger front end.

Ties a :class:`~rate_log.tracker.RepeatTracker` to a clock and a sink:
each call to :meth:`RateLog.log` reads the clock, asks the tracker for a
decision, renders it and writes the result.

Typical usage::

    from datetime import timedelta
    from rate_log import DurationLimit, RateLog

    rate_log = RateLog(DurationLimit(limit=timedelta(seconds=1)))
    rate_log.log("Connection refused")  # written
    rate_log.log("Connection refused")  # counted silently
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta

from rate_log.formatting import render
from rate_log.models import CountLimit, Decision, DurationLimit, Notice, parse_threshold
from rate_log.sink import Sink, StdoutSink
from rate_log.tracker import RepeatTracker

logger = logging.getLogger("rate_log.ratelog")


class RateLog:
    """Writes new messages immediately and summarizes repeats.

    Args:
        threshold: A :class:`CountLimit`, :class:`DurationLimit`, or any value
            accepted by :func:`~rate_log.models.parse_threshold`.
        sink: Where rendered lines go (default: stdout).
        clock: Monotonic clock returning seconds (default ``time.monotonic``).
    """

    def __init__(
        self,
        threshold: CountLimit | DurationLimit | timedelta | int | str,
        *,
        sink: Sink | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._tracker = RepeatTracker(parse_threshold(threshold))
        self._sink: Sink = sink if sink is not None else StdoutSink()
        self._clock = clock

    @property
    def tracker(self) -> RepeatTracker:
        return self._tracker

    @property
    def sink(self) -> Sink:
        return self._sink

    def log(self, message: str, *, now: float | None = None) -> Decision:
        """Log ``message`` subject to rate limiting.

        Args:
            message: The message text.
            now: Explicit monotonic timestamp; the clock is read when omitted.

        Returns:
            The tracker's decision for this call.
        """
        if now is None:
            now = self._clock()
        decision = self._tracker.observe(message, now)

        if isinstance(decision, Notice):
            logger.debug(
                "Repeat threshold reached (count=%d, duration=%s)",
                decision.count,
                decision.duration,
            )

        line = render(decision)
        if line is not None:
            self._sink.write(line)
        return decision

    def reset(self) -> None:
        """Forget the tracked message so the next one is written again."""
        self._tracker.reset()

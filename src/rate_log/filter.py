"""Logging filter that rate limits repeated records.

Attach :class:`RepeatFilter` to a logger or handler to suppress runs of
identical messages from the standard ``logging`` machinery::

    import logging
    from rate_log import CountLimit, RepeatFilter

    log = logging.getLogger("worker")
    log.addFilter(RepeatFilter(CountLimit(limit=100)))
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta

from rate_log.formatting import format_notice
from rate_log.models import CountLimit, DurationLimit, Emit, Notice, parse_threshold
from rate_log.tracker import RepeatTracker


class RepeatFilter(logging.Filter):
    """Drops repeats of the last record's message until a threshold is hit.

    The first record with a given message passes unchanged. Repeats are
    dropped; the repeat that reaches the threshold passes with its message
    replaced by the repeat summary.

    Args:
        threshold: Threshold or any value accepted by ``parse_threshold``.
        clock: Monotonic clock returning seconds (default ``time.monotonic``).
    """

    def __init__(
        self,
        threshold: CountLimit | DurationLimit | timedelta | int | str,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self._tracker = RepeatTracker(parse_threshold(threshold))
        self._clock = clock

    @property
    def tracker(self) -> RepeatTracker:
        return self._tracker

    def filter(self, record: logging.LogRecord) -> bool:
        decision = self._tracker.observe(record.getMessage(), self._clock())
        if isinstance(decision, Emit):
            return True
        if isinstance(decision, Notice):
            record.msg = format_notice(decision)
            record.args = None
            return True
        return False

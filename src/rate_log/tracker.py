"""Repeat tracking state machine.

Classifies each incoming message against the previous one. A new
message is emitted immediately; repeats of it are counted silently
until the configured threshold is reached, at which point a single
notice summarizing the repeats is produced and the counters start
over for the same message.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import timedelta

from rate_log.models import (
    CountLimit,
    Decision,
    DurationLimit,
    Emit,
    Notice,
    Silent,
    TrackingState,
)


class RepeatTracker:
    """Tracks one message at a time and decides what to do with each call.

    Not thread-safe; callers sharing a tracker must serialize access.

    Args:
        threshold: When to produce a notice for a repeated message.
    """

    def __init__(self, threshold: CountLimit | DurationLimit) -> None:
        self._threshold = threshold
        self._state = TrackingState()

    @property
    def threshold(self) -> CountLimit | DurationLimit:
        return self._threshold

    @property
    def state(self) -> TrackingState:
        """Snapshot of the current counters."""
        return replace(self._state)

    def observe(self, message: str, now: float) -> Decision:
        """Record an occurrence of ``message`` at monotonic time ``now``.

        Args:
            message: Message text. Any string, including empty.
            now: Monotonic timestamp in seconds. A value earlier than the
                previous call contributes a zero gap.

        Returns:
            ``Emit`` for a new message, ``Notice`` when a repeat reaches the
            threshold, ``Silent`` otherwise.
        """
        state = self._state

        # identity is None before the first call, so "" is still new
        if message != state.identity:
            state.identity = message
            state.reset()
            state.last_seen = now
            return Emit(message)

        state.repeat_count += 1
        if state.last_seen is not None:
            state.elapsed += max(now - state.last_seen, 0.0)
        state.last_seen = now

        accumulated = state.accumulated
        if not self._threshold.reached(state.repeat_count, accumulated):
            return Silent()

        notice = Notice(message, state.repeat_count, accumulated)
        state.reset()
        return notice

    def reset(self) -> None:
        """Forget the tracked message and its counters."""
        self._state = TrackingState()

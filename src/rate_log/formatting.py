"""Formatting utilities for decisions and elapsed durations.

Durations are shown in the coarsest whole unit that does not truncate
to zero, e.g. ``"59s"`` rather than ``"59.9s"`` or ``"0m"``.
"""

from __future__ import annotations

from datetime import timedelta

from rate_log.models import Decision, Emit, Notice

_SECOND = timedelta(seconds=1)
_MS = timedelta(milliseconds=1)


def format_duration(span: timedelta) -> str:
    """Render a duration as whole hours, minutes, seconds or milliseconds.

    Examples:
        >>> format_duration(timedelta(milliseconds=999))
        '999ms'
        >>> format_duration(timedelta(seconds=3599))
        '59m'
    """
    total_secs = span // _SECOND
    if total_secs >= 3600:
        return f"{total_secs // 3600}h"
    if total_secs >= 60:
        return f"{total_secs // 60}m"
    if total_secs >= 1:
        return f"{total_secs}s"
    return f"{span // _MS}ms"


def format_notice(notice: Notice) -> str:
    """Render the repeat summary for a notice."""
    return (
        f'Message: "{notice.message}" repeat for {notice.count} times '
        f"in the past {format_duration(notice.duration)}"
    )


def render(decision: Decision) -> str | None:
    """Return the text to write for a decision, or None for a silent one."""
    if isinstance(decision, Emit):
        return decision.message
    if isinstance(decision, Notice):
        return format_notice(decision)
    return None

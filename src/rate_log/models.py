"""Core data models for rate-log."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------


class CountLimit(BaseModel):
    """Trigger a notice once a message has repeated ``limit`` times."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["count"] = "count"
    limit: int = Field(ge=0)

    def reached(self, count: int, duration: timedelta) -> bool:
        return count >= self.limit


class DurationLimit(BaseModel):
    """Trigger a notice once repeats have spanned ``limit`` of elapsed time.

    Time is accumulated from the gaps between consecutive calls with the
    same message, not from wall-clock time since the first occurrence.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["duration"] = "duration"
    limit: timedelta

    @field_validator("limit")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration limit must not be negative")
        return value

    def reached(self, count: int, duration: timedelta) -> bool:
        return duration >= self.limit


Threshold = Annotated[CountLimit | DurationLimit, Field(discriminator="kind")]
"""Either a :class:`CountLimit` or a :class:`DurationLimit`."""


_UNITS: dict[str, str] = {
    "ms": "milliseconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
}

_DURATION_RE = re.compile(r"(\d+)\s*(ms|s|m|h)")


def parse_threshold(value: object) -> CountLimit | DurationLimit:
    """Build a threshold from a user-supplied value.

    Accepts an existing threshold, an ``int`` (count), a ``timedelta``
    (duration), or a string such as ``"5"``, ``"count:5"``, ``"500ms"``,
    ``"2s"``, ``"1m"``, ``"1h"`` or ``"duration:30s"``.

    Raises:
        ValueError: If a string cannot be interpreted.
    """
    if isinstance(value, (CountLimit, DurationLimit)):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid threshold: {value!r}")
    if isinstance(value, int):
        return CountLimit(limit=value)
    if isinstance(value, timedelta):
        return DurationLimit(limit=value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid threshold: {value!r}")

    text = value.strip().lower()
    kind = None
    if ":" in text:
        kind, _, text = text.partition(":")
        kind = kind.strip()
        text = text.strip()
        if kind not in ("count", "duration"):
            raise ValueError(f"Unknown threshold kind: {kind!r}")

    if text.isdigit() and kind != "duration":
        return CountLimit(limit=int(text))

    match = _DURATION_RE.fullmatch(text)
    if match and kind != "count":
        amount, unit = match.groups()
        try:
            span = timedelta(**{_UNITS[unit]: int(amount)})
        except OverflowError as exc:
            raise ValueError(f"Invalid threshold: {value!r}") from exc
        return DurationLimit(limit=span)

    raise ValueError(f"Invalid threshold: {value!r}")


# ---------------------------------------------------------------------------
# Decisions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Emit:
    """A new message; write it out verbatim."""

    message: str


@dataclass(frozen=True)
class Silent:
    """A repeat below the threshold; nothing to write."""


@dataclass(frozen=True)
class Notice:
    """A repeat that crossed the threshold.

    Attributes:
        message: The repeated message.
        count: Repeats counted since the last reset.
        duration: Time accumulated across those repeats.
    """

    message: str
    count: int
    duration: timedelta


Decision = Emit | Silent | Notice


# ---------------------------------------------------------------------------
# Tracking state
# ---------------------------------------------------------------------------


@dataclass
class TrackingState:
    """Counters for the message currently being tracked."""

    identity: str | None = None
    """Text of the tracked message, or None before the first message."""

    repeat_count: int = 0
    elapsed: float = 0.0
    """Unrounded sum of the gaps between repeats, in seconds."""

    last_seen: float | None = None
    """Monotonic timestamp (seconds) of the latest observation."""

    def reset(self) -> None:
        """Zero the counters. The identity is left alone."""
        self.repeat_count = 0
        self.elapsed = 0.0
        self.last_seen = None

    @property
    def accumulated(self) -> timedelta:
        """Accumulated gaps as a timedelta, rounded to the microsecond."""
        return timedelta(seconds=self.elapsed)

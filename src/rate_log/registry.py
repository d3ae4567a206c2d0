"""Registry of named rate logs.

Lets one process run several independent :class:`RateLog` instances
(e.g. one per subsystem) without module-level state.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from rate_log.models import CountLimit, DurationLimit
from rate_log.ratelog import RateLog

logger = logging.getLogger("rate_log.registry")


class RateLogRegistry:
    """Registry of named rate logs.

    Example::

        registry = RateLogRegistry()
        db_log = registry.get_or_create("db", "30s")
        net_log = registry.get_or_create("net", 5)
    """

    def __init__(self) -> None:
        self._logs: dict[str, RateLog] = {}

    def register(self, name: str, rate_log: RateLog) -> None:
        """Register a rate log under a name."""
        if name in self._logs:
            logger.warning("Overwriting existing rate log: %s", name)
        self._logs[name] = rate_log
        logger.info("Rate log registered: %s", name)

    def unregister(self, name: str) -> None:
        """Remove a rate log. Unknown names are ignored."""
        self._logs.pop(name, None)

    def get(self, name: str) -> RateLog | None:
        """Get a registered rate log by name."""
        return self._logs.get(name)

    def get_or_create(
        self,
        name: str,
        threshold: CountLimit | DurationLimit | timedelta | int | str,
        **kwargs: Any,
    ) -> RateLog:
        """Return the rate log for ``name``, creating it if needed.

        Args:
            name: Registry key.
            threshold: Threshold used only when a new rate log is created.
            **kwargs: Passed to :class:`RateLog` (``sink``, ``clock``).
        """
        existing = self._logs.get(name)
        if existing is not None:
            return existing
        rate_log = RateLog(threshold, **kwargs)
        self.register(name, rate_log)
        return rate_log

    def list(self) -> list[str]:
        """List registered names."""
        return list(self._logs.keys())

    def has(self, name: str) -> bool:
        return name in self._logs

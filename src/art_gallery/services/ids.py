"""Timestamp-derived identifiers."""

import time
from dataclasses import dataclass


@dataclass
class TimestampIdGenerator:
    """Issue millisecond timestamps as ids, strictly increasing per process."""

    _last: int = 0

    def next_id(self) -> str:
        """Return a new id."""
        now_ms = time.time_ns() // 1_000_000
        self._last = max(now_ms, self._last + 1)
        return str(self._last)

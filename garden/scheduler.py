"""
Periodic tick sources. A Ticker calls one callback every interval until
cancelled. ClockTicker is driven by elapsed time from a frame loop, so the
tick rate is independent of the frame rate.
"""

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], object]


class Ticker(Protocol):
    def start(self, interval_ms: int, callback: TickCallback) -> None: ...

    def cancel(self) -> None: ...


class ClockTicker:
    """Accumulates elapsed milliseconds and fires once per full interval."""

    def __init__(self, max_ticks_per_advance: int = 4) -> None:
        self.max_ticks_per_advance = max(1, max_ticks_per_advance)
        self.interval_ms: Optional[int] = None
        self._callback: Optional[TickCallback] = None
        self._accum_ms = 0.0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: TickCallback) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self.interval_ms = int(interval_ms)
        self._callback = callback
        self._accum_ms = 0.0

    def cancel(self) -> None:
        self._callback = None
        self._accum_ms = 0.0

    def advance(self, dt_ms: float) -> int:
        """Feed elapsed time; returns how many ticks fired."""
        if self._callback is None or self.interval_ms is None:
            return 0
        self._accum_ms += max(0.0, dt_ms)
        num_ticks = min(int(self._accum_ms // self.interval_ms), self.max_ticks_per_advance)
        self._accum_ms -= num_ticks * self.interval_ms
        # Drop backlog past the cap so a stalled loop never floods ticks later.
        self._accum_ms = min(self._accum_ms, float(self.interval_ms))
        for _ in range(num_ticks):
            self._callback()
        return num_ticks

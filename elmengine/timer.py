"""A simple high-resolution stopwatch."""

from __future__ import annotations

import time


class Timer:
    """Measures the time passed since it was created or last reset."""

    def __init__(self) -> None:
        self._start_ns = time.perf_counter_ns()

    def reset(self) -> None:
        """Start measuring again from now."""
        self._start_ns = time.perf_counter_ns()

    def elapsed_seconds(self) -> float:
        """Seconds since the start point."""
        return (time.perf_counter_ns() - self._start_ns) * 1e-9

    def elapsed_milliseconds(self) -> float:
        """Milliseconds since the start point."""
        return self.elapsed_seconds() * 1000.0
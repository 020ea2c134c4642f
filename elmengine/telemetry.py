"""Smoothed frame timing."""

from __future__ import annotations

import math

from elmengine.timestep import Timestep

_WINDOW = 30


class ApplicationTelemetry:
    """Averages frame times over blocks of 30 frames."""

    def __init__(self) -> None:
        self._smooth_frame_time = 0.0
        self._accumulated = 0.0
        self._frames = 0

    def on_update(self, ts: Timestep) -> None:
        self._accumulated += ts.seconds
        self._frames += 1
        if self._frames >= _WINDOW:
            self._smooth_frame_time = self._accumulated / self._frames
            self._accumulated = 0.0
            self._frames = 0

    @property
    def smooth_frame_time(self) -> float:
        """Average frame time of the last full block, in seconds."""
        return self._smooth_frame_time

    @property
    def fps(self) -> float:
        """Frames per second; infinite before any block completes."""
        if self._smooth_frame_time == 0.0:
            return math.inf
        return 1.0 / self._smooth_frame_time
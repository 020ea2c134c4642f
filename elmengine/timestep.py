"""Frame time deltas."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """The time that passed between two frames, in seconds."""

    seconds: float = 0.0

    @property
    def milliseconds(self) -> float:
        """The same delta expressed in milliseconds."""
        return self.seconds * 1000.0

    def __float__(self) -> float:
        return float(self.seconds)
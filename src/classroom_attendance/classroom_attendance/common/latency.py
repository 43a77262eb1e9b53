from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class SimulatedLatency:
    """Artificial delay applied before a mock store action, standing in for a network call."""

    seconds: float = 0.0

    def wait(self) -> None:
        if self.seconds > 0:
            time.sleep(self.seconds)

"""Run settings for trip accumulation."""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVEL = os.getenv("CHECKIN_DISTANCE_LOG_LEVEL", "WARNING")


@dataclass(frozen=True)
class TripConfig:
    """Noise thresholds for the accumulator, in statute miles."""

    daily_noise_threshold: float = 0.01       # below this, ignored by daily totals
    cumulative_noise_threshold: float = 0.05  # below this, ignored by the trip total


DEFAULT_CONFIG = TripConfig()

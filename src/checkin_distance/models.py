"""Data models for check-in processing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class CheckIn:
    """One timestamped position from the input log."""

    timestamp: datetime         # Naive, local clock of the device
    latitude: float             # Decimal degrees, south negative
    longitude: float            # Decimal degrees, west negative
    raw_line: str = ""          # Trimmed source line, echoed in the report
    line_number: int = 0


@dataclass
class TripTotals:
    """Running distances (miles) and moving time for a trip."""

    cumulative_distance: float = 0.0
    daily_distance: float = 0.0
    daily_moving_time_seconds: float = 0.0

    def accumulate_daily(self, distance: float, elapsed_seconds: float) -> None:
        self.daily_distance += distance
        self.daily_moving_time_seconds += elapsed_seconds

    def accumulate(self, distance: float) -> None:
        self.cumulative_distance += distance

    def reset_daily(self) -> None:
        self.daily_distance = 0.0
        self.daily_moving_time_seconds = 0.0


@dataclass
class TripState:
    """Mutable state for one pass over a check-in log.

    ``previous`` is None until the first check-in has been processed.
    """

    previous: Optional[CheckIn] = None
    totals: TripTotals = field(default_factory=TripTotals)

    @property
    def is_tracking(self) -> bool:
        return self.previous is not None


@dataclass(frozen=True)
class DailySummary:
    """Distance and moving time for one calendar day."""

    day: date
    distance: float
    moving_time_seconds: float

    @property
    def average_speed(self) -> float:
        """Distance per hour of moving time; 0.0 when nothing moved."""
        if self.moving_time_seconds <= 0:
            return 0.0
        return self.distance / (self.moving_time_seconds / 3600)


@dataclass(frozen=True)
class RecordResult:
    """Outcome of feeding a single check-in to the accumulator."""

    checkin: CheckIn
    distance: float
    cumulative_distance: float
    closed_day: Optional[DailySummary] = None

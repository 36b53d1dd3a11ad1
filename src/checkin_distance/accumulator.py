"""Sequential trip accumulator.

Walks check-ins in log order, measuring the leg from the previous check-in,
keeping a running trip total and per-day totals, and closing out a
DailySummary whenever the calendar day changes.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from checkin_distance.config import DEFAULT_CONFIG, TripConfig
from checkin_distance.geo import DistanceUnit, great_circle_distance
from checkin_distance.models import CheckIn, DailySummary, RecordResult, TripState

logger = logging.getLogger(__name__)


def same_day(first: CheckIn, second: CheckIn) -> bool:
    return first.timestamp.date() == second.timestamp.date()


def summarize_day(state: TripState) -> DailySummary:
    """Snapshot the open day's totals, dated by the previous check-in."""
    if state.previous is None:
        raise ValueError("no check-in has been processed yet")
    return DailySummary(
        day=state.previous.timestamp.date(),
        distance=state.totals.daily_distance,
        moving_time_seconds=state.totals.daily_moving_time_seconds,
    )


def process_checkin(
    state: TripState, checkin: CheckIn, config: TripConfig = DEFAULT_CONFIG,
) -> RecordResult:
    """Advance ``state`` by one check-in and report the leg that led to it."""
    totals = state.totals
    distance = 0.0
    closed_day: Optional[DailySummary] = None

    previous = state.previous
    if previous is not None:
        distance = great_circle_distance(
            previous.latitude, previous.longitude,
            checkin.latitude, checkin.longitude,
            DistanceUnit.MILES,
        )

        if not same_day(previous, checkin):
            closed_day = summarize_day(state)
            logger.debug("Day %s closed at line %d", closed_day.day, checkin.line_number)
            totals.reset_daily()
        elif distance > config.daily_noise_threshold:
            # Logs are often exported newest-first
            elapsed = abs((checkin.timestamp - previous.timestamp).total_seconds())
            totals.accumulate_daily(distance, elapsed)

        if distance > config.cumulative_noise_threshold:
            totals.accumulate(distance)

    state.previous = checkin

    return RecordResult(
        checkin=checkin,
        distance=distance,
        cumulative_distance=totals.cumulative_distance,
        closed_day=closed_day,
    )


def finish(state: TripState) -> Optional[DailySummary]:
    """Summary for the day still open at end of input, or None if nothing was read."""
    if not state.is_tracking:
        return None
    return summarize_day(state)


def iter_trip(
    checkins: Iterable[CheckIn], config: TripConfig = DEFAULT_CONFIG,
) -> Iterator[Union[RecordResult, DailySummary]]:
    """Drive a fresh TripState over ``checkins``.

    Yields one RecordResult per check-in, then the final DailySummary (if
    any check-in was seen). Day-boundary summaries travel on the
    RecordResult that crossed the boundary.
    """
    state = TripState()
    count = 0
    for checkin in checkins:
        count += 1
        yield process_checkin(state, checkin, config)

    summary = finish(state)
    logger.info("Processed %d check-ins, %.2f miles", count, state.totals.cumulative_distance)
    if summary is not None:
        yield summary

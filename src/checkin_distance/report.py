"""Text rendering for per-record lines and daily summaries."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Union

from checkin_distance.models import DailySummary, RecordResult

DAY_FORMAT = "%a %m/%d/%Y"


def round_tenth(value: float) -> float:
    """Round half-up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def format_moving_time(seconds: float) -> str:
    """Whole hours and minutes; leftover seconds are dropped."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    return f"{hours} hrs {rest // 60} min"


def format_record(result: RecordResult) -> str:
    return f"{result.checkin.raw_line},{result.distance},{result.cumulative_distance}"


def format_daily_summary(summary: DailySummary, speed_unit: str = "mph") -> str:
    return (
        f"{summary.day:{DAY_FORMAT}}; "
        f"distance: {round_tenth(summary.distance)}; "
        f"moving time: {format_moving_time(summary.moving_time_seconds)}; "
        f"speed: {round_tenth(summary.average_speed)} {speed_unit}"
    )


def iter_report_lines(results: Iterable[Union[RecordResult, DailySummary]]) -> Iterator[str]:
    """Render the output of ``iter_trip`` as report lines, in order."""
    for item in results:
        if isinstance(item, DailySummary):
            yield format_daily_summary(item)
            continue
        if item.closed_day is not None:
            yield format_daily_summary(item.closed_day)
        yield format_record(item)

"""Abstract base parser with validation logic."""

from __future__ import annotations

import abc
from typing import Iterable, Iterator

from checkin_distance.models import CheckIn


class CheckInParseError(ValueError):
    """Raised when a log line cannot be turned into a CheckIn."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class CheckInParser(abc.ABC):
    """Abstract parser that converts raw log lines → CheckIn records."""

    @abc.abstractmethod
    def parse_line(self, line: str, line_number: int = 0) -> CheckIn:
        """Parse one active (non-blank, non-comment) line.

        Raises:
            CheckInParseError: if the line is malformed.
        """

    @staticmethod
    def is_active(line: str) -> bool:
        return bool(line) and not line.startswith("#")

    def iter_checkins(self, lines: Iterable[str]) -> Iterator[CheckIn]:
        """Yield a CheckIn for every active line, in input order."""
        for number, line in enumerate(lines, start=1):
            line = line.strip()
            if not self.is_active(line):
                continue
            yield self.parse_line(line, number)

    @staticmethod
    def validate(checkin: CheckIn) -> list[str]:
        """Validate a CheckIn. Returns list of error messages (empty = valid)."""
        errors: list[str] = []

        if not -90 <= checkin.latitude <= 90:
            errors.append(f"latitude {checkin.latitude} out of range [-90, 90]")

        if not -180 <= checkin.longitude <= 180:
            errors.append(f"longitude {checkin.longitude} out of range [-180, 180]")

        return errors

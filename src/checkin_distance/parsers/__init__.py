"""Parsers for converting raw check-in logs to CheckIn records."""

from checkin_distance.parsers.base import CheckInParseError, CheckInParser
from checkin_distance.parsers.checkin_log import CheckInLogParser

__all__ = ["CheckInParseError", "CheckInParser", "CheckInLogParser"]

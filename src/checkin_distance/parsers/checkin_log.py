"""Parser for comma-delimited tracker check-in logs."""

from __future__ import annotations

from datetime import datetime

from checkin_distance.models import CheckIn
from checkin_distance.parsers.base import CheckInParseError, CheckInParser

# Log columns (comma-delimited), trailing columns vary by export:
# Timestamp,ESN,Check-in type,Lat,Long,...
_COL_TIME = 0
# _COL_ESN = 1
# _COL_TYPE = 2
_COL_LAT = 3
_COL_LON = 4

TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M:%S"
DELIMITER = ","


class CheckInLogParser(CheckInParser):
    """Parse tracker export lines such as::

        05/31/2019 08:24:56,0-3020839,UNLIMITED-TRACK,36.57510,-87.89905,"","",null
    """

    def is_active(self, line: str) -> bool:
        # Exports may start with a column header row
        return super().is_active(line) and not line.startswith("Timestamp,")

    def parse_line(self, line: str, line_number: int = 0) -> CheckIn:
        cols = [c.strip() for c in line.split(DELIMITER)]
        if len(cols) <= _COL_LON:
            raise CheckInParseError(line_number, line, f"expected at least 5 fields, got {len(cols)}")

        try:
            timestamp = datetime.strptime(cols[_COL_TIME], TIMESTAMP_FORMAT)
        except ValueError as exc:
            raise CheckInParseError(line_number, line, f"bad timestamp {cols[_COL_TIME]!r}") from exc

        try:
            latitude = float(cols[_COL_LAT])
            longitude = float(cols[_COL_LON])
        except ValueError as exc:
            raise CheckInParseError(line_number, line, f"bad coordinate: {exc}") from exc

        return CheckIn(
            timestamp=timestamp,
            latitude=latitude,
            longitude=longitude,
            raw_line=line,
            line_number=line_number,
        )

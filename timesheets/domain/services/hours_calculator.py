"""
Hours calculation for time entries.

Two policies exist because two kinds of callers disagree about backwards
ranges: display and aggregation code clamps them to zero, entry creation
rejects them.
"""

from datetime import timezone, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from timesheets.domain.models.base import NegativeDurationError
from timesheets.domain.models.value_objects import TimestampLike, parse_timestamp


SECONDS_PER_HOUR = Decimal(3600)
HUNDREDTHS = Decimal("0.01")
QUARTERS_PER_HOUR = Decimal(4)


def _raw_hours(start: TimestampLike, end: TimestampLike, tz: tzinfo) -> Decimal:
    start_at = parse_timestamp(start, tz, "start_time")
    end_at = parse_timestamp(end, tz, "end_time")
    seconds = Decimal(str((end_at - start_at).total_seconds()))
    return seconds / SECONDS_PER_HOUR


class HoursCalculator:
    """
    Domain service computing elapsed and billable hours.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or timezone.utc

    def elapsed_hours(self, start: TimestampLike, end: TimestampLike) -> Decimal:
        """
        Lenient elapsed hours, rounded to 2 decimals.
        Returns 0 when end is not after start.
        Raises InvalidInputError when either timestamp cannot be parsed.
        """
        hours = _raw_hours(start, end, self.tz)
        if hours <= 0:
            return Decimal("0")
        return hours.quantize(HUNDREDTHS, rounding=ROUND_HALF_UP)

    def billable_hours(self, start: TimestampLike, end: TimestampLike) -> Decimal:
        """
        Strict billable hours, rounded to the nearest quarter hour.
        Raises InvalidInputError on unparseable input and
        NegativeDurationError when end is not after start.
        """
        hours = _raw_hours(start, end, self.tz)
        if hours <= 0:
            raise NegativeDurationError()
        quarters = (hours * QUARTERS_PER_HOUR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return quarters / QUARTERS_PER_HOUR


_default_calculator = HoursCalculator()


def elapsed_hours(start: TimestampLike, end: TimestampLike) -> Decimal:
    """Module-level lenient calculation in UTC."""
    return _default_calculator.elapsed_hours(start, end)


def billable_hours(start: TimestampLike, end: TimestampLike) -> Decimal:
    """Module-level strict calculation in UTC."""
    return _default_calculator.billable_hours(start, end)

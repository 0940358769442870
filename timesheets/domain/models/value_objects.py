"""
Value Objects for the domain layer.
Immutable objects that represent values and encapsulate business logic.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union

from timesheets.domain.models.base import InvalidInputError


TimestampLike = Union[datetime, str]
DateLike = Union[date, datetime, str]

# Display end of a week: Saturday 23:59:59.999
_WEEK_END_OFFSET = timedelta(days=7) - timedelta(milliseconds=1)


def parse_timestamp(
    value: Optional[TimestampLike],
    tz: tzinfo = timezone.utc,
    field: Optional[str] = None
) -> datetime:
    """
    Parse an ISO-8601 string or datetime into a timezone-aware datetime.
    Naive values are interpreted in the given reference time zone.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidInputError(f"Invalid timestamp: {value!r}", field)
    else:
        raise InvalidInputError(f"Invalid timestamp: {value!r}", field)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def parse_date(value: DateLike, tz: tzinfo = timezone.utc, field: Optional[str] = None) -> date:
    """Parse a calendar date, taking the local date of datetimes in the reference zone."""
    if isinstance(value, datetime):
        return parse_timestamp(value, tz, field).astimezone(tz).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return parse_timestamp(value, tz, field).astimezone(tz).date()
    raise InvalidInputError(f"Invalid date: {value!r}", field)


@dataclass(frozen=True)
class WeekRange:
    """
    A timesheet week in a reference time zone.
    Membership is half-open, from Sunday 00:00 up to the next Sunday 00:00;
    end (Saturday 23:59:59.999) is kept for display only.
    """

    start: datetime
    end: datetime

    @classmethod
    def containing(cls, anchor: DateLike, tz: tzinfo = timezone.utc) -> "WeekRange":
        """Build the week that contains the anchor date."""
        day = parse_date(anchor, tz, "week_of")
        sunday = day - timedelta(days=(day.weekday() + 1) % 7)
        start = datetime.combine(sunday, time.min, tzinfo=tz)
        return cls(start=start, end=start + _WEEK_END_OFFSET)

    @property
    def next_start(self) -> datetime:
        """Exclusive upper bound: the following Sunday at midnight."""
        return datetime.combine(self.first_day + timedelta(days=7), time.min, tzinfo=self.start.tzinfo)

    @property
    def first_day(self) -> date:
        return self.start.date()

    @property
    def last_day(self) -> date:
        return self.end.date()

    def contains(self, moment: datetime) -> bool:
        """Check if an aware timestamp falls inside the week."""
        return self.start <= moment < self.next_start

    @property
    def key(self) -> str:
        """Stable identifier for the week, used for per-week locking."""
        return self.first_day.isoformat()

    def __str__(self) -> str:
        return f"{self.first_day.isoformat()}..{self.last_day.isoformat()}"


@dataclass(frozen=True)
class ReportPeriod:
    """Closed time interval used by payroll reporting."""

    start: datetime
    end: datetime

    @classmethod
    def from_bounds(cls, start: DateLike, end: DateLike, tz: tzinfo = timezone.utc) -> "ReportPeriod":
        """
        Build a period from dates or timestamps.
        A plain date start means 00:00 and a plain date end means the last instant of that day.
        """
        start_at = cls._bound(start, tz, at_end=False)
        end_at = cls._bound(end, tz, at_end=True)
        if end_at < start_at:
            raise InvalidInputError("Period end must not be before period start", "end_date")
        return cls(start=start_at, end=end_at)

    @staticmethod
    def _bound(value: DateLike, tz: tzinfo, at_end: bool) -> datetime:
        if isinstance(value, datetime) or (isinstance(value, str) and "T" in value):
            return parse_timestamp(value, tz)
        day = parse_date(value, tz)
        return datetime.combine(day, time.max if at_end else time.min, tzinfo=tz)

    def covers(self, start: datetime, end: datetime) -> bool:
        """Check if a whole [start, end] interval lies inside the period."""
        return start >= self.start and end <= self.end

"""
ISO-8601 Week Dates
===================
Maps (year, week) to the calendar dates of that Monday-to-Sunday week.

All arithmetic is done on proleptic Gregorian day ordinals
(`date.toordinal()`), a plain day count with no clock time attached.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import logging

from gridcalendar.model.errors import InvalidWeek
from gridcalendar.model.labels import MONTH_NAMES_SHORT

logger = logging.getLogger(__name__)

MIN_WEEK = 1
MAX_WEEK = 53
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class WeekRange:
    """First (Monday) and last (Sunday) day of an ISO week."""
    start: date
    end: date

    @property
    def same_month(self) -> bool:
        return (self.start.year, self.start.month) == (self.end.year, self.end.month)

    def label(self) -> str:
        """'Jan 6-12' inside one month, 'Dec 30-Jan 5' across a month boundary."""
        start_month = MONTH_NAMES_SHORT[self.start.month - 1]
        if self.same_month:
            return f"{start_month} {self.start.day}-{self.end.day}"
        end_month = MONTH_NAMES_SHORT[self.end.month - 1]
        return f"{start_month} {self.start.day}-{end_month} {self.end.day}"


def week1_monday_ordinal(year: int) -> int:
    """Ordinal of the Monday on or before January 4th, which starts ISO week 1."""
    jan4 = date(year, 1, 4).toordinal()
    # Ordinal 1 (0001-01-01) is a Monday, so (ordinal - 1) % 7 == 0 on Mondays
    return jan4 - (jan4 - 1) % DAYS_PER_WEEK


def week_range(year: int, week: int) -> WeekRange:
    """
    Dates of ISO week `week` of `year`.

    Week 53 is computed with the same arithmetic even for years that only
    have 52 weeks; in that case the result is week 1 of the next year.

    Raises:
        InvalidWeek: If week is outside 1-53.
    """
    if not MIN_WEEK <= week <= MAX_WEEK:
        raise InvalidWeek(year, week)

    start = week1_monday_ordinal(year) + (week - 1) * DAYS_PER_WEEK
    return WeekRange(
        start=date.fromordinal(start),
        end=date.fromordinal(start + DAYS_PER_WEEK - 1),
    )


def resolve_week(year: int, week: int) -> str:
    """
    Display string for ISO week `week` of `year`, e.g. 'Dec 30-Jan 5'.

    Raises:
        InvalidWeek: If week is outside 1-53.
    """
    return week_range(year, week).label()


def has_week_53(year: int) -> bool:
    """
    True when `year` has 53 ISO weeks.

    Week 53 belongs to `year` when its Monday is no later than December 28th,
    i.e. when that week still contains a Thursday of `year`.
    """
    monday = week1_monday_ordinal(year) + 52 * DAYS_PER_WEEK
    return monday <= date(year, 12, 28).toordinal()


def weeks_in_year(year: int) -> int:
    return 53 if has_week_53(year) else 52

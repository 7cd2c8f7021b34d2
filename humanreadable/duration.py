"""Human-readable durations such as "10 seconds", "5m" or "250ms".

A suffix is required and is matched case-sensitively. Accepted suffixes are
the abbreviation, the singular and the plural of each unit from nanoseconds
to days:

    >>> from humanreadable import Duration, minutes
    >>> Duration.parse("60 seconds") == minutes(1)
    True
    >>> str(Duration.parse("1 seconds"))
    '1 second'
"""

from datetime import timedelta
from typing import ClassVar

from humanreadable.parsing import DURATION_GRAMMAR, Grammar
from humanreadable.quantity import ScalarQuantity
from humanreadable.units import TimeUnit


class Duration(ScalarQuantity[TimeUnit]):
    grammar: ClassVar[Grammar[TimeUnit]] = DURATION_GRAMMAR
    unit_type: ClassVar[type[TimeUnit]] = TimeUnit

    def to_nanoseconds(self) -> int:
        return self.to(TimeUnit.NANOSECONDS)

    def to_microseconds(self) -> int:
        return self.to(TimeUnit.MICROSECONDS)

    def to_milliseconds(self) -> int:
        return self.to(TimeUnit.MILLISECONDS)

    def to_seconds(self) -> int:
        return self.to(TimeUnit.SECONDS)

    def to_minutes(self) -> int:
        return self.to(TimeUnit.MINUTES)

    def to_hours(self) -> int:
        return self.to(TimeUnit.HOURS)

    def to_days(self) -> int:
        return self.to(TimeUnit.DAYS)

    def to_timedelta(self) -> timedelta:
        """Equivalent `datetime.timedelta`.

        timedelta has microsecond resolution, so nanoseconds are truncated.

        Raises:
            OverflowError: If the duration exceeds `timedelta.max`
        """
        return timedelta(microseconds=self.to_microseconds())


def nanoseconds(count: int) -> Duration:
    return Duration(count, TimeUnit.NANOSECONDS)


def microseconds(count: int) -> Duration:
    return Duration(count, TimeUnit.MICROSECONDS)


def milliseconds(count: int) -> Duration:
    return Duration(count, TimeUnit.MILLISECONDS)


def seconds(count: int) -> Duration:
    return Duration(count, TimeUnit.SECONDS)


def minutes(count: int) -> Duration:
    return Duration(count, TimeUnit.MINUTES)


def hours(count: int) -> Duration:
    return Duration(count, TimeUnit.HOURS)


def days(count: int) -> Duration:
    return Duration(count, TimeUnit.DAYS)

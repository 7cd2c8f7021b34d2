"""Unit enumerations for human-readable quantities.

Each unit carries an integer multiplier relative to the smallest unit of its
kind (the base unit) and a plural display name. Members are declared in
ascending order of magnitude, and ordering between units follows that order.
"""

from enum import Enum
from typing import Any


class Unit(Enum):
    """Base class for an ordered family of units sharing one base unit."""

    def __init__(self, multiplier: int, plural: str):
        self.multiplier: int = multiplier
        self.plural: str = plural

    @property
    def singular(self) -> str:
        return self.plural[:-1]

    def label(self, quantity: int) -> str:
        """Display name to use next to `quantity`."""
        return self.singular if quantity == 1 else self.plural

    def to_base(self, quantity: int) -> int:
        return quantity * self.multiplier

    def convert(self, quantity: int, source: "Unit") -> int:
        """Convert `quantity` expressed in `source` into this unit.

        Conversions towards a coarser unit truncate.

        Raises:
            TypeError: If `source` belongs to a different kind of unit
        """
        if type(source) is not type(self):
            raise TypeError(
                f"Cannot convert {type(source).__name__}.{source.name} "
                f"to {type(self).__name__}.{self.name}"
            )
        if source is self:
            return quantity
        return source.to_base(quantity) // self.multiplier

    def _comparable(self, other: Any) -> bool:
        return type(other) is type(self)

    def __lt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.multiplier < other.multiplier

    def __le__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.multiplier <= other.multiplier

    def __gt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.multiplier > other.multiplier

    def __ge__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.multiplier >= other.multiplier

    def __str__(self) -> str:
        return self.plural


# Time multipliers (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR


class TimeUnit(Unit):
    NANOSECONDS = (NANOSECOND, "nanoseconds")
    MICROSECONDS = (MICROSECOND, "microseconds")
    MILLISECONDS = (MILLISECOND, "milliseconds")
    SECONDS = (SECOND, "seconds")
    MINUTES = (MINUTE, "minutes")
    HOURS = (HOUR, "hours")
    DAYS = (DAY, "days")


class ByteUnit(Unit):
    BYTE = (1, "bytes")
    KIBIBYTE = (1024, "kibibytes")
    MEBIBYTE = (1024**2, "mebibytes")
    GIBIBYTE = (1024**3, "gibibytes")
    TEBIBYTE = (1024**4, "tebibytes")
    PEBIBYTE = (1024**5, "pebibytes")

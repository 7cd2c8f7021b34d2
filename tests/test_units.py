"""Tests for the unit enumerations."""

import pytest

from humanreadable import ByteUnit, ParseError, ScalarQuantity, TimeUnit


def test_units_are_declared_smallest_first():
    """Test that declaration order matches magnitude order."""
    for kind in (TimeUnit, ByteUnit):
        members = list(kind)
        assert members == sorted(members)
        multipliers = [unit.multiplier for unit in members]
        assert multipliers == sorted(multipliers)


def test_time_multipliers_are_relative_to_nanoseconds():
    """Test the nanosecond multiplier table."""
    assert TimeUnit.NANOSECONDS.multiplier == 1
    assert TimeUnit.MICROSECONDS.multiplier == 1_000
    assert TimeUnit.MILLISECONDS.multiplier == 1_000_000
    assert TimeUnit.SECONDS.multiplier == 1_000_000_000
    assert TimeUnit.MINUTES.multiplier == 60 * 1_000_000_000
    assert TimeUnit.HOURS.multiplier == 3600 * 1_000_000_000
    assert TimeUnit.DAYS.multiplier == 86400 * 1_000_000_000


def test_byte_multipliers_are_powers_of_1024():
    """Test that each byte unit is 1024 times the previous one."""
    for power, unit in enumerate(ByteUnit):
        assert unit.multiplier == 1024**power


def test_unit_ordering():
    """Test comparison operators between units of one kind."""
    assert TimeUnit.SECONDS < TimeUnit.MINUTES
    assert TimeUnit.DAYS > TimeUnit.HOURS
    assert TimeUnit.SECONDS <= TimeUnit.SECONDS
    assert ByteUnit.PEBIBYTE >= ByteUnit.TEBIBYTE
    assert max(ByteUnit) is ByteUnit.PEBIBYTE
    assert min(TimeUnit) is TimeUnit.NANOSECONDS


def test_units_of_different_kinds_are_not_ordered():
    """Test that time and byte units cannot be compared."""
    with pytest.raises(TypeError):
        TimeUnit.SECONDS < ByteUnit.BYTE  # noqa: B015


def test_display_names():
    """Test plural, singular and str() forms."""
    assert TimeUnit.SECONDS.plural == "seconds"
    assert TimeUnit.SECONDS.singular == "second"
    assert ByteUnit.BYTE.singular == "byte"
    assert ByteUnit.KIBIBYTE.plural == "kibibytes"
    assert str(ByteUnit.MEBIBYTE) == "mebibytes"


def test_label_is_singular_only_for_one():
    """Test that a label is singular for 1 and plural otherwise."""
    assert TimeUnit.HOURS.label(1) == "hour"
    assert TimeUnit.HOURS.label(0) == "hours"
    assert TimeUnit.HOURS.label(2) == "hours"


def test_convert_truncates_towards_coarser_units():
    """Test conversion between units of the same kind."""
    assert TimeUnit.MINUTES.convert(119, TimeUnit.SECONDS) == 1
    assert TimeUnit.SECONDS.convert(2, TimeUnit.MINUTES) == 120
    assert ByteUnit.KIBIBYTE.convert(1023, ByteUnit.BYTE) == 0
    assert ByteUnit.BYTE.convert(3, ByteUnit.GIBIBYTE) == 3 * 1024**3
    assert TimeUnit.HOURS.convert(5, TimeUnit.HOURS) == 5


def test_convert_rejects_other_kind():
    """Test that converting between kinds raises."""
    with pytest.raises(TypeError, match="Cannot convert"):
        TimeUnit.SECONDS.convert(1, ByteUnit.BYTE)


def test_value_dunders_are_marked_as_overrides():
    """Test that the comparison and rendering methods carry @override."""
    names = ["__eq__", "__ne__", "__lt__", "__le__", "__gt__", "__ge__"]
    for name in names + ["__hash__", "__str__", "__repr__"]:
        assert getattr(getattr(ScalarQuantity, name), "__override__", False), name
    assert ParseError.__reduce__.__override__

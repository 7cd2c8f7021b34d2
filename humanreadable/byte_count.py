"""Human-readable byte counts such as "5mb", "10 kibibytes" or "512".

Units are binary multiples of a byte (base 1024). Suffixes are
case-insensitive and optional: a bare number is a count of bytes.
"""

from typing import ClassVar

from humanreadable.parsing import BYTE_COUNT_GRAMMAR, Grammar
from humanreadable.quantity import ScalarQuantity
from humanreadable.units import ByteUnit


class ByteCount(ScalarQuantity[ByteUnit]):
    grammar: ClassVar[Grammar[ByteUnit]] = BYTE_COUNT_GRAMMAR
    unit_type: ClassVar[type[ByteUnit]] = ByteUnit

    def to_bytes(self) -> int:
        return self.to(ByteUnit.BYTE)

    def to_kibibytes(self) -> int:
        return self.to(ByteUnit.KIBIBYTE)

    def to_mebibytes(self) -> int:
        return self.to(ByteUnit.MEBIBYTE)

    def to_gibibytes(self) -> int:
        return self.to(ByteUnit.GIBIBYTE)

    def to_tebibytes(self) -> int:
        return self.to(ByteUnit.TEBIBYTE)

    def to_pebibytes(self) -> int:
        return self.to(ByteUnit.PEBIBYTE)


# Trailing underscore avoids shadowing the `bytes` builtin
def bytes_(size: int) -> ByteCount:
    return ByteCount(size, ByteUnit.BYTE)


def kibibytes(size: int) -> ByteCount:
    return ByteCount(size, ByteUnit.KIBIBYTE)


def mebibytes(size: int) -> ByteCount:
    return ByteCount(size, ByteUnit.MEBIBYTE)


def gibibytes(size: int) -> ByteCount:
    return ByteCount(size, ByteUnit.GIBIBYTE)


def tebibytes(size: int) -> ByteCount:
    return ByteCount(size, ByteUnit.TEBIBYTE)


def pebibytes(size: int) -> ByteCount:
    return ByteCount(size, ByteUnit.PEBIBYTE)

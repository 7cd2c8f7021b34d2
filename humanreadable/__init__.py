from importlib.resources import files

from .byte_count import (
    ByteCount,
    bytes_,
    gibibytes,
    kibibytes,
    mebibytes,
    pebibytes,
    tebibytes,
)
from .duration import (
    Duration,
    days,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
)
from .errors import ParseError, ParseErrorKind
from .quantity import ScalarQuantity
from .units import ByteUnit, TimeUnit, Unit

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "ScalarQuantity",
    "Duration",
    "ByteCount",
    "Unit",
    "TimeUnit",
    "ByteUnit",
    "ParseError",
    "ParseErrorKind",
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "bytes_",
    "kibibytes",
    "mebibytes",
    "gibibytes",
    "tebibytes",
    "pebibytes",
    "docs",
]

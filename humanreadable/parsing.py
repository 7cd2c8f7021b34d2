"""Tokenizer for "<quantity><suffix>" strings.

A `Grammar` bundles everything needed to read one kind of quantity: the
pattern, the suffix table, the unit used when no suffix is written, and
whether suffixes are case-folded. `parse_quantity` is a pure function of its
input and the grammar it is handed. The two grammars below are built once at
import time and never mutated.
"""

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from typing_extensions import override

from humanreadable.errors import ParseError, ParseErrorKind
from humanreadable.units import ByteUnit, TimeUnit, Unit

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=Unit)

# Largest quantity representable as a signed 64-bit integer
MAX_QUANTITY = 2**63 - 1

# Stripped from both ends before matching: ASCII control characters and space
_TRIMMED = "".join(chr(code) for code in range(0x21))


@dataclass(frozen=True, eq=False)
class SuffixTable(Mapping[str, U], Generic[U]):
    """Read-only mapping from lowercase suffix to unit.

    Lookups are exact: no prefix or fuzzy matching.
    """

    entries: Mapping[str, U] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def build(cls, spellings: Mapping[U, Iterable[str]]) -> "SuffixTable[U]":
        entries: dict[str, U] = {}
        for unit, suffixes in spellings.items():
            for suffix in suffixes:
                if suffix in entries:
                    raise ValueError(
                        f"Suffix {suffix!r} maps to both "
                        f"{entries[suffix].name} and {unit.name}"
                    )
                entries[suffix] = unit
        return cls(entries)

    @property
    def suffixes(self) -> tuple[str, ...]:
        return tuple(sorted(self.entries))

    @override
    def __getitem__(self, suffix: str) -> U:
        return self.entries[suffix]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    @override
    def __len__(self) -> int:
        return len(self.entries)

    # Mapping equality compares contents, so the hash does too
    @override
    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))


@dataclass(frozen=True, eq=False, kw_only=True)
class Grammar(Generic[U]):
    name: str
    pattern: re.Pattern[str]
    suffixes: SuffixTable[U]
    default_unit: U | None = None
    fold_case: bool = False
    hint: str = ""


def _reject(
    grammar: Grammar[Any],
    kind: ParseErrorKind,
    text: str | None,
    detail: str,
) -> ParseError:
    logger.debug("rejected %s %r: %s", grammar.name, text, kind.value)
    shown = "got None" if text is None else repr(text)
    message = f"Invalid {grammar.name}: {shown}\n{detail}"
    if grammar.hint:
        message += f"\nHint: {grammar.hint}"
    return ParseError(
        kind, message, text=text, valid_suffixes=grammar.suffixes.suffixes
    )


def parse_quantity(text: Any, grammar: Grammar[U]) -> tuple[int, U]:
    """Split `text` into a quantity and a unit according to `grammar`.

    Args:
        text: The string to parse, e.g. "10 seconds" or "5mb"
        grammar: Pattern and suffix table for the kind of quantity

    Returns:
        The parsed (quantity, unit) pair

    Raises:
        ParseError: If `text` is None or does not follow the grammar
        TypeError: If `text` is neither a string nor None
    """
    if text is None:
        raise _reject(
            grammar, ParseErrorKind.NULL_INPUT, None, "Input must not be None."
        )
    if not isinstance(text, str):
        raise TypeError(
            f"{grammar.name.capitalize()} must be given as a string.\n"
            f"Got {type(text).__name__!r}: {text!r}"
        )

    candidate = text.strip(_TRIMMED)
    if grammar.fold_case:
        candidate = candidate.lower()

    match = grammar.pattern.fullmatch(candidate)
    if match is None:
        raise _reject(
            grammar,
            ParseErrorKind.MALFORMED,
            text,
            "Expected a non-negative integer followed by a unit suffix.",
        )

    digits, suffix = match.group(1), match.group(2)
    # int() refuses very long digit strings, so check the length first
    significant = digits.lstrip("0") or "0"
    if (
        len(significant) > len(str(MAX_QUANTITY))
        or int(significant) > MAX_QUANTITY
    ):
        raise _reject(
            grammar,
            ParseErrorKind.NUMBER_TOO_LARGE,
            text,
            f"Quantity exceeds the maximum of {MAX_QUANTITY}.",
        )
    quantity = int(significant)

    if suffix is None:
        if grammar.default_unit is None:
            raise _reject(
                grammar,
                ParseErrorKind.UNKNOWN_UNIT,
                text,
                "A unit suffix is required.\n"
                f"Valid suffixes: {', '.join(grammar.suffixes.suffixes)}",
            )
        return quantity, grammar.default_unit

    unit = grammar.suffixes.get(suffix)
    if unit is None:
        raise _reject(
            grammar,
            ParseErrorKind.UNKNOWN_UNIT,
            text,
            f"Unknown unit {suffix!r}.\n"
            f"Valid suffixes: {', '.join(grammar.suffixes.suffixes)}",
        )
    return quantity, unit


DURATION_SUFFIXES: SuffixTable[TimeUnit] = SuffixTable.build(
    {
        TimeUnit.NANOSECONDS: ("ns", "nanosecond", "nanoseconds"),
        TimeUnit.MICROSECONDS: ("us", "microsecond", "microseconds"),
        TimeUnit.MILLISECONDS: ("ms", "millisecond", "milliseconds"),
        TimeUnit.SECONDS: ("s", "second", "seconds"),
        TimeUnit.MINUTES: ("m", "minute", "minutes"),
        TimeUnit.HOURS: ("h", "hour", "hours"),
        TimeUnit.DAYS: ("d", "day", "days"),
    }
)

# Keys are stored without the plural "s"; the pattern absorbs it.
# "mibibyte" is a historical misspelling kept for existing configs.
BYTE_COUNT_SUFFIXES: SuffixTable[ByteUnit] = SuffixTable.build(
    {
        ByteUnit.BYTE: ("b", "byte"),
        ByteUnit.KIBIBYTE: ("k", "kb", "kibibyte"),
        ByteUnit.MEBIBYTE: ("m", "mb", "mebibyte", "mibibyte"),
        ByteUnit.GIBIBYTE: ("g", "gb", "gibibyte"),
        ByteUnit.TEBIBYTE: ("t", "tb", "tebibyte"),
        ByteUnit.PEBIBYTE: ("p", "pb", "pebibyte"),
    }
)

# Suffixes are case-sensitive for durations, e.g. "10S" is rejected.
DURATION_GRAMMAR: Grammar[TimeUnit] = Grammar(
    name="duration",
    pattern=re.compile(r"(\d+)\s*(\S+)", re.ASCII),
    suffixes=DURATION_SUFFIXES,
    hint='write a count and a time unit, e.g. "30 seconds", "5m" or "250ms"',
)

BYTE_COUNT_GRAMMAR: Grammar[ByteUnit] = Grammar(
    name="byte count",
    pattern=re.compile(r"([0-9]+)\s?([a-rt-z]+)?s?", re.ASCII),
    suffixes=BYTE_COUNT_SUFFIXES,
    default_unit=ByteUnit.BYTE,
    fold_case=True,
    hint=(
        "size must be given in bytes (b), kibibytes (k), mebibytes (m), "
        "gibibytes (g), tebibytes (t) or pebibytes (p), e.g. 50b, 100k or 250m"
    ),
)

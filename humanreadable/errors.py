from collections.abc import Iterable
from enum import Enum

from typing_extensions import override


class ParseErrorKind(Enum):
    MALFORMED = "malformed"
    UNKNOWN_UNIT = "unknown_unit"
    NUMBER_TOO_LARGE = "number_too_large"
    NULL_INPUT = "null_input"


class ParseError(ValueError):
    """Raised when a string cannot be parsed into a human-readable quantity.

    Attributes:
        kind: Which part of parsing rejected the input
        text: The offending input, exactly as given (None for NULL_INPUT)
        valid_suffixes: The suffixes the grammar accepts, sorted
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        *,
        text: str | None = None,
        valid_suffixes: Iterable[str] = (),
    ):
        super().__init__(message)
        self.kind: ParseErrorKind = kind
        self.text: str | None = text
        self.valid_suffixes: tuple[str, ...] = tuple(valid_suffixes)

    @override
    def __reduce__(self):
        return (
            type(self),
            (self.kind, str(self)),
            {"text": self.text, "valid_suffixes": self.valid_suffixes},
        )

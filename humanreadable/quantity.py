"""Generic immutable quantity shared by durations and byte counts."""

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self, override

from humanreadable.errors import ParseError
from humanreadable.parsing import MAX_QUANTITY, Grammar, parse_quantity
from humanreadable.units import Unit

U = TypeVar("U", bound=Unit)


@dataclass(frozen=True, eq=False)
class ScalarQuantity(Generic[U]):
    """A non-negative integer count of some unit.

    Equality, ordering and hashing work off the total in base units, so
    `60 seconds` equals `1 minute`. The string form keeps the unit the value
    was created with and is not normalized.

    Subclasses set `grammar` (how strings are read) and `unit_type` (which
    units are allowed).
    """

    quantity: int
    unit: U

    grammar: ClassVar[Grammar[Any]]
    unit_type: ClassVar[type[Unit]]

    def __post_init__(self) -> None:
        if not isinstance(self.unit, self.unit_type):
            raise TypeError(
                f"{type(self).__name__} unit must be a {self.unit_type.__name__}.\n"
                f"Got {type(self.unit).__name__!r}: {self.unit!r}"
            )
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise TypeError(
                f"{type(self).__name__} quantity must be an int.\n"
                f"Got {type(self.quantity).__name__!r}: {self.quantity!r}"
            )
        if self.quantity < 0:
            raise ValueError(
                f"{type(self).__name__} quantity must be non-negative, "
                f"got {self.quantity}"
            )
        if self.quantity > MAX_QUANTITY:
            raise ValueError(
                f"{type(self).__name__} quantity must be at most {MAX_QUANTITY}, "
                f"got {self.quantity}"
            )

    @classmethod
    def parse(cls, text: str) -> Self:
        """Read a value from its human-readable string form.

        Raises:
            ParseError: If `text` is None or not in the expected form
            TypeError: If `text` is not a string
        """
        quantity, unit = parse_quantity(text, cls.grammar)
        return cls(quantity, unit)

    @classmethod
    def try_parse(cls, text: str) -> "Self | ParseError":
        """Like `parse`, but hand back the ParseError instead of raising it."""
        try:
            return cls.parse(text)
        except ParseError as error:
            return error

    def to_base_units(self) -> int:
        return self.unit.to_base(self.quantity)

    def to(self, unit: U) -> int:
        """Total length in `unit`, truncated towards zero."""
        return unit.convert(self.quantity, self.unit)

    def _compare(self, other: Self) -> int:
        if self.unit is other.unit:
            left, right = self.quantity, other.quantity
        else:
            left, right = self.to_base_units(), other.to_base_units()
        return (left > right) - (left < right)

    def compare(self, other: Self) -> int:
        """Return -1, 0 or 1 as this value is shorter, equal or longer."""
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return self._compare(other)

    @override
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) == 0  # type: ignore[arg-type]

    @override
    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) != 0  # type: ignore[arg-type]

    @override
    def __lt__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) < 0

    @override
    def __le__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) <= 0

    @override
    def __gt__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) > 0

    @override
    def __ge__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) >= 0

    @override
    def __hash__(self) -> int:
        return hash(self.to_base_units())

    @override
    def __str__(self) -> str:
        return f"{self.quantity} {self.unit.label(self.quantity)}"

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from strings (or existing instances) and serialize via str()."""
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.to_string_ser_schema(),
        )

"""
The value tree: a closed union of the five JSON kinds.

Parsing produces these nodes directly. Caller data headed for the
serializer is classified once by from_python, so the recursive writer only
ever dispatches on this union.
"""

import math
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from decimal import Decimal
from enum import Enum
from numbers import Integral
from numbers import Real
from typing import Any
from typing import Final
from typing import assert_never
from typing import overload

from ._errors import UnsupportedType

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1
INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1


class NumberKind(Enum):
    """
    Numeric representation chosen for a Number.

    The parser only produces INT32, INT64 and FLOAT64; OTHER marks numbers
    supplied by callers (big ints, Decimal, Fraction, numpy scalars).
    """

    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    OTHER = "other"


@dataclass(frozen=True)
class Null:
    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Bool:
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number:
    """
    A numeric value and the representation it was read as.

    Equality is numeric: the kind is metadata and is not compared.
    """

    value: Real | Decimal
    kind: NumberKind = field(default=NumberKind.OTHER, compare=False)

    @classmethod
    def of(cls, value: Real | Decimal) -> "Number":
        """Wraps a number, inferring the narrowest matching kind."""
        if isinstance(value, bool):
            raise UnsupportedType("bool is not a number, use Bool")
        if type(value) is int:
            if INT32_MIN <= value <= INT32_MAX:
                return cls(value, NumberKind.INT32)
            if INT64_MIN <= value <= INT64_MAX:
                return cls(value, NumberKind.INT64)
        elif type(value) is float:
            return cls(value, NumberKind.FLOAT64)
        return cls(value, NumberKind.OTHER)

    def is_finite(self) -> bool:
        if isinstance(self.value, Integral):
            return True
        if isinstance(self.value, Decimal):
            return self.value.is_finite()
        return math.isfinite(self.value)

    def to_text(self) -> str:
        """Canonical decimal text for this number."""
        if isinstance(self.value, Integral):
            return str(int(self.value))
        if isinstance(self.value, Decimal):
            return str(self.value)
        return repr(float(self.value))

    def to_python(self) -> Real | Decimal:
        return self.value


@dataclass(frozen=True)
class String:
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Array(Sequence["Value"]):
    """Ordered, immutable sequence of values."""

    items: tuple["Value", ...] = ()

    @overload
    def __getitem__(self, index: int) -> "Value": ...

    @overload
    def __getitem__(self, index: slice) -> tuple["Value", ...]: ...

    def __getitem__(self, index: int | slice) -> "Value | tuple[Value, ...]":
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Object(Mapping[str, "Value"]):
    """
    Insertion-ordered, immutable mapping of string keys to values.

    Key uniqueness is enforced by the parser only. When a tree built by hand
    repeats a key, lookups see the last occurrence while iteration and
    writing see every member.
    """

    members: tuple[tuple[str, "Value"], ...] = ()
    _index: dict[str, "Value"] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", dict(self.members))

    def __getitem__(self, key: str) -> "Value":
        return self._index[key]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.members)

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.members}


type Value = Null | Bool | Number | String | Array | Object

VALUE_TYPES: Final = (Null, Bool, Number, String, Array, Object)

NULL: Final = Null()
TRUE: Final = Bool(True)
FALSE: Final = Bool(False)


def to_python(value: Value) -> Any:
    """Converts a value tree into plain dicts, lists and scalars."""
    return value.to_python()


def not_serializable(obj: Any) -> UnsupportedType:
    return UnsupportedType(
        f"Object of type {type(obj).__name__} is not JSON serializable"
    )


def bad_key(key: Any) -> UnsupportedType:
    return UnsupportedType(f"keys must be str, not {type(key).__name__}")


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int | float):
        return str(key)
    raise bad_key(key)


def from_python(obj: Any) -> Value:  # noqa: PLR0911
    """
    Classifies caller-supplied data into the closed Value union.

    Order matters: bool before numbers, str before other iterables, and
    mappings before iterables. Value nodes pass through as they are; the
    writer checks what a hand-built node holds when it reaches it.
    """
    if obj is None:
        return NULL
    if isinstance(obj, VALUE_TYPES):
        return obj
    if isinstance(obj, bool):
        return TRUE if obj else FALSE
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, Mapping):
        return Object(
            tuple(
                (_key_text(key), from_python(value))
                for key, value in obj.items()
            )
        )
    if isinstance(obj, Real | Decimal):
        return Number.of(obj)
    if isinstance(obj, Iterable) and not isinstance(
        obj, bytes | bytearray | memoryview
    ):
        return Array(tuple(from_python(item) for item in obj))
    raise not_serializable(obj)


def kind_name(value: Value) -> str:
    """Short lowercase name of a value's variant, used in messages."""
    if isinstance(value, Null):
        return "null"
    elif isinstance(value, Bool):
        return "boolean"
    elif isinstance(value, Number):
        return "number"
    elif isinstance(value, String):
        return "string"
    elif isinstance(value, Array):
        return "array"
    elif isinstance(value, Object):
        return "object"
    else:
        assert_never(value)

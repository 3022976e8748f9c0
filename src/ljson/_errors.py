"""
Error taxonomy shared by the cursor, parser and serializer.

Decode-side errors carry the cursor position at the point of failure; the
encode-side errors describe values the serializer refuses to write.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Position:
    """
    Snapshot of a cursor position.

    `index` counts characters consumed so far, `line` is 1-based and
    `column` is the 1-based column of the last character read on the line
    (0 right after a line terminator).
    """

    index: int = 0
    line: int = 1
    column: int = 0

    def describe(self) -> str:
        return f" at {self.index} [character {self.column} line {self.line}]"


class JsonError(Exception):
    """Root of every error raised by ljson."""


class JSONDecodeError(JsonError, ValueError):
    """
    Handles JSON parsing failures with precise position information.

    The message is kept separate from the rendered position so callers can
    match on `msg` while `str(err)` stays human readable.
    """

    def __init__(self, msg: str, position: Position | None = None) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")

        self.msg = msg
        self.position = position if position is not None else Position()
        self.pos = self.position.index
        self.lineno = self.position.line
        self.colno = self.position.column

        super().__init__(f"{msg}{self.position.describe()}")

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.msg, self.position)


class UnexpectedEof(JSONDecodeError):
    """Input ended where a token, quote or terminator was required."""


class UnterminatedString(JSONDecodeError):
    """A string literal hit a raw line break or the end of input."""


class IllegalEscape(JSONDecodeError):
    """Unrecognized backslash escape inside a string literal."""


class MalformedObject(JSONDecodeError):
    """Structural token missing or out of place inside an object."""


class MalformedArray(JSONDecodeError):
    """Structural token missing or out of place inside an array."""


class DuplicateKey(JSONDecodeError):
    """The same key appeared twice within one object."""

    def __init__(
        self, msg: str, position: Position | None = None, key: str = ""
    ) -> None:
        super().__init__(msg, position)
        self.key = key

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.msg, self.position, self.key)


class MissingValue(JSONDecodeError):
    """
    A required value was absent.

    Raised when a token boundary comes where a value belongs, and when
    parse_string is called where the next value is not a string.
    """


class InvalidLiteral(JSONDecodeError):
    """A raw token is none of true, false, null or a number."""

    def __init__(
        self, msg: str, position: Position | None = None, token: str = ""
    ) -> None:
        super().__init__(msg, position)
        self.token = token

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.msg, self.position, self.token)


class ExtraData(JSONDecodeError):
    """Non-blank input remained after a complete top-level value."""


class NestingTooDeep(JSONDecodeError):
    """Containers nested deeper than the interpreter's recursion limit."""


class IllegalCursorState(JsonError, RuntimeError):
    """
    Pushback requested without a forward read to undo.

    This is a contract violation by the caller, not a problem with the data.
    """


class JSONEncodeError(JsonError):
    """Root of the serializer's errors."""


class NonFiniteNumber(JSONEncodeError, ValueError):
    """Infinite or not-a-number values have no JSON representation."""


class UnsupportedType(JSONEncodeError, TypeError):
    """A value outside the five JSON kinds was handed to the serializer."""

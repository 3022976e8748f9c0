"""
Recursive-descent parser producing value trees from a Cursor.

Beyond strict JSON the grammar accepts trailing commas in objects and
arrays, and unquoted raw tokens which are read as true/false/null or as the
narrowest numeric representation that parses exactly.
"""

import re
from collections.abc import Callable
from typing import Final

from . import _profiling
from ._cursor import BLANK_LIMIT
from ._cursor import EOF
from ._cursor import CharSource
from ._cursor import Cursor
from ._errors import DuplicateKey
from ._errors import IllegalEscape
from ._errors import InvalidLiteral
from ._errors import JSONDecodeError
from ._errors import MalformedArray
from ._errors import MalformedObject
from ._errors import MissingValue
from ._errors import UnexpectedEof
from ._errors import UnterminatedString
from ._value import FALSE
from ._value import INT32_MAX
from ._value import INT32_MIN
from ._value import INT64_MAX
from ._value import INT64_MIN
from ._value import NULL
from ._value import TRUE
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import NumberKind
from ._value import Object
from ._value import String
from ._value import Value
from ._value import kind_name

# Characters that end a raw token, besides anything at or below a space.
TOKEN_BOUNDARIES: Final = frozenset("[]{},:=#")

ESCAPES: Final = {
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
}

_INTEGER_RE: Final = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE: Final = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
_SURROGATE_MIN: Final = 0xD800
_SURROGATE_MAX: Final = 0xDFFF


def _try_int32(token: str) -> int | None:
    if _INTEGER_RE.fullmatch(token) is None:
        return None
    value = int(token)
    return value if INT32_MIN <= value <= INT32_MAX else None


def _try_int64(token: str) -> int | None:
    if _INTEGER_RE.fullmatch(token) is None:
        return None
    value = int(token)
    return value if INT64_MIN <= value <= INT64_MAX else None


def _try_float64(token: str) -> float | None:
    if _FLOAT_RE.fullmatch(token) is None:
        return None
    value = float(token)
    # Overflow to infinity does not count as an exact parse.
    return value if value not in (float("inf"), float("-inf")) else None


# Attempted in order; the first representation that parses wins.
NUMBER_PARSERS: Final[
    tuple[tuple[NumberKind, Callable[[str], int | float | None]], ...]
] = (
    (NumberKind.INT32, _try_int32),
    (NumberKind.INT64, _try_int64),
    (NumberKind.FLOAT64, _try_float64),
)

_LITERALS: Final[dict[str, Value]] = {
    "true": TRUE,
    "false": FALSE,
    "null": NULL,
}


def parse_number(token: str) -> Number | None:
    """Returns the narrowest Number the token parses as, or None."""
    for kind, try_parse in NUMBER_PARSERS:
        value = try_parse(token)
        if value is not None:
            return Number(value, kind)
    return None


def _combine_surrogates(text: str) -> str:
    """Joins escaped UTF-16 surrogate pairs into single code points."""
    if not any(_SURROGATE_MIN <= ord(c) <= _SURROGATE_MAX for c in text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


class JsonParser:
    """
    Parses one JSON-like value at a time from a character source.

    Holds no state between top-level calls beyond the cursor position, so
    several values can be read from one stream in sequence. A parser is a
    single-threaded session; share it between threads only with external
    locking.
    """

    def __init__(self, source: CharSource | str | Cursor) -> None:
        if isinstance(source, Cursor):
            self.cursor = source
        elif isinstance(source, str):
            self.cursor = Cursor.from_string(source)
        else:
            self.cursor = Cursor(source)

    def _chars_read(self) -> int:
        return self.cursor.position.index

    def _error(
        self, error_type: type[JSONDecodeError], msg: str
    ) -> JSONDecodeError:
        return error_type(msg, self.cursor.position)

    def parse_value(self) -> Value:
        """Parses any value, dispatching on the next non-blank character."""
        char = self.cursor.next_non_blank()
        self.cursor.push_back()

        if char == '"':
            return String(self.parse_string())
        elif char == "{":
            return self.parse_object()
        elif char == "[":
            return self.parse_array()
        else:
            return self.parse_raw_token()

    def parse_string(self) -> str:
        """
        Reads a double-quoted string literal, processing backslash escapes.

        Strings cannot span physical lines: a raw LF or CR before the closing
        quote is an UnterminatedString error, as is running out of input.
        A value that does not open with a quote is a MissingValue error.
        """
        with _profiling.ProfileContext("parse_string", self._chars_read):
            char = self.cursor.next_non_blank()
            if char != '"':
                self.cursor.push_back()
                raise self._error(
                    MissingValue,
                    f"Invalid string: expected `\"`, found `{char}`",
                )

            chars: list[str] = []
            while True:
                char = self.cursor.next_or_eof()
                if char == '"':
                    return _combine_surrogates("".join(chars))
                elif char == EOF:
                    raise self._error(
                        UnterminatedString,
                        "Unterminated string: expected `\"`, "
                        "found end of input",
                    )
                elif char in ("\n", "\r"):
                    raise self._error(
                        UnterminatedString,
                        "Unterminated string: expected `\"`, found newline",
                    )
                elif char == "\\":
                    chars.append(self._parse_escape())
                else:
                    chars.append(char)

    def _parse_escape(self) -> str:
        char = self.cursor.next_or_eof()
        if char == EOF:
            raise self._error(
                UnterminatedString,
                "Unterminated string: expected escape, found end of input",
            )
        if char in ESCAPES:
            return ESCAPES[char]
        if char != "u":
            raise self._error(
                IllegalEscape,
                "Illegal escape: expected \\b, \\t, \\n, \\f, \\r, \\u, "
                f"\\\", \\', \\\\ or \\/, found `{char}`",
            )

        try:
            digits = self.cursor.next_chars(4)
        except UnexpectedEof as err:
            raise self._error(
                UnterminatedString,
                "Unterminated string: expected 4 hex digits, "
                "found end of input",
            ) from err
        if not all(digit in _HEX_DIGITS for digit in digits):
            raise self._error(
                IllegalEscape,
                f"Illegal escape: expected 4 hex digits, found `{digits}`",
            )
        return chr(int(digits, 16))

    def parse_raw_token(self) -> Value:
        """
        Reads an unquoted token and interprets it as a literal or number.

        The token runs until end of input or a boundary character, which is
        pushed back for the caller.
        """
        with _profiling.ProfileContext("parse_raw_token", self._chars_read):
            chars: list[str] = []
            char = self.cursor.next_or_eof()
            while char != EOF:
                if char <= BLANK_LIMIT or char in TOKEN_BOUNDARIES:
                    self.cursor.push_back()
                    break
                chars.append(char)
                char = self.cursor.next_or_eof()

            token = "".join(chars)
            if not token:
                if char == EOF:
                    raise self._error(UnexpectedEof, "Unexpected end of input")
                raise self._error(
                    MissingValue,
                    f"Missing value: expected item, found `{char}`",
                )

            literal = _LITERALS.get(token.lower())
            if literal is not None:
                return literal

            number = parse_number(token)
            if number is not None:
                return number

            raise InvalidLiteral(
                "Invalid item: expected true, false, null or number, "
                f"found `{token}`",
                self.cursor.position,
                token=token,
            )

    def _parse_key(self) -> str:
        key = self.parse_value()
        if isinstance(key, String):
            return key.value
        elif isinstance(key, Bool):
            return "true" if key.value else "false"
        elif isinstance(key, Null):
            return "null"
        elif isinstance(key, Number):
            return key.to_text()
        raise self._error(
            MalformedObject,
            f"Invalid key: expected string or literal, found {kind_name(key)}",
        )

    def parse_object(self) -> Object:
        """
        Parses an object; trailing commas before `}` are accepted.

        Keys may be quoted strings or raw tokens. A key seen twice in the
        same object is a DuplicateKey error rather than an overwrite.
        """
        with _profiling.ProfileContext("parse_object", self._chars_read):
            char = self.cursor.next_non_blank()
            if char != "{":
                self.cursor.push_back()
                raise self._error(
                    MalformedObject,
                    f"Invalid object: expected `{{`, found `{char}`",
                )

            members: dict[str, Value] = {}
            while True:
                if self.cursor.next_non_blank() == "}":
                    return Object(tuple(members.items()))
                self.cursor.push_back()
                key = self._parse_key()

                char = self.cursor.next_non_blank()
                if char != ":":
                    raise self._error(
                        MalformedObject,
                        f"Expected `:` after key, found `{char}`",
                    )
                value = self.parse_value()
                if key in members:
                    raise DuplicateKey(
                        f'Expected unique key, found duplicate key "{key}"',
                        self.cursor.position,
                        key=key,
                    )
                members[key] = value

                char = self.cursor.next_non_blank()
                if char == ",":
                    if self.cursor.next_non_blank() == "}":
                        return Object(tuple(members.items()))
                    self.cursor.push_back()
                elif char == "}":
                    return Object(tuple(members.items()))
                else:
                    raise self._error(
                        MalformedObject,
                        f"Expected `,` or `}}`, found `{char}`",
                    )

    def parse_array(self) -> Array:
        """Parses an array; trailing commas before `]` are accepted."""
        with _profiling.ProfileContext("parse_array", self._chars_read):
            char = self.cursor.next_non_blank()
            if char != "[":
                self.cursor.push_back()
                raise self._error(
                    MalformedArray,
                    f"Invalid array: expected `[`, found `{char}`",
                )

            items: list[Value] = []
            if self.cursor.next_non_blank() == "]":
                return Array(())
            self.cursor.push_back()

            while True:
                if self.cursor.next_non_blank() == ",":
                    raise self._error(
                        MalformedArray,
                        "Invalid array: expected item, found `,`",
                    )
                self.cursor.push_back()
                items.append(self.parse_value())

                char = self.cursor.next_non_blank()
                if char == ",":
                    if self.cursor.next_non_blank() == "]":
                        return Array(tuple(items))
                    self.cursor.push_back()
                elif char == "]":
                    return Array(tuple(items))
                else:
                    raise self._error(
                        MalformedArray, f"Expected `,` or `]`, found `{char}`"
                    )

    def at_end(self) -> bool:
        """
        Consumes trailing blanks and reports whether input is exhausted.

        A non-blank character found on the way is pushed back.
        """
        if self.cursor.next_non_blank_or_eof() == EOF:
            return True
        self.cursor.push_back()
        return False

    def position_description(self) -> str:
        return self.cursor.position_description()

    def __str__(self) -> str:
        return f"JsonParser{self.position_description()}"

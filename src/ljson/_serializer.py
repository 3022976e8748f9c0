"""
Writes value trees as JSON text to a character sink.

indent_width == 0 gives compact output with no inserted whitespace; a
positive width pretty-prints with that many spaces per nesting level. The
public write_* functions classify caller data once on entry, after which
the recursive writer only sees the closed Value union.
"""

from collections.abc import Iterable
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any
from typing import Final
from typing import Protocol

from . import _profiling
from ._errors import NonFiniteNumber
from ._errors import UnsupportedType
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value
from ._value import bad_key
from ._value import from_python
from ._value import not_serializable

SHORT_ESCAPES: Final = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


class CharSink(Protocol):
    """Anything that accepts text."""

    def write(self, text: str, /) -> Any: ...


def _needs_unicode_escape(char: str) -> bool:
    code = ord(char)
    return (
        code < 0x20
        or 0x80 <= code <= 0x9F
        or 0x2000 <= code <= 0x20FF
    )


def escape_string(text: str) -> str:
    """
    Renders text as a quoted JSON string literal.

    `/` is escaped only directly after `<` so an embedded `</script>` cannot
    close a surrounding HTML script block.
    """
    result = ['"']
    previous = ""
    for char in text:
        if char in SHORT_ESCAPES:
            result.append(SHORT_ESCAPES[char])
        elif char == "/":
            result.append("\\/" if previous == "<" else "/")
        elif _needs_unicode_escape(char):
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
        previous = char
    result.append('"')
    return "".join(result)


class _CountingSink:
    """Forwards writes to a sink while counting them into a profile."""

    def __init__(self, sink: CharSink, profile: Any) -> None:
        self._sink = sink
        self._profile = profile

    def write(self, text: str, /) -> Any:
        self._profile.add_chars(len(text))
        return self._sink.write(text)


def _write_indent(sink: CharSink, amount: int) -> None:
    if amount > 0:
        sink.write(" " * amount)


def _write_number(sink: CharSink, number: Number) -> None:
    if isinstance(number.value, bool) or not isinstance(
        number.value, Real | Decimal
    ):
        raise not_serializable(number.value)
    if not number.is_finite():
        raise NonFiniteNumber(
            f"Expected finite number, found `{number.value}`"
        )
    sink.write(number.to_text())


def _write_array(
    sink: CharSink, array: Array, indent_width: int, current_indent: int
) -> None:
    new_indent = current_indent + indent_width
    sink.write("[")
    for i, item in enumerate(array.items):
        if i:
            sink.write(",")
        if indent_width > 0:
            sink.write("\n")
        _write_indent(sink, new_indent)
        _write_value(sink, item, indent_width, new_indent)
    if indent_width > 0:
        sink.write("\n")
    _write_indent(sink, current_indent)
    sink.write("]")


def _write_member(
    sink: CharSink, key: str, value: Value, indent_width: int, indent: int
) -> None:
    if not isinstance(key, str):
        raise bad_key(key)
    sink.write(escape_string(key))
    sink.write(": " if indent_width > 0 else ":")
    _write_value(sink, value, indent_width, indent)


def _write_object(
    sink: CharSink, obj: Object, indent_width: int, current_indent: int
) -> None:
    sink.write("{")
    if len(obj.members) == 1:
        # A single entry stays on the opening line.
        key, value = obj.members[0]
        _write_member(sink, key, value, indent_width, current_indent)
    elif obj.members:
        new_indent = current_indent + indent_width
        for i, (key, value) in enumerate(obj.members):
            if i:
                sink.write(",")
            if indent_width > 0:
                sink.write("\n")
            _write_indent(sink, new_indent)
            _write_member(sink, key, value, indent_width, new_indent)
        if indent_width > 0:
            sink.write("\n")
        _write_indent(sink, current_indent)
    sink.write("}")


def _write_value(
    sink: CharSink, value: Value, indent_width: int, current_indent: int
) -> None:
    if isinstance(value, Null):
        sink.write("null")
    elif isinstance(value, Object):
        _write_object(sink, value, indent_width, current_indent)
    elif isinstance(value, Array):
        _write_array(sink, value, indent_width, current_indent)
    elif isinstance(value, Number):
        _write_number(sink, value)
    elif isinstance(value, Bool):
        sink.write("true" if value.value else "false")
    elif isinstance(value, String) and isinstance(value.value, str):
        sink.write(escape_string(value.value))
    else:
        # Reached by hand-built nodes holding plain Python data.
        inner = value.value if isinstance(value, String) else value
        raise not_serializable(inner)


def _check_indent(indent_width: int, current_indent: int) -> None:
    if indent_width < 0 or current_indent < 0:
        raise ValueError("indent widths must be non-negative")


def write_value(
    sink: CharSink,
    value: Any,
    indent_width: int = 0,
    current_indent: int = 0,
) -> CharSink:
    """
    Writes any supported value to the sink.

    Accepts a Value tree or plain Python data: None, bool, str, real numbers,
    mappings and other iterables. Anything else raises UnsupportedType.
    Cycles are not detected.
    """
    _check_indent(indent_width, current_indent)
    tree = from_python(value)
    with _profiling.ProfileContext("write_value") as profile:
        target = (
            _CountingSink(sink, profile)
            if _profiling.PROFILE_HOT_PATHS
            else sink
        )
        _write_value(target, tree, indent_width, current_indent)
    return sink


def write_object(
    sink: CharSink,
    obj: Object | Mapping[Any, Any],
    indent_width: int = 0,
    current_indent: int = 0,
) -> CharSink:
    """Writes a mapping as a JSON object."""
    _check_indent(indent_width, current_indent)
    value = from_python(obj)
    if not isinstance(value, Object):
        raise UnsupportedType(
            f"Expected a mapping, found {type(obj).__name__}"
        )
    _write_object(sink, value, indent_width, current_indent)
    return sink


def write_array(
    sink: CharSink,
    items: Array | Iterable[Any],
    indent_width: int = 0,
    current_indent: int = 0,
) -> CharSink:
    """Writes an iterable as a JSON array."""
    _check_indent(indent_width, current_indent)
    value = from_python(items)
    if not isinstance(value, Array):
        raise UnsupportedType(
            f"Expected an iterable, found {type(items).__name__}"
        )
    _write_array(sink, value, indent_width, current_indent)
    return sink


def write_string(sink: CharSink, text: String | str) -> CharSink:
    value = from_python(text)
    if not isinstance(value, String):
        raise UnsupportedType(f"Expected a str, found {type(text).__name__}")
    sink.write(escape_string(value.value))
    return sink


def write_number(sink: CharSink, number: Any) -> CharSink:
    """Writes a number; infinities and NaN raise NonFiniteNumber."""
    value = from_python(number)
    if not isinstance(value, Number):
        raise UnsupportedType(
            f"Expected a number, found {type(number).__name__}"
        )
    _write_number(sink, value)
    return sink

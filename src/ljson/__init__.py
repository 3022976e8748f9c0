"""
Lenient JSON reader and writer built around a pushback cursor.

Parsing produces an immutable value tree (Null, Bool, Number, String, Array,
Object) and tolerates trailing commas and unquoted literal tokens. Writing
accepts value trees or plain Python data and emits compact or indented text.
"""

import io
import logging
from typing import IO
from typing import Any

from ._config import EncodeConfig
from ._config import ParseConfig
from ._cursor import EOF
from ._cursor import Cursor
from ._errors import DuplicateKey
from ._errors import ExtraData
from ._errors import IllegalCursorState
from ._errors import IllegalEscape
from ._errors import InvalidLiteral
from ._errors import JSONDecodeError
from ._errors import JSONEncodeError
from ._errors import JsonError
from ._errors import MalformedArray
from ._errors import MalformedObject
from ._errors import MissingValue
from ._errors import NestingTooDeep
from ._errors import NonFiniteNumber
from ._errors import Position
from ._errors import UnexpectedEof
from ._errors import UnsupportedType
from ._errors import UnterminatedString
from ._parser import JsonParser
from ._parser import parse_number
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import get_hot_path_stats
from ._serializer import escape_string
from ._serializer import write_array
from ._serializer import write_number
from ._serializer import write_object
from ._serializer import write_string
from ._serializer import write_value
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import NumberKind
from ._value import Object
from ._value import String
from ._value import Value
from ._value import from_python
from ._value import to_python

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _parse(parser: JsonParser, config: ParseConfig) -> Value:
    try:
        result = parser.parse_value()
        if not config.allow_extra_data and not parser.at_end():
            raise ExtraData("Extra data", parser.cursor.position)
    except JSONDecodeError as err:
        logger.debug("JSON parse failed: %s", err)
        raise
    except RecursionError as err:
        nesting = NestingTooDeep(
            "Maximum nesting depth exceeded", parser.cursor.position
        )
        logger.debug("JSON parse failed: %s", nesting)
        raise nesting from err
    return result


def loads(s: str, **kwargs: Any) -> Value:
    """
    Parses one JSON value from a string.

    Keyword arguments build a ParseConfig. Trailing non-blank input is an
    ExtraData error unless allow_extra_data=True.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )

    config = ParseConfig(**kwargs)
    return _parse(JsonParser(s), config)


def load(fp: IO[str], **kwargs: Any) -> Value:
    """
    Parses one JSON value from a text stream.

    The stream is read one character at a time, so slow sources should be
    buffered by the caller.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    config = ParseConfig(**kwargs)
    return _parse(JsonParser(fp), config)


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes a value tree or plain Python data to a JSON string.

    Keyword arguments build an EncodeConfig.
    """
    config = EncodeConfig(**kwargs)
    sink = io.StringIO()
    try:
        write_value(sink, obj, config.indent)
    except JSONEncodeError as err:
        logger.debug("JSON encode failed: %s", err)
        raise
    return sink.getvalue()


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes to a text stream.

    The text is built in full before the single write, so a failed encode
    leaves fp untouched.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(obj, **kwargs))


__all__ = [
    "EOF",
    "Array",
    "Bool",
    "Cursor",
    "DuplicateKey",
    "EncodeConfig",
    "ExtraData",
    "HotPathStats",
    "IllegalCursorState",
    "IllegalEscape",
    "InvalidLiteral",
    "JSONDecodeError",
    "JSONEncodeError",
    "JsonError",
    "JsonParser",
    "MalformedArray",
    "MalformedObject",
    "MissingValue",
    "NestingTooDeep",
    "NonFiniteNumber",
    "Null",
    "Number",
    "NumberKind",
    "Object",
    "ParseConfig",
    "Position",
    "String",
    "UnexpectedEof",
    "UnsupportedType",
    "UnterminatedString",
    "Value",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "escape_string",
    "from_python",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse_number",
    "to_python",
    "write_array",
    "write_number",
    "write_object",
    "write_string",
    "write_value",
]

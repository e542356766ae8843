"""
JSON parsing and serialization over an explicit tagged value tree.

``parse`` turns JSON text into a tree of ``Null``, ``Bool``, ``Number``,
``String``, ``Array`` and ``Object`` values, returning a ``Success`` or a
``Failure`` that pinpoints the offending offset. ``stringify`` turns a tree
back into compact or pretty-printed JSON text.
"""

import logging
from dataclasses import replace
from os import PathLike
from typing import IO

from jsontree._config import DEFAULT_PARSE_CONFIG
from jsontree._config import EncodeConfig
from jsontree._config import ParseConfig
from jsontree._errors import ErrorKind
from jsontree._errors import JSONParseError
from jsontree._errors import UnsupportedValueError
from jsontree._offsets import OffsetMapper
from jsontree._parser import parse_array
from jsontree._parser import parse_number
from jsontree._parser import parse_object
from jsontree._parser import parse_string
from jsontree._parser import parse_value
from jsontree._profiling import HotPathStats
from jsontree._profiling import clear_hot_path_stats
from jsontree._profiling import get_hot_path_stats
from jsontree._profiling import profile
from jsontree._result import Failure
from jsontree._result import ParseResult
from jsontree._result import Success
from jsontree._serializer import encode_value
from jsontree._tokenizer import Token
from jsontree._tokenizer import TokenKind
from jsontree._tokenizer import next_token
from jsontree._tokenizer import peek_kind
from jsontree._tokenizer import skip_whitespace
from jsontree._value import Array
from jsontree._value import Bool
from jsontree._value import Null
from jsontree._value import Number
from jsontree._value import Object
from jsontree._value import String
from jsontree._value import Value
from jsontree._value import ValueKind
from jsontree._value import from_python
from jsontree._value import to_python

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

type StrPath = str | PathLike[str]


def parse(text: str, config: ParseConfig | None = None) -> ParseResult[Value]:
    """
    Parses one JSON value from the start of ``text``.

    Returns ``Success(value, index)`` where ``index`` is the cursor after the
    value, or ``Failure(kind, index)``. Text after the value is ignored
    unless ``config.reject_trailing_data`` is set.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON text must be str, not {type(text).__name__}"
        )

    config = config or DEFAULT_PARSE_CONFIG
    with profile("parse", len(text)):
        result = parse_value(text, 0, config)

    if isinstance(result, Success) and config.reject_trailing_data:
        rest = skip_whitespace(text, result.index)
        if rest < len(text):
            result = Failure(ErrorKind.TRAILING_DATA, rest)

    if isinstance(result, Failure):
        logger.debug("Parse failed: %s", result.message)
    return result


def load(fp: IO[str], config: ParseConfig | None = None) -> ParseResult[Value]:
    """
    Parses JSON from a text file object, reading it whole.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), config)


def parse_file(
    path: StrPath, config: ParseConfig | None = None
) -> ParseResult[Value]:
    """
    Reads a UTF-8 file and parses its contents.

    ``OSError`` from opening or reading the file propagates unchanged.
    """
    with open(path, encoding="utf-8") as fp:
        text = fp.read()
    logger.debug("Read %d characters from %s", len(text), path)
    return parse(text, config)


def stringify(
    value: Value, pretty: bool = False, *, config: EncodeConfig | None = None
) -> str:
    """
    Serializes a value tree to JSON text.

    ``pretty`` puts each element on its own line, indented two spaces per
    level. A supplied ``config`` controls escaping, indentation and whether
    unrecognised values raise; ``pretty=True`` overrides its ``pretty``.
    """
    if config is None:
        config = EncodeConfig(pretty=pretty)
    elif pretty and not config.pretty:
        config = replace(config, pretty=True)
    return encode_value(value, config)


def dump(
    value: Value,
    fp: IO[str],
    pretty: bool = False,
    *,
    config: EncodeConfig | None = None,
) -> None:
    """
    Serializes a value tree into a text file object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(stringify(value, pretty, config=config))


def write_file(
    value: Value,
    path: StrPath,
    pretty: bool = False,
    *,
    config: EncodeConfig | None = None,
) -> None:
    """
    Serializes a value tree into a UTF-8 file, replacing its contents.

    The text is produced before the file is opened, so a serialization
    error leaves an existing file untouched. ``OSError`` propagates
    unchanged.
    """
    text = stringify(value, pretty, config=config)
    with open(path, "w", encoding="utf-8") as fp:
        fp.write(text)
    logger.debug("Wrote %d characters to %s", len(text), path)


__all__ = [
    "Array",
    "Bool",
    "EncodeConfig",
    "ErrorKind",
    "Failure",
    "HotPathStats",
    "JSONParseError",
    "Null",
    "Number",
    "Object",
    "OffsetMapper",
    "ParseConfig",
    "ParseResult",
    "String",
    "Success",
    "Token",
    "TokenKind",
    "UnsupportedValueError",
    "Value",
    "ValueKind",
    "clear_hot_path_stats",
    "dump",
    "from_python",
    "get_hot_path_stats",
    "load",
    "next_token",
    "parse",
    "parse_array",
    "parse_file",
    "parse_number",
    "parse_object",
    "parse_string",
    "parse_value",
    "peek_kind",
    "stringify",
    "to_python",
    "write_file",
]

"""
Serializer from value trees to JSON text.

Containers are expanded onto an explicit work stack of pending text
fragments and child values, so arbitrarily deep trees serialize without
recursion.
"""

from __future__ import annotations

import math
from typing import Any
from typing import Final

from jsontree._config import EncodeConfig
from jsontree._errors import UnsupportedValueError
from jsontree._profiling import profile
from jsontree._value import Array
from jsontree._value import Bool
from jsontree._value import Null
from jsontree._value import Number
from jsontree._value import Object
from jsontree._value import String

ASCII_LIMIT: Final = 127
# Integral floats below this magnitude are written without an exponent
INTEGRAL_LIMIT: Final = 1e16

_ESCAPES: Final = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _encode_string(s: str, config: EncodeConfig) -> str:
    """Encode string with proper escape sequences."""
    if not config.escape_strings:
        return f'"{s}"'

    result = ['"']
    for char in s:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            result.append(escaped)
        elif char < " ":
            result.append(f"\\u{ord(char):04x}")
        elif config.ensure_ascii and ord(char) > ASCII_LIMIT:
            result.append(_ascii_escape(char))
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _ascii_escape(char: str) -> str:
    code_point = ord(char)
    if code_point <= 0xFFFF:
        return f"\\u{code_point:04x}"
    code_point -= 0x10000
    high = 0xD800 | (code_point >> 10)
    low = 0xDC00 | (code_point & 0x3FF)
    return f"\\u{high:04x}\\u{low:04x}"


def _encode_number(n: float, config: EncodeConfig) -> str:
    """Encode numeric values with JSON compliance."""
    number = float(n)
    if not math.isfinite(number):
        if config.strict:
            raise UnsupportedValueError(n)
        return "null"
    if number == 0 and math.copysign(1.0, number) < 0:
        return "-0"
    if number.is_integer() and abs(number) < INTEGRAL_LIMIT:
        return str(int(number))
    return repr(number)


def _encode_fallback(obj: Any, config: EncodeConfig) -> str:
    """Best-effort rendering of anything that is not a value."""
    if config.strict:
        raise UnsupportedValueError(obj)
    return _encode_string(f"[Object {type(obj).__name__}]", config)


def _encode_key(key: Any, config: EncodeConfig) -> str:
    if not isinstance(key, str):
        if config.strict:
            raise UnsupportedValueError(key)
        key = str(key)
    return _encode_string(key, config)


def _encode_scalar(obj: Any, config: EncodeConfig) -> str:
    if isinstance(obj, Null):
        return "null"
    elif isinstance(obj, Bool):
        return "true" if obj.value else "false"
    elif isinstance(obj, Number):
        return _encode_number(obj.value, config)
    elif isinstance(obj, String):
        return _encode_string(obj.value, config)
    return _encode_fallback(obj, config)


def _newline(config: EncodeConfig, level: int) -> str:
    return "\n" + " " * (config.indent * level)


def _expand_array(
    arr: Array, config: EncodeConfig, level: int
) -> list[str | tuple[Any, int]]:
    """Lay out an array as fragments and child values, in output order."""
    if not arr.items:
        return ["[]"]

    parts: list[str | tuple[Any, int]] = ["["]
    for i, item in enumerate(arr.items):
        if i:
            parts.append(",")
        if config.pretty:
            parts.append(_newline(config, level + 1))
        parts.append((item, level + 1))
    if config.pretty:
        parts.append(_newline(config, level))
    parts.append("]")
    return parts


def _expand_object(
    obj: Object, config: EncodeConfig, level: int
) -> list[str | tuple[Any, int]]:
    """Lay out an object as fragments and child values, in output order."""
    if not obj.members:
        return ["{}"]

    key_separator = ": " if config.pretty else ":"
    parts: list[str | tuple[Any, int]] = ["{"]
    for i, (key, value) in enumerate(obj.members.items()):
        if i:
            parts.append(",")
        if config.pretty:
            parts.append(_newline(config, level + 1))
        parts.append(_encode_key(key, config) + key_separator)
        parts.append((value, level + 1))
    if config.pretty:
        parts.append(_newline(config, level))
    parts.append("}")
    return parts


def encode_value(obj: Any, config: EncodeConfig) -> str:
    """Encode a value tree, compact or pretty-printed per ``config``."""
    with profile("encode_value"):
        output: list[str] = []
        pending: list[str | tuple[Any, int]] = [(obj, 0)]

        while pending:
            item = pending.pop()
            if isinstance(item, str):
                output.append(item)
                continue

            node, level = item
            if isinstance(node, Array):
                pending.extend(reversed(_expand_array(node, config, level)))
            elif isinstance(node, Object):
                pending.extend(reversed(_expand_object(node, config, level)))
            else:
                output.append(_encode_scalar(node, config))

        return "".join(output)

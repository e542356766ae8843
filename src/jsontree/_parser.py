"""
JSON value parser over the stateless tokenizer.

Each sub-parser takes the source text and a cursor and returns a
``ParseResult``. Dispatch is two-phase: the tokenizer classifies the next
token, then the owning sub-parser scans it from the token start.

Nesting is tracked on an explicit stack of open containers rather than the
Python call stack, so deeply nested documents parse without touching the
interpreter's recursion limit. Error positions are the same as a recursive
implementation would report.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final
from typing import cast

from jsontree._config import DEFAULT_PARSE_CONFIG
from jsontree._config import ParseConfig
from jsontree._errors import ErrorKind
from jsontree._errors import Position
from jsontree._profiling import profile
from jsontree._result import Failure
from jsontree._result import ParseResult
from jsontree._result import Success
from jsontree._tokenizer import Token
from jsontree._tokenizer import TokenKind
from jsontree._tokenizer import next_token
from jsontree._tokenizer import number_end
from jsontree._tokenizer import skip_whitespace
from jsontree._value import Array
from jsontree._value import Bool
from jsontree._value import Null
from jsontree._value import Number
from jsontree._value import Object
from jsontree._value import String
from jsontree._value import Value

NUMBER_PATTERN: Final = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")

_PLAIN_RUN: Final = re.compile(r'[^"\\]+')
_SIMPLE_ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def parse_string(text: str, index: Position) -> ParseResult[str]:
    """
    Parses a quoted string starting at ``index``, resolving escapes.

    Unknown escape characters are dropped. Surrogate pair escapes are
    combined into a single code point; a lone surrogate is kept as-is.
    """
    with profile("parse_string"):
        start = skip_whitespace(text, index)
        length = len(text)
        if start >= length or text[start] != '"':
            return Failure(ErrorKind.NO_VALUE_FOUND, start)

        chunks: list[str] = []
        pos = start + 1
        while pos < length:
            run = _PLAIN_RUN.match(text, pos)
            if run:
                chunks.append(run.group())
                pos = run.end()
                continue

            if text[pos] == '"':
                return Success("".join(chunks), pos + 1)

            # Backslash
            if pos + 1 >= length:
                return Failure(ErrorKind.UNTERMINATED_ESCAPE, length)

            escape = text[pos + 1]
            if escape == "u":
                decoded = _decode_unicode_escape(text, pos)
                if isinstance(decoded, Failure):
                    return decoded
                chunks.append(decoded.value)
                pos = decoded.index
                continue

            replacement = _SIMPLE_ESCAPES.get(escape)
            if replacement is not None:
                chunks.append(replacement)
            pos += 2

        return Failure(ErrorKind.UNTERMINATED_STRING, length)


def _read_hex_quad(text: str, pos: Position) -> ParseResult[int]:
    """Reads the hex digits of the ``\\uXXXX`` escape whose backslash is at ``pos``."""
    digits = text[pos + 2 : pos + 6]
    if len(digits) < 4:
        return Failure(ErrorKind.TRUNCATED_UNICODE_ESCAPE, pos)
    if not all(char in HEX_DIGITS for char in digits):
        return Failure(ErrorKind.INVALID_UNICODE_ESCAPE, pos, f"\\u{digits}")
    return Success(int(digits, 16), pos + 6)


def _decode_unicode_escape(text: str, pos: Position) -> ParseResult[str]:
    high = _read_hex_quad(text, pos)
    if isinstance(high, Failure):
        return high

    code_point = high.value
    end = high.index
    if 0xD800 <= code_point <= 0xDBFF and text.startswith("\\u", end):
        low = _read_hex_quad(text, end)
        # A malformed second escape is reported when the loop reaches it
        if isinstance(low, Success) and 0xDC00 <= low.value <= 0xDFFF:
            code_point = 0x10000 + ((code_point - 0xD800) << 10)
            code_point += low.value - 0xDC00
            end = low.index

    return Success(chr(code_point), end)


def parse_number(text: str, index: Position) -> ParseResult[float]:
    """
    Parses a number starting at ``index``.

    The tokenizer's lexical scan bounds the literal; the literal must then
    match ``-?digits[.digits][(e|E)[+|-]digits]``. Leading zeros are
    accepted.
    """
    with profile("parse_number"):
        start = skip_whitespace(text, index)
        end = number_end(text, start)
        literal = text[start:end]
        if not NUMBER_PATTERN.fullmatch(literal):
            return Failure(ErrorKind.INVALID_NUMBER, start, literal)
        return Success(float(literal), end)


def _parse_scalar(text: str, token: Token) -> ParseResult[Value]:
    """Builds the leaf value introduced by ``token``."""
    kind = token.kind
    if kind is TokenKind.STRING:
        string = parse_string(text, token.start)
        if isinstance(string, Failure):
            return string
        return Success(String(string.value), string.index)
    elif kind is TokenKind.NUMBER:
        number = parse_number(text, token.start)
        if isinstance(number, Failure):
            return number
        return Success(Number(number.value), number.index)
    elif kind is TokenKind.TRUE:
        return Success(Bool(True), token.end)
    elif kind is TokenKind.FALSE:
        return Success(Bool(False), token.end)
    elif kind is TokenKind.NULL:
        return Success(Null(), token.end)
    return Failure(ErrorKind.NO_VALUE_FOUND, token.start)


@dataclass
class _OpenContainer:
    """
    Parser state for one array or object that has been opened but not closed.

    ``expecting_value`` is true right after a complete element or pair,
    which is when a comma is legal. ``comma_index`` remembers a comma that
    has not yet been followed by a member.
    """

    container: Array | Object
    close: TokenKind
    unterminated: ErrorKind
    missing_member: ErrorKind
    expecting_value: bool = False
    comma_index: Position | None = None
    key: str = ""

    @classmethod
    def opened_by(cls, kind: TokenKind) -> _OpenContainer:
        if kind is TokenKind.OBJECT_OPEN:
            return cls(
                Object(),
                TokenKind.OBJECT_CLOSE,
                ErrorKind.UNTERMINATED_OBJECT,
                ErrorKind.MISSING_KEY_VALUE,
            )
        return cls(
            Array(),
            TokenKind.ARRAY_CLOSE,
            ErrorKind.UNTERMINATED_ARRAY,
            ErrorKind.MISSING_VALUE,
        )

    def attach(self, value: Value) -> None:
        if isinstance(self.container, Object):
            self.container.set_member(self.key, value)
        else:
            self.container.items.append(value)
        self.expecting_value = True
        self.comma_index = None


_OPENERS: Final = frozenset({TokenKind.OBJECT_OPEN, TokenKind.ARRAY_OPEN})


def _advance_container(
    text: str, index: Position, frame: _OpenContainer, config: ParseConfig
) -> ParseResult[bool]:
    """
    Consumes separators inside an open container.

    Succeeds with ``True`` and the cursor past the closing bracket once the
    container is closed, or with ``False`` and the cursor where the next
    element value (or object member value, after its key and colon) starts.
    """
    while True:
        token = next_token(text, index)

        if token.kind is TokenKind.END:
            return Failure(frame.unterminated, token.start)

        if token.kind is TokenKind.COMMA:
            if not frame.expecting_value:
                return Failure(frame.missing_member, token.start)
            frame.expecting_value = False
            frame.comma_index = token.start
            index = token.end
            continue

        if token.kind is frame.close:
            if frame.comma_index is not None and not config.allow_trailing_comma:
                return Failure(ErrorKind.TRAILING_COMMA, frame.comma_index)
            return Success(True, token.end)

        if frame.expecting_value:
            return Failure(ErrorKind.MISSING_COMMA, token.start)

        if isinstance(frame.container, Array):
            return Success(False, token.start)

        if token.kind is not TokenKind.STRING:
            return Failure(ErrorKind.INVALID_KEY, token.start)
        key = parse_string(text, token.start)
        if isinstance(key, Failure):
            return key

        colon = next_token(text, key.index)
        if colon.kind is not TokenKind.COLON:
            return Failure(ErrorKind.MISSING_COLON, colon.start)

        frame.key = key.value
        return Success(False, colon.end)


def _parse_tree(
    text: str, index: Position, config: ParseConfig
) -> ParseResult[Value]:
    stack: list[_OpenContainer] = []

    while True:
        # A value starts at index
        token = next_token(text, index)
        if token.kind in _OPENERS:
            if config.max_depth is not None and len(stack) >= config.max_depth:
                return Failure(ErrorKind.NESTING_TOO_DEEP, token.start)
            stack.append(_OpenContainer.opened_by(token.kind))
            index = token.end
        else:
            scalar = _parse_scalar(text, token)
            if isinstance(scalar, Failure) or not stack:
                return scalar
            stack[-1].attach(scalar.value)
            index = scalar.index

        # Close finished containers until one needs another value
        while True:
            frame = stack[-1]
            step = _advance_container(text, index, frame, config)
            if isinstance(step, Failure):
                return step
            index = step.index
            if not step.value:
                break

            stack.pop()
            if not stack:
                return Success(frame.container, index)
            stack[-1].attach(frame.container)


def parse_value(
    text: str, index: Position = 0, config: ParseConfig | None = None
) -> ParseResult[Value]:
    """Parses any JSON value starting at ``index``."""
    with profile("parse_value"):
        return _parse_tree(text, index, config or DEFAULT_PARSE_CONFIG)


def parse_object(
    text: str, index: Position = 0, config: ParseConfig | None = None
) -> ParseResult[Object]:
    """Parses a JSON object starting at ``index``."""
    token = next_token(text, index)
    if token.kind is not TokenKind.OBJECT_OPEN:
        return Failure(ErrorKind.NO_VALUE_FOUND, token.start)
    with profile("parse_object"):
        result = _parse_tree(text, index, config or DEFAULT_PARSE_CONFIG)
    return cast("ParseResult[Object]", result)


def parse_array(
    text: str, index: Position = 0, config: ParseConfig | None = None
) -> ParseResult[Array]:
    """Parses a JSON array starting at ``index``."""
    token = next_token(text, index)
    if token.kind is not TokenKind.ARRAY_OPEN:
        return Failure(ErrorKind.NO_VALUE_FOUND, token.start)
    with profile("parse_array"):
        result = _parse_tree(text, index, config or DEFAULT_PARSE_CONFIG)
    return cast("ParseResult[Array]", result)

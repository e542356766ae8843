"""Error taxonomy and the exceptions raised at the library boundary."""

from __future__ import annotations

from enum import Enum
from functools import cached_property

from jsontree._offsets import OffsetMapper

type Position = int


class ErrorKind(Enum):
    """
    Classifies every failure the parser or serializer can report.

    The enum value is the stable kind name used in diagnostics.
    """

    UNTERMINATED_STRING = "UnterminatedString"
    UNTERMINATED_ESCAPE = "UnterminatedEscape"
    TRUNCATED_UNICODE_ESCAPE = "TruncatedUnicodeEscape"
    INVALID_UNICODE_ESCAPE = "InvalidUnicodeEscape"
    INVALID_NUMBER = "InvalidNumber"
    UNTERMINATED_OBJECT = "UnterminatedObject"
    MISSING_KEY_VALUE = "MissingKeyValue"
    MISSING_COMMA = "MissingComma"
    MISSING_COLON = "MissingColon"
    INVALID_KEY = "InvalidKey"
    UNTERMINATED_ARRAY = "UnterminatedArray"
    MISSING_VALUE = "MissingValue"
    NO_VALUE_FOUND = "NoValueFound"
    TRAILING_COMMA = "TrailingComma"
    TRAILING_DATA = "TrailingData"
    NESTING_TOO_DEEP = "NestingTooDeep"
    UNSUPPORTED_VALUE = "UnsupportedValue"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.UNTERMINATED_STRING: "Unterminated string",
    ErrorKind.UNTERMINATED_ESCAPE: "Unterminated escape sequence",
    ErrorKind.TRUNCATED_UNICODE_ESCAPE: "Incomplete unicode escape sequence",
    ErrorKind.INVALID_UNICODE_ESCAPE: "Invalid unicode escape sequence",
    ErrorKind.INVALID_NUMBER: "Invalid number",
    ErrorKind.UNTERMINATED_OBJECT: "Unterminated object",
    ErrorKind.MISSING_KEY_VALUE: "Expecting key/value pair before ','",
    ErrorKind.MISSING_COMMA: "Expecting ',' delimiter",
    ErrorKind.MISSING_COLON: "Expecting ':' delimiter",
    ErrorKind.INVALID_KEY: "Expecting property name enclosed in double quotes",
    ErrorKind.UNTERMINATED_ARRAY: "Unterminated array",
    ErrorKind.MISSING_VALUE: "Expecting value before ','",
    ErrorKind.NO_VALUE_FOUND: "Expecting value",
    ErrorKind.TRAILING_COMMA: "Illegal trailing comma",
    ErrorKind.TRAILING_DATA: "Extra data",
    ErrorKind.NESTING_TOO_DEEP: "Maximum nesting depth exceeded",
    ErrorKind.UNSUPPORTED_VALUE: "Value is not JSON serializable",
}


class JSONParseError(ValueError):
    """
    Reports a parse failure with its position in the source document.

    Carries the error kind, the character offset, and the line and column
    derived from it so callers can point at the offending text.
    """

    def __init__(
        self, kind: ErrorKind, msg: str, doc: str = "", pos: Position = 0
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno, self.colno = OffsetMapper(doc).line_col(pos)

        super().__init__(
            f"{msg} at line {self.lineno}, column {self.colno} (index {pos})"
        )

    @cached_property
    def byte_pos(self) -> int:
        """Offset of the error in the UTF-8 encoding of the document."""
        return OffsetMapper(self.doc).char_to_byte(self.pos)


class UnsupportedValueError(TypeError):
    """Raised when a value cannot be represented as JSON."""

    kind = ErrorKind.UNSUPPORTED_VALUE

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        )

"""
Stateless JSON tokenizer.

``next_token`` classifies the lexical unit at a cursor without holding any
state of its own. Punctuation and the ``true``/``false``/``null`` literals
are consumed; strings and numbers are only classified, and their parsers
re-scan from the token start.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from jsontree._errors import Position
from jsontree._profiling import profile

WHITESPACE: Final = frozenset(" \t\n\r")
DIGITS: Final = frozenset("0123456789")
NUMBER_CHARS: Final = frozenset("0123456789+-.eE")


class TokenKind(Enum):
    """Classification of a lexical unit."""

    STRING = "string"
    NUMBER = "number"
    OBJECT_OPEN = "{"
    OBJECT_CLOSE = "}"
    ARRAY_OPEN = "["
    ARRAY_CLOSE = "]"
    COMMA = ","
    COLON = ":"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    END = "end"
    NONE = "none"


_PUNCTUATION: Final = {
    "{": TokenKind.OBJECT_OPEN,
    "}": TokenKind.OBJECT_CLOSE,
    "[": TokenKind.ARRAY_OPEN,
    "]": TokenKind.ARRAY_CLOSE,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_LITERALS: Final = (
    ("true", TokenKind.TRUE),
    ("false", TokenKind.FALSE),
    ("null", TokenKind.NULL),
)


@dataclass(frozen=True)
class Token:
    """
    A classified lexical unit: its kind and where it starts and ends.

    ``start`` is the first non-whitespace position; ``end`` is the cursor
    after the token. For strings and numbers ``end == start``.
    """

    kind: TokenKind
    start: Position
    end: Position


def skip_whitespace(text: str, index: Position) -> Position:
    """Returns the first position at or after ``index`` that is not whitespace."""
    length = len(text)
    while index < length and text[index] in WHITESPACE:
        index += 1
    return index


def next_token(text: str, index: Position) -> Token:
    """Classifies the token at ``index``, skipping leading whitespace."""
    with profile("next_token"):
        start = skip_whitespace(text, index)
        if start >= len(text):
            return Token(TokenKind.END, start, start)

        char = text[start]
        kind = _PUNCTUATION.get(char)
        if kind is not None:
            return Token(kind, start, start + 1)

        if char == '"':
            return Token(TokenKind.STRING, start, start)
        if char in DIGITS or char == "-":
            return Token(TokenKind.NUMBER, start, start)

        for literal, literal_kind in _LITERALS:
            if text.startswith(literal, start):
                return Token(literal_kind, start, start + len(literal))

        # Unknown input: one character is consumed
        return Token(TokenKind.NONE, start, start + 1)


def peek_kind(text: str, index: Position) -> TokenKind:
    """Returns the kind of the next token without committing to it."""
    return next_token(text, index).kind


def number_end(text: str, index: Position) -> Position:
    """
    Finds the end of the numeric run starting at ``index``.

    This is a lexical boundary only: any mix of digits, signs, dots and
    exponent markers is accepted here and validated by the number parser.
    """
    length = len(text)
    while index < length and text[index] in NUMBER_CHARS:
        index += 1
    return index

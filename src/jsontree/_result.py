"""
Parse results as a sum type.

Every sub-parser returns either ``Success`` (a value and the cursor after it)
or ``Failure`` (an error kind and the offending cursor). Callers check with
``isinstance(result, Failure)`` and hand failures back up unchanged, so no
exceptions are involved until a caller explicitly asks for one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

from jsontree._errors import ErrorKind
from jsontree._errors import JSONParseError
from jsontree._errors import Position


@dataclass(frozen=True)
class Success[T]:
    """A parsed value and the cursor position immediately after it."""

    value: T
    index: Position

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self, text: str = "") -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """An error kind anchored at a cursor position in the source text."""

    kind: ErrorKind
    index: Position
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        """Diagnostic string: kind, description and the failing index."""
        text = f"{self.kind.value}: {self.kind.description}"
        if self.detail:
            text = f"{text} ({self.detail})"
        return f"{text} at index {self.index}"

    def raise_error(self, text: str = "") -> NoReturn:
        """Raise this failure as a ``JSONParseError`` against ``text``."""
        msg = self.kind.description
        if self.detail:
            msg = f"{msg}: {self.detail}"
        raise JSONParseError(self.kind, msg, text, self.index)

    def unwrap(self, text: str = "") -> NoReturn:
        self.raise_error(text)


type ParseResult[T] = Success[T] | Failure

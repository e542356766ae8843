"""Immutable parse and encode settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    The defaults are permissive: unlimited nesting, trailing commas accepted
    and text after the top-level value left for the caller to inspect.
    """

    max_depth: int | None = None
    allow_trailing_comma: bool = True
    reject_trailing_data: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth < 0:
                raise ValueError("max_depth must be non-negative")
        if not isinstance(self.allow_trailing_comma, bool):
            raise TypeError("allow_trailing_comma must be a boolean")
        if not isinstance(self.reject_trailing_data, bool):
            raise TypeError("reject_trailing_data must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures serialization with immutable settings.

    ``strict`` turns the best-effort fallback for unrecognised values into
    an ``UnsupportedValueError``; ``escape_strings=False`` writes string
    contents verbatim between quotes.
    """

    pretty: bool = False
    indent: int = 2
    escape_strings: bool = True
    ensure_ascii: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.pretty, bool):
            raise TypeError("pretty must be a boolean")
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError("indent must be an integer")
        if self.indent < 0:
            raise ValueError("indent must be non-negative")
        if not isinstance(self.escape_strings, bool):
            raise TypeError("escape_strings must be a boolean")
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")


DEFAULT_PARSE_CONFIG = ParseConfig()

"""
Tests for the individual sub-parsers.

Each sub-parser starts at an arbitrary cursor, skips leading whitespace, and
reports the cursor after what it consumed.
"""

import jsontree
from jsontree import ErrorKind
from jsontree import Failure
from jsontree import ParseConfig
from jsontree import String
from jsontree import Success


def test_parse_string_from_cursor() -> None:
    """
    Validates string parsing after leading whitespace.
    """
    result = jsontree.parse_string(' "ab\\nc" tail', 0)

    assert result == Success("ab\nc", 8)


def test_parse_string_requires_quote() -> None:
    """
    Validates a string parse fails where no quote starts.
    """
    assert jsontree.parse_string("  abc", 0) == Failure(
        ErrorKind.NO_VALUE_FOUND, 2
    )


def test_parse_number_from_cursor() -> None:
    """
    Validates number parsing stops at the end of the numeric run.
    """
    assert jsontree.parse_number("  -12.5e1,", 0) == Success(-125.0, 9)


def test_parse_number_rejects_malformed_literal() -> None:
    """
    Validates malformed numbers report the literal and its start.
    """
    result = jsontree.parse_number("[1.]", 1)

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.INVALID_NUMBER
    assert result.index == 1
    assert result.detail == "1."


def test_parse_object() -> None:
    """
    Validates object parsing ignores text after the closing brace.
    """
    result = jsontree.parse_object(' {"a": [1]} tail')

    assert result == Success(jsontree.from_python({"a": [1]}), 11)


def test_parse_object_wrong_opener() -> None:
    """
    Validates object parsing fails on anything but an opening brace.
    """
    assert jsontree.parse_object("[1]") == Failure(ErrorKind.NO_VALUE_FOUND, 0)
    assert jsontree.parse_object('{"a" 1}') == Failure(
        ErrorKind.MISSING_COLON, 5
    )


def test_parse_array_from_cursor() -> None:
    """
    Validates array parsing from an offset inside larger text.
    """
    result = jsontree.parse_array("x[true, null]", 1)

    assert result == Success(jsontree.from_python([True, None]), 13)


def test_parse_array_wrong_opener() -> None:
    """
    Validates array parsing fails on anything but an opening bracket.
    """
    assert jsontree.parse_array("{}") == Failure(ErrorKind.NO_VALUE_FOUND, 0)


def test_parse_array_respects_config() -> None:
    """
    Validates sub-parsers honour the supplied parse configuration.
    """
    result = jsontree.parse_array("[[1]]", 0, ParseConfig(max_depth=1))

    assert result == Failure(ErrorKind.NESTING_TOO_DEEP, 1)


def test_parse_value_from_cursor() -> None:
    """
    Validates a second value can be parsed where the first one ended.
    """
    text = '[1] "s"'
    first = jsontree.parse_value(text)
    assert isinstance(first, Success)

    second = jsontree.parse_value(text, first.index)

    assert second == Success(String("s"), 7)

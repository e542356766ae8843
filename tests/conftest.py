"""
Pytest configuration and shared fixtures for jsontree tests.

Provides immutable test data fixtures and common utilities for clean,
type-safe test organization.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jsontree
from jsontree import ErrorKind


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_kind: ErrorKind | None = None
    expected_index: int | None = None


PASS1 = """[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]"""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides json.org JSON_checker documents the default parser rejects.

    The parser is deliberately permissive about trailing commas, trailing
    data, leading zeros, unknown escapes and raw control characters, so
    only the checker documents that break its grammar are listed here.
    """
    cases = [
        ("fail2.json", '["Unclosed array"', ErrorKind.UNTERMINATED_ARRAY, 17),
        (
            "fail3.json",
            '{unquoted_key: "keys must be quoted"}',
            ErrorKind.INVALID_KEY,
            1,
        ),
        (
            "fail5.json",
            '["double extra comma",,]',
            ErrorKind.MISSING_VALUE,
            22,
        ),
        (
            "fail6.json",
            '[   , "<-- missing value"]',
            ErrorKind.MISSING_VALUE,
            4,
        ),
        (
            "fail11.json",
            '{"Illegal expression": 1 + 2}',
            ErrorKind.MISSING_COMMA,
            25,
        ),
        (
            "fail12.json",
            '{"Illegal invocation": alert()}',
            ErrorKind.NO_VALUE_FOUND,
            23,
        ),
        (
            "fail14.json",
            '{"Numbers cannot be hex": 0x14}',
            ErrorKind.MISSING_COMMA,
            27,
        ),
        ("fail16.json", "[\\naked]", ErrorKind.NO_VALUE_FOUND, 1),
        (
            "fail19.json",
            '{"Missing colon" null}',
            ErrorKind.MISSING_COLON,
            17,
        ),
        (
            "fail20.json",
            '{"Double colon":: null}',
            ErrorKind.NO_VALUE_FOUND,
            16,
        ),
        (
            "fail21.json",
            '{"Comma instead of colon", null}',
            ErrorKind.MISSING_COLON,
            25,
        ),
        (
            "fail22.json",
            '["Colon instead of comma": false]',
            ErrorKind.MISSING_COMMA,
            25,
        ),
        ("fail23.json", '["Bad value", truth]', ErrorKind.MISSING_COMMA, 18),
        ("fail24.json", "['single quote']", ErrorKind.NO_VALUE_FOUND, 1),
        ("fail29.json", "[0e]", ErrorKind.INVALID_NUMBER, 1),
        ("fail30.json", "[0e+]", ErrorKind.INVALID_NUMBER, 1),
        ("fail31.json", "[0e+-1]", ErrorKind.INVALID_NUMBER, 1),
        (
            "fail32.json",
            '{"Comma instead if closing brace": true,',
            ErrorKind.UNTERMINATED_OBJECT,
            40,
        ),
        ("fail33.json", '["mismatch"}', ErrorKind.MISSING_COMMA, 11),
    ]
    return [
        JsonTestCase(
            description=description,
            input_data=doc,
            should_fail=True,
            expected_kind=kind,
            expected_index=index,
        )
        for description, doc, kind, index in cases
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data=PASS1,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, jsontree.Null()),
        JsonTestCase("true boolean", "true", False, jsontree.Bool(True)),
        JsonTestCase("false boolean", "false", False, jsontree.Bool(False)),
        JsonTestCase("integer", "42", False, jsontree.Number(42.0)),
        JsonTestCase("negative integer", "-17", False, jsontree.Number(-17.0)),
        JsonTestCase("float", "3.14", False, jsontree.Number(3.14)),
        JsonTestCase("empty string", '""', False, jsontree.String("")),
        JsonTestCase("simple string", '"hello"', False, jsontree.String("hello")),
        JsonTestCase("empty array", "[]", False, jsontree.Array()),
        JsonTestCase("empty object", "{}", False, jsontree.Object()),
        JsonTestCase(
            "simple array",
            "[1, 2, 3]",
            False,
            jsontree.from_python([1, 2, 3]),
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            False,
            jsontree.from_python({"key": "value"}),
        ),
    ]

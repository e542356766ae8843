"""
Parsing and serialization benchmarks comparing jsontree against other libraries.

Every library is measured producing plain Python objects from the same
document, so jsontree's figures include converting its value tree with
``to_python``.
"""

import json
from collections.abc import Callable
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import jsontree
from benchmarks.data_generators import generate_test_data


def _jsontree_loads(text: str) -> Any:
    return jsontree.to_python(jsontree.parse(text).unwrap(text))


def _orjson_dumps(obj: Any) -> str:
    return orjson.dumps(obj).decode("utf-8")


PARSERS = [
    ("stdlib_json", json.loads),
    ("orjson", orjson.loads),
    ("ujson", ujson.loads),
    ("jsontree", _jsontree_loads),
]

SERIALIZERS = [
    ("stdlib_json", json.dumps),
    ("orjson", _orjson_dumps),
    ("ujson", ujson.dumps),
    ("jsontree", jsontree.stringify),
]


class TestParsingBenchmarks:
    """Benchmarks for JSON parsing performance across different libraries."""

    @pytest.mark.benchmark(group="parse")
    @pytest.mark.parametrize(
        "data_type,expected_type",
        [
            ("small_object", dict),
            ("large_object", dict),
            ("mixed_array", list),
            ("nested_structure", dict),
            ("string_heavy", dict),
            ("deep_array", list),
        ],
    )
    @pytest.mark.parametrize("parser,parse_func", PARSERS)
    def test_parsing(
        self,
        benchmark: Any,
        parser: str,
        parse_func: Callable[[str], Any],
        data_type: str,
        expected_type: type,
    ) -> None:
        """Benchmarks parsing one generated document."""
        test_data = generate_test_data(data_type)

        if parser == "orjson":
            # orjson expects bytes for optimal performance
            result = benchmark(parse_func, test_data.encode("utf-8"))
        else:
            result = benchmark(parse_func, test_data)

        assert isinstance(result, expected_type)

    def test_results_agree(self) -> None:
        """Checks jsontree reads the benchmark documents like the stdlib."""
        for data_type in ("small_object", "mixed_array", "string_heavy"):
            test_data = generate_test_data(data_type)
            assert _jsontree_loads(test_data) == json.loads(test_data)


class TestSerializationBenchmarks:
    """Benchmarks for JSON serialization across different libraries."""

    @pytest.mark.benchmark(group="serialize")
    @pytest.mark.parametrize(
        "data_type", ["large_object", "mixed_array", "nested_structure"]
    )
    @pytest.mark.parametrize("serializer,dump_func", SERIALIZERS)
    def test_serialization(
        self,
        benchmark: Any,
        serializer: str,
        dump_func: Callable[[Any], str],
        data_type: str,
    ) -> None:
        """Benchmarks serializing one generated document."""
        source = json.loads(generate_test_data(data_type))
        data = (
            jsontree.from_python(source) if serializer == "jsontree" else source
        )

        result = benchmark(dump_func, data)

        assert json.loads(result) == source

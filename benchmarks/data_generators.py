"""
Test data generators for jsontree benchmarks.

Each generator returns JSON text produced by the standard library so every
library under test reads identical input:
- flat and wide objects of different sizes
- mixed-type arrays
- nested and deeply nested structures
- string-heavy documents with escape sequences
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators: dict[str, Callable[[], Any]] = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "deep_array": _deep_array,
    }

    if data_type == "string_heavy":
        # Escapes are written by hand, not by json.dumps
        return _string_heavy()
    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return json.dumps(generators[data_type]())


def _small_object() -> dict[str, Any]:
    """A small object (< 1KB) with basic key-value pairs."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "manager": None,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _large_object() -> dict[str, Any]:
    """A large object (> 10KB): an account with transaction history."""
    return {
        "account_id": random.randint(1000000, 9999999),
        "owner": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "email": f"{_random_string(8)}@{_random_string(6)}.com",
            "address": {
                "street": f"{random.randint(1, 9999)} {_random_string(8)} St",
                "city": _random_string(12),
                "zip": f"{random.randint(10000, 99999)}",
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
                "settled": random.choice([True, False]),
                "note": None if i % 3 else f"Payment for {_random_string(20)}",
            }
            for i in range(80)
        ],
    }


def _mixed_array() -> list[Any]:
    """A large array mixing every JSON value type."""
    makers: list[Callable[[int], Any]] = [
        lambda i: random.randint(-1000, 1000),
        lambda i: round(random.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(random.randint(5, 30)),
        lambda i: random.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _random_string(10)},
        lambda i: [i, str(i), i % 2 == 0],
    ]
    return [random.choice(makers)(i) for i in range(300)]


def _nested_structure() -> dict[str, Any]:
    """A tree eight levels deep with a fan-out of three."""

    def node(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}
        return {
            "level": depth,
            "children": [node(depth - 1) for _ in range(3)],
        }

    return node(8)


def _deep_array() -> list[Any]:
    """Arrays nested 200 levels deep around a single string."""
    value: Any = "bottom"
    for _ in range(200):
        value = [value]
    return value


def _string_heavy() -> str:
    """JSON text whose strings are dense with escape sequences."""

    def escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(random.choice(_ESCAPES))
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    strings = ", ".join(escaped_string() for _ in range(100))
    unicode = ", ".join(
        f'"Unicode: \\u{random.randint(0x00A0, 0x07FF):04x}"' for _ in range(50)
    )
    return f'{{"strings": [{strings}], "unicode": [{unicode}]}}'


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))

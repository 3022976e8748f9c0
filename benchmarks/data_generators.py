"""
Test data generators for ljson benchmarks.

Each generator builds plain Python data; generate_test_data renders it as
strict JSON text that every library can read, generate_lenient_data as text
with trailing commas and literal keys that only ljson accepts.
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['"', "\\", "/", "\b", "\f", "\n", "\r", "\t", "\x01", "\u2028"]


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))


def _small_object(rng: random.Random) -> Any:
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _timestamp(rng: random.Random) -> str:
    return (
        f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
        f"T{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00Z"
    )


def _large_object(rng: random.Random) -> Any:
    return {
        "user_id": rng.randint(1000000, 9999999),
        "session": rng.randint(2**32, 2**40),
        "profile": {
            "first_name": _random_string(rng, 10),
            "last_name": _random_string(rng, 12),
            "address": {
                "street": f"{rng.randint(1, 9999)} Main St",
                "city": _random_string(rng, 12),
                "zip": f"{rng.randint(10000, 99999)}",
            },
            "notifications": {
                "email": rng.choice([True, False]),
                "push": rng.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "timestamp": _timestamp(rng),
                "status": rng.choice(["completed", "pending", None]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "timestamp": _timestamp(rng),
                "action": rng.choice(["login", "logout", "purchase", "view"]),
                "user_agent": f"Mozilla/5.0 ({_random_string(rng, 20)})",
            }
            for _ in range(30)
        ],
    }


def _mixed_array(rng: random.Random) -> Any:
    choices: list[Callable[[int], Any]] = [
        lambda _: rng.randint(-1000, 1000),
        lambda _: rng.randint(2**31, 2**62),
        lambda _: round(rng.uniform(-100.0, 100.0), 3),
        lambda _: _random_string(rng, rng.randint(5, 30)),
        lambda _: rng.choice([True, False]),
        lambda _: None,
        lambda i: {"index": i, "score": round(rng.uniform(0, 100), 2)},
    ]
    return [rng.choice(choices)(i) for i in range(200)]


def _nested_structure(rng: random.Random) -> Any:
    def create(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}
        return {
            "level": depth,
            "items": [create(depth - 1) for _ in range(3)],
            "nested": create(depth - 1),
        }

    return create(6)


def _string_heavy(rng: random.Random) -> Any:
    def escaped_string() -> str:
        return "".join(
            rng.choice(_ESCAPES)
            if rng.random() < _ESCAPE_PROBABILITY
            else rng.choice(string.ascii_letters + " ")
            for _ in range(50)
        )

    return {
        "strings": [escaped_string() for _ in range(100)],
        "html": [f"<b>{escaped_string()}</b>" for _ in range(20)],
        "paths": {
            str(i): f"C:\\Users\\{_random_string(rng, 8)}\\file_{i}.txt"
            for i in range(20)
        },
    }


GENERATORS: dict[str, Callable[[random.Random], Any]] = {
    "small_object": _small_object,
    "large_object": _large_object,
    "mixed_array": _mixed_array,
    "nested_structure": _nested_structure,
    "string_heavy": _string_heavy,
}


def generate_test_value(data_type: str) -> Any:
    """Builds reproducible Python data of the given shape."""
    if data_type not in GENERATORS:
        raise ValueError(f"Unknown data type: {data_type}")
    return GENERATORS[data_type](random.Random(_SEED))


def generate_test_data(data_type: str) -> str:
    """Renders the data as strict JSON text."""
    return json.dumps(generate_test_value(data_type))


def _lenient(value: Any, rng: random.Random) -> str:
    if isinstance(value, dict):
        members = [
            f"{_lenient_key(key, rng)}: {_lenient(item, rng)}"
            for key, item in value.items()
        ]
        return "{" + ", ".join(members) + (",}" if members else "}")
    if isinstance(value, list):
        items = [_lenient(item, rng) for item in value]
        return "[" + ", ".join(items) + (",]" if items else "]")
    if value is True:
        return rng.choice(["true", "TRUE", "True"])
    if value is None:
        return rng.choice(["null", "NULL"])
    return json.dumps(value)


def _lenient_key(key: str, rng: random.Random) -> str:
    if key.isdigit() and rng.random() < 0.5:
        return key
    return json.dumps(key)


def generate_lenient_data(data_type: str) -> str:
    """
    Renders the data with trailing commas, mixed-case literals and raw
    numeric keys where a key is all digits.
    """
    return _lenient(generate_test_value(data_type), random.Random(_SEED))

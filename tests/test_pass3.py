"""
JSON_checker pass3 test from the json.org test suite.

Validates parsing of nested object structure with proper
handling of string keys and values.
"""

import ljson

# from https://json.org/JSON_checker/test/pass3.json
JSON = r"""
{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}
"""

# Single-entry objects stay on the opening line; the inner object has two
# entries and is laid out one member per line.
PRETTY = """{"JSON Test Pattern pass3": {
    "The outermost value": "must be an object or array.",
    "In this test": "It is an object."
}}"""


def test_parse() -> None:
    """
    Validates parsing and round-trip encoding for nested objects.
    """
    res = ljson.loads(JSON)

    out = ljson.dumps(res)
    assert res == ljson.loads(out)


def test_pretty_layout() -> None:
    """
    Validates the indented layout of a single-entry outer object.
    """
    res = ljson.loads(JSON)
    assert ljson.dumps(res, indent=4) == PRETTY

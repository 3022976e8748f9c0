"""
JSON_checker pass2 test from the json.org test suite.

Validates parsing of deeply nested array structure to ensure
parser can handle significant nesting levels.
"""

import ljson

# from https://json.org/JSON_checker/test/pass2.json
JSON = r"""
[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]
"""


def test_parse() -> None:
    """
    Validates parsing and round-trip encoding for deeply nested arrays.
    """
    res = ljson.loads(JSON)

    depth = 0
    node = res
    while isinstance(node, ljson.Array):
        depth += 1
        node = node[0]
    assert depth == 19
    assert node == ljson.String("Not too deep")

    out = ljson.dumps(res)
    assert out == JSON.strip()
    assert res == ljson.loads(out)


def test_pretty_round_trip() -> None:
    """
    Validates that indented output reads back to the same tree.
    """
    res = ljson.loads(JSON)
    assert res == ljson.loads(ljson.dumps(res, indent=2))

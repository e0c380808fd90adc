"""
Response assertions for handler tests.
"""
import json
from typing import Any

import httpx


def assert_status(response: httpx.Response, expected: int) -> None:
    actual = response.status_code
    if actual != expected:
        raise AssertionError(
            f"unexpected status: wanted {expected} but got {actual}, body: {response.text}"
        )


def assert_header(response: httpx.Response, key: str, expected: str) -> None:
    actual = response.headers.get(key)
    if actual != expected:
        raise AssertionError(f"unexpected header {key!r}: wanted {expected!r} but got {actual!r}")


def assert_json_body(response: httpx.Response, expected: Any) -> None:
    """
    Compare the response body with expected as JSON values.
    expected may be a JSON document string or an already decoded value.
    """
    if isinstance(expected, (str, bytes)):
        expected = json.loads(expected)

    try:
        actual = response.json()
    except ValueError as e:
        raise AssertionError(f"response body is not JSON: {response.text!r}") from e

    if actual != expected:
        raise AssertionError(f"unexpected JSON body: wanted {expected!r} but got {actual!r}")

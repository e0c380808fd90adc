"""
Query string multi-map helpers.

Encoding sorts keys lexicographically and keeps the insertion order of the
values under each key:

    {"type": ["code", "token"], "provider": ["google"]}
        -> "provider=google&type=code&type=token"
"""
from typing import Any, Dict, Iterable, List, Mapping, Tuple
from urllib.parse import quote_plus, unquote_plus

from .coercion import coerce_to_string
from .errors import InvalidQueryError
from .patterns import PATTERNS

QueryValues = Dict[str, List[str]]


def _unescape(raw: str, text: str) -> str:
    if PATTERNS["BAD_ESCAPE"].search(text):
        raise InvalidQueryError(raw, f"invalid URL escape in {text!r}")
    return unquote_plus(text, errors="strict")


def _parse_pair(raw: str, pair: str) -> Tuple[str, str]:
    if ";" in pair:
        raise InvalidQueryError(raw, "invalid semicolon separator in query")

    key, _, value = pair.partition("=")
    try:
        return _unescape(raw, key), _unescape(raw, value)
    except UnicodeDecodeError as e:
        raise InvalidQueryError(raw, str(e)) from e


def parse_query(raw: str, strict: bool = True) -> QueryValues:
    """
    Parse a raw 'k=v&k2=v2' query string into a multi-map.

    Semicolons and malformed percent escapes raise InvalidQueryError, or
    with strict=False the offending pair is skipped and parsing continues.
    """
    values: QueryValues = {}
    if not raw:
        return values

    for pair in raw.split("&"):
        if not pair:
            continue
        try:
            key, value = _parse_pair(raw, pair)
        except InvalidQueryError:
            if strict:
                raise
            continue

        values.setdefault(key, []).append(value)

    return values


def encode_query(values: Mapping[str, Iterable[Any]]) -> str:
    parts = []
    for key in sorted(values):
        escaped_key = quote_plus(key)
        for value in values[key]:
            parts.append(f"{escaped_key}={quote_plus(coerce_to_string(value))}")
    return "&".join(parts)


def build_query(query: Mapping[str, Iterable[Any]]) -> QueryValues:
    """Stringify every value of a key -> values mapping."""
    values: QueryValues = {}
    for key, items in query.items():
        for item in items:
            values.setdefault(key, []).append(coerce_to_string(item))
    return values


def add_value(values: QueryValues, key: str, value: Any) -> QueryValues:
    values.setdefault(key, []).append(coerce_to_string(value))
    return values


def set_value(values: QueryValues, key: str, value: Any) -> QueryValues:
    values[key] = [coerce_to_string(value)]
    return values

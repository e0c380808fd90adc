"""
Path parameter substitution for templated request paths.
"""
import logging
import re
from typing import Any, List, Mapping

from .coercion import coerce_to_string
from .errors import InvalidParamKeyError, InvalidPlaceholderPatternError
from .patterns import PATTERNS, placeholder_pattern

logger = logging.getLogger(__name__)


def validate_param_key(key: Any) -> str:
    if not isinstance(key, str) or not PATTERNS["PARAM_KEY"].fullmatch(key):
        raise InvalidParamKeyError(key)
    return key


def extract_placeholders(path: str) -> List[str]:
    """List placeholder names in order of appearance."""
    if not path:
        return []
    return [match.group(1) for match in PATTERNS["PLACEHOLDER"].finditer(path)]


def substitute_param(path: str, key: str, value: Any) -> str:
    """
    Replace every ':key' placeholder in path with the string form of value.

    A placeholder only matches when followed by a non-identifier character
    or the end of the path. Keys with no placeholder leave the path as is.
    """
    validate_param_key(key)

    try:
        pattern = placeholder_pattern(key)
    except re.error as e:
        raise InvalidPlaceholderPatternError(key, e) from e

    replacement = coerce_to_string(value)
    return pattern.sub(lambda _: replacement, path)


def substitute_params(path: str, params: Mapping[str, Any]) -> str:
    """Apply substitute_param for every key/value pair in params."""
    result = path
    for key, value in params.items():
        result = substitute_param(result, key, value)

    unfilled = extract_placeholders(result)
    if unfilled:
        logger.debug(f"Placeholders left unfilled in {result}: {unfilled}")

    return result

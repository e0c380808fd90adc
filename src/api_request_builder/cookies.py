"""
Cookie header serialization for outgoing test requests.
"""
from http.cookiejar import Cookie
from http.cookies import Morsel
from typing import Optional, Tuple, Union

COOKIE_SEPARATOR = "; "

CookieLike = Union[Morsel, Cookie, str]


def _valid_cookie_value_byte(char: str) -> bool:
    return 0x20 <= ord(char) < 0x7F and char not in '";\\'


def cookie_pair(cookie: CookieLike, value: Optional[str] = None) -> Tuple[str, str]:
    """Name and value of a Morsel, a cookiejar Cookie, or a bare name."""
    if isinstance(cookie, Morsel):
        return cookie.key, cookie.value
    if isinstance(cookie, Cookie):
        return cookie.name, cookie.value or ""
    if value is None:
        raise TypeError(f"Cookie {cookie!r} given without a value")
    return cookie, value


def sanitize_cookie_name(name: str) -> str:
    return name.replace("\n", "-").replace("\r", "-")


def sanitize_cookie_value(value: str) -> str:
    """
    Drop octets not allowed in a cookie value.
    Values containing a space or comma are double-quoted.
    """
    cleaned = "".join(char for char in value if _valid_cookie_value_byte(char))
    if " " in cleaned or "," in cleaned:
        return f'"{cleaned}"'
    return cleaned


def format_cookie(name: str, value: str) -> str:
    return f"{sanitize_cookie_name(name)}={sanitize_cookie_value(value)}"


def append_cookie(existing: Optional[str], name: str, value: str) -> str:
    """Append a name=value pair to an existing Cookie header value."""
    pair = format_cookie(name, value)
    if existing:
        return f"{existing}{COOKIE_SEPARATOR}{pair}"
    return pair

"""
Fluent wrapper around httpx.Request.

    request = (
        wrap_get("/api/users/:id")
        .set_param("id", 1)
        .add_query("type", "code")
        .unwrap()
    )
    str(request.url)  # "/api/users/1?type=code"
"""
import logging
from typing import Any, Iterable, Mapping, Optional

import httpx

from ..auth import encode_basic_auth, encode_bearer_auth
from ..body import to_content
from ..config import BuilderConfig, resolve_config
from ..cookies import CookieLike, append_cookie, cookie_pair
from ..path_params import substitute_param, substitute_params
from ..query import (
    QueryValues,
    add_value,
    build_query,
    encode_query,
    parse_query,
    set_value,
)
from .request import content_headers, new_request

logger = logging.getLogger(__name__)

# Recomputed whenever the body is replaced
_BODY_HEADERS = (b"content-length", b"transfer-encoding")


class RequestWrapper:
    """Mutable builder for an httpx.Request; every setter returns self."""

    def __init__(self, request: httpx.Request, config: Optional[BuilderConfig] = None):
        self.request = request
        self.config = config or resolve_config()

    def unwrap(self) -> httpx.Request:
        """Return the wrapped request, logging its final method and URL."""
        if self.config.log_requests:
            logger.debug(f"[{self.request.method}] {self.request.url}")
        return self.request

    # ===== body =====

    def with_body(self, body: Any) -> "RequestWrapper":
        """Replace the body and recompute Content-Length."""
        content, is_json = to_content(body)

        headers = httpx.Headers(
            [
                (key, value)
                for key, value in self.request.headers.raw
                if key.lower() not in _BODY_HEADERS
            ]
        )
        for key, value in content_headers(is_json, self.config).items():
            headers.setdefault(key, value)

        rebuilt = httpx.Request(
            self.request.method,
            self.request.url,
            headers=headers,
            content=content,
        )

        # Update the wrapped request in place so callers holding it see the new body.
        # httpx caches the read body on _content, so it is replaced alongside the stream.
        self.request.headers = rebuilt.headers
        self.request.stream = rebuilt.stream
        self.request._content = rebuilt.read()
        return self

    # ===== path params =====

    def with_param(self, params: Mapping[str, Any]) -> "RequestWrapper":
        path = substitute_params(self.request.url.path, params)
        self.request.url = self.request.url.copy_with(path=path)
        return self

    def set_param(self, key: str, value: Any) -> "RequestWrapper":
        path = substitute_param(self.request.url.path, key, value)
        self.request.url = self.request.url.copy_with(path=path)
        return self

    # ===== query =====

    def _query_values(self) -> QueryValues:
        # Malformed pairs already on the target are dropped, not raised
        return parse_query(self.request.url.query.decode("ascii"), strict=False)

    def _replace_query(self, values: Mapping[str, Iterable[Any]]) -> "RequestWrapper":
        encoded = encode_query(values)
        query = encoded.encode("ascii") if encoded else None
        self.request.url = self.request.url.copy_with(query=query)
        return self

    def add_query(self, key: str, value: Any) -> "RequestWrapper":
        """Append value to any existing values of key."""
        return self._replace_query(add_value(self._query_values(), key, value))

    def set_query(self, key: str, value: Any) -> "RequestWrapper":
        """Replace all existing values of key with value."""
        return self._replace_query(set_value(self._query_values(), key, value))

    def with_query(self, query: Mapping[str, Iterable[Any]]) -> "RequestWrapper":
        return self._replace_query(build_query(query))

    def with_query_string(self, query: str) -> "RequestWrapper":
        return self._replace_query(parse_query(query))

    def with_query_values(self, query: QueryValues) -> "RequestWrapper":
        return self._replace_query(query)

    # ===== header =====

    def add_header(self, key: str, value: str) -> "RequestWrapper":
        self.request.headers = httpx.Headers([*self.request.headers.raw, (key, value)])
        return self

    def set_header(self, key: str, value: str) -> "RequestWrapper":
        self.request.headers[key] = value
        return self

    def set_basic_auth(self, username: str, password: str) -> "RequestWrapper":
        return self.set_header("Authorization", encode_basic_auth(username, password))

    def set_bearer_auth(self, token: str) -> "RequestWrapper":
        return self.set_header("Authorization", encode_bearer_auth(token))

    def add_cookie(self, cookie: CookieLike, value: Optional[str] = None) -> "RequestWrapper":
        """
        Append a cookie to the Cookie header.

        cookie may be an http.cookies.Morsel, an http.cookiejar.Cookie (the
        entries of an httpx.Cookies jar), or a cookie name given with value.
        """
        name, value = cookie_pair(cookie, value)
        existing = self.request.headers.get("Cookie")
        return self.set_header("Cookie", append_cookie(existing, name, value))


def wrap(request: httpx.Request, config: Optional[BuilderConfig] = None) -> RequestWrapper:
    return RequestWrapper(request, config)


def wrap_get(target: str, config: Optional[BuilderConfig] = None) -> RequestWrapper:
    config = config or resolve_config()
    return wrap(new_request("GET", target, None, config), config)


def wrap_post(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> RequestWrapper:
    config = config or resolve_config()
    return wrap(new_request("POST", target, body, config), config)


def wrap_put(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> RequestWrapper:
    config = config or resolve_config()
    return wrap(new_request("PUT", target, body, config), config)


def wrap_patch(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> RequestWrapper:
    config = config or resolve_config()
    return wrap(new_request("PATCH", target, body, config), config)


def wrap_delete(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> RequestWrapper:
    config = config or resolve_config()
    return wrap(new_request("DELETE", target, body, config), config)

"""
Test request constructors.
Bodies that expose read() or are raw bytes are sent verbatim; anything
else is serialized to JSON.
"""
from typing import Any, Optional

import httpx

from ..body import to_content
from ..config import BuilderConfig, resolve_config

JSON_CONTENT_TYPE = "application/json"


def resolve_target(target: str, config: BuilderConfig) -> str:
    """Join a relative target onto config.base_url when one is set."""
    if not config.base_url or httpx.URL(target).is_absolute_url:
        return target
    base = config.base_url.rstrip("/")
    if target.startswith("/"):
        return f"{base}{target}"
    return f"{base}/{target}"


def content_headers(is_json: bool, config: BuilderConfig) -> dict:
    if is_json and config.json_content_type:
        return {"Content-Type": JSON_CONTENT_TYPE}
    return {}


def new_request(
    method: str,
    target: str,
    body: Any = None,
    config: Optional[BuilderConfig] = None,
) -> httpx.Request:
    """
    Create an in-memory request for a handler under test.

    Raises:
        InvalidBodyError: body is neither a reader nor JSON serializable.
    """
    config = config or resolve_config()
    content, is_json = to_content(body)
    return httpx.Request(
        method,
        resolve_target(target, config),
        headers=content_headers(is_json, config),
        content=content,
    )


def get(target: str, config: Optional[BuilderConfig] = None) -> httpx.Request:
    return new_request("GET", target, None, config)


def post(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> httpx.Request:
    return new_request("POST", target, body, config)


def put(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> httpx.Request:
    return new_request("PUT", target, body, config)


def patch(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> httpx.Request:
    return new_request("PATCH", target, body, config)


def delete(target: str, body: Any = None, config: Optional[BuilderConfig] = None) -> httpx.Request:
    return new_request("DELETE", target, body, config)

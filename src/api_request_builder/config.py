"""
Builder configuration.

Each BuilderConfig field is taken from the first source that provides it:
an explicit argument, its environment variable, a config dict, then the
field default.
"""
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

ENV_BASE_URL = "API_REQUEST_BUILDER_BASE_URL"
ENV_LOG_REQUESTS = "API_REQUEST_BUILDER_LOG_REQUESTS"
ENV_JSON_CONTENT_TYPE = "API_REQUEST_BUILDER_JSON_CONTENT_TYPE"

TRUE_VALUES = ("true", "1", "yes", "on")


@dataclass
class BuilderConfig:
    """Options applied by request constructors and RequestWrapper."""
    base_url: Optional[str] = None
    log_requests: bool = True
    json_content_type: bool = False


def parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)


def parse_url(value: Any) -> Optional[str]:
    return str(value) if value else None


# field -> (env var, parser)
FIELDS: Dict[str, tuple] = {
    "base_url": (ENV_BASE_URL, parse_url),
    "log_requests": (ENV_LOG_REQUESTS, parse_flag),
    "json_content_type": (ENV_JSON_CONTENT_TYPE, parse_flag),
}


def _resolve_field(
    field: str,
    arg: Any,
    config: Optional[Dict[str, Any]],
    env_key: str,
    parse: Callable[[Any], Any],
) -> Any:
    if arg is not None:
        return parse(arg)

    env_value = os.getenv(env_key)
    if env_value is not None:
        return parse(env_value)

    if config and field in config:
        return parse(config[field])

    return getattr(BuilderConfig, field)


def resolve_config(
    base_url: Optional[str] = None,
    log_requests: Optional[bool] = None,
    json_content_type: Optional[bool] = None,
    config: Optional[Dict[str, Any]] = None,
) -> BuilderConfig:
    args = {
        "base_url": base_url,
        "log_requests": log_requests,
        "json_content_type": json_content_type,
    }
    result = BuilderConfig(**{
        field: _resolve_field(field, args[field], config, env_key, parse)
        for field, (env_key, parse) in FIELDS.items()
    })
    logger.debug(f"Resolved builder config: {result}")
    return result

"""
API Request Builder - fluent httpx.Request construction for JSON API tests
"""

from .config import BuilderConfig, resolve_config
from .core import (
    RequestWrapper,
    new_request,
    get,
    post,
    put,
    patch,
    delete,
    wrap,
    wrap_get,
    wrap_post,
    wrap_put,
    wrap_patch,
    wrap_delete,
)
from .path_params import extract_placeholders, substitute_param, substitute_params
from .query import QueryValues, build_query, encode_query, parse_query
from .assertions import assert_header, assert_json_body, assert_status
from .errors import (
    RequestConfigurationError,
    InvalidBodyError,
    InvalidQueryError,
    InvalidParamKeyError,
    InvalidPlaceholderPatternError,
)

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "resolve_config",
    "RequestWrapper",
    "new_request",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "wrap",
    "wrap_get",
    "wrap_post",
    "wrap_put",
    "wrap_patch",
    "wrap_delete",
    "extract_placeholders",
    "substitute_param",
    "substitute_params",
    "QueryValues",
    "build_query",
    "encode_query",
    "parse_query",
    "assert_header",
    "assert_json_body",
    "assert_status",
    "RequestConfigurationError",
    "InvalidBodyError",
    "InvalidQueryError",
    "InvalidParamKeyError",
    "InvalidPlaceholderPatternError",
]

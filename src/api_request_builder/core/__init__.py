from .request import new_request, get, post, put, patch, delete
from .wrapper import (
    RequestWrapper,
    wrap,
    wrap_get,
    wrap_post,
    wrap_put,
    wrap_patch,
    wrap_delete,
)

__all__ = [
    "new_request",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "RequestWrapper",
    "wrap",
    "wrap_get",
    "wrap_post",
    "wrap_put",
    "wrap_patch",
    "wrap_delete",
]

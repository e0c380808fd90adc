"""
Request body resolution.
Readers and raw bytes are used verbatim, anything else is sent as JSON.
"""
import dataclasses
import json
import logging
from typing import Any, Optional, Tuple

from pydantic import BaseModel

from .errors import InvalidBodyError

logger = logging.getLogger(__name__)


def _read_all(reader: Any) -> bytes:
    data = reader.read()
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _to_jsonable(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return dataclasses.asdict(body)
    return body


def to_content(body: Any) -> Tuple[Optional[bytes], bool]:
    """
    Resolve a body into raw bytes.

    Returns:
        (content, is_json) where content is None when there is no body.

    Raises:
        InvalidBodyError: body is not JSON serializable.
    """
    if body is None:
        return None, False

    if hasattr(body, "read"):
        logger.debug("Using reader body verbatim")
        return _read_all(body), False

    if isinstance(body, (bytes, bytearray)):
        return bytes(body), False

    try:
        encoded = json.dumps(_to_jsonable(body))
    except (TypeError, ValueError) as e:
        raise InvalidBodyError(body, e) from e

    return encoded.encode("utf-8"), True

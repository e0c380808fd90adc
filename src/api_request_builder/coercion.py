"""
String form of path and query values.

None renders as an empty string and dicts/lists render as JSON, so a value
substituted into a URL never shows a Python repr.
"""
from typing import Any
import json

def coerce_to_string(value: Any) -> str:
    """Convert value to string for path and query replacement."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        # 2.0 -> "2", 12.34 -> "12.34"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)

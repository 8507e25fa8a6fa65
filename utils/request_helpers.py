"""
Request parsing helpers for API routes.

Provides utilities for consistently parsing query parameters and JSON bodies
across routers.
"""

from typing import Any, Dict

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def parse_bool(value: Any, default: bool = False) -> bool:
    """
    Interpret a query-string or JSON value as a boolean.

    JSON booleans pass through; strings are matched against common truthy
    spellings; None gives the default.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


async def require_json_body(request: Any, message: str = "Request body is required") -> Dict[str, Any]:
    """
    Await request JSON body and return it, or raise ValueError if missing/invalid.

    Args:
        request: Quart request (must support await request.get_json()).
        message: Error message when body is missing.

    Returns:
        Parsed JSON dict.

    Raises:
        ValueError: If body is missing or not a dict.
    """
    data = await request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        raise ValueError(message)
    return data


async def optional_json_body(request: Any) -> Dict[str, Any]:
    """Like require_json_body, but an absent body is an empty dict."""
    data = await request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data

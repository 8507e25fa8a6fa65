"""
Validation utilities for API endpoints and service functions.

Every validator returns the cleaned value or raises ValueError, which
api_handler turns into a 400 response.
"""

from typing import List, Any, Optional


def validate_tag_ids(value: Any, param_name: str = "tag_ids") -> List[int]:
    """
    Validate a list of catalog IDs.

    An empty list is valid (it clears the tags of an image). Items must be
    integers; a float is accepted only when it has no fractional part (JSON
    clients may send ``2.0``). Booleans and numeric strings are rejected.
    Duplicates are collapsed keeping first occurrence.

    Raises:
        ValueError: If validation fails
    """
    if value is None:
        return []

    if not isinstance(value, list):
        raise ValueError(f"{param_name} must be a list")

    result = []
    for item in value:
        if isinstance(item, bool):
            raise ValueError(f"{param_name} must contain only integers")
        if isinstance(item, float) and item.is_integer():
            tag_id = int(item)
        elif isinstance(item, int):
            tag_id = item
        else:
            raise ValueError(f"{param_name} must contain only integers")
        if tag_id <= 0:
            raise ValueError(f"{param_name} contains invalid (non-positive) IDs")
        if tag_id not in result:
            result.append(tag_id)
    return result


def validate_string(value: Any, param_name: str = "parameter",
                    max_length: Optional[int] = None,
                    allow_empty: bool = False,
                    strip: bool = True) -> str:
    """
    Validate that a value is a string with an optional length limit.

    With strip=False the value is returned as given (for lookup keys that
    must match stored data exactly); emptiness is still judged on the
    stripped text.

    Returns:
        The string, stripped unless strip=False

    Raises:
        ValueError: If validation fails
    """
    if value is None:
        if allow_empty:
            return ""
        raise ValueError(f"{param_name} is required")

    if not isinstance(value, str):
        raise ValueError(f"{param_name} must be a string")

    if strip:
        value = value.strip()

    if not allow_empty and len(value.strip()) == 0:
        raise ValueError(f"{param_name} cannot be empty")

    if max_length is not None and len(value) > max_length:
        raise ValueError(f"{param_name} must be at most {max_length} characters")

    return value


def validate_enum(value: Any, param_name: str = "parameter",
                  allowed_values: Optional[List[str]] = None) -> str:
    """
    Validate that a value is one of the allowed values (case-insensitive).

    Returns:
        The matching allowed value

    Raises:
        ValueError: If validation fails
    """
    if value is None:
        raise ValueError(f"{param_name} is required")

    if not isinstance(value, str):
        raise ValueError(f"{param_name} must be a string")

    if not allowed_values:
        raise ValueError("allowed_values must be provided")

    lowered = value.strip().lower()
    for allowed in allowed_values:
        if allowed.lower() == lowered:
            return allowed

    raise ValueError(f"{param_name} must be one of: {', '.join(allowed_values)}")


def validate_positive_integer(value: Any, param_name: str = "parameter") -> int:
    """
    Validate that a value is a positive integer.

    Raises:
        ValueError: If validation fails
    """
    if value is None or value == "":
        raise ValueError(f"{param_name} is required")

    if isinstance(value, bool):
        raise ValueError(f"{param_name} must be an integer")

    try:
        result = int(value)
    except (ValueError, TypeError) as e:
        raise ValueError(f"{param_name} must be an integer") from e

    if result < 1:
        raise ValueError(f"{param_name} must be at least 1")

    return result

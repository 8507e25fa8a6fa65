"""
Standardized API response utilities.
All API endpoints go through these so clients always see the same envelope:
``{"success": true, ...}`` or ``{"success": false, "error": "..."}``.
"""

from quart import jsonify, Response
from typing import Any, Dict, Tuple


def error_response(error: str, status_code: int = 400, data: Dict[str, Any] = None) -> Tuple[Response, int]:
    """
    Create a standardized error response.

    Example:
        return error_response("tag_ids must be a list", 400)
        # Returns: {"success": False, "error": "tag_ids must be a list"}, 400
    """
    response = {"success": False, "error": str(error)}
    if data:
        response.update(data)
    return jsonify(response), status_code


def not_found_response(message: str = "Resource not found") -> Tuple[Response, int]:
    """Create a 404 response."""
    return error_response(message, 404)


def unauthorized_response(message: str = "Unauthorized") -> Tuple[Response, int]:
    """Create a 401 response."""
    return error_response(message, 401)

"""
Decorators for API endpoints.

This module provides the api_handler decorator for consistent error
handling and the shared-secret check.
"""

from functools import wraps
from quart import jsonify, request
from typing import Callable, Any

from .api_responses import error_response, unauthorized_response
from .logging_config import get_logger

logger = get_logger('API')


def _request_secret() -> str:
    return request.args.get('secret', '') or request.headers.get('X-System-Secret', '')


def api_handler(require_auth: bool = False, log_errors: bool = True):
    """
    Decorator for API endpoints that handles:
    - Exception catching with proper logging
    - Consistent response format
    - Optional authentication check

    Args:
        require_auth: If True, checks for system secret in request
        log_errors: If True, logs a traceback on errors

    Usage:
        @api_blueprint.route('/endpoint', methods=['POST'])
        @api_handler(require_auth=True)
        async def my_endpoint():
            # Just the logic, no try/except needed
            return {"data": "value"}  # Auto-wrapped with success=True
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                if require_auth:
                    import config
                    if _request_secret() != config.RELOAD_SECRET:
                        return unauthorized_response()

                result = await func(*args, **kwargs)

                # Auto-wrap dict responses
                if isinstance(result, dict):
                    if 'success' not in result:
                        result = {"success": True, **result}
                    return jsonify(result)

                return result

            except ValueError as e:
                if log_errors:
                    logger.warning(f"Bad request in {func.__name__}: {e}")
                return error_response(e, 400)
            except PermissionError as e:
                return error_response(e, 403)
            except (LookupError, FileNotFoundError) as e:
                return error_response(e, 404)
            except Exception as e:
                if log_errors:
                    logger.exception(f"Unhandled error in {func.__name__}: {e}")
                return error_response(e, 500)

        return wrapper
    return decorator


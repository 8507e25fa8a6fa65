from .api_responses import (
    error_response,
    not_found_response,
    unauthorized_response,
)
from .decorators import api_handler
from .logging_config import setup_logging, get_logger

__all__ = [
    'error_response',
    'not_found_response',
    'unauthorized_response',
    'api_handler',
    'setup_logging',
    'get_logger',
]

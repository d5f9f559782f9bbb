"""
Utilities Package

Contains utility functions, decorators, errors and the activity logger.
"""

from .decorators import handle_errors, require_json, require_service
from .errors import (
    ServiceError, NotFoundError, ConflictError, UnauthorizedError, ValidationError, StorageError
)
from .helpers import parse_timestamp, to_int, utc_now, weighted_choice
from .activity_logger import activity_logger

__all__ = [
    'handle_errors', 'require_json', 'require_service',
    'ServiceError', 'NotFoundError', 'ConflictError', 'UnauthorizedError', 'ValidationError', 'StorageError',
    'parse_timestamp', 'to_int', 'utc_now', 'weighted_choice',
    'activity_logger'
]

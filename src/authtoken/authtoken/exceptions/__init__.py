# ABOUTME: Exceptions package exports
# ABOUTME: Exports the base exception hierarchy and token-specific errors

from authtoken.exceptions.base import (
    TokenException,
    ValidationException,
    ConfigurationException,
    TokenStateException,
)

from authtoken.exceptions.token import (
    TokenExpiredError,
    TokenRevokedError,
    InvalidTokenOptionsError,
    TokenSchedulingError,
)

__all__ = [
    "TokenException",
    "ValidationException",
    "ConfigurationException",
    "TokenStateException",
    # Token exceptions
    "TokenExpiredError",
    "TokenRevokedError",
    "InvalidTokenOptionsError",
    "TokenSchedulingError",
]

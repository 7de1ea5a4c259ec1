# ABOUTME: Token lifecycle package initialization
# ABOUTME: Exposes the Token type, its Result statuses, free functions and errors

"""
Authentication token lifecycle.

A `Token` holds a value, an expiry instant, a warning lead time and a type.
Its expired, revoked and usable states are exposed as `Result` values, and it
emits `warn`, `expire` and `revoke` signals to registered listeners.
"""

from authtoken.components.token import Token, from_serializable, of, revoke, usable, value
from authtoken.exceptions import (
    InvalidTokenOptionsError,
    TokenException,
    TokenExpiredError,
    TokenRevokedError,
    TokenSchedulingError,
    TokenStateException,
)
from authtoken.implementations import AsyncioTimerScheduler, VirtualTimerScheduler
from authtoken.models import Failure, Result, Success, TokenEvent, TokenOptions, TokenType

__version__ = "0.1.0"

__all__ = [
    "Token",
    "of",
    "from_serializable",
    "value",
    "revoke",
    "usable",
    "Result",
    "Success",
    "Failure",
    "TokenEvent",
    "TokenOptions",
    "TokenType",
    "AsyncioTimerScheduler",
    "VirtualTimerScheduler",
    "TokenException",
    "TokenStateException",
    "TokenExpiredError",
    "TokenRevokedError",
    "InvalidTokenOptionsError",
    "TokenSchedulingError",
]

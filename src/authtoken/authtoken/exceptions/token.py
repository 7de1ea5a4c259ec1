# ABOUTME: Token-specific exception classes for status failures and bad input
# ABOUTME: Expired/revoked errors are Result payloads; option and scheduling errors are raised

from typing import Any, Dict

from authtoken.exceptions.base import ConfigurationException, TokenStateException, ValidationException


class TokenExpiredError(TokenStateException):
    """The token's expiry instant has passed and its expire timer has fired."""

    def __init__(self, token_type: str, value: str):
        super().__init__(
            message=f"{token_type} token {value} expired",
            code="TOKEN_EXPIRED",
            details={"type": token_type, "value": value},
        )


class TokenRevokedError(TokenStateException):
    """The token has been explicitly revoked."""

    def __init__(self, token_type: str, value: str):
        super().__init__(
            message=f"{token_type} token {value} revoked",
            code="TOKEN_REVOKED",
            details={"type": token_type, "value": value},
        )


class InvalidTokenOptionsError(ValidationException):
    """Raised when token construction input cannot be validated.

    The `details["errors"]` entry carries the underlying pydantic error list
    so callers can report every offending field at once.
    """

    def __init__(self, message: str = "Invalid token options", errors: list[Dict[str, Any]] | None = None):
        super().__init__(
            message=message,
            code="INVALID_TOKEN_OPTIONS",
            details={"errors": errors or []},
        )


class TokenSchedulingError(ConfigurationException):
    """Raised when a token cannot schedule its timers."""

    pass

# ABOUTME: Core exception classes for the token lifecycle library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class TokenException(Exception):
    """Base exception class for the token lifecycle library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize TokenException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code!r})"


class ValidationException(TokenException):
    """Exception raised for data validation errors.

    Used when input data fails validation checks, such as:
    - Invalid data formats
    - Missing required fields
    - Data outside acceptable ranges
    - Type mismatches

    Should include specific details about what validation failed.
    """

    pass


class ConfigurationException(TokenException):
    """Exception raised for configuration errors.

    Used when runtime configuration is invalid or missing, such as:
    - Missing required configuration values
    - Invalid configuration format
    - Environment setup issues (e.g. no running event loop)

    Should include details about the configuration issue.
    """

    pass


class TokenStateException(TokenException):
    """Base class for errors describing why a token is not usable.

    Instances of this class and its subclasses are carried as the failure
    branch of a `Result`; they are constructed and returned, not raised.
    """

    pass

# ABOUTME: Models package exports
# ABOUTME: Exports the Result container and token data models

from .result import Result, ResultStatus, Success, Failure
from .token import TokenType, TokenEvent, TokenOptions, TokenData, TokenPlainObject, TokenSerializable

__all__ = [
    "Result",
    "ResultStatus",
    "Success",
    "Failure",
    "TokenType",
    "TokenEvent",
    "TokenOptions",
    "TokenData",
    "TokenPlainObject",
    "TokenSerializable",
]

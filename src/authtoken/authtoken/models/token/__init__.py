# ABOUTME: Token models package exports
# ABOUTME: Exports token enums, construction options and projection types

from .enum import TokenType, TokenEvent
from .options import TokenOptions, TokenData, TokenPlainObject, TokenSerializable

__all__ = [
    "TokenType",
    "TokenEvent",
    "TokenOptions",
    "TokenData",
    "TokenPlainObject",
    "TokenSerializable",
]

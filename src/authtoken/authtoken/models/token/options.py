# ABOUTME: Validated construction options and plain-data projection types for tokens
# ABOUTME: Normalizes ISO strings, epoch milliseconds and datetimes into UTC instants

import math
import zoneinfo
from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from authtoken.config.settings import get_settings
from authtoken.exceptions.token import InvalidTokenOptionsError
from authtoken.models.token.enum import TokenType
from authtoken.utils.time import from_epoch_ms, to_utc, truncate_to_ms


class TokenOptions(BaseModel):
    """
    Validated input for constructing a `Token`.

    Accepts the wire spelling `warnFor` as well as `warn_for`. `expires` may be
    an ISO-8601 string, a number of epoch milliseconds, or a `datetime`; it is
    always stored as a timezone-aware UTC instant with millisecond precision.
    Naive values are read in the configured `TIMEZONE`.

    Attributes:
        value (str): Opaque token identifier.
        expires (datetime): Absolute expiry instant (UTC).
        warn_for (int | float): Warning lead time before expiry, in milliseconds.
        type (TokenType): Token classification.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    value: str = Field(min_length=1, description="Opaque token identifier")
    expires: datetime = Field(description="Absolute expiry instant (UTC, millisecond precision)")
    warn_for: int | float = Field(
        default_factory=lambda: get_settings().DEFAULT_WARN_FOR_MS,
        alias="warnFor",
        description="Warning lead time before expiry, in milliseconds",
    )
    type: TokenType = Field(description="Token classification")

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> Any:
        """Reject non-string token values instead of coercing them."""
        if not isinstance(v, str):
            raise ValueError("Token value must be a string")
        return v

    @field_validator("expires", mode="before")
    @classmethod
    def validate_expires(cls, v: Any) -> datetime:
        """
        Normalize the supported expiry representations into a UTC instant.

        Raises:
            ValueError: If the value is unparseable, not finite, or of an unsupported type.
        """
        tz = zoneinfo.ZoneInfo(get_settings().TIMEZONE)

        if isinstance(v, bool):
            raise ValueError("Expiry must be an ISO-8601 string, epoch milliseconds or a datetime")

        if isinstance(v, datetime):
            return truncate_to_ms(to_utc(v, tz))

        if isinstance(v, (int, float)):
            return from_epoch_ms(v)

        if isinstance(v, str):
            text = v.strip()
            if not text:
                raise ValueError("Expiry string cannot be empty")
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError as e:
                raise ValueError(f"Unparseable expiry {v!r}") from e
            return truncate_to_ms(to_utc(parsed, tz))

        raise ValueError("Expiry must be an ISO-8601 string, epoch milliseconds or a datetime")

    @field_validator("warn_for", mode="before")
    @classmethod
    def validate_warn_for(cls, v: Any) -> int | float:
        """Require a finite, non-negative number of milliseconds."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("warnFor must be a number of milliseconds")
        if not math.isfinite(v) or v < 0:
            raise ValueError("warnFor must be a finite, non-negative number of milliseconds")
        return v

    @classmethod
    def parse(cls, options: "TokenOptions | Mapping[str, Any] | None" = None, **kwargs: Any) -> "TokenOptions":
        """
        Build options from an existing instance, a mapping, or keyword arguments.

        Keyword arguments override mapping entries.

        Raises:
            InvalidTokenOptionsError: If validation fails. The pydantic error
                                      list is available in `details["errors"]`.
        """
        if isinstance(options, TokenOptions) and not kwargs:
            return options

        if isinstance(options, TokenOptions):
            data: dict[str, Any] = options.model_dump(by_alias=True)
        elif options is None:
            data = {}
        elif isinstance(options, Mapping):
            data = _to_aliases(options)
        else:
            raise InvalidTokenOptionsError(
                message=f"Token options must be a mapping, got {type(options).__name__}",
            )
        data.update(_to_aliases(kwargs))

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidTokenOptionsError(
                message=f"Invalid token options: {e.error_count()} validation error(s)",
                errors=e.errors(include_url=False, include_context=False),
            ) from e


def _to_aliases(data: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite field names to their aliases so both spellings merge into one key."""
    result: dict[str, Any] = {}
    for key, item in data.items():
        field = TokenOptions.model_fields.get(key)
        result[field.alias if field is not None and field.alias else key] = item
    return result


class TokenData(TypedDict):
    """Minimal projection: identity and validity only."""

    value: str
    expires: datetime
    type: str


TokenPlainObject = TypedDict(
    "TokenPlainObject",
    {"value": str, "expires": datetime, "warnFor": int | float, "type": str},
)
TokenPlainObject.__doc__ = "In-process projection; `expires` stays a datetime."

TokenSerializable = TypedDict(
    "TokenSerializable",
    {"value": str, "expires": int, "warnFor": int | float, "type": str},
)
TokenSerializable.__doc__ = "Wire projection; `expires` is whole epoch milliseconds."

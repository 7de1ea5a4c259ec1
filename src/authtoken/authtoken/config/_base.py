# ABOUTME: Base configuration classes for the token lifecycle library
# ABOUTME: Holds logging level/format, the naive-expiry timezone and token construction defaults

from typing import Literal
import zoneinfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseTokenSettings(BaseSettings):
    """Defines the configuration the token lifecycle library reads at runtime.

    Loaded by `pydantic-settings` from environment variables or a `.env`
    file. Every field here is consumed somewhere in the library: the logging
    setup reads the level and format, option validation reads the timezone
    and warning default, and log calls read the masking switch.

    Attributes:
        LOG_LEVEL: Minimum level for the handlers `setup_logging()` installs.
        LOG_FORMAT: Console output format, structured (json) or human-readable (txt).
        TIMEZONE: IANA zone used to interpret naive expiry timestamps.
        DEFAULT_WARN_FOR_MS: Warning lead time applied when token options omit `warnFor`.
        LOG_TOKEN_VALUES: Whether raw token values may appear in log output.
    """

    # Logging
    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum level for the handlers installed by setup_logging().",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="Console log format. 'json' serializes each record.",
    )
    LOG_TOKEN_VALUES: bool = Field(
        default=False,
        description="Log raw token values instead of masked ones. Never enable in production.",
    )

    # Expiry interpretation
    TIMEZONE: str = Field(
        default="UTC",
        description="Timezone applied to naive expiry datetimes and ISO strings without an offset.",
    )

    # Token defaults
    DEFAULT_WARN_FOR_MS: float = Field(
        default=60_000,
        ge=0,
        allow_inf_nan=False,
        description="Warning lead time in milliseconds used when token options omit warnFor.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case, and `WARN` for `WARNING`."""
        if isinstance(v, str):
            level = v.upper().strip()
            return "WARNING" if level == "WARN" else level
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Accept `structured` and `text` as spellings of `json` and `txt`."""
        if isinstance(v, str):
            fmt = v.lower().strip()
            return {"structured": "json", "text": "txt"}.get(fmt, fmt)
        return v

    @field_validator("TIMEZONE", mode="before")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Require an IANA timezone identifier, repairing lower-case input.

        Raises:
            ValueError: If no zone matches the identifier.
        """
        if not isinstance(v, str):
            return v

        name = v.strip()
        candidates = [name]
        if "/" in name:
            # "america/new_york" -> "America/New_York"
            candidates.append("/".join(part.replace("_", " ").title().replace(" ", "_") for part in name.split("/")))

        for candidate in candidates:
            if not candidate:
                continue
            try:
                zoneinfo.ZoneInfo(candidate)
            except (zoneinfo.ZoneInfoNotFoundError, ValueError):
                continue
            return candidate

        raise ValueError(
            f"Invalid timezone '{name}'. Must be a valid IANA timezone identifier "
            f"(e.g., 'UTC', 'America/New_York', 'Asia/Shanghai')."
        )

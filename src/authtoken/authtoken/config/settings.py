# ABOUTME: Main configuration composition for the token lifecycle library.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseTokenSettings


class TokenSettings(BaseTokenSettings):
    """Represents the complete, composed configuration for the library.

    This class is the final aggregator for all configuration settings. It
    inherits from `BaseTokenSettings` and is meant to be extended with more
    specific settings classes through inheritance.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> TokenSettings:
    """Provides a singleton instance of the library settings.

    The cache ensures environment variables and `.env` files are read once,
    giving a consistent configuration state. Call `get_settings.cache_clear()`
    to pick up changed environment variables (tests do this).

    Returns:
        A single, cached instance of the TokenSettings class.
    """
    return TokenSettings()

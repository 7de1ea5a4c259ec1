from enum import Enum


class TokenType(str, Enum):
    """
    Enum for token classifications.
    """

    ACCESS = "access"
    REFRESH = "refresh"

    def __str__(self) -> str:
        return self.value


class TokenEvent(str, Enum):
    """
    Enumeration of the signals a token emits.

    Attributes:
        WARN (str): Fires once, `warn_for` milliseconds before expiry. No status change.
        EXPIRE (str): Fires once, at expiry, together with the expired status transition.
        REVOKE (str): Fires on every `revoke()` call.
    """

    WARN = "warn"
    EXPIRE = "expire"
    REVOKE = "revoke"

    def __str__(self) -> str:
        return self.value

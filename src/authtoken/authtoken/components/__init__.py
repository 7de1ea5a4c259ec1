# ABOUTME: Components package exports
# ABOUTME: Exports the Token state machine, its notifier and one-shot timer

from .notifier import ListenerEntry, Listener, TokenNotifier
from .timer import OneShotTimer
from .token import Token, TokenListener, TokenStatus, from_serializable, of, revoke, usable, value

__all__ = [
    "ListenerEntry",
    "Listener",
    "TokenNotifier",
    "OneShotTimer",
    "Token",
    "TokenListener",
    "TokenStatus",
    "from_serializable",
    "of",
    "revoke",
    "usable",
    "value",
]

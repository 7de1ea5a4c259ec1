# ABOUTME: Token lifecycle state machine with Result-valued status and scheduled warn/expire signals
# ABOUTME: Exposes expired/revoked/usable queries, revocation, subscription, disposal and data projections

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from types import TracebackType
from typing import Any

from loguru import logger

from authtoken.components.notifier import Listener, TokenNotifier
from authtoken.components.timer import OneShotTimer
from authtoken.config.logging import mask_token_value
from authtoken.exceptions.base import TokenStateException
from authtoken.exceptions.token import TokenExpiredError, TokenRevokedError
from authtoken.implementations.eventloop.scheduler import AsyncioTimerScheduler
from authtoken.interfaces.scheduler import AbstractTimerScheduler
from authtoken.models.result import Failure, Result, Success
from authtoken.models.token.enum import TokenEvent, TokenType
from authtoken.models.token.options import TokenData, TokenOptions, TokenPlainObject, TokenSerializable
from authtoken.utils.time import to_epoch_ms

TokenListener = Listener["Token"]
TokenStatus = Result["Token", TokenStateException]


class Token:
    """
    An authentication token with a time-driven and revocable lifecycle.

    The token's identity (value, expiry, warning lead time, type) is fixed at
    construction. Its status is held in two independent `Result` fields:

    - expired status: `Success(token)` until the expire timer fires, then
      `Failure(TokenExpiredError)` for good;
    - revoked status: `Success(token)` until `revoke()` is called, then a
      fresh `Failure(TokenRevokedError)` on every call.

    Construction schedules two one-shot timers on the scheduler: one at
    `expires` that flips the expired status and emits `expire`, and one at
    `expires - warn_for` that only emits `warn`. Delays in the past clamp to
    zero; the timers still fire on a later scheduler turn, never inside the
    constructor, so listeners attached right after construction see every
    event.

    Example:
        >>> token = Token.of({"value": "abc", "expires": "2030-01-01T00:00:00Z",
        ...                   "warnFor": 60_000, "type": "access"})
        >>> token.on("warn", refresh).on("expire", drop)
        >>> token.usable().is_success()
        True

    Note:
        Without an explicit scheduler, the token binds to the running asyncio
        loop. Call `dispose()` (or use the token as a context manager) to
        cancel pending timers for tokens that are discarded early.
    """

    def __init__(
        self,
        options: TokenOptions | Mapping[str, Any] | None = None,
        *,
        scheduler: AbstractTimerScheduler | None = None,
        **kwargs: Any,
    ):
        """
        Initialize the token and schedule its warn and expire timers.

        Args:
            options: `TokenOptions`, or a mapping with `value`, `expires`,
                     `warnFor` (or `warn_for`) and `type`.
            scheduler: Timer scheduler. Defaults to an `AsyncioTimerScheduler`
                       bound to the running event loop.
            **kwargs: Option fields, overriding entries in `options`.

        Raises:
            InvalidTokenOptionsError: If the options fail validation.
            TokenSchedulingError: If no scheduler is given and no event loop is running.
        """
        opts = TokenOptions.parse(options, **kwargs)

        self._value = opts.value
        self._expires = opts.expires
        self._warn_for = opts.warn_for
        self._type = opts.type

        self._status_expired: TokenStatus = Success(self)
        self._status_revoked: TokenStatus = Success(self)

        self._notifier: TokenNotifier[Token] = TokenNotifier()
        self._disposed = False

        if scheduler is None:
            scheduler = AsyncioTimerScheduler()
        self._scheduler = scheduler

        expires_ms = to_epoch_ms(self._expires)
        now = scheduler.now_ms()
        self._expire_timer = OneShotTimer(scheduler, expires_ms - now, self._on_expire, name="expire")
        try:
            self._warn_timer = OneShotTimer(scheduler, expires_ms - self._warn_for - now, self._on_warn, name="warn")
        except Exception:
            # Construction failed; nothing else holds the expire timer
            self._expire_timer.cancel()
            raise

        logger.debug(
            "Token created",
            token=mask_token_value(self._value),
            type=self._type.value,
            expire_delay_ms=self._expire_timer.delay_ms,
            warn_delay_ms=self._warn_timer.delay_ms,
        )

    @classmethod
    def of(
        cls,
        options: TokenOptions | Mapping[str, Any] | None = None,
        *,
        scheduler: AbstractTimerScheduler | None = None,
        **kwargs: Any,
    ) -> Token:
        """Factory alias for the constructor."""
        return cls(options, scheduler=scheduler, **kwargs)

    @classmethod
    def from_serializable(
        cls, data: TokenSerializable | Mapping[str, Any], *, scheduler: AbstractTimerScheduler | None = None
    ) -> Token:
        """
        Rebuild a token from its `to_serializable()` form.

        The result has the same value, expiry instant, warning lead time and
        type, fresh statuses and newly scheduled timers.
        """
        return cls(data, scheduler=scheduler)

    @classmethod
    def from_data(
        cls,
        data: TokenData | TokenPlainObject | Mapping[str, Any],
        *,
        scheduler: AbstractTimerScheduler | None = None,
        **kwargs: Any,
    ) -> Token:
        """
        Rebuild a token from its `to_data()` or `to_plain_object()` form.

        `to_data()` omits the warning lead time; pass `warnFor=...` or rely on
        the configured `DEFAULT_WARN_FOR_MS`.
        """
        return cls(data, scheduler=scheduler, **kwargs)

    # Fixed fields

    @property
    def value(self) -> str:
        """The opaque token identifier."""
        return self._value

    @property
    def expires(self) -> datetime:
        """The absolute expiry instant (UTC)."""
        return self._expires

    @property
    def warn_for(self) -> int | float:
        """Lead time before expiry at which `warn` fires, in milliseconds."""
        return self._warn_for

    @property
    def type(self) -> TokenType:
        """The token classification."""
        return self._type

    @property
    def disposed(self) -> bool:
        """Whether `dispose()` has been called."""
        return self._disposed

    # Status

    def expired(self) -> TokenStatus:
        """
        Get the expired status.

        Returns:
            `Success(self)` until the expire timer has fired, then
            `Failure(TokenExpiredError)`.
        """
        return self._status_expired

    def revoked(self) -> TokenStatus:
        """
        Get the revoked status.

        Returns:
            `Success(self)` until `revoke()` has been called, then
            `Failure(TokenRevokedError)`.
        """
        return self._status_revoked

    def usable(self) -> TokenStatus:
        """
        Get the combined status.

        Returns:
            The revoked failure if revoked, else the expired failure if
            expired, else `Success(self)`.
        """
        return self.revoked().and_(self.expired())

    def time_until_expiry(self) -> float:
        """
        Get the time left until the expiry instant, by the scheduler's clock.

        Returns:
            Milliseconds until `expires`, clamped at zero.
        """
        return max(0.0, to_epoch_ms(self._expires) - self._scheduler.now_ms())

    # Transitions

    def revoke(self) -> Token:
        """
        Revoke the token.

        Assigns a new `Failure(TokenRevokedError)` to the revoked status and
        emits `revoke` synchronously, on every call.

        Returns:
            The token, for chaining.
        """
        self._status_revoked = Failure(TokenRevokedError(self._type.value, self._value))
        logger.info("Token revoked", token=mask_token_value(self._value), type=self._type.value)
        self._notifier.emit(TokenEvent.REVOKE, self)
        return self

    def _on_expire(self) -> None:
        self._status_expired = Failure(TokenExpiredError(self._type.value, self._value))
        logger.info("Token expired", token=mask_token_value(self._value), type=self._type.value)
        self._notifier.emit(TokenEvent.EXPIRE, self)

    def _on_warn(self) -> None:
        logger.debug(
            "Token expiry warning",
            token=mask_token_value(self._value),
            type=self._type.value,
            warn_for_ms=self._warn_for,
        )
        self._notifier.emit(TokenEvent.WARN, self)

    # Subscription

    def on(self, event: TokenEvent | str, listener: TokenListener) -> Token:
        """
        Register `listener` for `event` ("warn", "expire" or "revoke").

        Returns:
            The token, for chaining.

        Raises:
            ValueError: If the event is unknown or the listener is not callable.
        """
        self._notifier.on(event, listener)
        return self

    def once(self, event: TokenEvent | str, listener: TokenListener) -> Token:
        """
        Register `listener` for the next emission of `event` only.

        Returns:
            The token, for chaining.
        """
        self._notifier.once(event, listener)
        return self

    def off(self, event: TokenEvent | str, listener: TokenListener) -> Token:
        """
        Remove one registration of `listener` for `event`. Unknown listeners are ignored.

        Returns:
            The token, for chaining.
        """
        self._notifier.off(event, listener)
        return self

    def remove_all_listeners(self, event: TokenEvent | str | None = None) -> Token:
        """
        Remove all listeners for `event`, or for every event when None.

        Returns:
            The token, for chaining.
        """
        self._notifier.remove_all_listeners(event)
        return self

    def listeners(self, event: TokenEvent | str) -> list[TokenListener]:
        """Get the listeners registered for `event`, in registration order."""
        return self._notifier.listeners(event)

    def listener_count(self, event: TokenEvent | str | None = None) -> int:
        """Get the number of registrations for `event`, or for all events when None."""
        return self._notifier.listener_count(event)

    # Disposal

    def dispose(self) -> None:
        """
        Cancel pending timers and drop all listeners.

        After disposal no `warn` or `expire` will fire. The statuses keep
        their current values and `revoke()` still works. Calling `dispose()`
        again is a no-op.
        """
        if self._disposed:
            return
        self._disposed = True
        self._expire_timer.cancel()
        self._warn_timer.cancel()
        removed = self._notifier.remove_all_listeners()
        logger.debug("Token disposed", token=mask_token_value(self._value), listeners_removed=removed)

    def __enter__(self) -> Token:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.dispose()

    # Projections

    def to_data(self) -> TokenData:
        """Project to `{value, expires, type}`."""
        return {
            "value": self._value,
            "expires": self._expires,
            "type": self._type.value,
        }

    def to_plain_object(self) -> TokenPlainObject:
        """Project to `{value, expires, warnFor, type}` with `expires` as a datetime."""
        return {
            "value": self._value,
            "expires": self._expires,
            "warnFor": self._warn_for,
            "type": self._type.value,
        }

    def to_serializable(self) -> TokenSerializable:
        """Project to `{value, expires, warnFor, type}` with `expires` as epoch milliseconds."""
        return {
            "value": self._value,
            "expires": to_epoch_ms(self._expires),
            "warnFor": self._warn_for,
            "type": self._type.value,
        }

    def __repr__(self) -> str:
        return (
            f"Token("
            f"type={self._type.value!r}, "
            f"value={mask_token_value(self._value)!r}, "
            f"expires={self._expires.isoformat()!r}, "
            f"warn_for={self._warn_for}"
            f")"
        )


of = Token.of
from_serializable = Token.from_serializable


def value(token: Token) -> str:
    """Return the token's value."""
    return token.value


def revoke(token: Token) -> Token:
    """Revoke the token and return it."""
    return token.revoke()


def usable(token: Token) -> TokenStatus:
    """Return the token's combined status."""
    return token.usable()

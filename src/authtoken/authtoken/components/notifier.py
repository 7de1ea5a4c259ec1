# ABOUTME: Typed publish/subscribe channel scoped to the token signals
# ABOUTME: Registration-order delivery with reentrancy-safe snapshot iteration and once-listeners

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, TypeVar

from loguru import logger

from authtoken.models.token.enum import TokenEvent

P = TypeVar("P")

Listener = Callable[[P], Any]  # Type alias for a listener receiving the event payload.


class ListenerEntry(Generic[P]):
    """
    A single listener registration.

    Each call to `on()` or `once()` creates a new entry, so registering the
    same callable twice delivers twice.
    """

    __slots__ = ("listener", "once", "spent")

    def __init__(self, listener: Listener[P], once: bool = False):
        self.listener = listener
        self.once = once
        self.spent = False

    def __repr__(self) -> str:
        name = getattr(self.listener, "__qualname__", repr(self.listener))
        return f"ListenerEntry(listener={name}, once={self.once})"


class TokenNotifier(Generic[P]):
    """
    Publish/subscribe channel for the three token events.

    Listeners for an event are invoked synchronously, in registration order,
    with the emitted payload. Emission iterates over a snapshot of the
    listener list taken when `emit()` starts:

    - a listener added during an emission is not called for that emission;
    - a listener removed during an emission is still called for that
      emission if it was registered when the emission started;
    - no listener is called twice for one emission, even when `emit()` is
      re-entered from inside a listener.

    There is no replay: a listener registered after an event fired never
    receives that past occurrence.

    An exception raised by a listener is logged with its traceback and
    counted; the remaining listeners still run.
    """

    def __init__(self) -> None:
        """Initialize an empty notifier."""
        self._listeners: Dict[TokenEvent, List[ListenerEntry[P]]] = {}

        # Statistics
        self._emitted_count = 0
        self._delivered_count = 0
        self._error_count = 0

    @staticmethod
    def _coerce_event(event: TokenEvent | str) -> TokenEvent:
        try:
            return TokenEvent(event)
        except ValueError:
            valid = ", ".join(e.value for e in TokenEvent)
            raise ValueError(f"Unknown token event {event!r}; expected one of: {valid}") from None

    def on(self, event: TokenEvent | str, listener: Listener[P]) -> None:
        """
        Register a listener for every future emission of `event`.

        Args:
            event: A `TokenEvent` member or its string value.
            listener: Callable invoked with the payload.

        Raises:
            ValueError: If the event is unknown or the listener is not callable.
        """
        self._add(event, listener, once=False)

    def once(self, event: TokenEvent | str, listener: Listener[P]) -> None:
        """
        Register a listener for the next emission of `event` only.

        The registration is removed before the listener is invoked.

        Raises:
            ValueError: If the event is unknown or the listener is not callable.
        """
        self._add(event, listener, once=True)

    def _add(self, event: TokenEvent | str, listener: Listener[P], once: bool) -> None:
        event = self._coerce_event(event)
        if not callable(listener):
            raise ValueError("listener must be callable")
        self._listeners.setdefault(event, []).append(ListenerEntry(listener, once=once))

    def off(self, event: TokenEvent | str, listener: Listener[P]) -> bool:
        """
        Remove one registration of `listener` for `event`.

        When the same callable is registered several times, the most recently
        added registration is removed.

        Returns:
            True if a registration was removed, False if none matched.

        Raises:
            ValueError: If the event is unknown.
        """
        event = self._coerce_event(event)
        entries = self._listeners.get(event)
        if not entries:
            return False

        for i in range(len(entries) - 1, -1, -1):
            if entries[i].listener == listener:
                entries.pop(i)
                if not entries:
                    del self._listeners[event]
                return True

        return False

    def remove_all_listeners(self, event: TokenEvent | str | None = None) -> int:
        """
        Remove every registration for `event`, or for all events when None.

        Returns:
            The number of registrations removed.
        """
        if event is None:
            count = sum(len(entries) for entries in self._listeners.values())
            self._listeners.clear()
            return count

        return len(self._listeners.pop(self._coerce_event(event), []))

    def emit(self, event: TokenEvent | str, payload: P) -> bool:
        """
        Invoke the listeners registered for `event` with `payload`.

        Args:
            event: The event to emit.
            payload: The value passed to each listener.

        Returns:
            True if the event had listeners when the emission started, False otherwise.

        Raises:
            ValueError: If the event is unknown.
        """
        event = self._coerce_event(event)
        self._emitted_count += 1

        snapshot = list(self._listeners.get(event, ()))
        if not snapshot:
            return False

        for entry in snapshot:
            if entry.spent:
                continue
            if entry.once:
                entry.spent = True
                self._discard(event, entry)

            try:
                entry.listener(payload)
                self._delivered_count += 1
            except Exception as e:
                self._error_count += 1
                logger.opt(exception=e).error(
                    "Error in token listener",
                    event=event.value,
                    listener=repr(entry),
                )

        return True

    def _discard(self, event: TokenEvent, entry: ListenerEntry[P]) -> None:
        entries = self._listeners.get(event)
        if not entries:
            return
        for i, candidate in enumerate(entries):
            if candidate is entry:
                entries.pop(i)
                break
        if not entries:
            del self._listeners[event]

    def listeners(self, event: TokenEvent | str) -> list[Listener[P]]:
        """
        Get the callables registered for `event`, in registration order.

        Returns:
            A copy of the listener list.
        """
        return [entry.listener for entry in self._listeners.get(self._coerce_event(event), ())]

    def listener_count(self, event: TokenEvent | str | None = None) -> int:
        """
        Get the number of registrations for `event`, or across all events when None.

        Returns:
            The registration count.
        """
        if event is None:
            return sum(len(entries) for entries in self._listeners.values())
        return len(self._listeners.get(self._coerce_event(event), ()))

    def event_names(self) -> list[TokenEvent]:
        """
        Get the events that currently have at least one listener.

        Returns:
            Events in first-registration order.
        """
        return list(self._listeners.keys())

    @property
    def error_count(self) -> int:
        """Number of listener invocations that raised."""
        return self._error_count

    def get_statistics(self) -> dict[str, int]:
        """
        Get notifier statistics.

        Returns:
            Counts of emissions, successful deliveries, listener errors and
            current registrations.
        """
        return {
            "emitted_count": self._emitted_count,
            "delivered_count": self._delivered_count,
            "error_count": self._error_count,
            "listener_count": self.listener_count(),
        }

"""Event emitter: in-process, synchronous publish/subscribe registry.

Listeners are kept per event in registration order. Removal never mutates a
stored list in place; it stores a new list instead. An ``emit`` that is already
iterating therefore keeps walking the list it captured: listeners removed
during dispatch still run in that call, and listeners added during dispatch
only run from the next ``emit``.
"""

from __future__ import annotations

import contextvars
import weakref
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from itertools import islice
from typing import Any, Generic, TypeVar

from loguru import logger

from wallet_events.errors import InvalidListenerError

EventT = TypeVar("EventT", bound=Hashable)
F = TypeVar("F", bound=Callable[..., Any])

_MISSING: Any = object()

_current_context: contextvars.ContextVar[Any] = contextvars.ContextVar(
    "wallet_events_listener_context", default=None
)


def current_context() -> Any:
    """Return the context bound to the listener being invoked, or None outside emit."""
    return _current_context.get()


@dataclass(frozen=True, eq=False)
class Listener:
    """A registered callback with its invocation context and one-shot flag."""

    fn: Callable[..., Any]
    context: Any
    once: bool = False

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        token = _current_context.set(self.context)
        try:
            return self.fn(*args, **kwargs)
        finally:
            _current_context.reset(token)


class EventEmitter(Generic[EventT]):
    """Registry mapping event identifiers to ordered listeners.

    Event identifiers are any hashable value except None (strings, enum members,
    sentinel objects). Every instance owns an independent table; there is no
    shared or global emitter.

    Not thread-safe: callers registering or emitting from several threads must
    synchronize externally.
    """

    def __init__(self) -> None:
        self._events: dict[EventT, list[Listener]] = {}
        # one-shot listeners already selected by some emit, nested ones included
        self._fired: weakref.WeakSet[Listener] = weakref.WeakSet()

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def event_names(self) -> list[EventT]:
        """Events that currently have at least one listener, in table order."""
        return list(self._events)

    def listeners(self, event: EventT) -> list[Callable[..., Any]]:
        """Callbacks registered for ``event``, in invocation order."""
        return [listener.fn for listener in self._events.get(event, ())]

    def listener_count(self, event: EventT) -> int:
        return len(self._events.get(event, ()))

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def _add_listener(
        self,
        event: EventT,
        fn: Callable[..., Any],
        context: Any,
        once: bool,
    ) -> EventEmitter[EventT]:
        if not callable(fn):
            raise InvalidListenerError(fn)

        listener = Listener(fn, self if context is None else context, once)
        handlers = self._events.get(event)
        if handlers is None:
            self._events[event] = [listener]
        else:
            handlers.append(listener)
        return self

    def on(
        self,
        event: EventT,
        fn: Callable[..., Any] = _MISSING,
        context: Any = None,
    ) -> Any:
        """Add a listener for ``event``.

        Returns the emitter for chaining. Without ``fn``, returns a decorator:

            @emitter.on("connect")
            def handle_connect(public_key):
                ...
        """
        if fn is _MISSING:

            def decorator(func: F) -> F:
                self._add_listener(event, func, context, once=False)
                return func

            return decorator
        return self._add_listener(event, fn, context, once=False)

    def once(
        self,
        event: EventT,
        fn: Callable[..., Any] = _MISSING,
        context: Any = None,
    ) -> Any:
        """Add a one-time listener for ``event``. Decorator form as for :meth:`on`."""
        if fn is _MISSING:

            def decorator(func: F) -> F:
                self._add_listener(event, func, context, once=True)
                return func

            return decorator
        return self._add_listener(event, fn, context, once=True)

    def add_listener(
        self,
        event: EventT,
        fn: Callable[..., Any],
        context: Any = None,
    ) -> EventEmitter[EventT]:
        return self._add_listener(event, fn, context, once=False)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def emit(self, event: EventT, *args: Any, **kwargs: Any) -> bool:
        """Call every listener registered for ``event`` with the given arguments.

        Returns True if the event had listeners, else False. One-shot listeners
        are removed before they are called. Exceptions raised by a listener
        propagate to the caller and stop this dispatch.
        """
        handlers = self._events.get(event)
        if not handlers:
            return False

        for listener in islice(handlers, len(handlers)):
            if listener.once:
                if listener in self._fired:
                    continue
                self._fired.add(listener)
                self._discard(event, listener)
            listener(*args, **kwargs)
        return True

    # -------------------------------------------------------------------------
    # Removal
    # -------------------------------------------------------------------------

    def _store(self, event: EventT, handlers: list[Listener]) -> None:
        if handlers:
            self._events[event] = handlers
        else:
            del self._events[event]

    def _discard(self, event: EventT, listener: Listener) -> None:
        """Remove exactly ``listener`` (by identity) from the current table."""
        handlers = self._events.get(event)
        if not handlers:
            return
        self._store(event, [item for item in handlers if item is not listener])

    def remove_listener(
        self,
        event: EventT,
        fn: Callable[..., Any] | None = None,
        context: Any = None,
        once: bool = False,
    ) -> EventEmitter[EventT]:
        """Remove the listeners of ``event``.

        Without ``fn`` every listener of the event is removed. Otherwise only
        listeners whose callback equals ``fn`` are removed, further restricted to
        those bound to ``context`` when it is given and to one-time listeners
        when ``once`` is true. Unknown events and listeners are ignored.
        """
        handlers = self._events.get(event)
        if handlers is None:
            return self
        if fn is None:
            del self._events[event]
            return self

        self._store(
            event,
            [
                listener
                for listener in handlers
                if listener.fn != fn
                or (once and not listener.once)
                or (context is not None and listener.context != context)
            ],
        )
        return self

    def off(
        self,
        event: EventT,
        fn: Callable[..., Any] | None = None,
        context: Any = None,
        once: bool = False,
    ) -> EventEmitter[EventT]:
        return self.remove_listener(event, fn, context, once)

    def remove_all_listeners(self, event: EventT | None = None) -> EventEmitter[EventT]:
        """Remove all listeners, or only those of ``event``."""
        if event is None:
            self._events = {}
            logger.debug("Cleared all listeners on {}", type(self).__name__)
        else:
            self._events.pop(event, None)
        return self

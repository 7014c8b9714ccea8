"""Deferred, coalescing dispatch of signal handlers.

Qt signals fire whenever the model or view changes, often several times while
a single user action is processed.  :class:`EventManager` sits between those
signals and the expensive handlers that react to them: connecting a token
returned by :meth:`EventManager.add` to a signal only *queues* the handler,
and the queued work runs once when the host calls :meth:`EventManager.flush`.

Typical use::

    token = events.add(self.refresh_lists)
    model.packagesChanged.connect(token)
    ...
    model.packagesChanged.disconnect(events.remove(token))
    events.assert_is_empty()
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple

from ..errors import EventWiringError

logger = logging.getLogger(__name__)

Handler = Callable[[], None]
EventToken = Callable[..., None]


class EventQueueMode(Enum):
    """How repeated fires of the same handler are queued before a flush."""

    ALL = auto()
    LATEST_ONLY = auto()


@dataclass
class _PendingEvent:
    handler: Handler
    mode: EventQueueMode


def _describe(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class EventManager:
    """Collect handler invocations and run them together on :meth:`flush`.

    Under :attr:`EventQueueMode.LATEST_ONLY` a handler is pending at most once
    between two flushes no matter how many wired signals fire.  Under
    :attr:`EventQueueMode.ALL` every fire queues a separate invocation.
    Handlers run in the order they first became pending.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # (token, handler) pairs in wiring order.
        self._wirings: List[Tuple[EventToken, Handler]] = []
        self._pending: List[_PendingEvent] = []
        self._latest_only: Dict[Handler, _PendingEvent] = {}
        self._is_flushing = False

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------
    def add(
        self, handler: Handler, mode: EventQueueMode = EventQueueMode.LATEST_ONLY
    ) -> EventToken:
        """Return a slot that queues *handler* each time it is invoked.

        Every call creates a new wiring which must later be released with
        :meth:`remove`.  The returned token accepts and ignores any signal
        arguments.
        """

        def token(*_args: object) -> None:
            self._enqueue(handler, mode)

        with self._lock:
            self._wirings.append((token, handler))
        logger.debug("Wired %s (%s)", _describe(handler), mode.name)
        return token

    def remove(self, target: Handler | EventToken) -> EventToken:
        """Release one wiring and return its token for disconnection.

        *target* may be a token previously returned by :meth:`add`, in which
        case exactly that wiring is released, or the handler itself, in which
        case its oldest remaining wiring is released.
        """

        with self._lock:
            index = self._find_wiring(target)
            if index is None:
                raise EventWiringError(
                    f"remove() called for {_describe(target)} which has no wiring left"
                )
            token, handler = self._wirings.pop(index)
        logger.debug("Unwired %s", _describe(handler))
        return token

    def _find_wiring(self, target: Handler | EventToken) -> Optional[int]:
        for index, (token, _handler) in enumerate(self._wirings):
            if token is target:
                return index
        for index, (_token, handler) in enumerate(self._wirings):
            if handler == target:
                return index
        return None

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def trigger(
        self, handler: Handler, mode: EventQueueMode = EventQueueMode.LATEST_ONLY
    ) -> None:
        """Queue *handler* for the next flush without any signal firing."""

        self._enqueue(handler, mode)

    def flush(self) -> None:
        """Run every pending handler once and clear the pending set.

        Handlers queued while the flush is running are kept for the next
        flush.  Calling :meth:`flush` from inside a handler is an error.  If a
        handler raises, the exception propagates and the handlers queued
        behind it stay pending for the next flush.
        """

        with self._lock:
            if self._is_flushing:
                raise EventWiringError("flush() must not be called re-entrantly")
            if not self._pending:
                return
            remaining = self._pending
            self._pending = []
            self._latest_only.clear()
            self._is_flushing = True

        try:
            while remaining:
                event = remaining.pop(0)
                event.handler()
        finally:
            with self._lock:
                self._is_flushing = False
                if remaining:
                    self._requeue_front(remaining)

    def clear_pending(self) -> None:
        """Drop every pending handler without running it."""

        with self._lock:
            self._pending = []
            self._latest_only.clear()

    def _requeue_front(self, events: List[_PendingEvent]) -> None:
        # Caller holds the lock.
        for event in events:
            if event.mode is not EventQueueMode.LATEST_ONLY:
                continue
            queued = self._latest_only.get(event.handler)
            if queued is not None:
                self._pending = [other for other in self._pending if other is not queued]
            self._latest_only[event.handler] = event
        self._pending = events + self._pending

    def _enqueue(self, handler: Handler, mode: EventQueueMode) -> None:
        with self._lock:
            if mode is EventQueueMode.LATEST_ONLY:
                if handler in self._latest_only:
                    return
                event = _PendingEvent(handler, mode)
                self._latest_only[handler] = event
            else:
                event = _PendingEvent(handler, mode)
            self._pending.append(event)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def is_empty(self) -> bool:
        """Return ``True`` when no wiring and no pending handler remain."""

        with self._lock:
            return not self._wirings and not self._pending

    def assert_is_empty(self) -> None:
        """Raise :class:`EventWiringError` if a wiring or pending handler is left."""

        with self._lock:
            leaked = [_describe(handler) for _token, handler in self._wirings]
            pending = [_describe(event.handler) for event in self._pending]
        problems = []
        if leaked:
            problems.append(
                f"{len(leaked)} event wiring(s) still registered: {', '.join(leaked)}"
            )
        if pending:
            problems.append(
                f"{len(pending)} handler(s) still pending: {', '.join(pending)}"
            )
        if problems:
            raise EventWiringError("; ".join(problems))

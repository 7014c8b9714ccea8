"""Custom exception hierarchy for pkgBrowser."""

from __future__ import annotations


class PkgBrowserError(Exception):
    """Base class for all custom errors raised by pkgBrowser."""


class ProgrammingError(PkgBrowserError):
    """Raised when an internal invariant is violated.

    These errors point at a defect in the wiring of the synchronisation layer
    rather than at bad external input, so callers are not expected to recover
    from them.
    """


class UnknownSortMethodError(ProgrammingError):
    """Raised when a list reports a sort method outside its enumeration."""


class EventWiringError(ProgrammingError):
    """Raised when event subscriptions are unbalanced or flushed re-entrantly."""


class SyncStateError(ProgrammingError):
    """Raised when the model/view syncer is driven out of lifecycle order."""

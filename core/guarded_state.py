"""
Lock-guarded state container.

Printer configuration is read by admin page handlers and by the job
pipeline at the same time. ``GuardedState`` hands out deep copies on read
and applies edits as read-snapshot -> mutate-copy -> swap, all while holding
the lock, so a concurrent reader never sees a half-applied form.

Usage:
    state = GuardedState(DriverOptions(...))

    # Readers get a private copy
    options = state.get()

    # Writers edit a copy which replaces the stored value on success
    with state.edit() as options:
        options.darkness_configured = 50
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from copy import deepcopy
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class GuardedState(Generic[T]):
    """Mutex-protected value with copy-on-read and swap-on-write."""

    def __init__(self, value: T):
        self._value = value
        self._lock = threading.RLock()

    def get(self) -> T:
        """Return a deep copy of the current value."""
        with self._lock:
            return deepcopy(self._value)

    @contextmanager
    def edit(self) -> Iterator[T]:
        """
        Edit a private copy of the value.

        The lock is held for the whole block. If the block raises, the
        stored value is left untouched and the exception propagates.

        Yields:
            Deep copy of the current value
        """
        with self._lock:
            working = deepcopy(self._value)
            yield working
            self._value = working

"""Activity gate use case: the "am I still the controller" flag."""

from __future__ import annotations

import threading
from collections.abc import Callable


class ActivityGate:
    """Single controller-activity flag, independent of the catalog lock.

    Backed by a threading.Event so that readers on any thread see the
    latest value without taking a lock. Writers serialize on a small lock
    of their own, so a check-and-set and the on_change callback that
    reports it happen as one step.

    Transitions:
        - Starts active.
        - deactivate() sets it inactive. Idempotent.
        - set(flag) assigns it directly (test override, may reactivate).
    """

    def __init__(self, active: bool = True) -> None:
        """Initialize the gate.

        Args:
            active: Initial flag value. Defaults to True.
        """
        self._active = threading.Event()
        self._write_lock = threading.Lock()
        if active:
            self._active.set()

    def is_active(self) -> bool:
        """Return True while the controller is active."""
        return self._active.is_set()

    def deactivate(self, on_change: Callable[[bool], None] | None = None) -> bool:
        """Mark the controller inactive.

        Args:
            on_change: Called with the new flag value, under the write lock,
                only if this call changed the flag.

        Returns:
            True if this call changed the flag, False if it was already inactive.
        """
        return self.set(False, on_change)

    def set(
        self, active: bool, on_change: Callable[[bool], None] | None = None
    ) -> bool:
        """Assign the flag directly.

        Args:
            active: New flag value.
            on_change: Called with the new flag value, under the write lock,
                only if this call changed the flag.

        Returns:
            True if this call changed the flag.
        """
        with self._write_lock:
            if self._active.is_set() == active:
                return False
            if active:
                self._active.set()
            else:
                self._active.clear()
            if on_change is not None:
                on_change(active)
            return True

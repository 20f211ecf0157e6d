"""Fake controller metrics adapter for testing.

Provides a test double for ControllerMetricsPort that records all metric
updates for assertion in tests.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        value: Value that was set.
    """

    metric_name: str
    value: int | bool


class FakeControllerMetrics:
    """Fake implementation of ControllerMetricsPort for testing.

    Records all metric updates for later assertion. Updates may arrive from
    several threads, so recording is serialized.

    Example:
        >>> fake = FakeControllerMetrics()
        >>> fake.set_active_controller(True)
        >>> fake.current_active_controller
        True
        >>> fake.calls
        [MetricCall(metric_name='active_controller', value=True)]
    """

    def __init__(self) -> None:
        """Initialize with no recorded state."""
        self._lock = threading.Lock()
        self._active_controller: bool | None = None
        self._global_topic_count: int | None = None
        self._calls: list[MetricCall] = []

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all metric update calls in order of invocation."""
        with self._lock:
            return list(self._calls)

    @property
    def current_active_controller(self) -> bool | None:
        """Return last set active controller state, or None if never set."""
        return self._active_controller

    @property
    def current_global_topic_count(self) -> int | None:
        """Return last set topic count, or None if never set."""
        return self._global_topic_count

    def set_active_controller(self, is_active: bool) -> None:
        """Record active controller update."""
        with self._lock:
            self._active_controller = is_active
            self._calls.append(MetricCall("active_controller", is_active))

    def set_global_topic_count(self, count: int) -> None:
        """Record global topic count update."""
        with self._lock:
            self._global_topic_count = count
            self._calls.append(MetricCall("global_topic_count", count))

    def clear_calls(self) -> None:
        """Clear the recorded calls list.

        Does not reset current_* state values.
        """
        with self._lock:
            self._calls.clear()

    def reset(self) -> None:
        """Reset all state and calls."""
        with self._lock:
            self._active_controller = None
            self._global_topic_count = None
            self._calls.clear()

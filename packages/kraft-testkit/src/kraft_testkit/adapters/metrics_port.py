"""Port interface and no-op implementation for controller metrics.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ControllerMetricsPort(Protocol):
    """Port interface for controller metrics collection.

    Implementations record controller gauges to a metrics backend
    (Prometheus, in-memory fakes, etc.).

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - set_* methods update gauges to specific values
        - Thread safety is implementation-defined
        - Implementations may no-op if metrics are disabled
    """

    def set_active_controller(self, is_active: bool) -> None:
        """Set the active controller gauge.

        Args:
            is_active: True if this node is the active controller
                (sets gauge to 1), False otherwise (sets gauge to 0).
        """
        ...

    def set_global_topic_count(self, count: int) -> None:
        """Set the global topic count gauge.

        Args:
            count: Number of topics currently in the catalog.
        """
        ...


class NoOpControllerMetrics:
    """No-operation metrics adapter for when metrics are disabled.

    All methods are no-ops. This allows the controller to unconditionally
    call metrics methods without checking if metrics are enabled.

    Example:
        >>> adapter = NoOpControllerMetrics()
        >>> adapter.set_active_controller(True)  # Does nothing
    """

    def set_active_controller(self, is_active: bool) -> None:
        """No-op."""
        pass

    def set_global_topic_count(self, count: int) -> None:
        """No-op."""
        pass

"""Prometheus metrics adapter for the mock controller.

Implements ControllerMetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Gauge


class PrometheusControllerMetrics:
    """Prometheus implementation of ControllerMetricsPort.

    Creates and manages Prometheus gauges for controller state.
    All gauges use a configurable prefix (default 'kraft_testkit_').

    This adapter requires prometheus-client to be installed:
        pip install kraft-testkit[metrics]

    Example:
        >>> adapter = PrometheusControllerMetrics(prefix="myapp_controller")
        >>> adapter.set_active_controller(True)  # myapp_controller_active_controller_count = 1
        >>> adapter.set_global_topic_count(3)

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "kraft_testkit",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Initialize Prometheus gauges.

        Args:
            prefix: Metric name prefix. All gauge names will be
                {prefix}_<metric_name>.
            registry: Registry to register gauges with. Defaults to the
                prometheus-client global registry.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, Gauge

        target = registry if registry is not None else REGISTRY

        self._active_controller: Gauge = Gauge(
            f"{prefix}_active_controller_count",
            "Active controller: 1=this node is the active controller, 0=not",
            registry=target,
        )
        self._global_topic_count: Gauge = Gauge(
            f"{prefix}_global_topic_count",
            "Number of topics in the controller catalog",
            registry=target,
        )

    def set_active_controller(self, is_active: bool) -> None:
        """Set active controller gauge.

        Args:
            is_active: True for active (1), False otherwise (0).
        """
        self._active_controller.set(1 if is_active else 0)

    def set_global_topic_count(self, count: int) -> None:
        """Set global topic count gauge."""
        self._global_topic_count.set(count)

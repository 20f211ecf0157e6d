"""Factory functions for creating mock controllers and metrics adapters.

Handles optional dependency imports gracefully.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kraft_testkit.adapters.fakes.mock_controller import MockController
from kraft_testkit.adapters.metrics_port import ControllerMetricsPort
from kraft_testkit.domain.seed import ControllerSeed
from kraft_testkit.usecases.seed_parser import SeedParser

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry


class PrometheusClientNotInstalledError(ImportError):
    """Raised when prometheus-client is required but not installed.

    Install with: pip install kraft-testkit[metrics]
    """

    def __init__(self) -> None:
        super().__init__(
            "prometheus-client is not installed. "
            "Install with: pip install kraft-testkit[metrics]"
        )


def create_mock_controller(
    seed: ControllerSeed | str | None = None,
    metrics: ControllerMetricsPort | None = None,
) -> MockController:
    """Create a MockController from an optional seed.

    Args:
        seed: Seed topics, either a ControllerSeed or a YAML seed fixture
            string (see SeedParser). None builds an empty catalog.
        metrics: Optional metrics port. Defaults to NoOpControllerMetrics.

    Returns:
        An active MockController.

    Raises:
        ControllerConfigError: If the seed fixture is invalid.

    Example:
        >>> controller = create_mock_controller(
        ...     "topics:\\n  - name: alpha\\n    id: 8ggx4wHrRz6Kw3lSwsAV4g\\n"
        ... )
        >>> controller.current_claim_epoch()
        1
    """
    if isinstance(seed, str):
        seed = SeedParser().parse(seed)

    builder = MockController.builder()
    if seed is not None:
        builder.with_seed(seed)
    if metrics is not None:
        builder.with_metrics(metrics)
    return builder.build()


def create_prometheus_metrics(
    prefix: str = "kraft_testkit",
    registry: CollectorRegistry | None = None,
) -> ControllerMetricsPort:
    """Create a Prometheus-backed ControllerMetricsPort.

    Args:
        prefix: Metric name prefix.
        registry: Registry to register gauges with. Defaults to the global
            registry.

    Raises:
        PrometheusClientNotInstalledError: If prometheus-client is not installed.
    """
    try:
        import prometheus_client  # noqa: F401
    except ImportError as exc:
        raise PrometheusClientNotInstalledError() from exc

    from kraft_testkit.adapters.prometheus_metrics import PrometheusControllerMetrics

    return PrometheusControllerMetrics(prefix=prefix, registry=registry)

"""Interface adapters: Controller and metrics ports with their implementations."""

from kraft_testkit.adapters.metrics_port import (
    ControllerMetricsPort,
    NoOpControllerMetrics,
)
from kraft_testkit.adapters.ports import ControllerPort

__all__ = [
    "ControllerPort",
    "ControllerMetricsPort",
    "NoOpControllerMetrics",
]

"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without a real controller quorum.
"""

from kraft_testkit.adapters.fakes.fake_metrics import FakeControllerMetrics, MetricCall
from kraft_testkit.adapters.fakes.mock_controller import (
    MockController,
    MockControllerBuilder,
)

__all__ = [
    "FakeControllerMetrics",
    "MetricCall",
    "MockController",
    "MockControllerBuilder",
]

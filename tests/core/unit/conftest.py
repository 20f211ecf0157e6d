"""Pytest configuration for kraft-testkit core unit tests."""

from typing import Any

import pytest

from kraft_testkit.adapters.fakes.fake_metrics import FakeControllerMetrics
from kraft_testkit.adapters.fakes.mock_controller import MockController
from tests.core.unit.topic_fixtures import ALPHA_ID, BETA_ID


def pytest_configure(config: Any) -> None:
    """Register custom markers for unit tests."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "concurrency: Concurrency tests with threading")
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )
    config.addinivalue_line(
        "markers", "no_parallel: Tests that cannot run in parallel with pytest-xdist"
    )


@pytest.fixture
def fake_metrics() -> FakeControllerMetrics:
    """Recording metrics port."""
    return FakeControllerMetrics()


@pytest.fixture
def controller(fake_metrics: FakeControllerMetrics) -> MockController:
    """Active controller seeded with alpha and beta."""
    return (
        MockController.builder()
        .add_initial_topic("alpha", ALPHA_ID)
        .add_initial_topic("beta", BETA_ID)
        .with_metrics(fake_metrics)
        .build()
    )

"""Unit tests for factory functions."""

import builtins

import pytest

from kraft_testkit.adapters.fakes.fake_metrics import FakeControllerMetrics, MetricCall
from kraft_testkit.domain.exceptions import ControllerConfigError
from kraft_testkit.domain.seed import ControllerSeed
from kraft_testkit.domain.topic import Topic
from kraft_testkit.factories import (
    PrometheusClientNotInstalledError,
    create_mock_controller,
    create_prometheus_metrics,
)
from tests.core.unit.topic_fixtures import ALPHA_ID, BETA_ID

SEED_YAML = """
topics:
  - name: alpha
    id: 8ggx4wHrRz6Kw3lSwsAV4g
  - name: beta
    id: Vp3tqRm_T0ygHcR8cKJxXw
"""


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.Factories")
class TestCreateMockController:
    """Tests for create_mock_controller()."""

    def test_without_seed_builds_empty_active_controller(self):
        controller = create_mock_controller()
        assert controller.topics() == []
        assert controller.current_claim_epoch() == 1

    def test_from_seed_object(self):
        seed = ControllerSeed(topics=[Topic("alpha", ALPHA_ID)])
        controller = create_mock_controller(seed)
        assert controller.topics() == [Topic("alpha", ALPHA_ID)]

    def test_from_yaml_string(self):
        controller = create_mock_controller(SEED_YAML)
        assert sorted(controller.topics(), key=lambda t: t.name) == [
            Topic("alpha", ALPHA_ID),
            Topic("beta", BETA_ID),
        ]

    def test_invalid_yaml_seed(self):
        with pytest.raises(ControllerConfigError):
            create_mock_controller("topics: [unclosed")

    def test_metrics_wired(self):
        metrics = FakeControllerMetrics()
        create_mock_controller(SEED_YAML, metrics=metrics)
        assert metrics.calls == [
            MetricCall("active_controller", True),
            MetricCall("global_topic_count", 2),
        ]


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.Factories")
class TestCreatePrometheusMetrics:
    """Tests for create_prometheus_metrics()."""

    def test_raises_when_prometheus_missing(self, monkeypatch):
        real_import = builtins.__import__

        def fake_import(name, *args, **kwargs):
            if name == "prometheus_client":
                raise ImportError("No module named 'prometheus_client'")
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(builtins, "__import__", fake_import)

        with pytest.raises(PrometheusClientNotInstalledError, match="kraft-testkit\\[metrics\\]"):
            create_prometheus_metrics()

    def test_error_is_import_error(self):
        assert issubclass(PrometheusClientNotInstalledError, ImportError)

    def test_creates_adapter_on_registry(self):
        prometheus_client = pytest.importorskip("prometheus_client")
        registry = prometheus_client.CollectorRegistry()

        metrics = create_prometheus_metrics(prefix="factory_test", registry=registry)
        metrics.set_active_controller(True)

        assert registry.get_sample_value("factory_test_active_controller_count") == 1

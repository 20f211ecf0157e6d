"""Tests for ControllerPort protocol conformance."""

from __future__ import annotations

import pytest

from kraft_testkit.adapters.fakes.mock_controller import MockController
from kraft_testkit.adapters.ports import ControllerPort

CONTROLLER_OPERATIONS = [
    "alter_isr",
    "create_topics",
    "unregister_broker",
    "find_topic_ids",
    "find_topic_names",
    "delete_topics",
    "describe_configs",
    "elect_leaders",
    "finalized_features",
    "incremental_alter_configs",
    "legacy_alter_configs",
    "process_broker_heartbeat",
    "register_broker",
    "wait_for_ready_brokers",
    "alter_client_quotas",
    "begin_writing_snapshot",
    "begin_shutdown",
    "current_claim_epoch",
    "close",
]


@pytest.mark.tier(0)
@pytest.mark.tra("Port.ControllerPort")
class TestControllerPort:
    """ControllerPort declares the whole controller surface."""

    @pytest.mark.parametrize("operation", CONTROLLER_OPERATIONS)
    def test_protocol_declares_operation(self, operation: str) -> None:
        assert callable(getattr(ControllerPort, operation))

    def test_mock_controller_implements_protocol(self) -> None:
        assert isinstance(MockController.builder().build(), ControllerPort)

    def test_partial_implementation_rejected(self) -> None:
        class OnlyLookups:
            def find_topic_ids(self, topic_names):
                return None

        assert not isinstance(OnlyLookups(), ControllerPort)

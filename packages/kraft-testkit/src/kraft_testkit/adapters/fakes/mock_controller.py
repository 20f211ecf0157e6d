"""In-memory mock of the cluster metadata controller.

Lets tests exercise code that depends on ControllerPort without a real
controller (no consensus, metadata log, broker heartbeats or snapshots).
Only the topic catalog operations and the activity lifecycle are modelled;
every other operation raises NotImplementedError so that a test reaching an
unsupported path fails immediately.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Collection, Iterable, Mapping
from concurrent.futures import Future
from typing import Any

from kraft_testkit.adapters.metrics_port import (
    ControllerMetricsPort,
    NoOpControllerMetrics,
)
from kraft_testkit.domain.api_error import ApiError, Errors
from kraft_testkit.domain.exceptions import NotControllerError
from kraft_testkit.domain.result import ResultOrError
from kraft_testkit.domain.seed import ControllerSeed
from kraft_testkit.domain.state import ControllerState
from kraft_testkit.domain.topic import Topic, TopicId
from kraft_testkit.futures import completed_future, failed_future
from kraft_testkit.usecases.activity_gate import ActivityGate
from kraft_testkit.usecases.topic_catalog import TopicCatalog

logger = logging.getLogger(__name__)

ACTIVE_CLAIM_EPOCH = 1
INACTIVE_CLAIM_EPOCH = -1


class MockControllerBuilder:
    """Collects seed topics and builds a MockController.

    Seeds are keyed by name: adding a second topic with the same name
    replaces the first.

    Example:
        >>> controller = (
        ...     MockControllerBuilder()
        ...     .add_initial_topic("alpha", TopicId.random())
        ...     .add_initial_topic("beta", TopicId.random())
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._initial_topics: dict[str, Topic] = {}
        self._metrics: ControllerMetricsPort | None = None

    def add_initial_topic(self, name: str, topic_id: TopicId) -> MockControllerBuilder:
        """Record a seed topic.

        Args:
            name: Topic name.
            topic_id: Topic identifier.

        Returns:
            This builder, for chaining.

        Raises:
            ControllerConfigError: If name or topic_id is invalid.
        """
        self._initial_topics[name] = Topic(name=name, topic_id=topic_id)
        return self

    def add_initial_topics(self, topics: Iterable[Topic]) -> MockControllerBuilder:
        """Record several seed topics in order."""
        for topic in topics:
            self._initial_topics[topic.name] = topic
        return self

    def with_seed(self, seed: ControllerSeed) -> MockControllerBuilder:
        """Record every topic of a parsed seed fixture."""
        return self.add_initial_topics(seed.topics)

    def with_metrics(self, metrics: ControllerMetricsPort) -> MockControllerBuilder:
        """Use the given metrics port instead of the no-op default."""
        self._metrics = metrics
        return self

    def build(self) -> MockController:
        """Build a controller whose catalog holds exactly the seed topics.

        Raises:
            ControllerConfigError: If two seeds with different names share
                a topic id.
        """
        return MockController(self._initial_topics.values(), metrics=self._metrics)


class MockController:
    """Mock implementation of ControllerPort for testing.

    Holds an in-memory topic catalog and a controller-activity flag.

    Supported:
        - find_topic_ids(), find_topic_names(): catalog lookups
        - delete_topics(): catalog removal, gated by the activity flag
        - begin_shutdown(), close(), set_active(), current_claim_epoch()

    Every other ControllerPort operation raises NotImplementedError at call
    time, before any future is produced, and has no side effects.

    All returned futures are already completed.

    Thread safety:
        The catalog operations run under one lock, so each call observes
        and leaves the catalog in a consistent state. The activity flag is
        read without that lock. Gauge updates are published inside the
        critical section that made the change, so they land in order.
    """

    def __init__(
        self,
        initial_topics: Iterable[Topic] = (),
        *,
        metrics: ControllerMetricsPort | None = None,
    ) -> None:
        """Initialize the controller. Prefer MockController.builder().

        Args:
            initial_topics: Topics to seed the catalog with.
            metrics: Metrics port. Defaults to NoOpControllerMetrics.

        Raises:
            ControllerConfigError: If two topics share a name or an id.
        """
        self._lock = threading.Lock()
        self._catalog = TopicCatalog(initial_topics)
        self._gate = ActivityGate(active=True)
        self._closed = False
        self._metrics: ControllerMetricsPort = (
            metrics if metrics is not None else NoOpControllerMetrics()
        )

        self._metrics.set_active_controller(True)
        self._metrics.set_global_topic_count(len(self._catalog))
        logger.debug("Built mock controller with %d topic(s)", len(self._catalog))

    @staticmethod
    def builder() -> MockControllerBuilder:
        """Return a new builder."""
        return MockControllerBuilder()

    # ----- Topic catalog -----

    def find_topic_ids(
        self, topic_names: Collection[str]
    ) -> Future[dict[str, ResultOrError[TopicId]]]:
        """Look up topic ids by name.

        Args:
            topic_names: Names to look up. Duplicates collapse in the result.

        Returns:
            Completed future of a mapping from each name to its id, or to an
            UNKNOWN_TOPIC_OR_PARTITION error.
        """
        results: dict[str, ResultOrError[TopicId]] = {}
        with self._lock:
            for name in topic_names:
                topic_id = self._catalog.id_for(name)
                if topic_id is None:
                    results[name] = ResultOrError.failed(
                        ApiError(Errors.UNKNOWN_TOPIC_OR_PARTITION)
                    )
                else:
                    results[name] = ResultOrError.of(topic_id)
        return completed_future(results)

    def find_topic_names(
        self, topic_ids: Collection[TopicId]
    ) -> Future[dict[TopicId, ResultOrError[str]]]:
        """Look up topic names by id.

        Args:
            topic_ids: Ids to look up. Duplicates collapse in the result.

        Returns:
            Completed future of a mapping from each id to its name, or to an
            UNKNOWN_TOPIC_ID error.
        """
        results: dict[TopicId, ResultOrError[str]] = {}
        with self._lock:
            for topic_id in topic_ids:
                topic = self._catalog.get(topic_id)
                if topic is None:
                    results[topic_id] = ResultOrError.failed(
                        ApiError(Errors.UNKNOWN_TOPIC_ID)
                    )
                else:
                    results[topic_id] = ResultOrError.of(topic.name)
        return completed_future(results)

    def delete_topics(
        self, topic_ids: Collection[TopicId]
    ) -> Future[dict[TopicId, ApiError]]:
        """Delete topics by id.

        Ids are processed in order, so a repeated id reports
        UNKNOWN_TOPIC_ID for its second occurrence.

        Returns:
            Completed future of a per-id outcome mapping (ApiError.NONE on
            success), or a future failed with NotControllerError if the
            controller is inactive. An inactive controller leaves the
            catalog untouched.
        """
        with self._lock:
            if not self._gate.is_active():
                logger.debug("Rejecting topic deletion: controller is inactive")
                return failed_future(NotControllerError())

            results: dict[TopicId, ApiError] = {}
            removed = 0
            for topic_id in topic_ids:
                topic = self._catalog.remove(topic_id)
                if topic is None:
                    results[topic_id] = ApiError(Errors.UNKNOWN_TOPIC_ID)
                else:
                    results[topic_id] = ApiError.NONE
                    removed += 1
            if removed:
                remaining = len(self._catalog)
                logger.debug("Deleted %d topic(s); %d remaining", removed, remaining)
                self._metrics.set_global_topic_count(remaining)
        return completed_future(results)

    def topics(self) -> list[Topic]:
        """Return a consistent snapshot of the catalog contents."""
        with self._lock:
            return self._catalog.topics()

    # ----- Activity lifecycle -----

    def begin_shutdown(self) -> None:
        """Stop acting as the active controller. Idempotent."""
        if self._gate.deactivate(self._publish_active):
            logger.info("Mock controller shutting down; no longer active")

    def close(self) -> None:
        """Close the controller. Equivalent to begin_shutdown(). Idempotent."""
        self._closed = True
        self.begin_shutdown()

    def set_active(self, active: bool) -> None:
        """Force the activity flag. Test-only override.

        Args:
            active: New flag value. True reactivates a shut-down controller.
        """
        if active:
            self._closed = False
        if self._gate.set(active, self._publish_active):
            logger.info(
                "Mock controller %s", "reactivated" if active else "deactivated"
            )

    def _publish_active(self, active: bool) -> None:
        self._metrics.set_active_controller(active)

    def is_active(self) -> bool:
        """Return True while this controller is the active controller."""
        return self._gate.is_active()

    @property
    def state(self) -> ControllerState:
        """Current lifecycle state.

        CLOSED after close() until set_active(True) reactivates the
        controller; a later begin_shutdown() then reports INACTIVE.
        """
        if self._gate.is_active():
            return ControllerState.ACTIVE
        if self._closed:
            return ControllerState.CLOSED
        return ControllerState.INACTIVE

    def current_claim_epoch(self) -> int:
        """Return 1 while active and -1 once inactive.

        Only the sign is meaningful; the epoch does not grow across
        reactivations.
        """
        return ACTIVE_CLAIM_EPOCH if self._gate.is_active() else INACTIVE_CLAIM_EPOCH

    def __enter__(self) -> MockController:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ----- Unsupported operations -----

    def _unsupported(self, operation: str) -> NotImplementedError:
        return NotImplementedError(f"MockController does not support {operation}()")

    def alter_isr(self, request: Any) -> Future[Any]:
        raise self._unsupported("alter_isr")

    def create_topics(self, request: Any) -> Future[Any]:
        raise self._unsupported("create_topics")

    def unregister_broker(self, broker_id: int) -> Future[None]:
        raise self._unsupported("unregister_broker")

    def describe_configs(
        self, resources: Mapping[Any, Collection[str]]
    ) -> Future[dict[Any, Any]]:
        raise self._unsupported("describe_configs")

    def elect_leaders(self, request: Any) -> Future[Any]:
        raise self._unsupported("elect_leaders")

    def finalized_features(self) -> Future[Any]:
        raise self._unsupported("finalized_features")

    def incremental_alter_configs(
        self,
        config_changes: Mapping[Any, Mapping[str, tuple[Any, str]]],
        validate_only: bool,
    ) -> Future[dict[Any, ApiError]]:
        raise self._unsupported("incremental_alter_configs")

    def legacy_alter_configs(
        self,
        new_configs: Mapping[Any, Mapping[str, str]],
        validate_only: bool,
    ) -> Future[dict[Any, ApiError]]:
        raise self._unsupported("legacy_alter_configs")

    def process_broker_heartbeat(self, request: Any) -> Future[Any]:
        raise self._unsupported("process_broker_heartbeat")

    def register_broker(self, request: Any) -> Future[Any]:
        raise self._unsupported("register_broker")

    def wait_for_ready_brokers(self, min_brokers: int) -> Future[None]:
        raise self._unsupported("wait_for_ready_brokers")

    def alter_client_quotas(
        self, quota_alterations: Collection[Any], validate_only: bool
    ) -> Future[dict[Any, ApiError]]:
        raise self._unsupported("alter_client_quotas")

    def begin_writing_snapshot(self) -> Future[int]:
        raise self._unsupported("begin_writing_snapshot")

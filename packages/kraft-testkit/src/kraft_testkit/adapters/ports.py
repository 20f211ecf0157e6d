"""Port interfaces for the controller test kit.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from concurrent.futures import Future

    from kraft_testkit.domain.api_error import ApiError
    from kraft_testkit.domain.result import ResultOrError
    from kraft_testkit.domain.topic import TopicId


@runtime_checkable
class ControllerPort(Protocol):
    """Port interface for the cluster metadata controller.

    Implementations answer metadata requests on behalf of the cluster. Every
    request-handling operation returns a concurrent.futures.Future; the
    request and response payloads of operations other than the topic
    catalog operations are opaque to this package.

    Contract:
        - find_topic_ids() and find_topic_names() report per-key misses as
          ResultOrError values instead of failing the future
        - delete_topics() fails its future with NotControllerError when this
          node is not the active controller
        - current_claim_epoch() is positive iff this node is the active
          controller
        - begin_shutdown() and close() are idempotent
    """

    def alter_isr(self, request: Any) -> Future[Any]:
        """Change the in-sync replica set of one or more partitions."""
        ...

    def create_topics(self, request: Any) -> Future[Any]:
        """Create topics."""
        ...

    def unregister_broker(self, broker_id: int) -> Future[None]:
        """Remove a broker registration."""
        ...

    def find_topic_ids(
        self, topic_names: Collection[str]
    ) -> Future[dict[str, ResultOrError[TopicId]]]:
        """Find the ids of the named topics.

        Args:
            topic_names: Names to look up. Duplicates collapse.

        Returns:
            Future resolving to a mapping from each name to its id or an
            UNKNOWN_TOPIC_OR_PARTITION error.
        """
        ...

    def find_topic_names(
        self, topic_ids: Collection[TopicId]
    ) -> Future[dict[TopicId, ResultOrError[str]]]:
        """Find the names of the identified topics.

        Args:
            topic_ids: Ids to look up. Duplicates collapse.

        Returns:
            Future resolving to a mapping from each id to its name or an
            UNKNOWN_TOPIC_ID error.
        """
        ...

    def delete_topics(
        self, topic_ids: Collection[TopicId]
    ) -> Future[dict[TopicId, ApiError]]:
        """Delete the identified topics.

        Returns:
            Future resolving to a per-id outcome mapping, or failed with
            NotControllerError if this node is not the active controller.
        """
        ...

    def describe_configs(
        self, resources: Mapping[Any, Collection[str]]
    ) -> Future[dict[Any, Any]]:
        """Describe configuration of the given resources."""
        ...

    def elect_leaders(self, request: Any) -> Future[Any]:
        """Trigger preferred or unclean leader election."""
        ...

    def finalized_features(self) -> Future[Any]:
        """Return the finalized feature levels and their epoch."""
        ...

    def incremental_alter_configs(
        self,
        config_changes: Mapping[Any, Mapping[str, tuple[Any, str]]],
        validate_only: bool,
    ) -> Future[dict[Any, ApiError]]:
        """Apply incremental configuration changes."""
        ...

    def legacy_alter_configs(
        self,
        new_configs: Mapping[Any, Mapping[str, str]],
        validate_only: bool,
    ) -> Future[dict[Any, ApiError]]:
        """Replace configuration of the given resources."""
        ...

    def process_broker_heartbeat(self, request: Any) -> Future[Any]:
        """Handle a broker heartbeat."""
        ...

    def register_broker(self, request: Any) -> Future[Any]:
        """Handle a broker registration."""
        ...

    def wait_for_ready_brokers(self, min_brokers: int) -> Future[None]:
        """Resolve once at least min_brokers brokers are ready."""
        ...

    def alter_client_quotas(
        self, quota_alterations: Collection[Any], validate_only: bool
    ) -> Future[dict[Any, ApiError]]:
        """Alter client quotas."""
        ...

    def begin_writing_snapshot(self) -> Future[int]:
        """Start writing a metadata snapshot; resolves to its offset."""
        ...

    def begin_shutdown(self) -> None:
        """Start shutting down. Idempotent."""
        ...

    def current_claim_epoch(self) -> int:
        """Return the current controller epoch, or -1 if not the controller."""
        ...

    def close(self) -> None:
        """Shut down and release resources. Idempotent."""
        ...

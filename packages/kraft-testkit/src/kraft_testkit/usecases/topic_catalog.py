"""In-memory topic catalog: the name <-> id bijection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from kraft_testkit.domain.exceptions import ControllerConfigError
from kraft_testkit.domain.topic import Topic, TopicId


class TopicCatalog:
    """Bijection between topic names and topic ids.

    The catalog owns one primary mapping keyed by id and derives a name
    index from it. Every mutation updates both in the same call, so the
    index cannot drift from the primary mapping.

    Invariants:
        - For every (name, topic_id) in the name index, the primary mapping
          holds a Topic with that name under topic_id.
        - For every Topic in the primary mapping, the name index maps its
          name back to its id.

    Thread safety:
        Not synchronized. The owning controller serializes all access under
        its catalog lock.
    """

    def __init__(self, topics: Iterable[Topic] = ()) -> None:
        """Initialize the catalog, inserting each topic in order.

        Args:
            topics: Initial topics.

        Raises:
            ControllerConfigError: If two topics share a name or an id.
        """
        self._by_id: dict[TopicId, Topic] = {}
        self._by_name: dict[str, TopicId] = {}
        for topic in topics:
            self.add(topic)

    def add(self, topic: Topic) -> None:
        """Insert a topic.

        Args:
            topic: Topic to insert.

        Raises:
            ControllerConfigError: If the name or the id is already present.
                The catalog is left unchanged.
        """
        if topic.name in self._by_name:
            raise ControllerConfigError(f"topic name {topic.name!r} already exists")
        if topic.topic_id in self._by_id:
            existing = self._by_id[topic.topic_id]
            raise ControllerConfigError(
                f"topic id {topic.topic_id} already assigned to {existing.name!r}"
            )
        self._by_id[topic.topic_id] = topic
        self._by_name[topic.name] = topic.topic_id

    def remove(self, topic_id: TopicId) -> Topic | None:
        """Remove the topic with the given id from both mappings.

        Returns:
            The removed Topic, or None if no topic has that id.
        """
        topic = self._by_id.pop(topic_id, None)
        if topic is not None:
            del self._by_name[topic.name]
        return topic

    def get(self, topic_id: TopicId) -> Topic | None:
        """Return the topic with the given id, or None."""
        return self._by_id.get(topic_id)

    def id_for(self, name: str) -> TopicId | None:
        """Return the id of the named topic, or None."""
        return self._by_name.get(name)

    def topics(self) -> list[Topic]:
        """Return a snapshot of all topics."""
        return list(self._by_id.values())

    def name_index(self) -> dict[str, TopicId]:
        """Return a copy of the name index."""
        return dict(self._by_name)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._by_id

    def __iter__(self) -> Iterator[Topic]:
        return iter(self.topics())

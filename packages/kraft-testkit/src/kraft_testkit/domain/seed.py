"""Seed topic configuration domain value object."""

from __future__ import annotations

from dataclasses import dataclass

from kraft_testkit.domain.exceptions import ControllerConfigError
from kraft_testkit.domain.topic import Topic


@dataclass(frozen=True)
class ControllerSeed:
    """Initial topic set for a mock controller.

    Value object produced by SeedParser from a YAML fixture and consumed by
    MockControllerBuilder.with_seed(). Topics keep their declaration order;
    the builder applies them in that order, so a later topic with the same
    name replaces an earlier one.

    Attributes:
        topics: Tuple of seed topics. A list is accepted and normalized to a
            tuple.
    """

    topics: tuple[Topic, ...] | list[Topic] = ()

    def __post_init__(self) -> None:
        """Validate and normalize topics."""
        for topic in self.topics:
            if not isinstance(topic, Topic):
                raise ControllerConfigError(
                    f"seed topics must be Topic instances, got: {type(topic).__name__}"
                )

        if isinstance(self.topics, list):
            object.__setattr__(self, "topics", tuple(self.topics))

    def topic_names(self) -> list[str]:
        """Return seed topic names in declaration order."""
        return [topic.name for topic in self.topics]

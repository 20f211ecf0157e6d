"""Seed parser use case: YAML fixture to ControllerSeed."""

from __future__ import annotations

import uuid
from typing import Any

import yaml

from kraft_testkit.domain.exceptions import ControllerConfigError
from kraft_testkit.domain.seed import ControllerSeed
from kraft_testkit.domain.topic import Topic, TopicId


class SeedParser:
    """Parses a YAML seed fixture into a ControllerSeed.

    Expected document shape::

        topics:
          - name: alpha
            id: 8ggx4wHrRz6Kw3lSwsAV4g
          - name: beta

    ``id`` accepts the base64 topic id form or canonical UUID text. When it
    is omitted a random id is generated.
    """

    def parse(self, yaml_str: str) -> ControllerSeed:
        """Parse YAML seed fixture to a ControllerSeed.

        Args:
            yaml_str: YAML string describing the seed topics.

        Returns:
            ControllerSeed domain object.

        Raises:
            ControllerConfigError: If YAML is invalid or an entry is malformed.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ControllerConfigError(f"Invalid YAML: {e}") from e

        if not isinstance(config, dict):
            raise ControllerConfigError("Seed fixture must be a dictionary")

        try:
            entries = config["topics"]
        except KeyError as e:
            raise ControllerConfigError(f"Missing required field in seed: {e}") from e

        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise ControllerConfigError("topics must be a list")

        return ControllerSeed(topics=[self._parse_topic(entry) for entry in entries])

    def _parse_topic(self, entry: Any) -> Topic:
        """Convert one fixture entry to a Topic."""
        if not isinstance(entry, dict):
            raise ControllerConfigError(f"topic entry must be a dictionary: {entry!r}")

        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ControllerConfigError(f"topic entry is missing a name: {entry!r}")

        raw_id = entry.get("id")
        if raw_id is None:
            topic_id = TopicId.random()
        else:
            topic_id = self._parse_topic_id(str(raw_id))

        return Topic(name=name, topic_id=topic_id)

    @staticmethod
    def _parse_topic_id(text: str) -> TopicId:
        """Parse base64 or canonical UUID text."""
        # Canonical UUID text is 36 characters with dashes
        if len(text) == 36 and text.count("-") == 4:
            try:
                return TopicId.from_uuid(uuid.UUID(text))
            except ValueError as e:
                raise ControllerConfigError(f"Invalid topic id {text!r}: {e}") from e
        return TopicId.from_string(text)

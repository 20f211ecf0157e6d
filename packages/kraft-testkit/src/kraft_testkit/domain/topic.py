"""Topic identity domain value objects."""

from __future__ import annotations

import base64
import re
import secrets
import uuid
from dataclasses import dataclass
from typing import ClassVar

from kraft_testkit.domain.exceptions import ControllerConfigError

_TOPIC_ID_BITS = 128
_TOPIC_ID_BYTES = _TOPIC_ID_BITS // 8
_TOPIC_ID_CHARS = 22
_URLSAFE_BASE64 = re.compile(r"[A-Za-z0-9_-]*")


@dataclass(frozen=True, order=True)
class TopicId:
    """Opaque 128-bit topic identifier.

    Value object naming a topic independently of its human-readable name.
    Equality and hashing are bitwise on the underlying integer.

    The textual form is the URL-safe base64 encoding of the 16 big-endian
    bytes with padding stripped, which is how the platform prints ids
    (e.g. ``AAAAAAAAAAAAAAAAAAAAAQ`` for the metadata topic id).

    Attributes:
        value: The identifier bits as a non-negative integer below 2**128.

    Invariants:
        - 0 <= value < 2**128
    """

    value: int

    ZERO: ClassVar[TopicId]
    METADATA_TOPIC_ID: ClassVar[TopicId]

    def __post_init__(self) -> None:
        """Validate the identifier range."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ControllerConfigError(
                f"topic id must be an integer, got: {type(self.value).__name__}"
            )
        if not 0 <= self.value < 1 << _TOPIC_ID_BITS:
            raise ControllerConfigError(
                f"topic id must fit in {_TOPIC_ID_BITS} bits, got: {self.value}"
            )

    @classmethod
    def random(cls) -> TopicId:
        """Generate a random topic id.

        Never returns a reserved id (ZERO, METADATA_TOPIC_ID) and never
        returns an id whose string form starts with ``-``, since such ids are
        mistaken for command line flags by the platform's tooling.
        """
        while True:
            candidate = cls(secrets.randbits(_TOPIC_ID_BITS))
            if candidate.is_reserved() or str(candidate).startswith("-"):
                continue
            return candidate

    @classmethod
    def from_string(cls, text: str) -> TopicId:
        """Parse the base64 textual form produced by ``str()``.

        Only the canonical form is accepted: 22 URL-safe base64 characters,
        optionally followed by ``==``, with the unused low bits of the last
        character set to zero.

        Args:
            text: URL-safe base64 text, with or without ``=`` padding.

        Returns:
            The parsed TopicId.

        Raises:
            ControllerConfigError: If the text is not the canonical encoding
                of exactly 16 bytes.
        """
        if not isinstance(text, str) or not text:
            raise ControllerConfigError("topic id string cannot be empty")

        body = text.rstrip("=")
        if text[len(body):] not in ("", "=="):
            raise ControllerConfigError(f"Invalid topic id {text!r}: bad padding")
        if not _URLSAFE_BASE64.fullmatch(body):
            raise ControllerConfigError(
                f"Invalid topic id {text!r}: not URL-safe base64"
            )
        if len(body) != _TOPIC_ID_CHARS:
            raise ControllerConfigError(
                f"Invalid topic id {text!r}: expected {_TOPIC_ID_BYTES} bytes "
                f"({_TOPIC_ID_CHARS} characters), got {len(body)} characters"
            )

        raw = base64.urlsafe_b64decode(body + "==")
        topic_id = cls(int.from_bytes(raw, "big"))
        if str(topic_id) != body:
            raise ControllerConfigError(
                f"Invalid topic id {text!r}: non-canonical encoding"
            )
        return topic_id

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> TopicId:
        """Convert a standard library UUID."""
        return cls(value.int)

    def to_bytes(self) -> bytes:
        """Return the 16 big-endian identifier bytes."""
        return self.value.to_bytes(_TOPIC_ID_BYTES, "big")

    def to_uuid(self) -> uuid.UUID:
        """Return the identifier as a standard library UUID."""
        return uuid.UUID(int=self.value)

    def is_reserved(self) -> bool:
        """Return True for ids the platform reserves for internal use."""
        return self.value in (0, 1)

    def __str__(self) -> str:
        return base64.urlsafe_b64encode(self.to_bytes()).decode("ascii").rstrip("=")

    def __repr__(self) -> str:
        return f"TopicId({str(self)!r})"


TopicId.ZERO = TopicId(0)
TopicId.METADATA_TOPIC_ID = TopicId(1)


@dataclass(frozen=True)
class Topic:
    """A topic known to the controller.

    Immutable record pairing a human-readable name with its identifier.

    Attributes:
        name: Topic name. Must be non-empty and non-whitespace.
        topic_id: Opaque identifier of the topic.
    """

    name: str
    topic_id: TopicId

    def __post_init__(self) -> None:
        """Validate topic record."""
        self._validate_name()
        self._validate_topic_id()

    def _validate_name(self) -> None:
        """Validate name is a non-empty, non-whitespace string."""
        if not isinstance(self.name, str):
            raise ControllerConfigError(
                f"topic name must be a string, got: {type(self.name).__name__}"
            )

        if not self.name:
            raise ControllerConfigError("topic name cannot be empty")

        if not self.name.strip():
            raise ControllerConfigError("topic name cannot be whitespace-only")

    def _validate_topic_id(self) -> None:
        """Validate topic_id is a TopicId."""
        if not isinstance(self.topic_id, TopicId):
            raise ControllerConfigError(
                f"topic id must be a TopicId, got: {type(self.topic_id).__name__}"
            )

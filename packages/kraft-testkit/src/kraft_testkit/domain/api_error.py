"""Protocol error codes and per-entry error values.

The codes mirror the numeric error codes of the streaming platform's wire
protocol so that callers can compare against them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Errors(Enum):
    """Protocol error codes used by the controller surface.

    Attributes:
        NONE: No error.
        UNKNOWN_TOPIC_OR_PARTITION: No topic with the requested name exists.
        NOT_CONTROLLER: This node is not the active controller.
        INVALID_CONFIG: A seed or fixture value was rejected.
        UNKNOWN_TOPIC_ID: No topic with the requested id exists.
    """

    NONE = (0, None)
    UNKNOWN_TOPIC_OR_PARTITION = (
        3,
        "This server does not host this topic-partition.",
    )
    NOT_CONTROLLER = (41, "This is not the correct controller for this cluster.")
    INVALID_CONFIG = (40, "Configuration is invalid.")
    UNKNOWN_TOPIC_ID = (100, "This server does not host this topic ID.")

    def __init__(self, code: int, default_message: str | None) -> None:
        self.code = code
        self.default_message = default_message


@dataclass(frozen=True)
class ApiError:
    """Immutable error value carried inside per-entry result mappings.

    Attributes:
        error: The protocol error code.
        message: Optional message. When omitted, ``message_or_default``
            falls back to the code's default message.
    """

    error: Errors
    message: str | None = None

    NONE: ClassVar[ApiError]

    def is_success(self) -> bool:
        """Return True if this value denotes success."""
        return self.error is Errors.NONE

    def is_failure(self) -> bool:
        """Return True if this value denotes a failure."""
        return not self.is_success()

    def message_or_default(self) -> str | None:
        """Return the explicit message, or the error code's default message."""
        if self.message is not None:
            return self.message
        return self.error.default_message


ApiError.NONE = ApiError(Errors.NONE)

"""Domain exceptions.

Exception hierarchy:
- ControllerError: Base exception for controller failures. Carries the
  protocol error code that a real controller would have answered with.
  - NotControllerError: Raised (on the returned future) when a mutating
    operation reaches a controller that is no longer active.
  - ControllerConfigError: Raised when seed topics, topic ids or seed
    fixtures are invalid.

Unsupported controller operations raise the builtin NotImplementedError
instead, since they signal a gap in the test double rather than a
controller condition.
"""

from __future__ import annotations

from kraft_testkit.domain.api_error import Errors


class ControllerError(Exception):
    """Base exception for all controller failures.

    Attributes:
        error: Protocol error code describing the failure.
        message: Human-readable error description.
    """

    error: Errors = Errors.NONE

    def __init__(self, message: str | None = None) -> None:
        """Initialize ControllerError.

        Args:
            message: Human-readable error description. Defaults to the
                error code's default message.
        """
        if message is None:
            message = self.error.default_message or self.__class__.__name__
        super().__init__(message)
        self.message = message


class NotControllerError(ControllerError):
    """Raised when the controller is not the active controller.

    Mirrors the platform's "not controller" response: callers are expected
    to rediscover the active controller and retry there.
    """

    error = Errors.NOT_CONTROLLER


class ControllerConfigError(ControllerError):
    """Raised when controller seed configuration is invalid.

    Raised by domain entities (e.g., Topic, TopicId), the topic catalog and
    the seed parser when validation fails.
    """

    error = Errors.INVALID_CONFIG

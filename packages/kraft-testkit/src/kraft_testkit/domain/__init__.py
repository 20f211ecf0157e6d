"""Domain layer: Entities with zero external dependencies."""

from kraft_testkit.domain.api_error import ApiError, Errors
from kraft_testkit.domain.exceptions import (
    ControllerConfigError,
    ControllerError,
    NotControllerError,
)
from kraft_testkit.domain.result import ResultOrError
from kraft_testkit.domain.seed import ControllerSeed
from kraft_testkit.domain.state import ControllerState
from kraft_testkit.domain.topic import Topic, TopicId

__all__ = [
    "ApiError",
    "Errors",
    "ControllerError",
    "ControllerConfigError",
    "NotControllerError",
    "ResultOrError",
    "ControllerSeed",
    "ControllerState",
    "Topic",
    "TopicId",
]

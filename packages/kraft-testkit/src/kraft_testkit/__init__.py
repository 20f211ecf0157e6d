"""kraft-testkit: In-memory test double for a cluster metadata controller."""

__version__ = "0.1.0"

from kraft_testkit.adapters.fakes.mock_controller import (
    MockController,
    MockControllerBuilder,
)
from kraft_testkit.adapters.ports import ControllerPort
from kraft_testkit.domain.api_error import ApiError, Errors
from kraft_testkit.domain.exceptions import (
    ControllerConfigError,
    ControllerError,
    NotControllerError,
)
from kraft_testkit.domain.result import ResultOrError
from kraft_testkit.domain.topic import Topic, TopicId
from kraft_testkit.factories import create_mock_controller

__all__ = [
    "MockController",
    "MockControllerBuilder",
    "ControllerPort",
    "ApiError",
    "Errors",
    "ControllerError",
    "ControllerConfigError",
    "NotControllerError",
    "ResultOrError",
    "Topic",
    "TopicId",
    "create_mock_controller",
]

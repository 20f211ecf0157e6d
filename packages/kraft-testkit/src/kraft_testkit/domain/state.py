"""Controller lifecycle states."""

from enum import Enum


class ControllerState(Enum):
    """Enumeration of controller lifecycle states.

    Attributes:
        ACTIVE: Controller accepts mutating operations.
        INACTIVE: Controller rejects mutating operations with a
            not-controller error.
        CLOSED: Controller was closed and is still inactive.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    CLOSED = "closed"

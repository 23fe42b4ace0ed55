"""Error codes and exceptions for the todo model."""
from enum import Enum, auto


class ErrorCode(Enum):
    """Enumeration of all possible error codes in the application."""

    INVALID_TRANSITION = auto()


class TodoError(Exception):
    """
    Base exception for todo errors.

    ``message`` names the violated rule; ``str()`` is always the generic label.
    """

    LABEL = "Invalid action for Todo"

    def __init__(self, code: ErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(self.LABEL)


class InvalidTransitionError(TodoError):
    """Raised when a lifecycle action is not allowed from the current state."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.INVALID_TRANSITION, message)

"""Todo state machine – validates and enforces legal lifecycle transitions."""
from enum import Enum

from src.shared.errors import InvalidTransitionError


class TodoStatus(Enum):
    PENDING = "pending"
    SKIPPED = "skipped"
    COMPLETED = "completed"


class TodoAction(Enum):
    SKIP = "skip"
    COMPLETE = "complete"


# Legal transitions: current status -> {action: resulting status}
TRANSITIONS: dict[TodoStatus, dict[TodoAction, TodoStatus]] = {
    TodoStatus.PENDING: {
        TodoAction.SKIP: TodoStatus.SKIPPED,
        TodoAction.COMPLETE: TodoStatus.COMPLETED,
    },
    TodoStatus.SKIPPED: {
        TodoAction.SKIP: TodoStatus.SKIPPED,
        TodoAction.COMPLETE: TodoStatus.COMPLETED,
    },
    TodoStatus.COMPLETED: {
        TodoAction.COMPLETE: TodoStatus.COMPLETED,
    },
}

_missing = set(TodoStatus) - set(TRANSITIONS)
if _missing:
    raise RuntimeError(f"No transitions defined for: {sorted(s.value for s in _missing)}")

TERMINAL_STATUSES = {
    status for status, moves in TRANSITIONS.items()
    if set(moves.values()) <= {status}
}


def is_valid_transition(status: TodoStatus, action: TodoAction) -> bool:
    """Return True if *action* is allowed from *status*."""
    return action in TRANSITIONS[status]


def next_status(status: TodoStatus, action: TodoAction) -> TodoStatus:
    """Return the status *action* leads to, or raise InvalidTransitionError."""
    if not is_valid_transition(status, action):
        raise InvalidTransitionError(f"Cannot {action.value} a {status.value} todo")
    return TRANSITIONS[status][action]


def assert_not_deleted(is_deleted: bool, action: TodoAction) -> None:
    """Raise InvalidTransitionError if *action* targets a deleted todo."""
    if is_deleted:
        raise InvalidTransitionError(f"Cannot {action.value} a deleted todo")

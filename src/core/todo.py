"""Todo entity with guarded lifecycle transitions."""
import logging

from src.core.todo_state import (
    TodoAction,
    TodoStatus,
    assert_not_deleted,
    is_valid_transition,
    next_status,
)
from src.shared.errors import InvalidTransitionError
from src.shared.logging_ import log_todo_event

logger = logging.getLogger(__name__)


class Todo:
    """
    A single task.

    ``status`` and ``is_deleted`` are read-only; they change only through
    skip(), complete() and delete(). Deletion is a soft delete: the object
    stays inspectable and keeps the status it had when deleted.
    """

    def __init__(self, title: str):
        self._title = title
        self._status = TodoStatus.PENDING
        self._is_deleted = False

    @property
    def title(self) -> str:
        return self._title

    @property
    def status(self) -> TodoStatus:
        return self._status

    @property
    def is_deleted(self) -> bool:
        return self._is_deleted

    def can(self, action: TodoAction) -> bool:
        """Check whether *action* would succeed right now."""
        return not self._is_deleted and is_valid_transition(self._status, action)

    def skip(self) -> None:
        """Mark as skipped. Raises InvalidTransitionError if deleted or completed."""
        self._apply(TodoAction.SKIP)

    def complete(self) -> None:
        """Mark as completed. Raises InvalidTransitionError if deleted."""
        self._apply(TodoAction.COMPLETE)

    def delete(self) -> None:
        """Soft-delete. Always succeeds and leaves the status untouched."""
        self._is_deleted = True
        log_todo_event(logger, id(self), "delete", self._status.value, True)

    def _apply(self, action: TodoAction) -> None:
        try:
            assert_not_deleted(self._is_deleted, action)
            new_status = next_status(self._status, action)
        except InvalidTransitionError as exc:
            log_todo_event(
                logger, id(self), action.value, self._status.value,
                self._is_deleted, error_code=exc.code, message=exc.message,
            )
            raise
        self._status = new_status
        log_todo_event(logger, id(self), action.value, new_status.value, self._is_deleted)

    def __repr__(self) -> str:
        return (
            f"Todo(title={self._title!r}, status={self._status.value}, "
            f"is_deleted={self._is_deleted})"
        )

    def __str__(self) -> str:
        suffix = ", deleted" if self._is_deleted else ""
        return f"Todo({self._title!r}, {self._status.value}{suffix})"

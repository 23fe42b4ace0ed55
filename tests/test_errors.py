"""Tests for error codes and exception rendering."""
from src.shared.errors import ErrorCode, InvalidTransitionError, TodoError


def test_invalid_transition_keeps_message_and_code():
    err = InvalidTransitionError("Cannot skip a deleted todo")
    assert err.message == "Cannot skip a deleted todo"
    assert err.code is ErrorCode.INVALID_TRANSITION
    assert isinstance(err, TodoError)


def test_invalid_transition_display_is_generic():
    assert str(InvalidTransitionError("Cannot skip a completed todo")) == "Invalid action for Todo"
    assert str(InvalidTransitionError("Cannot complete a deleted todo")) == "Invalid action for Todo"


def test_invalid_transition_is_the_only_code():
    assert list(ErrorCode) == [ErrorCode.INVALID_TRANSITION]


def test_errors_do_not_chain():
    err = InvalidTransitionError("Cannot skip a deleted todo")
    assert err.__cause__ is None
    assert err.__context__ is None

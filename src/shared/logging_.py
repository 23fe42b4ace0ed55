"""Structured logging for the todo model."""
import logging
import sys
from pathlib import Path
from typing import Optional

from src.shared.errors import ErrorCode

# Parent of every module logger that emits todo events
TODO_LOGGER_NAME = "src.core"


def setup_logger(
    level: int = logging.DEBUG,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Route todo lifecycle events to stdout, or to *log_file* when given.

    Every event is emitted at DEBUG, so the default level shows all of them.
    Calling again replaces the previous handler.
    """
    logger = logging.getLogger(TODO_LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger


def log_todo_event(
    logger: logging.Logger,
    todo_ref: int,
    action: str,
    status: str,
    is_deleted: bool,
    error_code: Optional[ErrorCode] = None,
    message: Optional[str] = None
):
    """
    Log a structured todo lifecycle event at DEBUG.

    Rejections are recoverable and reported to the caller by exception, so
    they stay at the same level as successful transitions.

    Args:
        logger: Logger instance
        todo_ref: Identity of the todo instance (rendered in hex)
        action: Attempted action (skip/complete/delete)
        status: Status after the attempt
        is_deleted: Deletion flag after the attempt
        error_code: Error code if the action was rejected (optional)
        message: Additional message (optional)
    """
    parts = [
        f"todo={todo_ref:x}",
        f"action={action}",
        f"status={status}",
        f"deleted={is_deleted}",
    ]

    if error_code:
        parts.append(f"error={error_code.name}")
    if message:
        parts.append(f"msg={message}")

    logger.debug(" | ".join(parts))

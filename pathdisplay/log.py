"""Logging setup and user-facing notifications."""

import logging

from rich.logging import RichHandler

from pathdisplay.config import get_settings

logger = logging.getLogger(__name__)

_LEVELS: dict[str, int] = {
    "TRACE": logging.DEBUG,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_notified_once: set[str] = set()


def configure_logging(level: str | None = None) -> None:
    """Install a Rich handler on the root logger."""
    logging.basicConfig(
        level=level or get_settings().LOG_LEVEL,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def notify(funname: str, msg: str, level: str = "INFO", once: bool = False) -> None:
    """Report a message from a helper function to the user.

    Args:
        funname: Name of the function emitting the notification
        msg: Message text
        level: One of TRACE, DEBUG, INFO, WARN, WARNING, ERROR
        once: Suppress the message if it was already emitted once

    Raises:
        ValueError: If level is not a known level name
    """
    log_level = _LEVELS.get(level.upper())
    if log_level is None:
        raise ValueError("Invalid error level")

    text = f"[{get_settings().NOTIFY_TITLE}.{funname}]: {msg}"
    if once:
        if text in _notified_once:
            return
        _notified_once.add(text)

    logger.log(log_level, text)


def warn_no_selection(name: str) -> None:
    notify(name, "Nothing currently selected", level="WARN")

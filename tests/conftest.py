"""Pytest fixtures for pathdisplay tests."""

from collections.abc import Iterator

import pytest

import pathdisplay.log
from pathdisplay.config import Settings
from pathdisplay.core.formatter import PathDisplayFormatter
from pathdisplay.core.smart import SmartPathState

TEST_TERMINAL_WIDTH = 40


@pytest.fixture(autouse=True)
def reset_notifications() -> Iterator[None]:
    """Forget messages already sent with notify(once=True)."""
    pathdisplay.log._notified_once.clear()
    yield
    pathdisplay.log._notified_once.clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with the stock picker chrome (caret "> " plus 2 cells of padding)."""
    return Settings(SELECTION_CARET="> ", CHROME_PADDING=2, ELLIPSIS="…", DEFAULT_SHORTEN_LEN=1)


@pytest.fixture
def terminal_width() -> int:
    """Width in cells of the terminal the formatter fixtures render into."""
    return TEST_TERMINAL_WIDTH


@pytest.fixture
def smart_state() -> SmartPathState:
    """Empty smart-shortening state using "/" as separator."""
    return SmartPathState(sep="/")


@pytest.fixture
def formatter(settings: Settings, smart_state: SmartPathState) -> PathDisplayFormatter:
    """Formatter for POSIX paths rendered into a 40 cell wide terminal."""
    return PathDisplayFormatter(
        get_separator=lambda: "/",
        get_available_width=lambda reserved: TEST_TERMINAL_WIDTH - reserved,
        smart_state=smart_state,
        settings=settings,
    )


@pytest.fixture
def windows_formatter(settings: Settings) -> PathDisplayFormatter:
    """Formatter for Windows paths."""
    return PathDisplayFormatter(
        get_separator=lambda: "\\",
        get_available_width=lambda reserved: TEST_TERMINAL_WIDTH - reserved,
        settings=settings,
    )

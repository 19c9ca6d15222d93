"""Turn filesystem paths into display strings for result lists."""

import logging
import os
from collections.abc import Callable, Mapping
from functools import lru_cache
from typing import Any

from pydantic import ValidationError
from rich.console import Console

from pathdisplay.config import Settings, get_settings
from pathdisplay.core import paths
from pathdisplay.core.smart import SmartPathState
from pathdisplay.core.styles import byte_len
from pathdisplay.errors import ConfigurationError
from pathdisplay.models.display import (
    DisplayConfig,
    DisplayMode,
    FilenameFirstOptions,
    PathRules,
    ShortenOptions,
    StyleLabel,
    StyleSpan,
)

logger = logging.getLogger(__name__)

_FLAG_NAMES = frozenset(
    {"hidden", "tail", "absolute", "smart", "shorten", "truncate", "filename_first"}
)


def default_separator() -> str:
    return os.sep


def terminal_width(reserved: int) -> int:
    """Width of the attached terminal left after ``reserved`` cells."""
    return max(Console().width - reserved, 0)


class PathDisplayFormatter:
    """Apply a DisplayConfig to paths.

    The formatter itself is stateless apart from the SmartPathState used by
    the ``smart`` rule, which lives as long as the formatter does.
    """

    def __init__(
        self,
        get_separator: Callable[[], str] = default_separator,
        get_available_width: Callable[[int], int] = terminal_width,
        make_relative: Callable[[str, str], str] | None = None,
        smart_state: SmartPathState | None = None,
        settings: Settings | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.get_separator = get_separator
        self.get_available_width = get_available_width
        self.make_relative = make_relative or self._make_relative
        if smart_state is None:
            smart_state = SmartPathState(sep=get_separator())
        self.smart_state = smart_state
        self.settings = settings or get_settings()
        self.log = log or logger

    def _make_relative(self, path: str, base: str) -> str:
        return paths.make_relative(path, base, self.get_separator())

    def format(self, path: str | None, config: DisplayConfig) -> tuple[str, list[StyleSpan]]:
        """Format a path for display.

        Args:
            path: Path to display; None and "" render as nothing
            config: Display configuration for the current pass

        Returns:
            The display string and the style spans to highlight it with

        Raises:
            TypeError: If path is neither a string nor None
        """
        if path is None or path == "":
            return "", []
        if not isinstance(path, str):
            raise TypeError(f"path must be a string, got {type(path).__name__}")
        if paths.is_uri(path):
            return path, []

        mode = config.mode
        if mode == DisplayMode.CUSTOM and config.custom is not None:
            return self._run_custom(config.custom, config, path)
        if mode == DisplayMode.HIDDEN:
            return "", []
        if mode == DisplayMode.TAIL:
            return paths.path_tail(path, self.get_separator()), []
        if mode == DisplayMode.FULL:
            return self._apply_rules(path, config)

        self.log.warning(
            f"Unsupported path display mode {mode!r}: expected one of "
            f"{', '.join(m.value for m in DisplayMode)} (custom requires a callable)"
        )
        return path, []

    def _run_custom(
        self, custom: Callable[..., Any], config: DisplayConfig, path: str
    ) -> tuple[str, list[StyleSpan]]:
        result = custom(config, path)
        if isinstance(result, tuple):
            text, styles = result
            return text, list(styles or [])
        return result, []

    def _base_directory(self, config: DisplayConfig) -> str:
        if config.base_directory:
            return paths.path_expand(config.base_directory, self.get_separator())
        return os.getcwd()

    def _apply_rules(self, path: str, config: DisplayConfig) -> tuple[str, list[StyleSpan]]:
        sep = self.get_separator()
        rules = config.rules
        styles: list[StyleSpan] = []

        if not rules.absolute:
            path = self.make_relative(path, self._base_directory(config))

        if rules.smart:
            path = self.smart_state.shorten(path)

        if rules.shorten is not None:
            path = paths.shorten(path, rules.shorten.length, rules.shorten.exclude, sep)

        if rules.truncate_enabled:
            path = self._truncate(path, config)

        if rules.filename_first is not None:
            path, styles = self._filename_first(path, rules.filename_first.reverse_directories, sep)

        return path, styles

    def _truncate(self, path: str, config: DisplayConfig) -> str:
        # Resolved once per config so a whole listing shares one width lookup
        if config.resolved_display_width is None:
            reserved = self.settings.reserved_width(config.rules.truncate_extra)
            config.resolved_display_width = max(self.get_available_width(reserved), 0)
        if config.prefix_width is None:
            config.prefix_width = 0
        budget = max(config.resolved_display_width - config.prefix_width, 0)
        return paths.truncate(path, budget, self.settings.ELLIPSIS)

    def _filename_first(
        self, path: str, reverse_directories: bool, sep: str
    ) -> tuple[str, list[StyleSpan]]:
        directories = path.split(sep)
        filename = directories.pop()
        if reverse_directories:
            directories.reverse()

        # A top-level filename has no directories after it
        transformed = f"{filename} {sep.join(directories)}".strip()
        end = byte_len(transformed)
        start = min(byte_len(filename), end)
        return transformed, [StyleSpan(start=start, end=end, label=StyleLabel.COMMENT)]


def _shorten_options(value: Any, settings: Settings) -> ShortenOptions | None:
    if value is None or value is False:
        return None
    if value is True:
        return ShortenOptions(length=settings.DEFAULT_SHORTEN_LEN)
    if isinstance(value, int):
        return ShortenOptions(length=value)
    if isinstance(value, Mapping):
        options = dict(value)
        options.setdefault("len", settings.DEFAULT_SHORTEN_LEN)
        return ShortenOptions.model_validate(options)
    raise ConfigurationError(f"shorten must be a bool, an int or a mapping, got {value!r}")


def _filename_first_options(value: Any) -> FilenameFirstOptions | None:
    if value is None or value is False:
        return None
    if value is True:
        return FilenameFirstOptions()
    if isinstance(value, Mapping):
        return FilenameFirstOptions.model_validate(dict(value))
    raise ConfigurationError(f"filename_first must be a bool or a mapping, got {value!r}")


def _config_from_flags(
    options: Mapping[str, Any], base_directory: str | None, settings: Settings
) -> DisplayConfig:
    unknown = set(options) - _FLAG_NAMES
    if unknown:
        raise ConfigurationError(f"Unknown path display option(s): {', '.join(sorted(unknown))}")

    if options.get("hidden"):
        return DisplayConfig(mode=DisplayMode.HIDDEN, base_directory=base_directory)
    if options.get("tail"):
        return DisplayConfig(mode=DisplayMode.TAIL, base_directory=base_directory)

    truncate = options.get("truncate")
    if truncate is not None and not isinstance(truncate, int):
        raise ConfigurationError(f"truncate must be a bool or an int, got {truncate!r}")

    rules = PathRules(
        absolute=bool(options.get("absolute")),
        smart=bool(options.get("smart")),
        shorten=_shorten_options(options.get("shorten"), settings),
        truncate=None if truncate is False else truncate,
        filename_first=_filename_first_options(options.get("filename_first")),
    )
    return DisplayConfig(mode=DisplayMode.FULL, rules=rules, base_directory=base_directory)


def parse_path_display(
    value: Any, base_directory: str | None = None, settings: Settings | None = None
) -> DisplayConfig:
    """Build a DisplayConfig from the loose user-facing form.

    Accepts None or "hidden", a callable ``(config, path)``, a list of flag
    names such as ``["smart", "truncate"]``, or a mapping of flag name to
    value such as ``{"shorten": {"len": 2, "exclude": [1, -1]}}``.

    Raises:
        ConfigurationError: If the value or one of its flags is not understood
    """
    settings = settings or get_settings()

    if value is None or value == DisplayMode.HIDDEN:
        return DisplayConfig(mode=DisplayMode.HIDDEN, base_directory=base_directory)
    if callable(value):
        return DisplayConfig(mode=DisplayMode.CUSTOM, custom=value, base_directory=base_directory)
    if isinstance(value, str):
        raise ConfigurationError(
            f"path display must be a callable, a list or a mapping, got {value!r}"
        )

    try:
        if isinstance(value, Mapping):
            return _config_from_flags(value, base_directory, settings)
        if isinstance(value, list | tuple | set | frozenset):
            if not all(isinstance(flag, str) for flag in value):
                raise ConfigurationError(f"path display flags must be strings, got {value!r}")
            return _config_from_flags(dict.fromkeys(value, True), base_directory, settings)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid path display options: {e}") from e

    raise ConfigurationError(f"path display must be a callable, a list or a mapping, got {value!r}")


@lru_cache
def get_formatter() -> PathDisplayFormatter:
    return PathDisplayFormatter()


def transform_path(config: DisplayConfig, path: str | None) -> tuple[str, list[StyleSpan]]:
    """Format a path with the process-wide formatter."""
    return get_formatter().format(path, config)

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DisplayMode(StrEnum):
    """How a path is rendered in a result list."""

    HIDDEN = "hidden"
    TAIL = "tail"
    FULL = "full"
    CUSTOM = "custom"


class StyleLabel(StrEnum):
    """Highlight labels attached to display spans."""

    COMMENT = "comment"


class StyleSpan(BaseModel):
    """A half-open byte range of a display string rendered with a named style."""

    start: int
    end: int
    label: str

    @property
    def range(self) -> tuple[int, int]:
        return (self.start, self.end)

    def shifted(self, offset: int) -> "StyleSpan":
        """Return a copy of this span moved right by offset bytes."""
        return self.model_copy(update={"start": self.start + offset, "end": self.end + offset})


class ShortenOptions(BaseModel):
    """Abbreviate directory segments to their first characters."""

    model_config = ConfigDict(populate_by_name=True)

    length: int = Field(default=1, alias="len", ge=0)
    # Segment indices (1-based, negative from the end) left untouched
    exclude: list[int] | None = None


class FilenameFirstOptions(BaseModel):
    """Render the filename before its directories."""

    reverse_directories: bool = False


class PathRules(BaseModel):
    """Independently togglable rules of the full display mode, applied in field order."""

    absolute: bool = False
    smart: bool = False
    shorten: ShortenOptions | None = None
    truncate: bool | int | None = None
    filename_first: FilenameFirstOptions | None = None

    @property
    def truncate_enabled(self) -> bool:
        return self.truncate is not None and self.truncate is not False

    @property
    def truncate_extra(self) -> int:
        """Fixed width reserved in addition to the picker chrome."""
        if isinstance(self.truncate, bool) or self.truncate is None:
            return 0
        return self.truncate


CustomTransform = Callable[..., Any]


class DisplayConfig(BaseModel):
    """Path display configuration for one formatting pass.

    The width fields are filled lazily by the formatter and reused for every
    path formatted with the same instance, so use one instance per listing
    render and per thread.
    """

    mode: DisplayMode = DisplayMode.FULL
    rules: PathRules = Field(default_factory=PathRules)
    custom: CustomTransform | None = None
    base_directory: str | None = None

    resolved_display_width: int | None = None
    prefix_width: int | None = None

    @property
    def is_hidden(self) -> bool:
        return self.mode == DisplayMode.HIDDEN

    def reset_cache(self) -> None:
        """Forget the widths resolved during the previous pass."""
        self.resolved_display_width = None
        self.prefix_width = None

"""Lexical path helpers used to build display strings.

None of these functions touch the filesystem: paths are treated as plain
strings split on a separator, so they work for paths that do not exist and
for paths of another platform when given that platform's separator.
"""

import os
import re
from pathlib import Path

from rich.cells import cell_len

DEFAULT_ELLIPSIS = "…"

_ENV_VAR_RE = re.compile(r"\$([A-Za-z0-9_]+)")
_WINDOWS_ROOT_RE = re.compile(r"[A-Za-z0-9]:\\")
_LOCATION_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def _is_scheme_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "+.-"


def is_uri(value: str) -> bool:
    """Check whether a string looks like a URI (``scheme:rest``).

    The scheme must start with an ASCII letter and contain only letters,
    digits, ``+``, ``.`` or ``-``. A backslash right after the colon marks a
    Windows drive path rather than a URI.
    """
    if not value or not (value[0].isascii() and value[0].isalpha()):
        return False

    for i in range(1, len(value)):
        char = value[i]
        if char == ":":
            return i < len(value) - 1 and value[i + 1] != "\\"
        if not _is_scheme_char(char):
            return False
    return False


def path_tail(path: str, sep: str = os.sep) -> str:
    """Return the last component of a path."""
    index = path.rfind(sep)
    if sep != "/":
        index = max(index, path.rfind("/"))
    if index == -1:
        return path
    return path[index + 1 :]


def path_expand(path: str, sep: str = os.sep) -> str:
    """Expand ``~`` and ``$VARS`` and normalize separators.

    Unlike ``os.path.expandvars``, unset variables are left untouched and
    backslashes are preserved on POSIX. Trailing separators are trimmed except
    for a root (``/`` or ``C:\\``).
    """
    if is_uri(path):
        return path

    if path.startswith("~"):
        home = str(Path.home())
        if home.endswith(("/", "\\")):
            home = home[:-1]
        path = home + path[1:]

    path = _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), m.group(0)), path)
    path = re.sub(r"/+", "/", path)

    if sep == "\\":
        path = re.sub(r"\\+", r"\\", path)
        if _WINDOWS_ROOT_RE.fullmatch(path):
            return path
        if len(path) > 1 and path.endswith("\\"):
            return path[:-1]
        return path

    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def make_relative(path: str, base: str, sep: str = os.sep) -> str:
    """Express path relative to base using segment comparison only.

    Leading segments shared with base are dropped and one ``..`` is inserted
    for every remaining base segment. A path with no leading segment in common
    with base (already relative, or on another drive) is returned unchanged.

    Args:
        path: Path to rewrite
        base: Directory the result is relative to
        sep: Path separator

    Returns:
        The relative path, or "." when path equals base
    """
    if not path or not base:
        return path

    trimmed_base = base.rstrip(sep)
    base_parts = trimmed_base.split(sep) if trimmed_base else [""]
    path_parts = path.split(sep)

    common = 0
    for ours, theirs in zip(path_parts, base_parts, strict=False):
        if ours != theirs:
            break
        common += 1

    if common == 0:
        return path

    parts = [".."] * (len(base_parts) - common) + path_parts[common:]
    # "/a/b/" relative to "/a" keeps no trailing empty segment
    if parts and parts[-1] == "" and len(parts) > 1:
        parts = parts[:-1]
    if not parts or parts == [""]:
        return "."
    return sep.join(parts)


def _shorten_segment(segment: str, length: int) -> str:
    if segment in (".", ".."):
        return segment
    if segment.startswith("."):
        return "." + segment[1 : 1 + length]
    return segment[:length]


def shorten(path: str, length: int = 1, exclude: list[int] | None = None, sep: str = os.sep) -> str:
    """Abbreviate path segments to their first ``length`` characters.

    Segments are numbered from 1 among the non-empty ones; negative entries in
    ``exclude`` count from the end, so the default ``[-1]`` keeps the
    filename intact. Hidden segments keep their leading dot.
    """
    if exclude is None:
        exclude = [-1]

    segments = path.split(sep)
    count = sum(1 for segment in segments if segment)
    excluded = {index + count + 1 if index < 0 else index for index in exclude}

    shortened: list[str] = []
    position = 0
    for segment in segments:
        if not segment:
            shortened.append(segment)
            continue
        position += 1
        if position in excluded:
            shortened.append(segment)
        else:
            shortened.append(_shorten_segment(segment, length))
    return sep.join(shortened)


def truncate(text: str, width: int, ellipsis: str = DEFAULT_ELLIPSIS, keep_end: bool = True) -> str:
    """Fit text into ``width`` terminal cells, marking the cut with an ellipsis.

    With ``keep_end`` the right-hand side of the text is preserved and the
    ellipsis is placed on the left.
    """
    if width <= 0:
        return ""
    if cell_len(text) <= width:
        return text

    ellipsis_width = cell_len(ellipsis)
    if ellipsis_width > width:
        return ""

    kept: list[str] = []
    used = 0
    for char in reversed(text) if keep_end else text:
        used += cell_len(char)
        if used + ellipsis_width > width:
            break
        kept.append(char)

    if keep_end:
        return ellipsis + "".join(reversed(kept))
    return "".join(kept) + ellipsis


def file_extension(filename: str) -> str:
    """Return the extension of a filename, keeping two parts for ``a.test.js``."""
    parts = filename.split(".")
    if len(parts) > 2:
        return ".".join(parts[-2:])
    return parts[-1]


def separate_file_path_location(path: str) -> tuple[str, int | None, int | None]:
    """Split a ``file:line:col`` reference into its parts.

    Returns:
        (path, line, column); column is 0 when only a line is given and both
        are None when the path carries no location
    """
    numbers: list[int] = []
    i = len(path) - 1
    while i >= 0:
        if path[i] == ":":
            if i == len(path) - 1:
                path = path[:i]
            else:
                piece = path[i + 1 :]
                value = int(piece) if _LOCATION_NUMBER_RE.fullmatch(piece) else None
                if value is not None:
                    numbers.append(value)
                    path = path[:i]
                    if len(numbers) == 2:
                        break
        i -= 1

    if len(numbers) == 2:
        return path, numbers[1], numbers[0]
    if len(numbers) == 1:
        return path, numbers[0], 0
    return path, None, None

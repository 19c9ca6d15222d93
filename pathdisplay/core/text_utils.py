"""Small string and list helpers for building result lists."""

import os
import re
from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")

_TERMCODES = {"\t": "<TAB>", "\x06": "<C-F>", " ": "<Space>"}


def max_split(s: str, pattern: str = " ", maxsplit: int = -1) -> list[str]:
    """Split on a regex, dropping empty pieces, stopping after maxsplit pieces.

    Once ``maxsplit`` non-empty pieces were taken, the rest of the string is
    appended unsplit as the final element.
    """
    regex = re.compile(pattern)
    pieces: list[str] = []
    pos = 0
    while maxsplit != 0 and pos < len(s):
        match = regex.search(s, pos)
        if match is None or match.end() == match.start():
            pieces.append(s[pos:])
            break

        value = s[pos : match.start()]
        if value:
            maxsplit -= 1
            pieces.append(value)
        pos = match.end()

        if maxsplit == 0:
            pieces.append(s[pos:])
    return pieces


def split_lines(s: str, windows: bool | None = None) -> list[str]:
    """Split text into lines, also accepting ``\\r\\n`` on Windows."""
    if windows is None:
        windows = os.name == "nt"
    if windows:
        return re.split(r"\r?\n", s)
    return s.split("\n")


def display_termcodes(s: str) -> str:
    """Make tabs, spaces and ^F visible in a key sequence."""
    return "".join(_TERMCODES.get(char, char) for char in s)


def cycle(i: int, n: int) -> int:
    """Wrap a 1-based index into the range 1..n."""
    return n if i % n == 0 else i % n


def list_find(
    func: Callable[[T, int, Sequence[T]], object], items: Sequence[T]
) -> tuple[int, T] | None:
    """Return the 1-based index and item of the first match, or None."""
    for index, item in enumerate(items, start=1):
        if func(item, index, items):
            return index, item
    return None

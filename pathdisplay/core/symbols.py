"""Filter symbol query results by kind."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pathdisplay.log import notify

SymbolResult = Mapping[str, Any]


def _as_list(value: str | Sequence[str]) -> list[str] | None:
    if isinstance(value, str):
        return [value.lower()]
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return [item.lower() for item in value]
    return None


def filter_symbols(
    results: Sequence[SymbolResult],
    symbols: str | Sequence[str] | None = None,
    ignore_symbols: str | Sequence[str] | None = None,
    post_filter: Callable[[list[SymbolResult]], list[SymbolResult]] | None = None,
) -> list[SymbolResult]:
    """Keep only (or drop) results whose ``kind`` matches, case-insensitively.

    Args:
        results: Symbol results, each carrying a ``kind`` key
        symbols: Kinds to keep
        ignore_symbols: Kinds to drop
        post_filter: Applied to the filtered list before the emptiness check

    Returns:
        The filtered results, or an empty list when nothing survived or the
        options were invalid (a notification explains why)
    """
    if symbols is not None and ignore_symbols is not None:
        notify(
            "filter_symbols",
            "Either symbols or ignore_symbols, can't process opposing options at the same time!",
            level="ERROR",
        )
        return []
    if symbols is None and ignore_symbols is None:
        return list(results)

    if ignore_symbols is not None:
        kinds = _as_list(ignore_symbols)
        if kinds is None:
            notify(
                "filter_symbols",
                "Please pass ignore_symbols as either a string or a list of strings",
                level="ERROR",
            )
            return []
        filtered = [item for item in results if str(item.get("kind", "")).lower() not in kinds]
    else:
        kinds = _as_list(symbols)  # type: ignore[arg-type]
        if kinds is None:
            notify(
                "filter_symbols",
                "Please pass filtering symbols as either a string or a list of strings",
                level="ERROR",
            )
            return []
        filtered = [item for item in results if str(item.get("kind", "")).lower() in kinds]

    if post_filter is not None:
        filtered = post_filter(filtered)

    if filtered:
        return filtered

    if symbols is not None:
        notify(
            "filter_symbols",
            f"{', '.join(kinds)} symbol(s) were not part of the query results",
            level="WARN",
        )
    else:
        notify(
            "filter_symbols",
            f"{', '.join(kinds)} ignore_symbol(s) have removed everything from the query result",
            level="WARN",
        )
    return []

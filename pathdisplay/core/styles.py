from pathdisplay.models.display import StyleSpan


def merge_styles(styles: list[StyleSpan], extra: list[StyleSpan], offset: int) -> list[StyleSpan]:
    """Append spans of a string embedded at byte ``offset`` to ``styles``."""
    styles.extend(span.shifted(offset) for span in extra)
    return styles


def byte_len(text: str) -> int:
    return len(text.encode("utf-8"))

"""Shortest distinguishing suffix of paths seen during a listing session."""

import os


class SmartPathState:
    """Ordered, de-duplicated log of every path shortened so far.

    The log is never pruned: create one instance per listing session and drop
    it when the session ends. Not thread-safe.
    """

    def __init__(self, sep: str = os.sep) -> None:
        self.sep = sep
        self._paths: list[str] = []
        self._seen: set[str] = set()

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._seen

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    def clear(self) -> None:
        self._paths.clear()
        self._seen.clear()

    def _divergence_index(self, segments: list[str], path: str) -> int:
        """Highest 1-based segment index at which path first differs from a seen path."""
        max_index = 1
        for seen in self._paths:
            if not seen or seen == path:
                continue
            other = seen.split(self.sep)
            for i in range(1, min(len(segments), len(other)) + 1):
                if segments[i - 1] != other[i - 1] and i > max_index:
                    max_index = i
                    break
        return max_index

    def shorten(self, path: str) -> str:
        """Reduce path to the trailing segments that tell it apart from the others.

        The path is registered after its result is computed, so the first
        path of a session is always returned unchanged.
        """
        result = path
        if self._paths:
            segments = path.split(self.sep)
            max_index = self._divergence_index(segments, path)
            if max_index == 1 and len(segments) >= 2:
                max_index = len(segments) - 2
            result = self.sep.join(segments[max(max_index - 2, 0) :])

        if path not in self._seen:
            self._seen.add(path)
            self._paths.append(path)

        if result != path:
            return ".." + self.sep + result
        return path

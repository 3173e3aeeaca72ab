"""Positional key path tracking."""

from __future__ import annotations

from flatyaml.config import InvalidConfigurationError
from flatyaml.parsing.classify import trim


class PathTracker:
    """
    Maps indentation depths to key segments and joins the active chain into a path.

    Writing a segment at a depth already tracked replaces it and forgets every deeper
    segment. A depth at or past the current length appends exactly one segment, even when
    the document skips levels.
    """

    def __init__(self, delimiter: str = "/") -> None:
        if not isinstance(delimiter, str) or not delimiter:
            raise InvalidConfigurationError("delimiter must be a non-empty string")
        self.delimiter = delimiter
        self._segments: list[str] = []

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    def create_key_path(self, depth: int, key: str) -> str:
        key = trim(key)
        if depth < len(self._segments):
            self._segments[depth] = key
            del self._segments[depth + 1 :]
        else:
            self._segments.append(key)
        return self.delimiter.join(self._segments)

    def clear(self) -> None:
        self._segments.clear()

"""Dotted-path parsing."""

from __future__ import annotations

from path_store.exceptions import InvalidPathError

SEPARATOR = "."


def split_path(path: str) -> list[str]:
    """Split *path* into its segments, rejecting empty paths and empty segments."""
    if not isinstance(path, str):
        raise InvalidPathError(repr(path), f"expected str, got {type(path).__name__}")
    if not path:
        raise InvalidPathError(path, "path is empty")

    segments = path.split(SEPARATOR)
    for index, segment in enumerate(segments):
        if not segment:
            raise InvalidPathError(path, f"segment {index} is empty")
    return segments


def join_path(segments: list[str]) -> str:
    return SEPARATOR.join(segments)

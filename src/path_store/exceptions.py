"""Custom exceptions for the path_store package."""

from __future__ import annotations

from typing import Literal

Operation = Literal["read", "write"]


class PathStoreError(Exception):
    """Base exception for all store-related errors."""


class PermissionDeniedError(PathStoreError, PermissionError):
    """Raised when the store policy denies a read or write on a path segment."""

    def __init__(self, key: str, operation: Operation) -> None:
        self.key = key
        self.operation = operation
        if operation == "read":
            msg = f"Permission denied to read key: {key}"
        else:
            msg = f"Permission denied to write on key: {key}"
        super().__init__(msg)


class InvalidPathError(PathStoreError, ValueError):
    """Raised when a dotted path is empty or contains an empty segment."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        msg = f"Invalid path {path!r}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class PathConflictError(PathStoreError, TypeError):
    """Raised when a write would have to descend into a non-mapping value."""

    def __init__(self, path: str, key: str, found: object) -> None:
        self.path = path
        self.key = key
        self.found_type = type(found).__name__
        super().__init__(
            f"Cannot write '{path}': segment '{key}' holds a {self.found_type}, not a mapping"
        )

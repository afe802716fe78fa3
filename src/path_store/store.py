"""PathStore — in-memory hierarchical key/value store with dotted-path addressing."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import Any, TypeAlias, Union

from path_store._internal.paths import join_path, split_path
from path_store.exceptions import InvalidPathError, PathConflictError, PermissionDeniedError
from path_store.permissions import Permission

logger = logging.getLogger(__name__)

Primitive: TypeAlias = str | int | float | bool | None
StoreValue: TypeAlias = Union[
    Primitive,
    Sequence["StoreValue"],
    Mapping[str, "StoreValue"],
    "PathStore",
    Callable[[], "StoreValue"],
]


def _is_placeholder(value: Any) -> bool:
    """Return ``True`` for values an intermediate write may replace with a mapping."""
    if value is None:
        return True
    return isinstance(value, (bool, int, float, str)) and not value


class PathStore:
    """A nested ``dict`` addressed by dotted paths, behind a store-wide policy.

    ``write("user.name", "Ada")`` creates the ``user`` mapping on demand and
    ``read("user.name")`` walks back down to it.  Every segment visited is
    checked against :attr:`default_policy` first.

    Values are stored by reference.  A nested :class:`PathStore` is treated as
    an opaque sub-tree: the remainder of a path reaching into it is handed to
    that store, so its own policy governs the rest of the traversal.

    Parameters:
        default_policy: ``"rw"`` (default), ``"r"``, ``"w"`` or ``"none"``.
                        Long labels like ``"read-only"`` are also accepted.
    """

    def __init__(self, default_policy: Permission | str = Permission.READ_WRITE) -> None:
        self._data: dict[str, StoreValue] = {}
        self.default_policy = default_policy

    @property
    def default_policy(self) -> Permission:
        return self._default_policy

    @default_policy.setter
    def default_policy(self, value: Permission | str) -> None:
        self._default_policy = Permission(value)

    # ── permissions ──────────────────────────────────────────

    def allowed_to_read(self, key: str) -> bool:
        """Return whether *key* may be read.  Decided by the store-wide policy alone."""
        return self._default_policy.can_read

    def allowed_to_write(self, key: str) -> bool:
        """Return whether *key* may be written.  Decided by the store-wide policy alone."""
        return self._default_policy.can_write

    def _check_read(self, key: str) -> None:
        if not self.allowed_to_read(key):
            logger.debug("read denied on %r under policy %s", key, self._default_policy.value)
            raise PermissionDeniedError(key, "read")

    def _check_write(self, key: str) -> None:
        if not self.allowed_to_write(key):
            logger.debug("write denied on %r under policy %s", key, self._default_policy.value)
            raise PermissionDeniedError(key, "write")

    # ── access ───────────────────────────────────────────────

    def read(self, path: str, default: Any = None) -> Any:
        """Return the value at *path*, or *default* when nothing is stored there.

        Callables are returned as-is, never invoked.  Reading never mutates
        the store.

        Raises:
            PermissionDeniedError: The policy denies reading a visited segment.
            InvalidPathError: *path* is empty or has an empty segment.
        """
        keys = split_path(path)
        current: Any = self._data

        for index, key in enumerate(keys):
            if isinstance(current, PathStore):
                return current.read(join_path(keys[index:]), default)

            self._check_read(key)

            if not isinstance(current, Mapping) or key not in current:
                return default

            current = current[key]

        return current

    def write(self, path: str, value: StoreValue) -> StoreValue:
        """Store *value* at *path*, creating missing intermediate mappings.

        Any previous value at the final segment is overwritten, whatever its
        type.  Returns *value*.

        Raises:
            PermissionDeniedError: The policy denies writing a visited segment.
            PathConflictError: An intermediate segment holds a non-mapping value.
            InvalidPathError: *path* is empty or has an empty segment.
        """
        keys = split_path(path)
        current: MutableMapping[str, Any] = self._data

        for index, key in enumerate(keys[:-1]):
            self._check_write(key)

            child = current.get(key)
            if isinstance(child, PathStore):
                return child.write(join_path(keys[index + 1 :]), value)

            if _is_placeholder(child):
                logger.debug("creating mapping at %r", join_path(keys[: index + 1]))
                child = current[key] = {}
            elif not isinstance(child, MutableMapping):
                raise PathConflictError(path, key, child)

            current = child

        last_key = keys[-1]
        self._check_write(last_key)

        current[last_key] = value
        return value

    def write_entries(self, entries: Mapping[str, StoreValue]) -> None:
        """Write every ``path -> value`` pair of *entries* in iteration order.

        Not atomic: when one write fails, the entries before it stay written
        and the ones after it are not attempted.
        """
        for key, value in entries.items():
            self.write(key, value)

    def entries(self) -> dict[str, StoreValue]:
        """Return a shallow copy of the top-level mapping.

        Nested mappings are shared with the store, so mutating them through
        the copy is visible to later reads.
        """
        return dict(self._data)

    # ── introspection ────────────────────────────────────────

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        missing = object()
        try:
            return self.read(path, missing) is not missing
        except InvalidPathError:
            return False

    def __repr__(self) -> str:
        return f"PathStore(default_policy={self._default_policy.value!r}, keys={list(self._data)})"

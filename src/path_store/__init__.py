"""path_store — an in-memory hierarchical key/value store.

Values live in nested dicts addressed by dotted paths (``"user.name"``).
Every segment a read or write visits is gated by the store's single
permission policy.
"""

from path_store.exceptions import (
    InvalidPathError,
    PathConflictError,
    PathStoreError,
    PermissionDeniedError,
)
from path_store.permissions import Permission, Restrict, permissions_of
from path_store.store import PathStore, StoreValue

__all__ = [
    "InvalidPathError",
    "PathConflictError",
    "PathStore",
    "PathStoreError",
    "Permission",
    "PermissionDeniedError",
    "Restrict",
    "StoreValue",
    "permissions_of",
]

"""Permission policies and the ``Restrict`` metadata descriptor."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

_ALIASES: dict[str, str] = {
    "read-write": "rw",
    "read_write": "rw",
    "readwrite": "rw",
    "read-only": "r",
    "read_only": "r",
    "readonly": "r",
    "write-only": "w",
    "write_only": "w",
    "writeonly": "w",
}


class Permission(StrEnum):
    """Access mode of a store or of a restricted attribute.

    The canonical values are the short codes ``"rw"``, ``"r"``, ``"w"`` and
    ``"none"``.  Long labels such as ``"read-only"`` resolve to the same
    members, case-insensitively.
    """

    READ_WRITE = "rw"
    READ_ONLY = "r"
    WRITE_ONLY = "w"
    NONE = "none"

    @classmethod
    def _missing_(cls, value: object) -> Permission | None:
        if not isinstance(value, str):
            return None
        label = value.strip().lower()
        label = _ALIASES.get(label, label)
        for member in cls:
            if member.value == label:
                return member
        return None

    @property
    def can_read(self) -> bool:
        return self in (Permission.READ_WRITE, Permission.READ_ONLY)

    @property
    def can_write(self) -> bool:
        return self in (Permission.READ_WRITE, Permission.WRITE_ONLY)


_UNSET: Any = object()
_TABLE = "permissions"


class Restrict:
    """Declare a permission label for a class attribute.

    Used as a class-level attribute, the descriptor records
    ``attribute name -> Permission`` in the owning class's ``permissions``
    table when the class is created::

        class Profile:
            email = Restrict("r")
            notes = Restrict("rw", default="")

        permissions_of(Profile)  # {"email": Permission.READ_ONLY, "notes": ...}

    The label is metadata only.  Reads and assignments on instances behave
    like a plain attribute; nothing is enforced here.

    Each class gets its own table, seeded with the entries of its bases, so
    restricting an attribute on a subclass leaves the base class untouched.
    """

    def __init__(self, permission: Permission | str, *, default: Any = _UNSET) -> None:
        self.permission = Permission(permission)
        self.default = default
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        table = owner.__dict__.get(_TABLE)
        if table is None:
            table = {}
            for base in reversed(owner.__mro__[1:]):
                table.update(base.__dict__.get(_TABLE, {}))
            setattr(owner, _TABLE, table)
        table[name] = self.permission

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        try:
            return instance.__dict__[self.name]
        except KeyError:
            if self.default is _UNSET:
                raise AttributeError(
                    f"'{type(instance).__name__}' object has no attribute '{self.name}'"
                ) from None
            return self.default

    def __set__(self, instance: object, value: Any) -> None:
        instance.__dict__[self.name] = value

    def __repr__(self) -> str:
        return f"Restrict({self.permission.value!r})"


def permissions_of(obj: type | object) -> dict[str, Permission]:
    """Return a copy of the permission table declared on *obj*'s class."""
    cls = obj if isinstance(obj, type) else type(obj)
    return dict(getattr(cls, _TABLE, {}))

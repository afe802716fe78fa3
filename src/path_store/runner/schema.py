# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m path_store.runner``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from path_store.permissions import Permission


class StoreConfigSchema(BaseModel):
    """Store configuration.

    Attributes:
        default_policy: Store-wide policy ("rw", "r", "w", "none" or a long
                        label such as "read-only")
        entries: Flat ``path -> value`` mapping written before any operation
                 runs.  Seeding ignores ``default_policy``.
    """

    default_policy: Permission = Permission.READ_WRITE
    entries: dict[str, Any] = Field(default_factory=dict)

    @field_validator("default_policy", mode="before")
    @classmethod
    def _parse_policy(cls, value: Any) -> Permission:
        return Permission(value)


class OperationSchema(BaseModel):
    """Single store operation.

    Attributes:
        op: Operation name
        path: Dotted path (read, write, allowed)
        value: Value to store (write)
        entries: Flat ``path -> value`` mapping (write_entries)
    """

    op: Literal["read", "write", "write_entries", "entries", "allowed"]
    path: str = ""
    value: Any = None
    entries: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _require_path(self) -> OperationSchema:
        if self.op in ("read", "write", "allowed") and not self.path:
            raise ValueError(f"operation '{self.op}' requires a 'path'")
        return self


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        store: Store configuration
        operations: Operations to apply, in order
    """

    store: StoreConfigSchema = Field(default_factory=StoreConfigSchema)
    operations: list[OperationSchema] = Field(default_factory=list)


class OperationResultSchema(BaseModel):
    """Outcome of one successful operation.

    Attributes:
        op: Operation name
        path: Path the operation addressed, if any
        result: Returned value (read, write, entries) or permission flags
                (allowed)
    """

    op: str
    path: str = ""
    result: Any = None


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether every operation completed
        results: Results of the operations that completed
        entries: Top-level snapshot of the store after the run
        error: Error message (on failure)
        error_type: Error class name (on failure)
        failed_index: Index of the operation that failed, if any
    """

    success: bool
    results: list[OperationResultSchema] = Field(default_factory=list)
    entries: dict[str, Any] = Field(default_factory=dict)
    error: str = ""
    error_type: str = ""
    failed_index: int | None = None

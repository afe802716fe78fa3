# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for applying a batch of operations to a PathStore.

Orchestrates the full execution flow:
1. Create and seed the store from configuration
2. Apply each operation in order
3. Stop at the first failure
4. Return structured result
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from path_store import PathStore, Permission

from .schema import (
    OperationResultSchema,
    OperationSchema,
    RunnerInput,
    RunnerOutput,
    StoreConfigSchema,
)

logger = logging.getLogger(__name__)

CYCLE_MARKER = "<cycle>"


class OperationError(Exception):
    """Raised when an operation fails; wraps the store error."""

    def __init__(self, index: int, op: str, cause: Exception) -> None:
        self.index = index
        self.op = op
        self.cause = cause
        super().__init__(f"Operation {index} ('{op}') failed: {cause}")


def to_jsonable(value: Any, _seen: set[int] | None = None) -> Any:
    """Convert a stored value into something ``model_dump_json`` accepts.

    Nested stores are expanded through their ``entries()``; callables are
    described, not invoked.  A store or container reached again while it is
    still being expanded is rendered as ``CYCLE_MARKER``.
    """
    if callable(value):
        return f"<callable {getattr(value, '__name__', type(value).__name__)}>"
    if not isinstance(value, (PathStore, Mapping, list, tuple)):
        return value

    seen = set() if _seen is None else _seen
    if id(value) in seen:
        return CYCLE_MARKER
    seen.add(id(value))
    try:
        if isinstance(value, PathStore):
            return to_jsonable(value.entries(), seen)
        if isinstance(value, Mapping):
            return {str(k): to_jsonable(v, seen) for k, v in value.items()}
        return [to_jsonable(v, seen) for v in value]
    finally:
        seen.discard(id(value))


class Executor:
    """Applies runner operations to a store.

    Operations run in order against one store.  Like
    :meth:`PathStore.write_entries`, a batch is not atomic: operations
    before a failure keep their effect and the rest are skipped.

    Pass a store to the constructor to run against existing state instead
    of building one from configuration.

    Example:
        executor = Executor()
        output = executor.execute(input_data)

        # For testing with a prepared store:
        store = PathStore("r")
        executor = Executor(store=store)
    """

    def __init__(self, store: PathStore | None = None) -> None:
        self._injected_store = store

    def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Execute every operation and report the outcome.

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        store: PathStore | None = None
        results: list[OperationResultSchema] = []
        try:
            store = self._injected_store or self._create_store(input_data.store)
            for index, operation in enumerate(input_data.operations):
                results.append(self._run_operation(store, index, operation))
        except OperationError as e:
            logger.warning("%s", e)
            return RunnerOutput(
                success=False,
                results=results,
                entries=self._snapshot(store),
                error=str(e.cause),
                error_type=type(e.cause).__name__,
                failed_index=e.index,
            )
        except Exception as e:
            logger.warning("runner failed: %s", e)
            return RunnerOutput(
                success=False,
                results=results,
                entries=self._snapshot(store),
                error=str(e),
                error_type=type(e).__name__,
            )

        return RunnerOutput(success=True, results=results, entries=self._snapshot(store))

    def _create_store(self, config: StoreConfigSchema) -> PathStore:
        """Create a store, seed it, then apply the configured policy."""
        store = PathStore(Permission.READ_WRITE)
        store.write_entries(config.entries)
        store.default_policy = config.default_policy
        return store

    def _run_operation(
        self, store: PathStore, index: int, operation: OperationSchema
    ) -> OperationResultSchema:
        logger.debug("operation %d: %s %r", index, operation.op, operation.path)
        try:
            result = self._dispatch(store, operation)
        except Exception as e:
            raise OperationError(index, operation.op, e) from e
        return OperationResultSchema(
            op=operation.op,
            path=operation.path,
            result=to_jsonable(result),
        )

    def _dispatch(self, store: PathStore, operation: OperationSchema) -> Any:
        if operation.op == "read":
            return store.read(operation.path)
        if operation.op == "write":
            return store.write(operation.path, operation.value)
        if operation.op == "write_entries":
            store.write_entries(operation.entries)
            return None
        if operation.op == "entries":
            return store.entries()
        return {
            "read": store.allowed_to_read(operation.path),
            "write": store.allowed_to_write(operation.path),
        }

    def _snapshot(self, store: PathStore | None) -> dict[str, Any]:
        if store is None:
            return {}
        return to_jsonable(store)

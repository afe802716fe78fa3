# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for applying store operations from JSON.

Usage:
    python -m path_store.runner < input.json > output.json

Exports:
    Executor: Applies a batch of operations to a store
    RunnerInput: Input schema read from stdin
    RunnerOutput: Output schema written to stdout
"""

from .executor import Executor, OperationError, to_jsonable
from .schema import (
    OperationResultSchema,
    OperationSchema,
    RunnerInput,
    RunnerOutput,
    StoreConfigSchema,
)

__all__ = [
    "Executor",
    "OperationError",
    "OperationResultSchema",
    "OperationSchema",
    "RunnerInput",
    "RunnerOutput",
    "StoreConfigSchema",
    "to_jsonable",
]

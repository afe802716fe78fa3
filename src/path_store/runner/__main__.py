# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the path_store runner.

Usage:
    python -m path_store.runner < input.json > output.json

Reads one ``RunnerInput`` document from stdin, applies its operations to
a freshly seeded store, and prints one ``RunnerOutput`` document.

Exit codes:
    0: Every operation completed
    1: An operation failed or the input was rejected (details in the JSON)
"""

from __future__ import annotations

import sys

from .executor import Executor
from .schema import RunnerInput, RunnerOutput


def _emit(output: RunnerOutput) -> int:
    print(output.model_dump_json())
    return 0 if output.success else 1


def main() -> int:
    """Run one batch from stdin and return the exit code."""
    try:
        input_data = RunnerInput.model_validate_json(sys.stdin.read())
    except Exception as e:
        # Malformed JSON or an unknown op/policy never reaches the store
        return _emit(RunnerOutput(success=False, error=str(e), error_type=type(e).__name__))

    # Store errors are already folded into the output by the executor
    return _emit(Executor().execute(input_data))


if __name__ == "__main__":
    sys.exit(main())

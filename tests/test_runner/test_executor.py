"""Tests for the runner executor."""

import pytest

from path_store import PathStore
from path_store.runner.executor import CYCLE_MARKER, Executor, to_jsonable
from path_store.runner.schema import (
    OperationSchema,
    RunnerInput,
    StoreConfigSchema,
)


def _input(*operations, **store):
    return RunnerInput(
        store=StoreConfigSchema(**store),
        operations=[OperationSchema(**op) for op in operations],
    )


class TestExecute:
    """Tests for Executor.execute()."""

    @pytest.fixture
    def executor(self):
        return Executor()

    def test_empty_batch(self, executor):
        output = executor.execute(RunnerInput())

        assert output.success
        assert output.results == []
        assert output.entries == {}

    def test_write_then_read(self, executor):
        output = executor.execute(
            _input(
                {"op": "write", "path": "user.name", "value": "Ada"},
                {"op": "read", "path": "user.name"},
                {"op": "read", "path": "user.age"},
            )
        )

        assert output.success
        assert [r.result for r in output.results] == ["Ada", "Ada", None]
        assert output.entries == {"user": {"name": "Ada"}}

    def test_write_entries_and_snapshot(self, executor):
        output = executor.execute(
            _input(
                {"op": "write_entries", "entries": {"a": 1, "b.c": 2}},
                {"op": "entries"},
            )
        )

        assert output.success
        assert output.results[1].result == {"a": 1, "b": {"c": 2}}

    def test_allowed(self, executor):
        output = executor.execute(
            _input({"op": "allowed", "path": "x"}, default_policy="read-only")
        )

        assert output.results[0].result == {"read": True, "write": False}

    def test_seed_entries_ignore_policy(self, executor):
        output = executor.execute(
            _input(
                {"op": "read", "path": "config.debug"},
                default_policy="r",
                entries={"config.debug": True},
            )
        )

        assert output.success
        assert output.results[0].result is True

    def test_permission_failure_stops_batch(self, executor):
        output = executor.execute(
            _input(
                {"op": "read", "path": "a"},
                {"op": "write", "path": "a", "value": 1},
                {"op": "read", "path": "a"},
                default_policy="r",
                entries={"a": 0},
            )
        )

        assert not output.success
        assert output.failed_index == 1
        assert output.error_type == "PermissionDeniedError"
        assert output.error == "Permission denied to write on key: a"
        assert len(output.results) == 1
        assert output.entries == {"a": 0}

    def test_earlier_operations_are_kept(self, executor):
        output = executor.execute(
            _input(
                {"op": "write", "path": "a", "value": "scalar"},
                {"op": "write", "path": "a.b", "value": 1},
            )
        )

        assert not output.success
        assert output.failed_index == 1
        assert output.error_type == "PathConflictError"
        assert output.entries == {"a": "scalar"}

    def test_invalid_path_reported(self, executor):
        output = executor.execute(_input({"op": "read", "path": "a..b"}))

        assert not output.success
        assert output.error_type == "InvalidPathError"
        assert output.failed_index == 0

    def test_injected_store(self):
        store = PathStore()
        store.write("existing", 1)
        executor = Executor(store=store)

        output = executor.execute(_input({"op": "write", "path": "new", "value": 2}))

        assert output.success
        assert store.read("new") == 2
        assert output.entries == {"existing": 1, "new": 2}

    def test_seed_failure_reported(self, executor):
        output = executor.execute(_input(entries={"a": "x", "a.b": 1}))

        assert not output.success
        assert output.error_type == "PathConflictError"
        assert output.failed_index is None

    def test_self_referencing_store(self):
        store = PathStore()
        store.write("me", store)
        executor = Executor(store=store)

        output = executor.execute(_input({"op": "read", "path": "me.me"}))

        assert output.success
        assert output.results[0].result == {"me": "<cycle>"}
        assert output.entries == {"me": "<cycle>"}


class TestToJsonable:
    """Tests for to_jsonable()."""

    def test_primitives_pass_through(self):
        assert to_jsonable(1) == 1
        assert to_jsonable("a") == "a"
        assert to_jsonable(None) is None

    def test_nested_store_expanded(self):
        inner = PathStore()
        inner.write("x", 1)
        assert to_jsonable({"child": inner}) == {"child": {"x": 1}}

    def test_callable_described(self):
        def producer():
            return 1

        assert to_jsonable(producer) == "<callable producer>"

    def test_tuple_becomes_list(self):
        assert to_jsonable((1, (2, 3))) == [1, [2, 3]]

    def test_store_cycle_marked(self):
        outer = PathStore()
        inner = PathStore()
        outer.write("inner", inner)
        inner.write("outer", outer)

        assert to_jsonable(outer) == {"inner": {"outer": CYCLE_MARKER}}

    def test_mapping_cycle_marked(self):
        data = {"a": 1}
        data["self"] = data

        assert to_jsonable(data) == {"a": 1, "self": CYCLE_MARKER}

    def test_shared_value_is_not_a_cycle(self):
        shared = {"x": 1}

        assert to_jsonable([shared, shared]) == [{"x": 1}, {"x": 1}]

"""Tests for the runner entry point."""

import io
import json

from path_store.runner.__main__ import main


def _run(monkeypatch, capsys, payload):
    monkeypatch.setattr("sys.stdin", io.StringIO(payload))
    code = main()
    return code, json.loads(capsys.readouterr().out)


def test_success(monkeypatch, capsys):
    payload = json.dumps({"operations": [{"op": "write", "path": "user.name", "value": "Ada"}]})

    code, out = _run(monkeypatch, capsys, payload)

    assert code == 0
    assert out["success"] is True
    assert out["entries"] == {"user": {"name": "Ada"}}


def test_denied(monkeypatch, capsys):
    payload = json.dumps(
        {"store": {"default_policy": "none"}, "operations": [{"op": "read", "path": "x"}]}
    )

    code, out = _run(monkeypatch, capsys, payload)

    assert code == 1
    assert out["error_type"] == "PermissionDeniedError"
    assert out["failed_index"] == 0


def test_invalid_json(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "not json")

    assert code == 1
    assert out["success"] is False
    assert out["error_type"] == "ValidationError"


def test_unknown_operation_rejected(monkeypatch, capsys):
    payload = json.dumps({"operations": [{"op": "delete", "path": "a"}]})

    code, out = _run(monkeypatch, capsys, payload)

    assert code == 1
    assert out["error_type"] == "ValidationError"
    assert out["results"] == []
